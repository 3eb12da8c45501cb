from pydantic import BaseModel, Field

from .inventory import Inventory


class Player(BaseModel):
    """Represents a player character in the game."""

    name: str = "player"
    inventory: Inventory = Field(default_factory=Inventory)

    def clone(self) -> "Player":
        """Copy the player without sharing the inventory."""
        return self.model_copy(deep=True)
