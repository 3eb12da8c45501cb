from typing import TYPE_CHECKING, Awaitable, Callable

from pydantic import BaseModel, Field

from .inventory import Inventory, normalize_tag
from .turn_outcome import TurnOutcome

if TYPE_CHECKING:
    from .game import Game

# condition(owning_location) -> bool
ExitCondition = Callable[..., bool]
# handler(game, target, instrument_or_none) -> TurnOutcome | None
AttackHandler = Callable[..., Awaitable[TurnOutcome | None]]


def always_open(location: "Location") -> bool:
    return True


async def nothing_to_attack(
    game: "Game", target: str, instrument: str | None
) -> TurnOutcome | None:
    """Default attack handler for locations with nothing worth fighting."""
    await game.tell("Violence isn't the answer here.")
    return TurnOutcome.CONTINUE


class LocationExit(BaseModel):
    """
    A directed edge leading from one location to another.

    The destination is kept as a location id and only looked up in the
    world when the exit is traversed, so exits may point at locations that
    are declared later.
    """

    direction: str
    destination_id: str
    condition: ExitCondition = Field(
        default=always_open,
        description="Evaluated against the owning location every time the exit is examined",
    )

    def is_open(self, owner: "Location") -> bool:
        """Evaluate the exit condition against its owning location."""
        return bool(self.condition(owner))


class Location(BaseModel):
    """
    Location in the game world.

    Contains both descriptive properties and
    runtime state that changes during gameplay.
    """

    # ID
    id: str

    # Descriptive properties (generally immutable after creation)
    name: str = ""
    description: str = ""

    # Location exits, in declaration order
    exits: list[LocationExit] = Field(default_factory=list)

    # Runtime state
    items: Inventory = Field(default_factory=Inventory)
    # Items that are here but cannot be picked up
    fixed_items: set[str] = Field(default_factory=set)
    attack_handler: AttackHandler = Field(default=nothing_to_attack)

    def is_fixed(self, tag: str) -> bool:
        return normalize_tag(tag) in self.fixed_items

    def find_exit(self, direction: str) -> LocationExit | None:
        """Get the first exit declared for a direction."""
        for exit in self.exits:
            if exit.direction == direction:
                return exit
        return None

    def exit_directions(self) -> list[str]:
        """Get the declared exit directions, without duplicates."""
        return list(dict.fromkeys(exit.direction for exit in self.exits))

    def clone(self) -> "Location":
        """Copy the location without sharing its exits or items."""
        return self.model_copy(deep=True)

    def __str__(self) -> str:
        return self.name or self.id
