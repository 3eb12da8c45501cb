from typing import Literal

from pydantic import BaseModel, Field


class BaseMessage(BaseModel):
    """Base class for all messages to the player."""

    message_type: str = Field(description="Discriminator field for message type")

    def render(self) -> str:
        """Plain-text form of the message."""
        raise NotImplementedError


class LocationMessage(BaseMessage):
    """Location description message."""

    message_type: Literal["location"] = "location"
    title: str  # Location name
    description: str  # Location description
    exits: list[str] = Field(default_factory=list)  # Declared exit directions
    items: list[str] = Field(default_factory=list)  # Items lying here

    def render(self) -> str:
        lines = [f"== {self.title} ==", self.description]
        if self.exits:
            lines.append(f"Exits: {', '.join(self.exits)}")
        lines.extend(f"There is a {item} here." for item in self.items)
        return "\n".join(lines)


class InventoryMessage(BaseMessage):
    """What the player is carrying."""

    message_type: Literal["inventory"] = "inventory"
    items: list[str] = Field(default_factory=list)

    def render(self) -> str:
        if not self.items:
            return "You are carrying:\n(None)"
        return "\n".join(["You are carrying:", *(f"  {item}" for item in self.items)])


class SystemMessage(BaseMessage):
    """System notification or information."""

    message_type: Literal["system"] = "system"
    content: str  # The system message
    severity: Literal["info", "success", "warning", "error"] = "info"

    def render(self) -> str:
        return self.content
