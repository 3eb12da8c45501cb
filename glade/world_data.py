from pathlib import Path

from pydantic import BaseModel, Field

from .core.builder import WorldBuilder
from .core.world import World


class ExitData(BaseModel):
    direction: str
    to: str
    blocked_by: str | None = Field(
        default=None,
        description="Item tag; the exit is closed while the location holds this item",
    )


class LocationData(BaseModel):
    name: str
    description: str = ""
    items: list[str] = Field(default_factory=list)
    fixed: list[str] = Field(
        default_factory=list, description="Items placed here that cannot be taken"
    )
    exits: list[ExitData] = Field(default_factory=list)


class WorldData(BaseModel):
    title: str = "Untitled"
    locations: dict[str, LocationData]
    starting_location_id: str


def blocked_by(tag: str):
    """Exit condition: open while the owning location does not hold ``tag``."""

    def condition(location) -> bool:
        return not location.items.has_item(tag)

    return condition


def build_world(world_data: WorldData) -> World:
    """Declare every location of ``world_data`` through a WorldBuilder."""
    builder = WorldBuilder(world_data.title)
    for location_id, data in world_data.locations.items():
        location = builder.location(location_id).name(data.name).description(data.description)
        for tag in data.items:
            location.item(tag)
        for tag in data.fixed:
            location.fixed(tag)
        for exit_data in data.exits:
            exit = location.exit(exit_data.direction).to(exit_data.to)
            if exit_data.blocked_by:
                exit.when(blocked_by(exit_data.blocked_by))
    builder.start(world_data.starting_location_id)
    return builder.build()


def load_world(filepath: str | Path) -> World:
    """
    Load world content from a JSON file and construct a World instance.

    Args:
        filepath: Path to the JSON world file

    Returns:
        A fully constructed World instance
    """
    world_data = WorldData.model_validate_json(Path(filepath).read_text())
    return build_world(world_data)
