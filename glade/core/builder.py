"""
Fluent construction of worlds.

World content is declared one location at a time::

    builder = WorldBuilder("Demo")
    builder.location("clearing").name("Clearing").exit("north").to("forest")
    forest = builder.location("forest").name("Forest").item("twig")
    forest.exit("south").to("clearing").when(lambda here: not here.items.has_item("vines"))
    builder.start("clearing")
    world = builder.build()

Exit targets and conditions are stored, never evaluated, while declaring, so
a location may lead to one that has not been declared yet. ``build()`` is the
second pass that checks every target exists.
"""

import inspect
import logging

from .command_parser import normalize_direction
from .inventory import normalize_tag
from .location import AttackHandler, ExitCondition, Location, LocationExit
from .world import World

logger = logging.getLogger(__name__)


class WorldBuildError(ValueError):
    """Raised when world content is declared incorrectly."""


class ExitBuilder:
    """Declares a single exit: ``exit(direction).to(target)[.when(predicate)]``."""

    def __init__(self, owner: "LocationBuilder", direction: str):
        self._owner = owner
        self._direction = direction
        self._exit: LocationExit | None = None
        self._has_condition = False

    @property
    def complete(self) -> bool:
        return self._exit is not None

    def to(self, target: "str | LocationBuilder") -> "ExitBuilder":
        """Set where the exit leads and attach it to its location.

        Args:
            target: A location id, or the builder of the destination location

        Returns:
            This builder, so a condition can be chained with ``when``
        """
        self._owner._check_open()
        if self._exit is not None:
            raise WorldBuildError(
                f"Exit '{self._direction}' of '{self._owner.id}' already leads to "
                f"'{self._exit.destination_id}'"
            )
        destination_id = target.id if isinstance(target, LocationBuilder) else target
        if not isinstance(destination_id, str) or not destination_id:
            raise WorldBuildError(
                f"Exit '{self._direction}' of '{self._owner.id}' needs a location id, got {target!r}"
            )
        self._exit = LocationExit(direction=self._direction, destination_id=destination_id)
        self._owner._location.exits.append(self._exit)
        return self

    def when(self, predicate: ExitCondition) -> "ExitBuilder":
        """Make the exit passable only while ``predicate(owning_location)`` is true."""
        self._owner._check_open()
        if self._exit is None:
            raise WorldBuildError(
                f"Exit '{self._direction}' of '{self._owner.id}': when() called before to()"
            )
        if self._has_condition:
            raise WorldBuildError(
                f"Exit '{self._direction}' of '{self._owner.id}' already has a condition"
            )
        if not callable(predicate):
            raise WorldBuildError(
                f"Exit '{self._direction}' of '{self._owner.id}': condition must be callable"
            )
        self._exit.condition = predicate
        self._has_condition = True
        return self


class LocationBuilder:
    """Populates the fields of one location."""

    def __init__(self, world_builder: "WorldBuilder", location: Location):
        self._world_builder = world_builder
        self._location = location
        self._exit_builders: list[ExitBuilder] = []

    @property
    def id(self) -> str:
        return self._location.id

    def _check_open(self) -> None:
        if self._world_builder.built:
            raise WorldBuildError(
                f"Cannot change '{self.id}': the world has already been built"
            )

    def name(self, text: str) -> "LocationBuilder":
        self._check_open()
        self._location.name = text
        return self

    def description(self, text: str) -> "LocationBuilder":
        self._check_open()
        self._location.description = text
        return self

    def attack(self, handler: AttackHandler) -> "LocationBuilder":
        """Set the coroutine called as ``handler(game, target, instrument)`` on attack."""
        self._check_open()
        if not inspect.iscoroutinefunction(handler):
            raise WorldBuildError(
                f"Attack handler for '{self.id}' must be an async function"
            )
        self._location.attack_handler = handler
        return self

    def item(self, tag: str) -> "LocationBuilder":
        """Place an item here. May be called repeatedly."""
        self._check_open()
        self._location.items.add_item(tag)
        return self

    def fixed(self, tag: str) -> "LocationBuilder":
        """Place an item here that the player cannot take."""
        self._check_open()
        self._location.items.add_item(tag)
        self._location.fixed_items.add(normalize_tag(tag))
        return self

    def exit(self, direction: str) -> ExitBuilder:
        """Start declaring an exit; finish it with ``to()``."""
        self._check_open()
        if not direction:
            raise WorldBuildError(f"Exit of '{self.id}' needs a direction")
        exit_builder = ExitBuilder(self, normalize_direction(direction))
        self._exit_builders.append(exit_builder)
        return exit_builder

    def incomplete_exits(self) -> list[str]:
        return [b._direction for b in self._exit_builders if not b.complete]


class WorldBuilder:
    """
    Collects location declarations and produces a World.

    Building is a one-time phase: after ``build()`` every builder it handed
    out refuses further changes.
    """

    def __init__(self, title: str = "Untitled"):
        self.title = title
        self.built = False
        self._locations: dict[str, LocationBuilder] = {}
        self._starting_location_id: str | None = None

    def location(self, location_id: str) -> LocationBuilder:
        """Declare a new location and get a builder for its fields."""
        self._check_open()
        if not location_id:
            raise WorldBuildError("Location id must not be empty")
        if location_id in self._locations:
            raise WorldBuildError(f"Location with id '{location_id}' already exists")

        builder = LocationBuilder(self, Location(id=location_id))
        self._locations[location_id] = builder
        return builder

    def start(self, target: "str | LocationBuilder") -> "WorldBuilder":
        """Designate the starting location."""
        self._check_open()
        self._starting_location_id = (
            target.id if isinstance(target, LocationBuilder) else target
        )
        return self

    def _check_open(self) -> None:
        if self.built:
            raise WorldBuildError("The world has already been built")

    def build(self) -> World:
        """Check all declarations and produce the world.

        Returns:
            The constructed World

        Raises:
            WorldBuildError: If an exit was left without a target, an exit
                leads to an undeclared location, or no valid start was set
        """
        self._check_open()

        errors: list[str] = []
        warnings: list[str] = []
        for location_id, builder in self._locations.items():
            for direction in builder.incomplete_exits():
                errors.append(f"Exit '{direction}' of '{location_id}' has no to()")

            location = builder._location
            for exit in location.exits:
                if exit.destination_id not in self._locations:
                    errors.append(
                        f"Exit '{exit.direction}' of '{location_id}' leads to "
                        f"unknown location '{exit.destination_id}'"
                    )

            seen: set[str] = set()
            for exit in location.exits:
                if exit.direction in seen:
                    warnings.append(
                        f"Location '{location_id}' has more than one '{exit.direction}' "
                        "exit; only the first is reachable"
                    )
                seen.add(exit.direction)

        if self._starting_location_id is None:
            errors.append("No starting location set")
        elif self._starting_location_id not in self._locations:
            errors.append(f"Starting location '{self._starting_location_id}' does not exist")

        if errors:
            raise WorldBuildError("; ".join(errors))

        for warning in warnings:
            logger.warning(warning)

        locations = {}
        for location_id, builder in self._locations.items():
            location = builder._location
            if not location.name:
                location.name = location_id
            locations[location_id] = location

        self.built = True
        logger.debug("Built world '%s' with %d locations", self.title, len(locations))
        return World(
            title=self.title,
            locations=locations,
            starting_location_id=self._starting_location_id,
            warnings=warnings,
        )
