from pydantic import BaseModel, Field

from .location import Location, LocationExit


class UnknownLocationError(KeyError):
    """Raised when a location id is not part of the world."""


class World(BaseModel):
    """
    Game world: the set of locations and where play begins.

    Locations are addressed by id. Exits store the id of their destination,
    which is resolved here at traversal time.
    """

    title: str = "Untitled"
    locations: dict[str, Location] = Field(default_factory=dict)
    starting_location_id: str | None = None

    # Problems noticed while the world was built that are not fatal
    warnings: list[str] = Field(default_factory=list)

    def get_location(self, location_id: str) -> Location:
        """Get a location by its ID.

        Args:
            location_id: The ID of the location to retrieve

        Returns:
            The Location object

        Raises:
            UnknownLocationError: If no location has that id
        """
        try:
            return self.locations[location_id]
        except KeyError:
            raise UnknownLocationError(location_id) from None

    @property
    def starting_location(self) -> Location:
        """The location new players start in."""
        if self.starting_location_id is None:
            raise RuntimeError("No starting location set")
        return self.get_location(self.starting_location_id)

    def destination(self, exit: LocationExit) -> Location:
        """Resolve the deferred destination of an exit."""
        return self.get_location(exit.destination_id)

    def dangling_exits(self) -> list[tuple[Location, LocationExit]]:
        """Find exits whose destination is not a known location."""
        return [
            (location, exit)
            for location in self.locations.values()
            for exit in location.exits
            if exit.destination_id not in self.locations
        ]
