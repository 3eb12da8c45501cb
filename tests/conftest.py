from __future__ import annotations

import pytest

from glade.core.builder import WorldBuilder
from glade.core.game import Game
from glade.core.player import Player
from glade.core.world import World
from glade.terminal import ScriptedIO
from glade.worlds import clearing


@pytest.fixture()
def clearing_world() -> World:
    return clearing.build()


@pytest.fixture()
def two_room_world() -> World:
    """Hall with a crate blocking the door east to the study."""
    builder = WorldBuilder("Two Rooms")
    hall = builder.location("hall").name("Hall").description("A bare hall.")
    hall.item("crate").item("lamp")
    hall.exit("east").to("study").when(lambda here: not here.items.has_item("crate"))
    study = builder.location("study").name("Study").description("Books everywhere.")
    study.exit("west").to(hall)
    builder.start(hall)
    return builder.build()


@pytest.fixture()
def make_game():
    """Build a Game fed by a ScriptedIO with the given input lines."""

    def _make(world: World, lines: list[str] | None = None) -> tuple[Game, ScriptedIO]:
        io = ScriptedIO(lines or [])
        return Game(world, Player(), io), io

    return _make
