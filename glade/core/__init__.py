from .builder import ExitBuilder, LocationBuilder, WorldBuildError, WorldBuilder
from .command_parser import MISSING, Verb, parse
from .game import Game, GameState, SessionTerminated
from .inventory import Inventory
from .location import Location, LocationExit
from .player import Player
from .turn_outcome import TurnOutcome
from .world import UnknownLocationError, World

__all__ = [
    "ExitBuilder",
    "LocationBuilder",
    "WorldBuildError",
    "WorldBuilder",
    "MISSING",
    "Verb",
    "parse",
    "Game",
    "GameState",
    "SessionTerminated",
    "Inventory",
    "Location",
    "LocationExit",
    "Player",
    "TurnOutcome",
    "UnknownLocationError",
    "World",
]
