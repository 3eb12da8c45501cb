import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable

from ..messages import InventoryMessage, LocationMessage, SystemMessage
from ..terminal import GameIO
from .command_parser import MISSING, Verb, normalize_direction, parse
from .location import Location
from .player import Player
from .turn_outcome import TurnOutcome
from .world import UnknownLocationError, World

logger = logging.getLogger(__name__)

HELP_TEXT = """Commands:
  go <direction>                 move (or just type the direction: north, n, ...)
  take <item>                    pick something up
  drop <item>                    put something down
  inv                            list what you are carrying
  attack <target> [with <item>]  fight
  help                           show this text
  quit                           leave the game"""


class GameState(Enum):
    IDLE = "idle"
    RENDERING = "rendering"
    AWAITING_INPUT = "awaiting_input"
    DISPATCHING = "dispatching"
    TERMINATED = "terminated"


class SessionTerminated(RuntimeError):
    """Raised when a turn is requested after the session has ended."""


@dataclass(frozen=True)
class VerbHandler:
    handler: Callable[..., Awaitable[TurnOutcome]]
    # Number of arguments the handler receives, padded with MISSING
    arity: int


class Game:
    """
    The turn controller.

    Each turn describes the current location, waits for one line of input,
    and runs the matching command handler. Handlers return a TurnOutcome:
    ABORT ends only the current turn, QUIT ends the session.
    """

    def __init__(
        self,
        world: World,
        player: Player,
        io: GameIO,
        start: Location | None = None,
    ):
        self.world = world
        self.player = player
        self.io = io
        dangling = world.dangling_exits()
        if dangling:
            location, exit = dangling[0]
            raise UnknownLocationError(
                f"Exit '{exit.direction}' of '{location.id}' leads to unknown location "
                f"'{exit.destination_id}'"
            )
        self.current_location: Location = start or world.starting_location
        self.state = GameState.IDLE
        self.turns = 0
        self.verbs: dict[Verb, VerbHandler] = {
            Verb.GO: VerbHandler(self.go, 1),
            Verb.TAKE: VerbHandler(self.take, 1),
            Verb.DROP: VerbHandler(self.drop, 1),
            Verb.INV: VerbHandler(self.inventory, 0),
            Verb.ATTACK: VerbHandler(self.attack, 3),
            Verb.HELP: VerbHandler(self.help, 0),
            Verb.QUIT: VerbHandler(self.quit, 0),
        }

    async def tell(self, content: str, severity: str = "info") -> None:
        """Send a plain message to the player."""
        await self.io.send(SystemMessage(content=content, severity=severity))

    async def render(self) -> None:
        """Describe the current location and the items lying in it."""
        location = self.current_location
        await self.io.send(
            LocationMessage(
                title=location.name,
                description=location.description,
                exits=location.exit_directions(),
                items=list(location.items.items),
            )
        )

    # Game loop and command processing
    async def run(self) -> None:
        """Play turns until the session is quit."""
        while self.state is not GameState.TERMINATED:
            await self.play_turn()

    async def play_turn(self) -> TurnOutcome:
        """Play a single turn: render, read one line, dispatch it.

        Returns:
            The outcome of the turn

        Raises:
            SessionTerminated: If the session has already been quit
        """
        if self.state is GameState.TERMINATED:
            raise SessionTerminated("The session has already ended")

        outcome = None
        try:
            self.state = GameState.RENDERING
            await self.render()

            self.state = GameState.AWAITING_INPUT
            line = await self.io.read_line()

            if line is None:
                logger.info("Input ended, quitting")
                outcome = TurnOutcome.QUIT
            else:
                self.state = GameState.DISPATCHING
                outcome = await self.dispatch(line)
        finally:
            # A raising handler leaves the game idle, not mid-dispatch
            self.turns += 1
            self.state = (
                GameState.TERMINATED if outcome is TurnOutcome.QUIT else GameState.IDLE
            )

        if outcome is TurnOutcome.ABORT:
            logger.debug("Turn %d aborted", self.turns)
        return outcome

    async def dispatch(self, command_input: str) -> TurnOutcome:
        """Run the handler for one line of input."""
        command = parse(command_input)
        if command.verb is None:
            logger.debug("Unknown verb %r", command.word)
            await self.tell("I don't know how to do that.", "warning")
            return TurnOutcome.CONTINUE

        verb_handler = self.verbs[command.verb]
        args = command.padded(verb_handler.arity)
        logger.debug("Dispatching %s%r", command.verb.value, args)
        return await verb_handler.handler(*args)

    # Command handlers
    async def go(self, direction) -> TurnOutcome:
        if direction is MISSING:
            await self.tell("Go where?")
            return TurnOutcome.ABORT

        direction = normalize_direction(direction)
        exit = self.current_location.find_exit(direction)
        if exit is None:
            await self.tell("There is nothing in that direction.")
            return TurnOutcome.CONTINUE
        if not exit.is_open(self.current_location):
            await self.tell("You can't go that way.")
            return TurnOutcome.CONTINUE

        destination = self.world.destination(exit)
        logger.debug("Moving %s from %s to %s", direction, self.current_location.id, destination.id)
        self.current_location = destination
        return TurnOutcome.CONTINUE

    async def take(self, tag) -> TurnOutcome:
        if tag is MISSING:
            await self.tell("Take what?")
            return TurnOutcome.ABORT

        if self.current_location.is_fixed(tag) and self.current_location.items.has_item(tag):
            await self.tell(f"You can't take the {tag}.")
            return TurnOutcome.CONTINUE

        if self.current_location.items.remove_item(tag):
            self.player.inventory.add_item(tag)
            await self.tell(f"You take the {tag}.", "success")
        else:
            await self.tell(f"You don't see a {tag} here.")
        return TurnOutcome.CONTINUE

    async def drop(self, tag) -> TurnOutcome:
        if tag is MISSING:
            await self.tell("Drop what?")
            return TurnOutcome.ABORT

        if self.player.inventory.remove_item(tag):
            self.current_location.items.add_item(tag)
            await self.tell(f"You drop the {tag}.", "success")
        else:
            await self.tell(f"You don't have a {tag}.")
        return TurnOutcome.CONTINUE

    async def inventory(self) -> TurnOutcome:
        await self.io.send(InventoryMessage(items=list(self.player.inventory.items)))
        return TurnOutcome.CONTINUE

    async def attack(self, target, keyword, instrument) -> TurnOutcome:
        """Attack something, optionally ``with`` an item the player carries.

        The location decides what actually happens.
        """
        if target is MISSING:
            await self.tell("Attack what?")
            return TurnOutcome.ABORT

        if keyword is MISSING:
            instrument = None
        elif keyword != "with":
            await self.tell(f"Try: attack {target} with <item>")
            return TurnOutcome.ABORT
        elif instrument is MISSING:
            await self.tell(f"Attack the {target} with what?")
            return TurnOutcome.ABORT
        elif not self.player.inventory.has_item(instrument):
            await self.tell(f"You don't have a {instrument}.")
            return TurnOutcome.ABORT

        outcome = await self.current_location.attack_handler(self, target, instrument)
        return outcome or TurnOutcome.CONTINUE

    async def help(self) -> TurnOutcome:
        await self.tell(HELP_TEXT)
        return TurnOutcome.CONTINUE

    async def quit(self) -> TurnOutcome:
        await self.tell("Goodbye.")
        return TurnOutcome.QUIT
