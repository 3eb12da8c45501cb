import logging

from .core.game import Game
from .core.player import Player
from .core.world import World
from .terminal import GameIO

logger = logging.getLogger(__name__)


async def run_session(world: World, io: GameIO, player: Player | None = None) -> Game:
    """Play a whole session of ``world`` through ``io``.

    Args:
        world: A fully built world with a starting location
        io: Where input comes from and messages go
        player: The player to play as; a fresh one is created if omitted

    Returns:
        The finished Game, for inspecting its final state
    """
    game = Game(world, player or Player(), io)
    logger.info("Starting session in '%s' at '%s'", world.title, game.current_location.id)
    await game.tell(f"Welcome to {world.title}!")
    await game.run()
    logger.info("Session ended after %d turns", game.turns)
    return game
