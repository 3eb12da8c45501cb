from typing import Callable

from ..core.world import World
from . import clearing

WORLDS: dict[str, Callable[[], World]] = {
    "clearing": clearing.build,
}


def get_world(name: str) -> World:
    """Build one of the bundled worlds by name."""
    try:
        factory = WORLDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown world '{name}'. Available: {', '.join(sorted(WORLDS))}"
        ) from None
    return factory()
