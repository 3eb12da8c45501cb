import asyncio
import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.console import Console

from . import config
from .core.builder import WorldBuildError
from .core.graph import unreachable_locations
from .core.world import World
from .session import run_session
from .terminal import ConsoleIO, ScriptedIO, custom_theme
from .world_data import load_world
from .worlds import WORLDS, get_world


def resolve_world(world_name: str | None, world_file: str | None) -> World:
    """Build the world named on the command line, or load it from a file."""
    if world_file:
        return load_world(world_file)
    return get_world(world_name or config.DEFAULT_WORLD)


def world_options(f):
    f = click.option(
        "--world-file",
        type=click.Path(exists=True, dir_okay=False),
        help="JSON world file to load instead of a bundled world",
    )(f)
    f = click.option(
        "--world",
        "world_name",
        type=click.Choice(sorted(WORLDS)),
        default=None,
        help="Bundled world to play",
    )(f)
    return f


def load_or_exit(world_name: str | None, world_file: str | None) -> World:
    try:
        return resolve_world(world_name, world_file)
    except (WorldBuildError, ValueError) as e:
        # pydantic's ValidationError is a ValueError too
        kind = "Invalid world file" if isinstance(e, ValidationError) else "Error"
        click.echo(f"{kind}: {e}", err=True)
        sys.exit(1)


@click.group()
@click.option("--log-level", default=None, help="Logging level, e.g. DEBUG")
def main(log_level: str | None):
    """Glade: a small interactive-fiction engine."""
    config.configure_logging(log_level)


@main.command()
@world_options
@click.option(
    "--script",
    type=click.Path(exists=True, dir_okay=False),
    help="Play the commands in this file, one per line, instead of reading the terminal",
)
def play(world_name: str | None, world_file: str | None, script: str | None):
    """Play a world on the terminal."""
    world = load_or_exit(world_name, world_file)

    if script:
        lines = Path(script).read_text().splitlines()
        io = ScriptedIO(lines, echo=Console(theme=custom_theme))
    else:
        io = ConsoleIO()

    try:
        asyncio.run(run_session(world, io))
    except KeyboardInterrupt:
        sys.exit(0)


@main.command()
@world_options
def check(world_name: str | None, world_file: str | None):
    """Build a world and report its locations and any problems."""
    world = load_or_exit(world_name, world_file)

    click.echo(f"{world.title}: {len(world.locations)} locations, start at '{world.starting_location_id}'")
    for location in world.locations.values():
        exits = ", ".join(f"{e.direction}->{e.destination_id}" for e in location.exits) or "none"
        items = ", ".join(location.items.items) or "none"
        click.echo(f"  {location.id} ({location.name}): exits {exits}; items {items}")

    for location, exit in world.dangling_exits():
        click.echo(
            f"Error: exit '{exit.direction}' of '{location.id}' leads to unknown location "
            f"'{exit.destination_id}'",
            err=True,
        )

    for warning in world.warnings:
        click.echo(f"Warning: {warning}", err=True)

    unreachable = unreachable_locations(world)
    if unreachable:
        click.echo(f"Warning: unreachable from start: {', '.join(sorted(unreachable))}", err=True)


if __name__ == "__main__":
    main()
