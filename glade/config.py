import logging
import os

from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

load_dotenv()

# World played when none is named on the command line
DEFAULT_WORLD = os.getenv("GLADE_WORLD", "clearing")

# Shown before each line of player input
PROMPT = os.getenv("GLADE_PROMPT", "> ")

LOG_LEVEL = os.getenv("GLADE_LOG_LEVEL", "WARNING")


def configure_logging(level: str | None = None) -> None:
    """Send log records to stderr through rich, away from game output."""
    logging.basicConfig(
        level=(level or LOG_LEVEL).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )
