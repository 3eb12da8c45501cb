import asyncio
from collections import deque
from typing import Iterable, Protocol

from rich.console import Console
from rich.theme import Theme

from . import config
from .messages import BaseMessage, LocationMessage, SystemMessage

custom_theme = Theme({
    "location": "bold #b0d8e3",   # Pale Cyan
    "info": "default",
    "success": "bold #a3be8c",    # Soft green
    "warning": "bold #ffafaf",    # Soft red
    "error": "bold red",
    "dim": "dim",
})


def message_style(message: BaseMessage) -> str:
    if isinstance(message, LocationMessage):
        return "location"
    if isinstance(message, SystemMessage):
        return message.severity
    return "info"


class GameIO(Protocol):
    """Line-based input and output used by the game."""

    async def read_line(self) -> str | None:
        """Wait for one line of input. None means the input has ended."""
        ...

    async def send(self, message: BaseMessage) -> None:
        """Show one message to the player."""
        ...


class ConsoleIO:
    """Plays the game on the terminal."""

    def __init__(self, console: Console | None = None, prompt: str | None = None):
        self.console = console or Console(theme=custom_theme)
        self.prompt = config.PROMPT if prompt is None else prompt

    async def read_line(self) -> str | None:
        try:
            # console.input blocks, keep it off the event loop
            return await asyncio.get_running_loop().run_in_executor(
                None, self.console.input, self.prompt
            )
        except EOFError:
            return None

    async def send(self, message: BaseMessage) -> None:
        self.console.print(
            message.render(), style=message_style(message), markup=False, highlight=False
        )


class ScriptedIO:
    """
    Feeds the game a fixed list of input lines and records what it says.

    Input ends once the lines run out. With ``echo`` set, each line and every
    message is also printed to that console.
    """

    def __init__(self, lines: Iterable[str], echo: Console | None = None):
        self._pending: deque[str] = deque(lines)
        self.echo = echo
        self.inputs: list[str] = []
        self.sent: list[BaseMessage] = []

    async def read_line(self) -> str | None:
        if not self._pending:
            return None
        line = self._pending.popleft()
        self.inputs.append(line)
        if self.echo is not None:
            self.echo.print(f"{config.PROMPT}{line}", style="dim", markup=False, highlight=False)
        return line

    async def send(self, message: BaseMessage) -> None:
        self.sent.append(message)
        if self.echo is not None:
            self.echo.print(
                message.render(), style=message_style(message), markup=False, highlight=False
            )

    @property
    def output(self) -> list[str]:
        """Every message sent so far, rendered as text."""
        return [message.render() for message in self.sent]

    @property
    def remaining(self) -> int:
        return len(self._pending)
