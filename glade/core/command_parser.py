from enum import StrEnum

from pydantic import BaseModel, Field


class _Missing:
    """Stands in for an argument the player did not type."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING = _Missing()


class Verb(StrEnum):
    """Every command the game understands."""

    GO = "go"
    TAKE = "take"
    DROP = "drop"
    INV = "inv"
    ATTACK = "attack"
    HELP = "help"
    QUIT = "quit"


# Dictionary of direction abbreviations
DIRECTION_ABBREVIATIONS = {
    "n": "north",
    "s": "south",
    "e": "east",
    "w": "west",
    "ne": "northeast",
    "nw": "northwest",
    "se": "southeast",
    "sw": "southwest",
    "u": "up",
    "d": "down",
}

DIRECTIONS = set(DIRECTION_ABBREVIATIONS.values())

VERB_ALIASES = {
    "i": Verb.INV,
    "inventory": Verb.INV,
    "get": Verb.TAKE,
}


class ParsedCommand(BaseModel):
    """A line of player input split into a verb and its arguments."""

    verb: Verb | None = Field(
        default=None, description="The recognised verb, or None if not in the whitelist"
    )
    word: str = Field(default="", description="The first token as typed (lower-cased)")
    args: tuple[str, ...] = Field(default_factory=tuple)

    def padded(self, arity: int) -> tuple:
        """Get exactly ``arity`` arguments, filling the gaps with MISSING."""
        args = self.args[:arity]
        return args + (MISSING,) * (arity - len(args))


def normalize_direction(token: str) -> str:
    """Expand direction abbreviations, e.g. ``n`` -> ``north``."""
    token = token.lower()
    return DIRECTION_ABBREVIATIONS.get(token, token)


def tokenize(command_input: str) -> list[str]:
    """Split a line on whitespace into lower-cased tokens."""
    return command_input.lower().split()


def parse(command_input: str) -> ParsedCommand:
    """Parse a line of player input.

    Args:
        command_input: Raw command string from the player

    Returns:
        ParsedCommand whose ``verb`` is None when the first word is not a known verb
    """
    tokens = tokenize(command_input)
    if not tokens:
        return ParsedCommand()

    word, args = tokens[0], tuple(tokens[1:])

    # A bare direction moves, e.g. "north" or "n"
    if not args and normalize_direction(word) in DIRECTIONS:
        return ParsedCommand(verb=Verb.GO, word=word, args=(word,))

    if word in VERB_ALIASES:
        return ParsedCommand(verb=VERB_ALIASES[word], word=word, args=args)

    try:
        verb = Verb(word)
    except ValueError:
        verb = None
    return ParsedCommand(verb=verb, word=word, args=args)
