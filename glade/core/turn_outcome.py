from enum import Enum


class TurnOutcome(Enum):
    """
    How a command handler wants the turn loop to proceed.

    ABORT ends the current turn only. QUIT ends the whole session.
    """

    CONTINUE = "continue"
    ABORT = "abort"
    QUIT = "quit"
