"""
Labels and fixed game constants.
"""

from typing import Callable, Literal, Tuple

Symbol = str  # one character, '0' -> '8'
IndexSource = Callable[[int], int]  # n -> random index in [0, n)
GameStatus = Literal["in_progress", "won", "lost"]
OutcomeKind = Literal["invalid", "scored", "won", "lost", "finished"]

ALPHABET: Tuple[Symbol, ...] = ("0", "1", "2", "3", "4", "5", "6", "7", "8")
CODE_LENGTH = 4
DEFAULT_MAX_ATTEMPTS = 10
