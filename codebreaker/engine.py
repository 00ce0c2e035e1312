"""
Pure game logic (no terminal, no storage).
We compute two feedback numbers for each guess:
- well_placed: how many positions are exactly correct (right symbol, right place)
- misplaced: how many guess symbols appear in the secret, but somewhere else

Both the secret and the guess hold distinct symbols, so counting "guess symbol is
somewhere in the secret" and subtracting the exact matches never double counts.
"""

import logging
from dataclasses import dataclass

from .code import Code
from .types import DEFAULT_MAX_ATTEMPTS

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a guess is evaluated after every attempt has been used."""


@dataclass(frozen=True)
class GuessResult:
    well_placed: int
    misplaced: int

    @property
    def total_matches(self) -> int:
        return self.well_placed + self.misplaced


def _check_lengths(secret: Code, guess: Code) -> int:
    n = len(secret)
    if n == 0 or len(guess) != n:
        raise ValueError("Secret and guess must be the same non-zero length.")
    return n


def count_well_placed(secret: Code, guess: Code) -> int:
    n = _check_lengths(secret, guess)
    well_placed = 0
    i = 0
    while i < n:
        if secret[i] == guess[i]:
            well_placed += 1
        i += 1
    return well_placed


def count_total_matches(secret: Code, guess: Code) -> int:
    """Membership count: guess positions whose symbol is anywhere in the secret."""
    n = _check_lengths(secret, guess)
    total = 0
    i = 0
    while i < n:
        if guess[i] in secret:
            total += 1
        i += 1
    return total


def score_guess(secret: Code, guess: Code) -> GuessResult:
    """
    Example:
      secret = 1234
      guess  = 1243
      well_placed   = 2  (the 1 and the 2)
      total_matches = 4  (every guess symbol is in the secret)
      misplaced     = 4 - 2 = 2
    The guess is trusted to be valid; a malformed guess gives a meaningless result.
    """
    # 1. Exact position matches
    well_placed = count_well_placed(secret, guess)

    # 2. Symbols present anywhere, minus the ones already counted in place
    misplaced = count_total_matches(secret, guess) - well_placed

    return GuessResult(well_placed=well_placed, misplaced=misplaced)


def is_win(secret: Code, guess: Code) -> bool:
    """Win = every symbol matches in order."""
    return secret == guess


class GameEngine:
    """
    Owns the secret and the attempt counter for one game.

    The engine only knows whether attempts remain. Winning is a separate query,
    is_winning_guess(), and the caller decides the order: checking it first and
    skipping evaluate_guess() for the winning guess means a win does not use up
    an attempt.
    """

    def __init__(self, secret: Code, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> None:
        # secret and bound are validated by the caller (see config.load_config)
        self._secret = secret
        self._max_attempts = max_attempts
        self._attempts = 0

    @property
    def attempts(self) -> int:
        return self._attempts

    @property
    def max_attempts(self) -> int:
        return self._max_attempts

    @property
    def is_game_over(self) -> bool:
        return self._attempts >= self._max_attempts

    @property
    def remaining_attempts(self) -> int:
        return self._max_attempts - self._attempts

    def evaluate_guess(self, guess: Code) -> GuessResult:
        if self.is_game_over:
            raise GameOverError(f"All {self._max_attempts} attempts have been used.")

        # counts even when the guess turns out to be a win
        self._attempts += 1

        result = score_guess(self._secret, guess)
        logger.debug(
            "attempt %d/%d: %s -> %d well-placed, %d misplaced",
            self._attempts, self._max_attempts, guess, result.well_placed, result.misplaced,
        )
        return result

    def is_winning_guess(self, guess: Code) -> bool:
        return is_win(self._secret, guess)
