"""
One game, driven line by line.
Holds the engine, the guess history and the game status, and keeps the
scoreboard in sync when a game ends.
"""

import logging
from dataclasses import dataclass, field
from time import time
from typing import List, Optional

from .code import Code
from .engine import GameEngine, GuessResult, score_guess
from .schemas import GuessEntryOut, GuessOutcome, ScoreboardOut
from .types import DEFAULT_MAX_ATTEMPTS, GameStatus, OutcomeKind

logger = logging.getLogger(__name__)


@dataclass
class GuessEntry:
    guess: str
    well_placed: int
    misplaced: int
    message: str
    timestamp: float = field(default_factory=time)


@dataclass
class Scoreboard:
    games_started: int = 0
    games_won: int = 0
    games_lost: int = 0

    current_streak: int = 0
    best_streak: int = 0

    total_guesses_in_wins: int = 0
    fastest_win_guesses: Optional[int] = None

    @property
    def average_guesses_to_win(self) -> Optional[float]:
        if self.games_won == 0:
            return None
        return self.total_guesses_in_wins / self.games_won

    def record_start(self) -> None:
        self.games_started += 1

    def record_end(self, won: bool, guesses_used: int) -> None:
        if won:
            self.games_won += 1

            # streaks
            self.current_streak += 1
            if self.current_streak > self.best_streak:
                self.best_streak = self.current_streak

            # guesses used
            self.total_guesses_in_wins += guesses_used
            if self.fastest_win_guesses is None or guesses_used < self.fastest_win_guesses:
                self.fastest_win_guesses = guesses_used
        else:
            self.games_lost += 1
            self.current_streak = 0

    def reset(self) -> None:
        self.games_started = 0
        self.games_won = 0
        self.games_lost = 0
        self.current_streak = 0
        self.best_streak = 0
        self.total_guesses_in_wins = 0
        self.fastest_win_guesses = None

    def snapshot(self) -> ScoreboardOut:
        return ScoreboardOut(
            games_started=self.games_started,
            games_won=self.games_won,
            games_lost=self.games_lost,
            current_streak=self.current_streak,
            best_streak=self.best_streak,
            average_guesses_to_win=self.average_guesses_to_win,
            fastest_win_guesses=self.fastest_win_guesses,
        )


def feedback_message(result: GuessResult) -> str:
    # never says which symbols matched
    if result.well_placed == 0 and result.misplaced == 0:
        return "all incorrect"
    return f"{result.well_placed} well-placed and {result.misplaced} misplaced"


def _to_entry_out(entry: GuessEntry) -> GuessEntryOut:
    return GuessEntryOut(
        guess=entry.guess,
        well_placed=entry.well_placed,
        misplaced=entry.misplaced,
        message=entry.message,
        timestamp=entry.timestamp,
    )


class GameSession:
    def __init__(
        self,
        secret: Code,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        scoreboard: Optional[Scoreboard] = None,
    ) -> None:
        self._secret = secret
        self._engine = GameEngine(secret, max_attempts)
        self._scoreboard = scoreboard
        self._status: GameStatus = "in_progress"
        self.history: List[GuessEntry] = []

        if self._scoreboard is not None:
            self._scoreboard.record_start()

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def attempts(self) -> int:
        return self._engine.attempts

    @property
    def remaining_attempts(self) -> int:
        return self._engine.remaining_attempts

    @property
    def guesses_used(self) -> int:
        # the winning guess is never evaluated, so add it back here
        if self._status == "won":
            return self._engine.attempts + 1
        return self._engine.attempts

    def reveal_secret(self) -> Optional[str]:
        """Return the secret ONLY for finished games; else None."""
        if self._status == "in_progress":
            return None
        return str(self._secret)

    def submit(self, text: str) -> GuessOutcome:
        if self._status != "in_progress":
            # If game already ended, just report it (ignore extra guesses)
            return self._outcome("finished")

        guess = Code(text.strip())
        if not guess.is_valid():
            # discarded: nothing recorded, no attempt used
            return self._outcome("invalid")

        # Win check first: a winning guess skips evaluate_guess() and keeps its attempt
        if self._engine.is_winning_guess(guess):
            entry = self._record(guess, score_guess(self._secret, guess))
            self._finish("won")
            return self._outcome("won", entry)

        entry = self._record(guess, self._engine.evaluate_guess(guess))
        if self._engine.is_game_over:
            self._finish("lost")
            return self._outcome("lost", entry)

        return self._outcome("scored", entry)

    def _record(self, guess: Code, result: GuessResult) -> GuessEntry:
        entry = GuessEntry(
            guess=str(guess),
            well_placed=result.well_placed,
            misplaced=result.misplaced,
            message=feedback_message(result),
        )
        self.history.append(entry)
        return entry

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        logger.info("game %s after %d guess(es)", status, self.guesses_used)

        # Update scoreboard exactly once, on the transition out of "in_progress"
        if self._scoreboard is not None:
            self._scoreboard.record_end(won=(status == "won"), guesses_used=self.guesses_used)

    def _outcome(self, kind: OutcomeKind, entry: Optional[GuessEntry] = None) -> GuessOutcome:
        finished = self._status != "in_progress"
        return GuessOutcome(
            outcome=kind,
            status=self._status,
            attempts_left=self.remaining_attempts,
            feedback=_to_entry_out(entry) if entry is not None else None,
            secret=self.reveal_secret(),
            note=(f"Game {self._status}. No more guesses allowed." if finished else None),
        )
