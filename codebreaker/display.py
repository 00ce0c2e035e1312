"""
Console rendering with colorama.
Everything is written to one stream so tests can capture it.
"""

import sys
from typing import Optional, TextIO

from colorama import Fore, Style

from .schemas import GuessEntryOut, ScoreboardOut

BLOCK = "█ "


class ConsoleDisplay:
    def __init__(self, out: Optional[TextIO] = None) -> None:
        self.out = out if out is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text)
        self.out.flush()

    def _colored(self, text: str, color: str) -> None:
        self._write(color + text + Style.RESET_ALL)

    def welcome(self) -> None:
        self._write("Can you break the code?\n")
        self._write("Enter a valid guess.\n")

    def attempts(self, remaining: int) -> None:
        self._write(f"Attempts remaining: {remaining}\n")

    def result(self, entry: GuessEntryOut) -> None:
        self._write(f"\nWell-placed pieces: {entry.well_placed} ")
        self._colored(BLOCK * entry.well_placed, Fore.GREEN)

        self._write(f"\nMisplaced   pieces: {entry.misplaced} ")
        self._colored(BLOCK * entry.misplaced, Fore.YELLOW)
        self._write("\n")

    def win(self) -> None:
        self._colored("\nCongratz! You did it!\n", Fore.GREEN)

    def game_over(self, secret: Optional[str] = None) -> None:
        self._colored("\nGame Over! You've run out of attempts.\n", Fore.RED)
        if secret:
            self._write(f"The code was {secret}.\n")

    def invalid_input(self) -> None:
        self._colored("\nInvalid input. Please enter 4 distinct digits from 0-8.\n", Fore.RED)

    def goodbye(self, reason: Optional[str] = None) -> None:
        suffix = f" ({reason})" if reason else ""
        self._colored(f"\nGoodbye!{suffix}\n", Fore.CYAN)

    def scoreboard(self, stats: ScoreboardOut) -> None:
        self._write("\nScoreboard\n")
        self._write(f"  games: {stats.games_started}  won: {stats.games_won}  lost: {stats.games_lost}\n")
        self._write(f"  best streak: {stats.best_streak}\n")
        if stats.average_guesses_to_win is not None:
            self._write(
                f"  average guesses to win: {stats.average_guesses_to_win:.1f}"
                f"  (fastest: {stats.fastest_win_guesses})\n"
            )
