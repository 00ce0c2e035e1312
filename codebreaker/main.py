'''
Codebreaker on the command line

Usage:
codebreaker                 -> random secret, 10 attempts
codebreaker -c 0123         -> fixed secret
codebreaker -t 5            -> 5 attempts
codebreaker --rounds 3      -> three games in a row, then a scoreboard

Guesses are 4 distinct digits from 0-8. Ctrl-D (EOF) or Ctrl-C quits.
'''

import argparse
import logging
import sys
from typing import Callable, List, Optional

import colorama

from .config import ConfigError, load_config
from .display import ConsoleDisplay
from .generator import fetch_code
from .session import GameSession, Scoreboard

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="codebreaker",
        description="Guess the hidden code of 4 distinct digits from 0-8.",
    )
    parser.add_argument("-c", "--code", dest="secret", help="secret code to use instead of a random one")
    parser.add_argument("-t", "--attempts", dest="max_attempts", type=int, help="number of attempts (default 10)")
    parser.add_argument("--rounds", type=int, help="games to play in a row (default 1)")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def play(session: GameSession, display: ConsoleDisplay, read: Callable[[], str] = input) -> bool:
    """
    Run one game until it is won, lost or the input ends.
    Returns False when the player quit before the game finished.
    """
    display.welcome()

    while session.status == "in_progress":
        display.attempts(session.remaining_attempts)

        try:
            line = read()
        except EOFError:
            display.goodbye("EOF received")
            return False
        except KeyboardInterrupt:
            display.goodbye("interrupted")
            return False

        # Skip empty input
        if not line.strip():
            continue

        outcome = session.submit(line)

        if outcome.outcome == "invalid":
            display.invalid_input()
        elif outcome.outcome == "won":
            display.win()
        else:
            display.result(outcome.feedback)
            if outcome.outcome == "lost":
                display.game_over(outcome.secret)

    return True


def main(argv: Optional[List[str]] = None, read: Callable[[], str] = input) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("codebreaker").setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(secret=args.secret, max_attempts=args.max_attempts, rounds=args.rounds)
    except ConfigError as ce:
        print(f"Invalid arguments. {ce}")
        return 1

    colorama.just_fix_windows_console()
    display = ConsoleDisplay()
    scoreboard = Scoreboard()

    configured = config.secret_code()
    for round_number in range(1, config.rounds + 1):
        secret = configured if configured is not None else fetch_code()
        session = GameSession(secret, config.max_attempts, scoreboard)
        logger.debug("round %d of %d", round_number, config.rounds)

        if not play(session, display, read):
            break

    if config.rounds > 1:
        display.scoreboard(scoreboard.snapshot())

    return 0


if __name__ == "__main__":
    sys.exit(main())
