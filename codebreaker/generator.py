"""
Random secret codes.
Symbols are drawn without replacement from the alphabet, so a generated code is
always valid and each of the 9 * 8 * 7 * 6 = 3024 ordered codes is equally likely.

The randomness is any "give me an index in [0, n)" callable. Normal play uses the
OS-backed secrets.randbelow; tests pass a fixed sequence of indices.
"""

import logging
from secrets import randbelow
from typing import List, Optional

from .code import Code
from .types import ALPHABET, CODE_LENGTH, IndexSource, Symbol

logger = logging.getLogger(__name__)


class CodeGenerator:
    def __init__(self, index_source: IndexSource = randbelow) -> None:
        self._index_source = index_source

    def generate_random(self) -> Code:
        available: List[Symbol] = list(ALPHABET)
        selected: List[Symbol] = []

        while len(selected) < CODE_LENGTH:
            index = self._index_source(len(available))

            # index must address the current pool
            if index < 0 or index >= len(available):
                raise ValueError(
                    f"Index source returned {index}, expected 0..{len(available) - 1}."
                )

            selected.append(available.pop(index))

        logger.debug("generated a secret code")
        return Code(selected)


def fetch_code(index_source: Optional[IndexSource] = None) -> Code:
    """Fresh random secret; the CLI calls this once per round."""
    if index_source is None:
        return CodeGenerator().generate_random()
    return CodeGenerator(index_source).generate_random()
