"""
The Code value: an ordered sequence of symbols, used for both the secret and guesses.

Construction never validates, so a typed guess can be built first and checked with
is_valid() afterwards.
"""

from typing import Iterable, List

from .types import ALPHABET, CODE_LENGTH, Symbol


class Code:
    __slots__ = ("_pieces",)

    def __init__(self, pieces: Iterable[Symbol]) -> None:
        # a str is iterated character by character: Code("0123")
        self._pieces = tuple(pieces)

    @classmethod
    def of(cls, *pieces: Symbol) -> "Code":
        """Build from explicit symbols: Code.of("0", "1", "2", "3")."""
        return cls(pieces)

    @property
    def symbols(self) -> List[Symbol]:
        # fresh list every call so callers cannot reach the stored pieces
        return list(self._pieces)

    def is_valid(self) -> bool:
        """
        True when the code has exactly 4 symbols, each one of '0'..'8',
        and no symbol repeats.
        """
        if len(self._pieces) != CODE_LENGTH:
            return False

        for piece in self._pieces:
            if piece not in ALPHABET:
                return False

        # alphabet members are hashable, so a set is safe here
        return len(set(self._pieces)) == len(self._pieces)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Code):
            return NotImplemented
        return self._pieces == other._pieces

    def __hash__(self) -> int:
        return hash(self._pieces)

    def __len__(self) -> int:
        return len(self._pieces)

    def __getitem__(self, index: int) -> Symbol:
        return self._pieces[index]

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._pieces

    def __str__(self) -> str:
        return "".join(str(p) for p in self._pieces)

    def __repr__(self) -> str:
        return f"Code({str(self)!r})"
