"""Square coordinate type and helpers.

Board layout (row-major, Black's back rank first)::

    rank 0:  Black back rank
    rank 1:  Black pawns
    ...
    rank 6:  White pawns
    rank 7:  White back rank

Files grow to the right, ranks grow downward.  Square names use the file
letter followed by ``rank + 1``.
"""

from __future__ import annotations

from typing import NamedTuple

_FILE_LETTERS = "abcdefghijklmnopqrstuvwxyz"


class Square(NamedTuple):
    """0-based (file, rank) coordinate pair."""

    file: int
    rank: int

    def offset(self, df: int, dr: int) -> Square:
        return Square(self.file + df, self.rank + dr)

    def __str__(self) -> str:
        return square_name(self)


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. ``Square(4, 3)`` → ``'e4'``."""
    return _FILE_LETTERS[sq.file] + str(sq.rank + 1)


def file_letter(file: int) -> str:
    return _FILE_LETTERS[file]


def parse_square(name: str) -> Square:
    """Parse square name, e.g. ``'e4'`` → ``Square(4, 3)``."""
    if len(name) < 2 or name[0] not in _FILE_LETTERS or not name[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    rank = int(name[1:]) - 1
    if rank < 0:
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(_FILE_LETTERS.index(name[0]), rank)


def midpoint(a: Square, b: Square) -> Square:
    """Square halfway between *a* and *b* (integer division)."""
    return Square((a.file + b.file) // 2, (a.rank + b.rank) // 2)
