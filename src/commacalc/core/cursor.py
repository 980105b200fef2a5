"""
Bidirectional cursor over a fixed sequence.

The same cursor type walks the characters of a source string in the
tokenizer and the token list in the parser.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

T = TypeVar("T")


class Cursor(Generic[T]):
    """Position tracker with bounds-aware access to the current element.

    Reading outside the sequence yields ``None`` instead of raising, so
    scanning loops can test ``open``/``end`` rather than catching
    ``IndexError``. Negative positions are out of bounds; they never wrap
    around to the tail the way Python indexing would.
    """

    __slots__ = ("source", "position")

    def __init__(self, source: Sequence[T]) -> None:
        self.source = source
        self.position = 0

    def _at(self, index: int) -> T | None:
        if 0 <= index < len(self.source):
            return self.source[index]
        return None

    @property
    def first(self) -> T | None:
        return self._at(0)

    @property
    def last(self) -> T | None:
        return self._at(len(self.source) - 1)

    @property
    def current(self) -> T | None:
        return self._at(self.position)

    @property
    def open(self) -> bool:
        return not self.end

    @property
    def end(self) -> bool:
        return self.current is None

    def forward(self) -> T | None:
        """Advance one step and return the new current element."""
        self.position += 1
        return self.current

    def back(self) -> T | None:
        """Step back once and return the new current element."""
        self.position -= 1
        return self.current

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, length={len(self.source)})"
