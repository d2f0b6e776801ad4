"""Board cell with occupancy and hit flags."""

from __future__ import annotations


class Position:
    """Board coordinate with mutable occupied/hit flags.

    The coordinate is read-only; equality and hashing use it alone.
    """

    __slots__ = ("_row", "_column", "occupied", "hit")

    def __init__(self, row: int, column: int, occupied: bool = False, hit: bool = False) -> None:
        self._row = row
        self._column = column
        self.occupied = occupied
        self.hit = hit

    @property
    def row(self) -> int:
        return self._row

    @property
    def column(self) -> int:
        return self._column

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._row == other._row and self._column == other._column

    def __hash__(self) -> int:
        return hash((self._row, self._column))

    def is_adjacent_to(self, other: Position) -> bool:
        """Return whether `other` is this cell or one of its eight neighbours."""
        return abs(self._row - other.row) <= 1 and abs(self._column - other.column) <= 1

    def occupy(self) -> None:
        self.occupied = True

    def shoot(self) -> None:
        self.hit = True

    def is_occupied(self) -> bool:
        return self.occupied

    def is_hit(self) -> bool:
        return self.hit

    def __str__(self) -> str:
        return f"Linha = {self._row} Coluna = {self._column}"

    def __repr__(self) -> str:
        return f"Position(row={self._row}, column={self._column}, occupied={self.occupied}, hit={self.hit})"
