"""Ship geometry, hit tracking and proximity checks."""

from __future__ import annotations

from armada.game.core.models import Compass, ShipKind, shape_for
from armada.game.core.position import Position


class InvalidBearingError(ValueError):
    """Raised when a ship kind cannot be laid out with the given bearing."""


class Ship:
    """A placed ship owning one occupied cell per unit of size."""

    __slots__ = ("_kind", "_bearing", "_anchor", "_positions")

    def __init__(self, kind: ShipKind, bearing: Compass, anchor: Position) -> None:
        offsets = shape_for(kind, bearing)
        if offsets is None:
            raise InvalidBearingError(f"Invalid bearing {bearing!s} for {kind.category}.")
        self._kind = kind
        self._bearing = bearing
        self._anchor = anchor
        cells: list[Position] = []
        for d_row, d_col in offsets:
            cell = Position(anchor.row + d_row, anchor.column + d_col)
            cell.occupy()
            cells.append(cell)
        self._positions = tuple(cells)

    @property
    def kind(self) -> ShipKind:
        return self._kind

    @property
    def size(self) -> int:
        return self._kind.size

    @property
    def category(self) -> str:
        return self._kind.category

    @property
    def bearing(self) -> Compass:
        return self._bearing

    @property
    def position(self) -> Position:
        """Anchor the cells were laid out from."""
        return self._anchor

    @property
    def positions(self) -> tuple[Position, ...]:
        return self._positions

    @property
    def top_most(self) -> int:
        return min(cell.row for cell in self._positions)

    @property
    def bottom_most(self) -> int:
        return max(cell.row for cell in self._positions)

    @property
    def left_most(self) -> int:
        return min(cell.column for cell in self._positions)

    @property
    def right_most(self) -> int:
        return max(cell.column for cell in self._positions)

    def occupies(self, pos: Position) -> bool:
        return any(cell == pos for cell in self._positions)

    def still_floating(self) -> bool:
        """Return whether at least one cell has not been hit."""
        return any(not cell.is_hit() for cell in self._positions)

    def too_close_to(self, other: Ship | Position) -> bool:
        """Return whether `other` overlaps or touches this ship, diagonals included."""
        if isinstance(other, Ship):
            return any(self.too_close_to(cell) for cell in other.positions)
        return any(cell.is_adjacent_to(other) for cell in self._positions)

    def shoot(self, pos: Position) -> None:
        """Mark the cell at `pos` as hit; no-op when the ship is not there."""
        for cell in self._positions:
            if cell == pos:
                cell.shoot()

    def __str__(self) -> str:
        return f"[{self.category} {self._bearing!s} {self._anchor}]"

    def __repr__(self) -> str:
        return f"Ship({self._kind.name}, {self._bearing!r}, ({self._anchor.row}, {self._anchor.column}))"


def build_ship(tag: str, bearing: Compass, anchor: Position) -> Ship | None:
    """Build a ship from its factory tag; unknown tags return None.

    Raises InvalidBearingError for kinds that reject the bearing.
    """
    try:
        kind = ShipKind(tag)
    except ValueError:
        return None
    return Ship(kind, bearing, anchor)
