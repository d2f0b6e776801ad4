"""Core domain models used by game logic."""

from __future__ import annotations

from enum import Enum, StrEnum

BOARD_SIZE = 10
FLEET_SIZE = 10


class Compass(Enum):
    """Ship bearing, keyed by the direction letter typed at the console."""

    NORTH = "n"
    SOUTH = "s"
    EAST = "e"
    WEST = "o"
    UNKNOWN = "u"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_char(cls, ch: str) -> Compass:
        """Map a direction letter to a bearing; unrecognized letters give UNKNOWN."""
        for bearing in cls:
            if bearing is not cls.UNKNOWN and bearing.value == ch:
                return bearing
        return cls.UNKNOWN


class ShipKind(StrEnum):
    """The five ship kinds, valued by their factory tag."""

    BARGE = "barca"
    CARAVEL = "caravela"
    CARRACK = "nau"
    FRIGATE = "fragata"
    GALLEON = "galeao"

    @property
    def size(self) -> int:
        return SHIP_SIZES[self]

    @property
    def category(self) -> str:
        return SHIP_CATEGORIES[self]

    @property
    def validates_bearing(self) -> bool:
        return self in BEARING_CHECKED_KINDS


SHIP_SIZES: dict[ShipKind, int] = {
    ShipKind.BARGE: 1,
    ShipKind.CARAVEL: 2,
    ShipKind.CARRACK: 3,
    ShipKind.FRIGATE: 4,
    ShipKind.GALLEON: 5,
}

SHIP_CATEGORIES: dict[ShipKind, str] = {
    ShipKind.BARGE: "Barca",
    ShipKind.CARAVEL: "Caravela",
    ShipKind.CARRACK: "Nau",
    ShipKind.FRIGATE: "Fragata",
    ShipKind.GALLEON: "Galeao",
}

# Carrack and Frigate fall back to a row run on an unrecognized bearing.
BEARING_CHECKED_KINDS: frozenset[ShipKind] = frozenset({ShipKind.CARAVEL, ShipKind.GALLEON})

# Status report order, largest kind first.
REPORT_ORDER: tuple[ShipKind, ...] = (
    ShipKind.GALLEON,
    ShipKind.FRIGATE,
    ShipKind.CARRACK,
    ShipKind.CARAVEL,
    ShipKind.BARGE,
)


class ShotResult(StrEnum):
    """Result of a single shot."""

    MISS = "MISS"
    HIT = "HIT"
    SUNK = "SUNK"
    REPEAT = "REPEAT"
    INVALID = "INVALID"


Offset = tuple[int, int]

_LINEAR_AXES: dict[Compass, Offset] = {
    Compass.NORTH: (1, 0),
    Compass.SOUTH: (1, 0),
    Compass.EAST: (0, 1),
    Compass.WEST: (0, 1),
}

GALLEON_SHAPES: dict[Compass, tuple[Offset, ...]] = {
    Compass.NORTH: ((0, 0), (0, 1), (0, 2), (1, 1), (2, 1)),
    Compass.SOUTH: ((0, 0), (1, 0), (2, -1), (2, 0), (2, 1)),
    Compass.EAST: ((0, 0), (1, -2), (1, -1), (1, 0), (2, 0)),
    Compass.WEST: ((0, 0), (1, 0), (1, 1), (1, 2), (2, 0)),
}


def shape_for(kind: ShipKind, bearing: object) -> tuple[Offset, ...] | None:
    """Return cell offsets from the anchor, or None when the bearing is rejected.

    North/South runs both grow toward increasing row and East/West runs
    both grow toward increasing column.
    """
    if kind is ShipKind.BARGE:
        return ((0, 0),)
    if kind is ShipKind.GALLEON:
        return GALLEON_SHAPES.get(bearing) if isinstance(bearing, Compass) else None
    axis = _LINEAR_AXES.get(bearing) if isinstance(bearing, Compass) else None
    if axis is None:
        if kind.validates_bearing:
            return None
        axis = (1, 0)
    d_row, d_col = axis
    return tuple((d_row * i, d_col * i) for i in range(kind.size))
