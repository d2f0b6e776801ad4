from __future__ import annotations

import pytest

from armada.game.core.fleet import Fleet
from armada.game.core.game import Game
from armada.game.core.models import Compass, ShipKind
from armada.game.core.position import Position
from armada.game.core.ship import Ship


def make_ship(kind: ShipKind, row: int, column: int, bearing: Compass = Compass.NORTH) -> Ship:
    return Ship(kind, bearing, Position(row, column))


def make_valid_fleet() -> Fleet:
    fleet = Fleet()
    for ship in (
        make_ship(ShipKind.GALLEON, 0, 0, Compass.NORTH),
        make_ship(ShipKind.FRIGATE, 0, 5, Compass.EAST),
        make_ship(ShipKind.CARRACK, 4, 0, Compass.SOUTH),
        make_ship(ShipKind.CARAVEL, 4, 4, Compass.WEST),
        make_ship(ShipKind.BARGE, 9, 9, Compass.NORTH),
    ):
        assert fleet.add_ship(ship)
    return fleet


@pytest.fixture
def valid_fleet() -> Fleet:
    return make_valid_fleet()


@pytest.fixture
def game(valid_fleet: Fleet) -> Game:
    return Game(valid_fleet)
