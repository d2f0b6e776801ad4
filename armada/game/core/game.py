"""Shot resolution and game bookkeeping over a single fleet."""

from __future__ import annotations

import logging

from armada.game.core.fleet import Fleet
from armada.game.core.models import ShotResult
from armada.game.core.position import Position
from armada.game.core.ship import Ship

logger = logging.getLogger(__name__)


class Game:
    """Runtime game state: shot history and outcome counters."""

    def __init__(self, fleet: Fleet) -> None:
        self.fleet = fleet
        self._shots: list[Position] = []
        self.invalid_shots = 0
        self.repeated_shots = 0
        self.hits = 0
        self.sunk_ships = 0
        self.last_result: ShotResult | None = None

    @property
    def shots(self) -> tuple[Position, ...]:
        return tuple(self._shots)

    @property
    def remaining_ships(self) -> int:
        return len(self.fleet.floating_ships())

    def fire(self, pos: Position) -> Ship | None:
        """Resolve a shot and return the ship it sank, if any."""
        result, sunk = self._resolve(pos)
        self.last_result = result
        logger.debug("shot row=%d col=%d result=%s", pos.row, pos.column, result.value)
        if sunk is not None:
            logger.info("ship_sunk ship=%s remaining=%d", sunk, self.remaining_ships)
        return sunk

    def _resolve(self, pos: Position) -> tuple[ShotResult, Ship | None]:
        if not self._valid_shot(pos):
            self.invalid_shots += 1
            return ShotResult.INVALID, None
        if pos in self._shots:
            self.repeated_shots += 1
            return ShotResult.REPEAT, None

        self._shots.append(Position(pos.row, pos.column))
        ship = self.fleet.ship_at(pos)
        if ship is None:
            return ShotResult.MISS, None

        ship.shoot(pos)
        self.hits += 1
        if not ship.still_floating():
            self.sunk_ships += 1
            return ShotResult.SUNK, ship
        return ShotResult.HIT, None

    def _valid_shot(self, pos: Position) -> bool:
        # Upper bound is inclusive, one past the last placeable row/column.
        size = self.fleet.board_size
        return 0 <= pos.row <= size and 0 <= pos.column <= size
