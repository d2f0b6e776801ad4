"""Fleet placement validation and lookup."""

from __future__ import annotations

import logging

from armada.game.core.models import BOARD_SIZE, FLEET_SIZE, REPORT_ORDER
from armada.game.core.position import Position
from armada.game.core.ship import Ship

logger = logging.getLogger(__name__)


class Fleet:
    """Ordered collection of ships that never touch each other."""

    def __init__(self, board_size: int = BOARD_SIZE, capacity: int = FLEET_SIZE) -> None:
        self.board_size = board_size
        self.capacity = capacity
        self._ships: list[Ship] = []

    @property
    def ships(self) -> tuple[Ship, ...]:
        return tuple(self._ships)

    def __len__(self) -> int:
        return len(self._ships)

    def add_ship(self, ship: Ship) -> bool:
        """Admit a ship if the fleet has room, it is on the board and touches no other ship."""
        reason = self._rejection_reason(ship)
        if reason:
            logger.debug("ship_rejected ship=%s reason=%s", ship, reason)
            return False
        self._ships.append(ship)
        logger.debug("ship_admitted ship=%s count=%d", ship, len(self._ships))
        return True

    def ships_like(self, category: str) -> list[Ship]:
        return [ship for ship in self._ships if ship.category == category]

    def floating_ships(self) -> list[Ship]:
        return [ship for ship in self._ships if ship.still_floating()]

    def ship_at(self, pos: Position) -> Ship | None:
        """Return the first ship occupying `pos`, in insertion order."""
        for ship in self._ships:
            if ship.occupies(pos):
                return ship
        return None

    def status_report(self) -> str:
        """Describe all ships, floating ships, then ships grouped by category."""
        groups: list[list[Ship]] = [list(self._ships), self.floating_ships()]
        groups.extend(self.ships_like(kind.category) for kind in REPORT_ORDER)
        return "\n".join(str(ship) for group in groups for ship in group)

    def _rejection_reason(self, ship: Ship) -> str:
        # Inclusive check: a full fleet still takes one more ship.
        if len(self._ships) > self.capacity:
            return "fleet_full"
        if not self._inside_board(ship):
            return "out_of_bounds"
        if any(admitted.too_close_to(ship) for admitted in self._ships):
            return "collision_risk"
        return ""

    def _inside_board(self, ship: Ship) -> bool:
        last = self.board_size - 1
        return (
            ship.left_most >= 0
            and ship.right_most <= last
            and ship.top_most >= 0
            and ship.bottom_most <= last
        )
