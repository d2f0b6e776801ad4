"""Text maps of shots and ship cells."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from armada.game.core.fleet import Fleet
from armada.game.core.game import Game
from armada.game.core.models import BOARD_SIZE
from armada.game.core.position import Position

EMPTY_MARK = "."
SHOT_MARK = "X"
SHIP_MARK = "#"


def board_grid(positions: Iterable[Position], marker: str, size: int = BOARD_SIZE) -> np.ndarray:
    """Return a size x size char grid with `marker` at every in-bounds position."""
    grid = np.full((size, size), EMPTY_MARK, dtype="<U1")
    for pos in positions:
        if 0 <= pos.row < size and 0 <= pos.column < size:
            grid[pos.row, pos.column] = marker
    return grid


def render_board(positions: Iterable[Position], marker: str, size: int = BOARD_SIZE) -> str:
    grid = board_grid(positions, marker, size)
    return "\n".join("".join(row) for row in grid)


def render_shots(game: Game) -> str:
    """Render the shot history."""
    return render_board(game.shots, SHOT_MARK, game.fleet.board_size)


def render_fleet(fleet: Fleet) -> str:
    """Render every cell of every ship."""
    cells = [cell for ship in fleet.ships for cell in ship.positions]
    return render_board(cells, SHIP_MARK, fleet.board_size)
