"""Token-driven console session: build a fleet, fire salvos, inspect the boards."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator

from armada.game.core.board import render_fleet, render_shots
from armada.game.core.fleet import Fleet
from armada.game.core.game import Game
from armada.game.core.models import FLEET_SIZE, Compass
from armada.game.core.position import Position
from armada.game.core.ship import InvalidBearingError, Ship, build_ship

logger = logging.getLogger(__name__)

SHOTS_PER_SALVO = 3

CMD_NEW_FLEET = "nova"
CMD_STATUS = "estado"
CMD_FLEET_MAP = "mapa"
CMD_SALVO = "rajada"
CMD_SHOT_MAP = "ver"
CMD_QUIT = "desisto"

GOODBYE_MESSAGE = "Bons ventos!"
UNKNOWN_COMMAND_MESSAGE = "Que comando é esse??? Repete ..."
UNKNOWN_SHIP_MESSAGE = "Navio desconhecido!"
DEFEAT_MESSAGE = "Maldito sejas, Java Sparrow, eu voltarei, glub glub glub..."


class EndOfInput(Exception):
    """Raised when the token stream runs dry; `ConsoleSession.execute` absorbs it."""


class ConsoleSession:
    """Interprets console commands and yields the lines to show the player."""

    def __init__(self, tokens: Iterable[str], *, shots_per_salvo: int = SHOTS_PER_SALVO) -> None:
        self._tokens = iter(tokens)
        self.shots_per_salvo = shots_per_salvo
        self.fleet: Fleet | None = None
        self.game: Game | None = None
        self.exhausted = False
        self._handlers: dict[str, Callable[[list[str]], None]] = {
            CMD_NEW_FLEET: self._new_fleet,
            CMD_STATUS: self._status,
            CMD_FLEET_MAP: self._fleet_map,
            CMD_SALVO: self._salvo,
            CMD_SHOT_MAP: self._shot_map,
        }

    def run(self) -> Iterator[str]:
        """Process commands until `desisto` or the end of input."""
        while not self.exhausted:
            try:
                command = self._next_token()
            except EndOfInput:
                break
            if command == CMD_QUIT:
                break
            for line in self.execute(command):
                yield line
        yield GOODBYE_MESSAGE

    def execute(self, command: str) -> list[str]:
        """Run one command, reading its arguments from the token stream.

        If the tokens run out mid-command, the lines produced so far are
        returned and `exhausted` is set.
        """
        handler = self._handlers.get(command)
        if handler is None:
            logger.debug("unknown_command command=%s", command)
            return [UNKNOWN_COMMAND_MESSAGE]
        lines: list[str] = []
        try:
            handler(lines)
        except EndOfInput:
            logger.debug("input_exhausted command=%s", command)
            self.exhausted = True
        except ValueError as exc:
            logger.warning("bad_input command=%s error=%s", command, exc)
            lines.append(f"Entrada invalida: {exc}")
        return lines

    def _new_fleet(self, lines: list[str]) -> None:
        fleet = Fleet()
        admitted = 0
        while admitted <= FLEET_SIZE:
            tag = self._next_token()
            anchor = self._read_position()
            bearing = Compass.from_char(self._next_token()[:1])
            try:
                ship = build_ship(tag, bearing, anchor)
            except InvalidBearingError as exc:
                lines.append(str(exc))
                continue
            if ship is None:
                lines.append(UNKNOWN_SHIP_MESSAGE)
            elif fleet.add_ship(ship):
                admitted += 1
            else:
                lines.append(f"Falha na criacao de {ship.category} {ship.bearing} {ship.position}")
        self.fleet = fleet
        self.game = Game(fleet)
        logger.info("fleet_built ships=%d", admitted)
        lines.append(f"{admitted} navios adicionados com sucesso!")

    def _status(self, lines: list[str]) -> None:
        if self.fleet is not None:
            lines.append(self.fleet.status_report())

    def _fleet_map(self, lines: list[str]) -> None:
        if self.fleet is not None:
            lines.append(render_fleet(self.fleet))

    def _shot_map(self, lines: list[str]) -> None:
        if self.game is not None:
            lines.append(render_shots(self.game))

    def _salvo(self, lines: list[str]) -> None:
        if self.game is None:
            return
        game = self.game
        for _ in range(self.shots_per_salvo):
            sunk = game.fire(self._read_position())
            if sunk is not None:
                lines.append(_sunk_message(sunk))
        lines.append(
            f"Hits: {game.hits} Inv: {game.invalid_shots} "
            f"Rep: {game.repeated_shots} Restam {game.remaining_ships} navios."
        )
        if game.remaining_ships == 0:
            lines.append(DEFEAT_MESSAGE)

    def _read_position(self) -> Position:
        row = int(self._next_token())
        column = int(self._next_token())
        return Position(row, column)

    def _next_token(self) -> str:
        token = next(self._tokens, None)
        if token is None:
            raise EndOfInput
        return token


def _sunk_message(ship: Ship) -> str:
    return f"Mas... mas... {ship.category}s nao sao a prova de bala? :-("


def iter_tokens(lines: Iterable[str]) -> Iterator[str]:
    """Split input lines into whitespace-separated tokens."""
    for line in lines:
        for token in line.split():
            yield token
