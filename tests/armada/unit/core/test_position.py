import pytest

from armada.game.core.position import Position


def test_equality_and_hash_ignore_flags() -> None:
    shot = Position(3, 4)
    cell = Position(3, 4)
    cell.occupy()
    cell.shoot()
    assert shot == cell
    assert hash(shot) == hash(cell)
    assert Position(3, 4) != Position(4, 3)


def test_is_adjacent_to_covers_self_and_diagonals() -> None:
    center = Position(5, 5)
    assert center.is_adjacent_to(Position(5, 5))
    assert center.is_adjacent_to(Position(4, 6))
    assert center.is_adjacent_to(Position(6, 4))
    assert not center.is_adjacent_to(Position(7, 5))
    assert not center.is_adjacent_to(Position(5, 3))


def test_flags_start_clear_and_shoot_is_idempotent() -> None:
    cell = Position(0, 0)
    assert not cell.is_occupied()
    assert not cell.is_hit()
    cell.shoot()
    cell.shoot()
    assert cell.is_hit()
    cell.occupy()
    assert cell.is_occupied()


def test_str_matches_console_format() -> None:
    assert str(Position(2, 7)) == "Linha = 2 Coluna = 7"


def test_coordinate_is_read_only() -> None:
    cell = Position(1, 2)
    seen = {cell}
    with pytest.raises(AttributeError):
        cell.row = 5
    with pytest.raises(AttributeError):
        cell.column = 5
    assert Position(1, 2) in seen
