import pytest

from frontier.game.core.board import BoardState, seed_diagonal
from frontier.game.core.errors import AlreadyOwned, InvariantViolation
from frontier.game.core.models import Coord, PlayerId


def test_claim_sets_owner_and_value() -> None:
    board = BoardState(size=3)
    assert board.owner_at(Coord(1, 2)) is None
    assert board.value_at(Coord(1, 2)) is None

    board.claim(Coord(1, 2), PlayerId.TWO, 4)

    assert board.owner_at(Coord(1, 2)) is PlayerId.TWO
    assert board.value_at(Coord(1, 2)) == 4
    assert board.is_owned(Coord(1, 2))


def test_claim_is_permanent() -> None:
    board = BoardState(size=3)
    board.claim(Coord(0, 0), PlayerId.ONE, 2)

    with pytest.raises(AlreadyOwned):
        board.claim(Coord(0, 0), PlayerId.TWO, 5)
    with pytest.raises(InvariantViolation):
        board.claim(Coord(0, 0), PlayerId.ONE, 9)

    assert board.owner_at(Coord(0, 0)) is PlayerId.ONE
    assert board.value_at(Coord(0, 0)) == 2


def test_claim_rejects_non_positive_value_and_out_of_bounds() -> None:
    board = BoardState(size=3)
    with pytest.raises(InvariantViolation):
        board.claim(Coord(0, 0), PlayerId.ONE, 0)
    with pytest.raises(InvariantViolation):
        board.claim(Coord(3, 3), PlayerId.ONE, 1)
    assert not board.is_owned(Coord(0, 0))


@pytest.mark.parametrize("coord", [Coord(-1, -1), Coord(0, -1), Coord(3, 0), Coord(0, 3)])
def test_cell_queries_reject_out_of_bounds(coord: Coord) -> None:
    board = BoardState(size=3)
    board.claim(Coord(2, 2), PlayerId.ONE, 7)
    with pytest.raises(InvariantViolation):
        board.value_at(coord)
    with pytest.raises(InvariantViolation):
        board.owner_at(coord)
    with pytest.raises(InvariantViolation):
        board.is_owned(coord)
    assert board.value_at(Coord(2, 2)) == 7


def test_cell_enumeration_is_restartable_and_filtered() -> None:
    board = BoardState(size=3)
    board.claim(Coord(0, 1), PlayerId.ONE, 1)
    board.claim(Coord(2, 0), PlayerId.TWO, 1)
    board.claim(Coord(1, 1), PlayerId.ONE, 2)

    first = list(board.unowned_cells())
    second = list(board.unowned_cells())
    assert first == second
    assert len(first) == 6
    assert Coord(0, 1) not in first
    assert list(board.owned_cells_of(PlayerId.ONE)) == [Coord(0, 1), Coord(1, 1)]
    assert list(board.owned_cells_of(PlayerId.TWO)) == [Coord(2, 0)]


def test_seed_diagonal_for_six() -> None:
    board = BoardState(size=6)
    seed_diagonal(board)

    expected = {
        Coord(0, 0): (PlayerId.ONE, 1),
        Coord(1, 1): (PlayerId.ONE, 2),
        Coord(2, 2): (PlayerId.ONE, 3),
        Coord(3, 3): (PlayerId.TWO, 3),
        Coord(4, 4): (PlayerId.TWO, 2),
        Coord(5, 5): (PlayerId.TWO, 1),
    }
    for coord, (owner, value) in expected.items():
        assert board.owner_at(coord) is owner
        assert board.value_at(coord) == value
    assert len(list(board.unowned_cells())) == 30
    assert board.max_value_of(PlayerId.ONE) == 3
    assert board.max_value_of(PlayerId.TWO) == 3


def test_seed_diagonal_for_odd_size_gives_player_two_the_middle() -> None:
    board = BoardState(size=5)
    seed_diagonal(board)
    assert board.owner_at(Coord(2, 2)) is PlayerId.TWO
    assert board.value_at(Coord(2, 2)) == 3
    assert board.max_value_of(PlayerId.ONE) == 2


def test_is_full_and_max_value_of_empty_player() -> None:
    board = BoardState(size=2)
    assert board.max_value_of(PlayerId.ONE) == 0
    for index, coord in enumerate([Coord(0, 0), Coord(0, 1), Coord(1, 0), Coord(1, 1)], start=1):
        assert not board.is_full()
        board.claim(coord, PlayerId.ONE, index)
    assert board.is_full()
    assert list(board.unowned_cells()) == []
