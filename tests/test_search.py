import pytest

from knightstour.core import search as search_module
from knightstour.core.constraints import check_tour, violations
from knightstour.core.errors import OutOfBoundsError, SearchCancelled, TourIntegrityError
from knightstour.core.model import Board, Position, Tour
from knightstour.core.search import Path, count_tours, iter_tours, search

# a known open tour on a 4-wide, 3-high board
KNOWN_4X3 = ["a1", "c2", "a3", "b1", "d2", "b3", "c1", "d3", "b2", "d1", "c3", "a2"]


def test_trivial_board_has_one_tour():
    tours = search(Position(0, 0), Board(1, 1))
    assert [t.labels() for t in tours] == [["a1"]]


def test_three_by_three_has_no_tours():
    board = Board(3, 3)
    for start in board.squares():
        assert search(start, board) == []


@pytest.mark.parametrize("width,height", [(1, 5), (5, 1), (2, 2), (2, 6)])
def test_narrow_boards_have_no_tours(width, height):
    board = Board(width, height)
    for start in board.squares():
        assert search(start, board) == []


def test_known_tour_is_found():
    board = Board(4, 3)
    tours = search(Position(0, 0), board)
    assert KNOWN_4X3 in [t.labels() for t in tours]


def test_every_tour_is_complete_adjacent_and_starts_right():
    board = Board(4, 3)
    for start in board.squares():
        for tour in search(start, board):
            assert tour.start == start
            assert len(tour) == board.area
            assert set(tour.squares) == set(board.squares())
            assert violations(tour, board) == []


def test_tours_are_unique_per_start():
    board = Board(4, 3)
    tours = search(Position(0, 0), board)
    assert len(set(tours)) == len(tours)


def test_order_is_reproducible():
    board = Board(4, 3)
    assert search(Position(1, 1), board) == search(Position(1, 1), board)


def test_half_turn_symmetry():
    board = Board(4, 3)
    for start in board.squares():
        mirror = Position(board.width - 1 - start.x, board.height - 1 - start.y)
        assert count_tours(start, board) == count_tours(mirror, board)


def test_iter_tours_is_lazy_and_matches_search():
    board = Board(4, 3)
    first = next(iter_tours(Position(0, 0), board))
    assert first == search(Position(0, 0), board)[0]


def test_deep_board_does_not_recurse():
    # 2-high boards are chains of forced moves, so depth grows with width
    board = Board(3000, 2)
    assert search(Position(0, 0), board) == []


def test_start_off_board():
    with pytest.raises(OutOfBoundsError):
        search(Position(4, 0), Board(4, 3))


def test_cancellation_is_checked_each_step():
    calls = []

    def stop():
        calls.append(1)
        return len(calls) > 5

    with pytest.raises(SearchCancelled):
        search(Position(0, 0), Board(4, 3), should_stop=stop)
    assert len(calls) == 6


def test_path_backtracking():
    path = Path(Position(0, 0))
    path.advance(Position(1, 2))
    assert len(path) == 2
    assert Position(1, 2) in path
    assert path.current == Position(1, 2)
    with pytest.raises(TourIntegrityError):
        path.advance(Position(0, 0))
    assert path.retreat() == Position(1, 2)
    assert Position(1, 2) not in path
    assert path.snapshot() == Tour((Position(0, 0),))
    path.unwind()
    assert len(path) == 0
    assert not path.visited


def test_snapshot_is_independent_of_path():
    path = Path(Position(0, 0))
    tour = path.snapshot()
    path.advance(Position(1, 2))
    assert tour.labels() == ["a1"]


def test_broken_move_generator_fails_loudly(monkeypatch):
    def king_moves(pos, board):
        steps = [(0, 1), (1, 0), (0, -1), (-1, 0)]
        return [Position(pos.x + dx, pos.y + dy) for dx, dy in steps if board.in_bounds(pos.x + dx, pos.y + dy)]

    monkeypatch.setattr(search_module, "neighbors", king_moves)
    with pytest.raises(TourIntegrityError):
        search(Position(0, 0), Board(1, 2))


def test_check_tour_rejects_short_and_repeated_tours():
    board = Board(4, 3)
    with pytest.raises(TourIntegrityError):
        check_tour(Tour((Position(0, 0), Position(2, 1))), board)
    squares = [Position.from_label(label, board) for label in KNOWN_4X3]
    assert check_tour(Tour(tuple(squares)), board).labels() == KNOWN_4X3
    squares[-1] = squares[0]
    assert "all distinct" in violations(Tour(tuple(squares)), board)


def test_check_tour_rejects_wrong_start():
    board = Board(4, 3)
    tour = Tour(tuple(Position.from_label(label, board) for label in KNOWN_4X3))
    assert check_tour(tour, board, Position(0, 0)) == tour
    with pytest.raises(TourIntegrityError, match="starts at b2"):
        check_tour(tour, board, Position(1, 1))


def test_cancellation_is_logged(caplog):
    with caplog.at_level("WARNING", logger="knightstour.core.search"):
        with pytest.raises(SearchCancelled):
            search(Position(0, 0), Board(4, 3), should_stop=lambda: True)
    assert "cancelled" in caplog.text
