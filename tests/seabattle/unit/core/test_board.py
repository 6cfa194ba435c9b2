import pytest

from seabattle.game.core.board import (
    Board,
    can_place_ship,
    create_board,
    neighbors,
    place_ship,
)
from seabattle.game.core.errors import InvalidCoordinate, InvalidPlacement
from seabattle.game.core.models import Coord, Fleet, Tile
from seabattle.game.core.shot_resolution import apply_shot


def test_create_board_has_100_empty_tiles() -> None:
    board = create_board()
    tiles = board.tiles()
    assert len(tiles) == 10
    assert all(len(row) == 10 for row in tiles)
    assert all(tile == Tile(False, False, None) for row in tiles for tile in row)


def test_tiles_are_independent() -> None:
    board = create_board()
    place_ship(board, 0, 0, 1, True, Fleet())
    assert board.tile(0, 0) == Tile(has_ship=True, hit=False, ship_id=0)
    assert board.tile(0, 1) == Tile()
    assert board.tile(1, 0) == Tile()
    assert board.occupied_cells == 1


@pytest.mark.parametrize(
    ("row", "col", "size", "horizontal"),
    [
        (0, 0, 5, True),
        (5, 3, 3, True),
        (0, 5, 5, True),
        (9, 8, 2, True),
        (0, 0, 5, False),
        (3, 5, 3, False),
        (5, 0, 5, False),
        (8, 9, 2, False),
    ],
)
def test_can_place_ship_accepts_runs_inside_the_grid(
    row: int, col: int, size: int, horizontal: bool
) -> None:
    assert can_place_ship(create_board(), row, col, size, horizontal)


@pytest.mark.parametrize(
    ("row", "col", "size", "horizontal"),
    [
        (0, 6, 5, True),
        (0, 8, 3, True),
        (0, 9, 2, True),
        (6, 0, 5, False),
        (9, 0, 2, False),
        (-1, 0, 2, True),
        (0, -1, 2, False),
        (10, 0, 1, True),
        (0, 10, 1, False),
        (0, 0, 0, True),
    ],
)
def test_can_place_ship_rejects_out_of_bounds_runs(
    row: int, col: int, size: int, horizontal: bool
) -> None:
    assert not can_place_ship(create_board(), row, col, size, horizontal)


def test_can_place_ship_rejects_collisions_in_both_orientations() -> None:
    board = create_board()
    fleet = Fleet()
    place_ship(board, 0, 5, 5, False, fleet, "Vertical")
    place_ship(board, 7, 0, 5, True, fleet, "Horizontal")

    assert not can_place_ship(board, 0, 5, 2, True)
    assert not can_place_ship(board, 2, 3, 5, True)
    assert not can_place_ship(board, 5, 2, 5, False)
    assert can_place_ship(board, 0, 6, 4, True)


def test_place_ship_records_cells_in_traversal_order() -> None:
    board = create_board()
    fleet = Fleet()
    ship = place_ship(board, 2, 3, 4, True, fleet, "Battleship")

    assert ship.id == 0
    assert ship.name == "Battleship"
    assert ship.hits == 0
    assert not ship.sunk
    assert ship.cells == (Coord(2, 3), Coord(2, 4), Coord(2, 5), Coord(2, 6))
    assert fleet[0] is ship

    marked = [
        Coord(r, c) for r in range(10) for c in range(10) if board.tile(r, c).ship_id == ship.id
    ]
    assert marked == list(ship.cells)
    assert board.occupied_cells == 4


def test_place_ship_vertical_and_incrementing_ids() -> None:
    board = create_board()
    fleet = Fleet()
    first = place_ship(board, 0, 0, 2, True, fleet, "Destroyer")
    second = place_ship(board, 1, 5, 4, False, fleet, "Battleship")

    assert (first.id, second.id) == (0, 1)
    assert second.cells == (Coord(1, 5), Coord(2, 5), Coord(3, 5), Coord(4, 5))
    assert board.tile(4, 5).ship_id == 1
    assert board.tile(5, 5).has_ship is False


def test_place_ship_uses_default_name() -> None:
    ship = place_ship(create_board(), 0, 0, 3, True, Fleet(), None)
    assert ship.name == "Ship (3)"


def test_place_ship_refuses_illegal_run_without_mutation() -> None:
    board = create_board()
    fleet = Fleet()
    place_ship(board, 0, 0, 3, True, fleet)
    with pytest.raises(InvalidPlacement):
        place_ship(board, 0, 2, 3, True, fleet)
    with pytest.raises(InvalidPlacement):
        place_ship(board, 0, 9, 2, True, fleet)
    assert len(fleet) == 1
    assert board.occupied_cells == 3


def test_apply_shot_miss_marks_tile() -> None:
    board = create_board()
    outcome = apply_shot(board, 0, 0, Fleet())
    assert (outcome.already_hit, outcome.hit, outcome.sunk, outcome.ship) == (False, False, False, None)
    assert board.tile(0, 0).hit
    assert board.shots_fired == 1


def test_apply_shot_hits_then_sinks_size_three_ship() -> None:
    board = create_board()
    fleet = Fleet()
    cruiser = place_ship(board, 0, 0, 3, True, fleet, "Cruiser")

    first = apply_shot(board, 0, 0, fleet)
    second = apply_shot(board, 0, 1, fleet)
    third = apply_shot(board, 0, 2, fleet)

    assert [first.sunk, second.sunk, third.sunk] == [False, False, True]
    assert first.hit and second.hit and third.hit
    assert first.ship is cruiser
    assert cruiser.hits == 3
    assert cruiser.sunk


def test_apply_shot_twice_reports_already_hit_without_counting() -> None:
    board = create_board()
    fleet = Fleet()
    cruiser = place_ship(board, 0, 0, 3, True, fleet, "Cruiser")

    apply_shot(board, 0, 0, fleet)
    repeat = apply_shot(board, 0, 0, fleet)
    assert repeat.already_hit
    assert not repeat.hit and not repeat.sunk and repeat.ship is None
    assert cruiser.hits == 1


def test_apply_shot_identifies_ship_and_isolates_damage() -> None:
    board = create_board()
    fleet = Fleet()
    place_ship(board, 0, 0, 2, True, fleet, "Destroyer")
    place_ship(board, 2, 0, 3, True, fleet, "Cruiser")

    assert apply_shot(board, 0, 0, fleet).ship is fleet[0]
    assert apply_shot(board, 2, 1, fleet).ship is fleet[1]
    apply_shot(board, 0, 1, fleet)
    assert fleet[0].sunk
    assert not fleet[1].sunk


def test_apply_shot_on_sunk_ship_reports_hit_without_increment() -> None:
    board = create_board()
    fleet = Fleet()
    ship = place_ship(board, 0, 0, 2, True, fleet, "Destroyer")
    ship.hits = ship.size
    ship.sunk = True

    outcome = apply_shot(board, 0, 0, fleet)
    assert outcome.hit and not outcome.sunk and outcome.ship is ship
    assert ship.hits == 2


def test_out_of_range_coordinates_raise() -> None:
    board = create_board()
    with pytest.raises(InvalidCoordinate):
        apply_shot(board, 10, 0, Fleet())
    with pytest.raises(InvalidCoordinate):
        board.tile(0, -1)
    with pytest.raises(ValueError):
        board.was_shot(-1, 3)


def test_neighbors_corner_edge_and_center() -> None:
    assert set(neighbors(0, 0)) == {Coord(1, 0), Coord(0, 1)}
    assert set(neighbors(9, 9)) == {Coord(8, 9), Coord(9, 8)}
    assert set(neighbors(0, 5)) == {Coord(1, 5), Coord(0, 4), Coord(0, 6)}
    assert neighbors(5, 5) == [Coord(4, 5), Coord(6, 5), Coord(5, 4), Coord(5, 6)]


def test_neighbors_never_include_diagonals() -> None:
    center = neighbors(5, 5)
    for diagonal in (Coord(4, 4), Coord(4, 6), Coord(6, 4), Coord(6, 6)):
        assert diagonal not in center


def test_board_repairs_mismatched_arrays() -> None:
    board = Board(size=4)
    assert board.ships.shape == (4, 4)
    assert board.shots.shape == (4, 4)
