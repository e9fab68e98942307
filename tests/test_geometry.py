import math

import pytest

from farfarwest.geometry import (
    Direction,
    Orientation,
    Rect,
    chebyshev_distance,
    direction_from_angle,
    displacement,
    manhattan_distance,
    sign,
    undisplacement,
)

CARDINALS = [Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT]


@pytest.mark.parametrize("direction", CARDINALS)
def test_undisplacement_round_trip(direction):
    assert undisplacement(displacement(direction)) == direction


def test_up_points_to_negative_y():
    assert displacement(Direction.UP) == (0, -1)


@pytest.mark.parametrize("vector", [(1, 1), (0, 0), (2, 0)])
def test_undisplacement_rejects_non_cardinal(vector):
    with pytest.raises(ValueError):
        undisplacement(vector)


@pytest.mark.parametrize("direction", CARDINALS)
def test_direction_from_angle_matches_displacement(direction):
    dx, dy = displacement(direction)
    assert direction_from_angle(math.atan2(dy, dx)) == direction


@pytest.mark.parametrize("orientation", list(Orientation))
def test_orientation_displacement_is_unit(orientation):
    vector = displacement(orientation)
    assert chebyshev_distance(vector, (0, 0)) == (0 if orientation == Orientation.CENTER else 1)


@pytest.mark.parametrize("a,b", [((3, 4), (-2, 7)), ((0, 0), (5, 5)), ((9, -1), (9, -1))])
def test_distance_invariants(a, b):
    assert manhattan_distance(a, b) == manhattan_distance(b, a)
    assert chebyshev_distance(a, b) <= manhattan_distance(a, b) <= 2 * chebyshev_distance(a, b)
    assert (manhattan_distance(a, b) == 0) == (a == b)


def test_sign_of_vector():
    assert sign((-7, 12)) == (-1, 1)
    assert sign((0, -3)) == (0, -1)


def test_rect_from_center_contains_center():
    rect = Rect.from_center_size((10, 20), (5, 5))
    assert rect.contains((10, 20))
    assert rect.position == (8, 18)


def test_rect_contains_is_half_open():
    rect = Rect.from_size((4, 3))
    assert rect.contains((0, 0))
    assert rect.contains((3, 2))
    assert not rect.contains((4, 2))
    assert not rect.contains((3, 3))
    assert not rect.contains((-1, 0))


def test_rect_positions_are_all_contained():
    rect = Rect.from_position_size((2, -1), (3, 4))
    positions = list(rect.positions())
    assert len(positions) == 3 * 4
    assert len(set(positions)) == len(positions)
    assert all(rect.contains(p) for p in positions)


def test_rect_grow_by_keeps_center():
    rect = Rect.from_center_size((0, 0), (5, 5))
    grown = rect.grow_by(2)
    assert grown.size == (9, 9)
    assert grown.position_at(Orientation.CENTER) == rect.position_at(Orientation.CENTER)


def test_rect_position_at_corners():
    rect = Rect.from_position_size((1, 2), (6, 4))
    assert rect.position_at(Orientation.NORTH_WEST) == rect.position
    east = rect.position_at(Orientation.EAST)
    west = rect.position_at(Orientation.WEST)
    assert east[1] == west[1]
    assert east[0] - west[0] == rect.size[0]


def test_rect_extend_to_covers_old_rect():
    rect = Rect.from_size((2, 2))
    extended = rect.extend_to((-3, 5))
    assert extended.position == (-3, 0)
    assert all(extended.contains(p) for p in rect.positions())
    assert rect.extend_to((1, 1)) == rect