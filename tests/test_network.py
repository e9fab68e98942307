import pytest

from farfarwest.geometry import chebyshev_distance, manhattan_distance
from farfarwest.network import (
    TRAIN_LENGTH,
    NetworkRuntime,
    NetworkState,
    StationState,
    TrainState,
)

SQUARE = [(0, 0), (6, 0), (6, 6), (0, 6)]


def _bound(points=SQUARE):
    runtime = NetworkRuntime()
    runtime.bind(points)
    return runtime


def test_bind_length_matches_loop_perimeter():
    runtime = _bound()
    perimeter = sum(
        manhattan_distance(a, b) for a, b in zip(SQUARE, SQUARE[1:] + SQUARE[:1])
    )
    assert len(runtime.railway) == perimeter


def test_bind_produces_contiguous_loop():
    runtime = _bound()
    track = runtime.railway
    for a, b in zip(track, track[1:] + track[:1]):
        assert manhattan_distance(a, b) == 1
    assert track[0] == SQUARE[0]
    for point in SQUARE:
        assert point in track


def test_bind_replaces_previous_track():
    runtime = _bound()
    runtime.bind([(0, 0), (3, 0), (3, 3), (0, 3)])
    assert len(runtime.railway) == sum(
        manhattan_distance(a, b)
        for a, b in zip(
            [(0, 0), (3, 0), (3, 3), (0, 3)], [(3, 0), (3, 3), (0, 3), (0, 0)]
        )
    )


def test_bind_rejects_diagonal():
    with pytest.raises(ValueError):
        NetworkRuntime().bind([(0, 0), (3, 3), (0, 3)])


def test_bind_rejects_empty():
    with pytest.raises(ValueError):
        NetworkRuntime().bind([])


def test_next_and_prev_are_inverse():
    runtime = _bound()
    length = len(runtime.railway)
    for index in range(length):
        for advance in (1, 3, 7):
            assert runtime.prev_position(runtime.next_position(index, advance), advance) == index


def test_positions_wrap_around():
    runtime = _bound()
    last = len(runtime.railway) - 1
    assert runtime.next_position(last) == 0
    assert runtime.prev_position(0) == last


def test_positions_on_empty_railway_raise():
    with pytest.raises(ValueError):
        NetworkRuntime().next_position(0)


def test_train_cells_cover_cars():
    runtime = _bound()
    cells = list(runtime.train_cells(2))
    assert len(cells) == TRAIN_LENGTH * 9
    head = runtime.railway[2]
    assert head in cells
    for cell in cells:
        assert min(chebyshev_distance(cell, p) for p in runtime.railway) <= 1


def test_state_defaults_are_independent():
    first = NetworkState()
    second = NetworkState()
    first.stations.append(StationState(index=3, stop_time=10))
    first.trains.append(TrainState(railway_index=3))
    assert second.stations == []
    assert second.trains == []