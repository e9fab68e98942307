import random

import pytest

from farfarwest.terrain import (
    Block,
    Cell,
    Decoration,
    PerlinNoise,
    RawCell,
    Region,
    Terrain,
    compute_regions,
    ease_out_cubic,
    generate_mountains,
    generate_outline,
    generate_raw,
)


def _uniform_raw(width, height, altitude, moisture):
    return [[RawCell(altitude, moisture) for _ in range(width)] for _ in range(height)]


def test_ease_out_cubic_endpoints():
    assert ease_out_cubic(0.0) == 0.0
    assert ease_out_cubic(1.0) == 1.0
    assert 0.5 < ease_out_cubic(0.5) < 1.0


def test_perlin_is_deterministic_for_a_seed():
    a = PerlinNoise(random.Random(7), 4.0)
    b = PerlinNoise(random.Random(7), 4.0)
    samples = [(0.13, 0.71), (0.5, 0.25), (0.99, 0.01)]
    assert [a.value(x, y) for x, y in samples] == [b.value(x, y) for x, y in samples]


def test_perlin_vanishes_on_lattice_points():
    noise = PerlinNoise(random.Random(3), 1.0)
    for x, y in [(0, 0), (1, 0), (3, 5), (-2, 7)]:
        assert noise.value(x, y) == pytest.approx(0.0, abs=1e-12)


def test_perlin_is_bounded():
    noise = PerlinNoise(random.Random(11), 1.0)
    rng = random.Random(5)
    for _ in range(200):
        assert abs(noise.value(rng.uniform(-10, 10), rng.uniform(-10, 10))) <= 1.0


def test_raw_without_padding_is_normalized():
    raw = generate_raw(random.Random(1), (24, 16), 4.0, 0)
    assert len(raw) == 16 and all(len(row) == 24 for row in raw)
    altitudes = [cell.altitude for row in raw for cell in row]
    moistures = [cell.moisture for row in raw for cell in row]
    assert min(altitudes) == pytest.approx(0.0)
    assert max(altitudes) == pytest.approx(1.0)
    assert min(moistures) == pytest.approx(0.0)
    assert max(moistures) == pytest.approx(1.0)


def test_raw_padding_raises_borders_to_full_altitude():
    raw = generate_raw(random.Random(2), (20, 20), 4.0, 5)
    for i in range(20):
        assert raw[0][i].altitude == pytest.approx(1.0)
        assert raw[19][i].altitude == pytest.approx(1.0)
        assert raw[i][0].altitude == pytest.approx(1.0)
        assert raw[i][19].altitude == pytest.approx(1.0)
    for row in raw:
        for cell in row:
            assert 0.0 <= cell.altitude <= 1.0 + 1e-12


def test_raw_rejects_bad_arguments():
    with pytest.raises(ValueError):
        generate_raw(random.Random(0), (0, 10), 4.0, 0)
    with pytest.raises(ValueError):
        generate_raw(random.Random(0), (10, 10), 4.0, -1)


def test_terrain_basics():
    terrain = Terrain((4, 3))
    positions = list(terrain.positions())
    assert len(positions) == 12
    assert positions[0] == (0, 0) and positions[1] == (1, 0)
    assert terrain.valid((3, 2))
    assert not terrain.valid((4, 0))
    assert not terrain.valid((0, -1))
    assert terrain.is_on_side((0, 1))
    assert terrain.is_on_side((3, 1))
    assert not terrain.is_on_side((1, 1))
    assert terrain[(1, 1)] == Cell()
    with pytest.raises(IndexError):
        terrain[(5, 5)]


def test_outline_forest_has_trees_on_sides():
    terrain = generate_outline(_uniform_raw(6, 5, 0.9, 0.9), random.Random(4))
    for position in terrain.positions():
        cell = terrain[position]
        assert cell.region == Region.FOREST
        if terrain.is_on_side(position):
            assert cell.block == Block.TREE


def test_outline_biome_thresholds():
    raw = [[
        RawCell(0.1, 0.0),
        RawCell(0.1, 0.9),
        RawCell(0.9, 0.1),
        RawCell(0.9, 0.9),
    ]]
    terrain = generate_outline(raw, random.Random(0))
    assert terrain[(0, 0)].region == Region.DESERT
    assert terrain[(0, 0)].block == Block.NONE
    assert terrain[(1, 0)].region == Region.PRAIRIE
    assert terrain[(2, 0)].region == Region.MOUNTAIN
    assert terrain[(2, 0)].block == Block.NONE
    assert terrain[(3, 0)].region == Region.FOREST


def test_outline_dry_prairie_has_no_herbs():
    terrain = generate_outline(_uniform_raw(5, 5, 0.1, 0.5), random.Random(9))
    assert all(terrain[p].region == Region.PRAIRIE for p in terrain.positions())
    herbs = sum(terrain[p].decoration == Decoration.HERB for p in terrain.positions())
    assert herbs <= 25


def test_outline_rejects_empty_raw():
    with pytest.raises(ValueError):
        generate_outline([], random.Random(0))


def test_mountains_only_touch_mountain_cells():
    terrain = Terrain((12, 12))
    for position in terrain.positions():
        terrain[position].region = Region.MOUNTAIN if position[0] < 6 else Region.PRAIRIE
    generate_mountains(terrain, random.Random(6))
    for position in terrain.positions():
        cell = terrain[position]
        if cell.region == Region.PRAIRIE:
            assert cell.block == Block.NONE
        elif terrain.is_on_side(position):
            assert cell.block == Block.CLIFF


def test_mountains_leave_no_isolated_ground():
    terrain = Terrain((14, 14))
    for position in terrain.positions():
        terrain[position].region = Region.MOUNTAIN
    generate_mountains(terrain, random.Random(12))
    for x, y in terrain.positions():
        if terrain[(x, y)].block == Block.CLIFF:
            continue
        neighbors = [(x + dx, y + dy) for dx, dy in ((0, -1), (-1, 0), (1, 0), (0, 1))]
        assert any(
            terrain.valid(n) and (terrain[n].block != Block.CLIFF or terrain.is_on_side(n))
            for n in neighbors
        )


def test_no_mountain_no_cliff():
    terrain = Terrain((8, 8))
    generate_mountains(terrain, random.Random(1))
    assert all(terrain[p].block == Block.NONE for p in terrain.positions())


def test_regions_split_by_biome():
    terrain = Terrain((10, 10))
    for position in terrain.positions():
        terrain[position].region = Region.DESERT if position[0] < 5 else Region.PRAIRIE
    regions = compute_regions(terrain, 10)
    assert len(regions[Region.DESERT]) == 1
    assert len(regions[Region.PRAIRIE]) == 1
    assert regions[Region.FOREST] == []
    desert = regions[Region.DESERT][0]
    assert len(desert.points) == 50
    assert all(x < 5 for x, _ in desert.points)
    assert desert.bounds.position == (0, 0)
    prairie = regions[Region.PRAIRIE][0]
    assert prairie.bounds.position == (5, 0)


def test_regions_minimum_size_is_strict():
    terrain = Terrain((10, 10))
    for position in terrain.positions():
        terrain[position].region = Region.DESERT if position[0] < 5 else Region.PRAIRIE
    regions = compute_regions(terrain, 50)
    assert regions[Region.DESERT] == []
    assert regions[Region.PRAIRIE] == []


def test_regions_sorted_largest_first():
    terrain = Terrain((10, 3))
    for position in terrain.positions():
        if position[0] in (2, 3):
            terrain[position].region = Region.FOREST
    regions = compute_regions(terrain, 1)
    sizes = [len(region.points) for region in regions[Region.PRAIRIE]]
    assert sizes == sorted(sizes, reverse=True)
    assert sum(sizes) == 24
    assert len(regions[Region.FOREST]) == 1