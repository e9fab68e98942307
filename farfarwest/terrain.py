"""Terrain generation: raw noise, biomes, mountain cliffs and contiguous regions."""

from __future__ import annotations

import enum
import logging
import math
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from .geometry import WORLD_BASIC_SIZE, WORLD_SIZE, Rect, Vec2

logger = logging.getLogger(__name__)

WORLD_NOISE_SCALE = WORLD_BASIC_SIZE / 256.0
WORLD_PADDING_SIZE = 150

ALTITUDE_THRESHOLD = 0.55
MOISTURE_LO_THRESHOLD = 0.45
MOISTURE_HI_THRESHOLD = 0.55

PRAIRIE_HERB_PROBABILITY = 0.2
DESERT_CACTUS_PROBABILITY = 0.02
FOREST_TREE_PROBABILITY = 0.25

MOUNTAIN_THRESHOLD = 0.4
MOUNTAIN_SURVIVAL_THRESHOLD = 6
MOUNTAIN_BIRTH_THRESHOLD = 8
MOUNTAIN_ITERATIONS = 7

REGION_MINIMUM_SIZE = 400

_TWELVE_NEIGHBORS: tuple[Vec2, ...] = (
    (0, -2),
    (-1, -1), (0, -1), (1, -1),
    (-2, 0), (-1, 0), (1, 0), (2, 0),
    (-1, 1), (0, 1), (1, 1),
    (0, 2),
)

_FOUR_NEIGHBORS: tuple[Vec2, ...] = ((0, -1), (-1, 0), (1, 0), (0, 1))


class Region(enum.Enum):
    PRAIRIE = enum.auto()
    DESERT = enum.auto()
    FOREST = enum.auto()
    MOUNTAIN = enum.auto()


class Block(enum.Enum):
    NONE = enum.auto()
    CACTUS = enum.auto()
    TREE = enum.auto()
    CLIFF = enum.auto()


class Decoration(enum.Enum):
    NONE = enum.auto()
    HERB = enum.auto()


@dataclass
class Cell:
    """One cell of the map: its biome, what blocks it and what decorates it."""

    region: Region = Region.PRAIRIE
    block: Block = Block.NONE
    decoration: Decoration = Decoration.NONE


@dataclass
class RawCell:
    """Altitude and moisture of a cell, both in [0, 1]."""

    altitude: float
    moisture: float


RawWorld = list[list[RawCell]]


def _fade(t: float) -> float:
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


def _lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


class PerlinNoise:
    """Two-dimensional gradient noise seeded from a random generator."""

    def __init__(self, rng: random.Random, scale: float = 1.0) -> None:
        self.scale = scale
        permutation = list(range(256))
        rng.shuffle(permutation)
        self._permutation = permutation * 2
        angles = (rng.random() * 2.0 * math.pi for _ in range(256))
        self._gradients = [(math.cos(a), math.sin(a)) for a in angles]

    def _dot(self, i: int, j: int, dx: float, dy: float) -> float:
        index = self._permutation[self._permutation[i & 255] + (j & 255)]
        gx, gy = self._gradients[index]
        return gx * dx + gy * dy

    def value(self, x: float, y: float) -> float:
        """Noise value at ``(x, y)``; zero on the lattice points."""
        x *= self.scale
        y *= self.scale
        ix = math.floor(x)
        iy = math.floor(y)
        fx = x - ix
        fy = y - iy
        u = _fade(fx)
        v = _fade(fy)
        n00 = self._dot(ix, iy, fx, fy)
        n10 = self._dot(ix + 1, iy, fx - 1.0, fy)
        n01 = self._dot(ix, iy + 1, fx, fy - 1.0)
        n11 = self._dot(ix + 1, iy + 1, fx - 1.0, fy - 1.0)
        return _lerp(_lerp(n00, n10, u), _lerp(n01, n11, u), v)


class Terrain:
    """Rectangular grid of map cells."""

    def __init__(self, size: Vec2) -> None:
        width, height = size
        if width <= 0 or height <= 0:
            raise ValueError(f"invalid terrain size: {width}x{height}")
        self.size: Vec2 = (width, height)
        self.cells: list[list[Cell]] = [[Cell() for _ in range(width)] for _ in range(height)]

    def __getitem__(self, position: Vec2) -> Cell:
        if not self.valid(position):
            raise IndexError(f"position out of the terrain: {position}")
        return self.cells[position[1]][position[0]]

    def valid(self, position: Vec2) -> bool:
        return 0 <= position[0] < self.size[0] and 0 <= position[1] < self.size[1]

    def positions(self) -> Iterator[Vec2]:
        """Every position, row by row."""
        width, height = self.size
        for y in range(height):
            for x in range(width):
                yield (x, y)

    def is_on_side(self, position: Vec2) -> bool:
        x, y = position
        width, height = self.size
        return x == 0 or x == width - 1 or y == 0 or y == height - 1


@dataclass
class WorldRegion:
    """A contiguous set of cells sharing the same biome."""

    points: list[Vec2] = field(default_factory=list)
    bounds: Rect = Rect((0, 0), (0, 0))


def ease_out_cubic(t: float) -> float:
    t -= 1.0
    return t * t * t + 1.0


def _normalized_heightmap(noise: PerlinNoise, size: Vec2) -> list[list[float]]:
    width, height = size
    values = [[noise.value(x / width, y / height) for x in range(width)] for y in range(height)]
    low = min(min(row) for row in values)
    high = max(max(row) for row in values)
    span = high - low
    if span == 0.0:
        return [[0.0] * width for _ in range(height)]
    return [[(value - low) / span for value in row] for row in values]


def generate_raw(
    rng: random.Random,
    size: Vec2 = WORLD_SIZE,
    scale: float = WORLD_NOISE_SCALE,
    padding: int = WORLD_PADDING_SIZE,
) -> RawWorld:
    """Altitude and moisture maps; altitude rises to 1 near the borders."""
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid world size: {width}x{height}")
    if padding < 0:
        raise ValueError(f"invalid padding: {padding}")

    altitudes = _normalized_heightmap(PerlinNoise(rng, scale), size)
    moistures = _normalized_heightmap(PerlinNoise(rng, scale), size)

    raw: RawWorld = []
    for y in range(height):
        row = []
        for x in range(width):
            factor = 1.0
            if x < padding:
                factor *= x / padding
            elif x >= width - padding:
                factor *= (width - x - 1) / padding
            if y < padding:
                factor *= y / padding
            elif y >= height - padding:
                factor *= (height - 1 - y) / padding

            altitude = 1.0 - (1.0 - altitudes[y][x]) * ease_out_cubic(factor)
            row.append(RawCell(altitude, moistures[y][x]))
        raw.append(row)
    return raw


def generate_outline(raw: Sequence[Sequence[RawCell]], rng: random.Random) -> Terrain:
    """Biomes from altitude and moisture, with cactuses, herbs and trees."""
    if not raw or not raw[0]:
        raise ValueError("the raw world is empty")

    terrain = Terrain((len(raw[0]), len(raw)))

    for position in terrain.positions():
        cell = terrain[position]
        raw_cell = raw[position[1]][position[0]]

        if raw_cell.altitude < ALTITUDE_THRESHOLD:
            if raw_cell.moisture < MOISTURE_LO_THRESHOLD:
                cell.region = Region.DESERT
                probability = DESERT_CACTUS_PROBABILITY * raw_cell.moisture / MOISTURE_LO_THRESHOLD
                if rng.random() < probability:
                    cell.block = Block.CACTUS
            else:
                cell.region = Region.PRAIRIE
                if rng.random() < PRAIRIE_HERB_PROBABILITY * raw_cell.moisture:
                    cell.decoration = Decoration.HERB
        else:
            if raw_cell.moisture < MOISTURE_HI_THRESHOLD:
                cell.region = Region.MOUNTAIN
            else:
                cell.region = Region.FOREST
                if terrain.is_on_side(position) or rng.random() < FOREST_TREE_PROBABILITY * raw_cell.moisture:
                    cell.block = Block.TREE

    return terrain


def generate_mountains(terrain: Terrain, rng: random.Random) -> None:
    """Place cliffs in mountain regions with a cellular automaton."""
    width, height = terrain.size
    mountain = [[cell.region == Region.MOUNTAIN for cell in row] for row in terrain.cells]

    cliff = [[False] * width for _ in range(height)]
    for x, y in terrain.positions():
        if mountain[y][x] and rng.random() < MOUNTAIN_THRESHOLD:
            cliff[y][x] = True

    following = [[False] * width for _ in range(height)]

    for _ in range(MOUNTAIN_ITERATIONS):
        for x, y in terrain.positions():
            if not mountain[y][x]:
                continue

            grounds = sum(
                1
                for dx, dy in _TWELVE_NEIGHBORS
                if 0 <= x + dx < width and 0 <= y + dy < height and not cliff[y + dy][x + dx]
            )
            threshold = MOUNTAIN_BIRTH_THRESHOLD if cliff[y][x] else MOUNTAIN_SURVIVAL_THRESHOLD
            following[y][x] = grounds < threshold

        cliff, following = following, cliff

    for x, y in terrain.positions():
        if not mountain[y][x] or cliff[y][x]:
            continue
        isolated = not any(
            0 <= x + dx < width and 0 <= y + dy < height and not cliff[y + dy][x + dx]
            for dx, dy in _FOUR_NEIGHBORS
        )
        if isolated:
            cliff[y][x] = True

    for position in terrain.positions():
        x, y = position
        if cliff[y][x] or (mountain[y][x] and terrain.is_on_side(position)):
            terrain[position].block = Block.CLIFF


def compute_regions(terrain: Terrain, minimum_size: int = REGION_MINIMUM_SIZE) -> dict[Region, list[WorldRegion]]:
    """Contiguous regions of each biome larger than ``minimum_size``, largest first."""
    visited: set[Vec2] = set()
    regions: dict[Region, list[WorldRegion]] = {region: [] for region in Region}

    for position in terrain.positions():
        if position in visited:
            continue

        region_type = terrain[position].region
        queue: deque[Vec2] = deque([position])
        visited.add(position)
        region = WorldRegion()

        while queue:
            current = queue.popleft()
            region.points.append(current)

            for dx, dy in _FOUR_NEIGHBORS:
                neighbor = (current[0] + dx, current[1] + dy)
                if not terrain.valid(neighbor) or neighbor in visited:
                    continue
                if terrain[neighbor].region != region_type:
                    continue
                visited.add(neighbor)
                queue.append(neighbor)

        if len(region.points) > minimum_size:
            regions[region_type].append(region)

    for region_type, found in regions.items():
        for region in found:
            bounds = Rect.from_center_size(region.points[0], (1, 1))
            for point in region.points:
                bounds = bounds.extend_to(point)
            region.bounds = bounds

        found.sort(key=lambda region: len(region.points), reverse=True)
        logger.info("\t%s (%d)", region_type.name.capitalize(), len(found))

    return regions