# farfarwest

Building blocks for a roguelike set in the Far West: Perlin-noise terrain
with biomes and mountain cliffs, towns and farms on the prairie, a looping
railway served by trains, a turn scheduler, character names and traits, and
a helper that rotates box-drawing characters.

The package needs nothing beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

Print a random female name and a random male name:

```
farfarwest-names
```

The lengths of the longest entries in each name list are logged at debug
level.

## Modules

- `farfarwest.geometry`: `Direction`, `Orientation` and `Rect` (built with
  `from_size`, `from_position_size` or `from_center_size`; `contains`,
  `position_at`, `grow_by`, `extend_to`, `positions`), and the vector helpers
  `displacement`, `undisplacement`, `direction_from_angle`, `sign`,
  `manhattan_distance` and `chebyshev_distance`. It also holds the world and
  console layout constants (`WORLD_SIZE`, `GAME_BOX`, `MESSAGE_BOX`, ...) and
  the action durations in game seconds (`TRAIN_TIME`, `STRAIGHT_WALK_TIME`,
  `DIAGONAL_WALK_TIME`, ...). `undisplacement` raises `ValueError` for a vector
  that is not a cardinal unit step.
- `farfarwest.names`: `generate_random_white_last_name`,
  `generate_random_white_male_name`, `generate_random_white_female_name` and
  `generate_random_white_non_binary_name`. A full name is a given name, an
  occasional middle initial and a surname (drawn at random unless one is
  passed), never longer than 22 characters. `compute_max_length` gives the
  longest entry for a `NameType`. `main` is the `farfarwest-names` command.
- `farfarwest.pictures`: `rotate_picture` turns a box-drawing or half-block
  character to face a `Direction`; other characters come back unchanged, and
  `Direction.CENTER` raises `ValueError`.
- `farfarwest.network`: `StationState`, `TrainState`, `NetworkState` and
  `NetworkRuntime`. `NetworkRuntime.bind` expands a sparse, axis-aligned
  railway loop into consecutive cells; `next_position` and `prev_position`
  move along it with wrap-around, and `train_cells` lists the cells covered
  by a train of eleven cars.
- `farfarwest.world_runtime`: `sort_by_distance` (indices ordered by
  Manhattan distance to an origin), `compute_view` (the game-box rectangle
  around a center) and `train_occupancy` (cell to train index).
- `farfarwest.scheduler`: `TaskType`, `Task` and `Scheduler`, a priority queue
  where the earliest date comes first and equal dates keep insertion order.
  `is_hero_turn` tells whether the next task is actor 0, and `postpone_top`
  reschedules the next task a number of seconds later.
- `farfarwest.terrain`: `PerlinNoise`, `generate_raw` (altitude and moisture,
  with altitude rising towards the borders), `generate_outline` (prairie,
  desert, forest and mountain, with herbs, cactuses and trees),
  `generate_mountains` (cliffs from a cellular automaton) and
  `compute_regions` (connected regions of each biome, largest first, with
  their bounds).
- `farfarwest.places`: `generate_places` draws towns and farms on the prairie
  far enough from one another; `rail_endpoints` gives where the railway enters
  and leaves a town, on the side facing the world center. `to_map` and
  `to_reduced` convert between map cells and the coarser grid used for
  placement.
- `farfarwest.characters`: `Gender`, `generate_gender` (weights 50, 48 and 2),
  `generate_attribute` (3d6 + 2) and `generate_hero_name`.
- `farfarwest.railway`: `GridMap` with A* route finding, `generate_network`,
  which joins every town into one loop and places a station and a train at
  each town, `compute_stop_times`, which shares out a day between travel and
  stops, and `compute_starting_position`.

## Example

```python
import random

from farfarwest.characters import generate_attribute, generate_gender, generate_hero_name
from farfarwest.scheduler import Scheduler, Task, TaskType

rng = random.Random(42)

gender = generate_gender(rng)
print(generate_hero_name(rng, gender), generate_attribute(rng))

scheduler = Scheduler()
scheduler.push(Task(date=0, type=TaskType.ACTOR, index=0))
scheduler.push(Task(date=1, type=TaskType.ACTOR, index=1))
print(scheduler.is_hero_turn())     # True
scheduler.postpone_top(15)
print(scheduler.top().index)        # 1
```

Every generator takes a `random.Random` instance; the same seed gives the
same result. Generating a full-size world (4096 × 4096 cells) in pure Python
is slow; the terrain functions accept a smaller size for experiments.

## What it does not do

There is no playable game here: no console screens, input handling or
rendering, no world model that runs actors and trains turn by turn, no
saving or loading of a world, and no single command that generates a whole
world. Town interiors (streets and buildings) are not laid out either. The
modules supply the pieces such a game is built from.