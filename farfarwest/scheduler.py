"""Turn scheduling: tasks ordered by the game date at which they run."""

from __future__ import annotations

import enum
import heapq
import itertools
from dataclasses import dataclass, replace


class TaskType(enum.IntEnum):
    ACTOR = 0
    TRAIN = 1


@dataclass(frozen=True)
class Task:
    """Something to update at ``date`` (game seconds): an actor or a train."""

    date: int
    type: TaskType
    index: int


class Scheduler:
    """Priority queue of tasks; the earliest date comes first, ties in insertion order."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, Task]] = []
        self._counter = itertools.count()

    def __len__(self) -> int:
        return len(self._heap)

    def push(self, task: Task) -> None:
        heapq.heappush(self._heap, (task.date, next(self._counter), task))

    def pop(self) -> Task:
        if not self._heap:
            raise IndexError("scheduler is empty")
        return heapq.heappop(self._heap)[2]

    def top(self) -> Task:
        if not self._heap:
            raise IndexError("scheduler is empty")
        return self._heap[0][2]

    def is_hero_turn(self) -> bool:
        """Whether the next task is the hero's (actor 0)."""
        task = self.top()
        return task.type == TaskType.ACTOR and task.index == 0

    def postpone_top(self, seconds: int) -> Task:
        """Reschedule the next task ``seconds`` later and return it."""
        task = self.pop()
        task = replace(task, date=task.date + seconds)
        self.push(task)
        return task