from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List


@dataclass
class _Task:
    due: float
    callback: Callable[[], None]
    cancelled: bool = False
    fired: bool = False


class ManualScheduler:
    """Scheduler driven by an explicit clock so debounce tests stay deterministic."""

    def __init__(self) -> None:
        self.now = 0.0
        self.tasks: List[_Task] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> Callable[[], None]:
        task = _Task(due=self.now + delay, callback=callback)
        self.tasks.append(task)

        def cancel() -> None:
            task.cancelled = True

        return cancel

    @property
    def pending(self) -> int:
        return sum(1 for task in self.tasks if not task.cancelled and not task.fired)

    def advance(self, seconds: float) -> None:
        self.now += seconds
        due = [
            task
            for task in self.tasks
            if not task.cancelled and not task.fired and task.due <= self.now + 1e-9
        ]
        for task in sorted(due, key=lambda t: t.due):
            task.fired = True
            task.callback()


class LeakyScheduler(ManualScheduler):
    """Ignores cancellation, mimicking a timer that already started firing."""

    def schedule(self, delay: float, callback: Callable[[], None]) -> Callable[[], None]:
        super().schedule(delay, callback)
        return lambda: None
