"""A task that multiplies by repeated addition on the scheduler."""

from dataclasses import dataclass

from ..scheduler import SchedulerTask, register_task
from .add import Add, _check_u128


@register_task
@dataclass
class Mul(SchedulerTask):
    """Multiply ``x`` by ``y`` and push the product onto the data stack."""

    x: int = 0
    y: int = 0

    def __post_init__(self):
        _check_u128("x", self.x)
        _check_u128("y", self.y)

    def execute(self, scheduler):
        if self.y == 0:
            scheduler.push_data(0)
            return []
        return [Add(0, self.x), _MulInternal(self.x, self.y, 0, 0)]


@register_task
@dataclass
class _MulInternal(SchedulerTask):
    """Collects each partial sum and schedules the next addition."""

    x: int = 0
    y: int = 0
    result: int = 0
    counter: int = 0

    def execute(self, scheduler):
        self.result = scheduler.pop_data()
        self.counter += 1
        if self.counter < self.y:
            return [Add(self.result, self.x)]
        scheduler.push_data(self.result)
        return []

    def push_self(self):
        return self.counter < self.y