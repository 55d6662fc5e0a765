"""A task that raises a number to a power by repeated multiplication."""

from dataclasses import dataclass

from ..scheduler import SchedulerTask, register_task
from .add import _check_u128
from .mul import Mul


@register_task
@dataclass
class Exp(SchedulerTask):
    """Raise ``x`` to the power ``y`` and push the result onto the data stack."""

    x: int = 0
    y: int = 0

    def __post_init__(self):
        _check_u128("x", self.x)
        _check_u128("y", self.y)

    def execute(self, scheduler):
        if self.y == 0:
            scheduler.push_data(1)
            return []
        return [Mul(1, self.x), _ExpInternal(self.x, self.y, 0, 0)]


@register_task
@dataclass
class _ExpInternal(SchedulerTask):
    """Collects each partial product and schedules the next multiplication."""

    x: int = 0
    y: int = 0
    result: int = 0
    counter: int = 0

    def execute(self, scheduler):
        self.result = scheduler.pop_data()
        self.counter += 1
        if self.counter < self.y:
            return [Mul(self.result, self.x)]
        scheduler.push_data(self.result)
        return []

    def push_self(self):
        return self.counter < self.y