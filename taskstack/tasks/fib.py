"""A task that computes Fibonacci numbers recursively on the scheduler."""

from dataclasses import dataclass

from ..scheduler import SchedulerTask, register_task
from .add import Add, _check_u128


@register_task
@dataclass
class Fib(SchedulerTask):
    """Compute the ``n``-th Fibonacci number and push it onto the data stack."""

    n: int = 0

    def __post_init__(self):
        _check_u128("n", self.n)

    def execute(self, scheduler):
        if self.n in (0, 1):
            scheduler.push_data(self.n)
            return []
        return [Fib(self.n - 1), Fib(self.n - 2), _FibCombiner()]


@register_task
@dataclass
class _FibCombiner(SchedulerTask):
    """Pops the two previous Fibonacci numbers and schedules their sum."""

    def execute(self, scheduler):
        first = scheduler.pop_data()
        second = scheduler.pop_data()
        return [Add(first, second)]