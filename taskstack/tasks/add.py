"""A task that adds two unsigned 128-bit numbers."""

from dataclasses import dataclass

from ..scheduler import SchedulerTask, register_task

U128_MAX = (1 << 128) - 1


def _check_u128(name, value):
    if not 0 <= value <= U128_MAX:
        raise ValueError(f"{name} must be an unsigned 128-bit integer, got {value}")


@register_task
@dataclass
class Add(SchedulerTask):
    """Add ``x`` and ``y`` and push the sum onto the data stack."""

    x: int = 0
    y: int = 0

    def __post_init__(self):
        _check_u128("x", self.x)
        _check_u128("y", self.y)

    def compute(self):
        """Return the sum, saturating at the unsigned 128-bit maximum."""
        return min(self.x + self.y, U128_MAX)

    def execute(self, scheduler):
        scheduler.push_data(self.compute())
        return []