# taskstack

A small task scheduler that keeps pending tasks and intermediate data in a
single fixed-size bidirectional stack. Tasks and data values are encoded with
CBOR before they are stored, so the whole state of a computation lives in one
64 KiB buffer.

Tasks are stored at the back of the buffer and data values at the front. When
a task runs it may pop and push data values and return follow-up tasks. The
follow-up tasks are scheduled so that they run in the order they were
returned. A task whose `push_self()` returns `True` is put back on the stack
beneath its follow-up tasks, so it runs again once they have finished.

## Installation

```
pip install taskstack
```

## Usage

```python
from taskstack.scheduler import Scheduler
from taskstack.tasks.fib import Fib
from taskstack.tasks.exp import Exp

scheduler = Scheduler()
scheduler.push_task(Fib(10))
scheduler.execute_all()
print(scheduler.pop_data())  # 55

scheduler.push_task(Exp(2, 10))
scheduler.execute_all()
print(scheduler.pop_data())  # 1024
```

The `Scheduler` class in `taskstack.scheduler` offers:

- `push_task(task)` / `pop_task()`: store and restore a task on the task stack.
- `push_data(value)` / `pop_data()`: store and restore any CBOR-encodable
  value on the data stack; the most recent value comes off first.
- `execute()`: run the next task and schedule the tasks it returns.
- `execute_all()`: run tasks until none are left.
- `is_empty()`, `is_empty_data()`: whether the task or data stack is empty.
- `clear()`: drop all tasks and data.

### Built-in tasks

- `taskstack.tasks.add.Add(x, y)`: pushes `x + y`, saturating at the largest
  unsigned 128-bit value. `Add.compute()` returns the same sum directly.
- `taskstack.tasks.mul.Mul(x, y)`: multiplication by repeated `Add` tasks.
- `taskstack.tasks.exp.Exp(x, y)`: exponentiation by repeated `Mul` tasks.
- `taskstack.tasks.fib.Fib(n)`: the nth Fibonacci number, computed by
  recursive subtasks.

Their arguments must be unsigned 128-bit integers; anything else raises
`ValueError` when the task is created.

### Writing your own task

Subclass `SchedulerTask`, make it a dataclass and register it with
`register_task` so that it can be encoded and restored by class name:

```python
from dataclasses import dataclass
from taskstack.scheduler import Scheduler, SchedulerTask, register_task

@register_task
@dataclass
class Double(SchedulerTask):
    value: int

    def execute(self, scheduler):
        scheduler.push_data(self.value * 2)
        return []

scheduler = Scheduler()
scheduler.push_task(Double(21))
scheduler.execute_all()
assert scheduler.pop_data() == 42
```

`encode_task` and `decode_task` turn a registered task into a CBOR map tagged
with its class name and back again. A field may not be named `type`, and
registering a different class under a name already in use raises
`ValueError`.

### The stack

`taskstack.stack.BidirectionalStack(capacity, length_size)` is the buffer the
scheduler uses (65536 bytes with 2-byte length prefixes). Records pushed with
`push_front` grow up from the start, records pushed with `push_back` grow
down from the end, and both share the free space reported by
`available_capacity()`. Back records are limited to 255 bytes, so a task
must encode to at most 255 bytes.

### Errors

The errors in `taskstack.errors` all derive from `SchedulerError`:

- `StackUnderflowError`: popping from an empty side of the stack, including
  `execute()` with no tasks left.
- `InsufficientCapacityError`: the buffer has no room for the record.
- `DataTooLargeError`: a back record over 255 bytes, or a front record too
  long for its length prefix.
- `SerializationError` / `DeserializationError`: a task or value could not be
  encoded or decoded.
- `ExecutionError`: a `SchedulerError` raised inside a task's `execute`.

Other exceptions raised inside a task propagate unchanged.

## What it does not do

Tasks run one at a time in the calling thread. There is no command-line
tool, no persistence of the buffer to disk and no concurrency.

## Running the tests

```
pip install -e ".[test]"
pytest
```