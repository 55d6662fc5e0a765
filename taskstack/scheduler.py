"""A task scheduler that keeps tasks and data as CBOR records on one stack."""

import dataclasses
from abc import ABC, abstractmethod

import cbor2

from .errors import (
    DeserializationError,
    ExecutionError,
    SchedulerError,
    SerializationError,
)
from .stack import BidirectionalStack

STACK_CAPACITY = 65536
LENGTH_SIZE = 2

_TYPE_KEY = "type"
_REGISTRY = {}


class SchedulerTask(ABC):
    """A unit of work the scheduler can store, restore and execute.

    Concrete tasks are dataclasses registered with ``register_task``.
    """

    @abstractmethod
    def execute(self, scheduler):
        """Do the work and return the follow-up tasks, in execution order."""

    def push_self(self):
        """Return True to have this task put back after it has executed."""
        return False


def register_task(cls):
    """Class decorator making a task type known to the encoder and decoder."""
    name = cls.__name__
    existing = _REGISTRY.get(name)
    if existing is not None and existing is not cls:
        raise ValueError(f"a task type named {name!r} is already registered")
    _REGISTRY[name] = cls
    return cls


def _task_fields(task):
    if dataclasses.is_dataclass(task):
        return {field.name: getattr(task, field.name) for field in dataclasses.fields(task)}
    return dict(vars(task))


def encode_task(task):
    """Encode a registered task as a CBOR map tagged with its type name."""
    cls = type(task)
    name = cls.__name__
    if _REGISTRY.get(name) is not cls:
        raise SerializationError(f"task type {name!r} is not registered")
    fields = _task_fields(task)
    if _TYPE_KEY in fields:
        raise SerializationError(f"task field name {_TYPE_KEY!r} is reserved")
    try:
        return cbor2.dumps({_TYPE_KEY: name, **fields})
    except (TypeError, ValueError) as exc:
        raise SerializationError(str(exc)) from exc


def decode_task(data):
    """Rebuild a task from bytes produced by ``encode_task``."""
    try:
        payload = cbor2.loads(data)
    except (cbor2.CBORDecodeError, ValueError) as exc:
        raise DeserializationError(str(exc)) from exc
    if not isinstance(payload, dict):
        raise DeserializationError("task record is not a map")
    fields = dict(payload)
    name = fields.pop(_TYPE_KEY, None)
    if not isinstance(name, str):
        raise DeserializationError("task record has no type tag")
    cls = _REGISTRY.get(name)
    if cls is None:
        raise DeserializationError(f"unknown task type {name!r}")
    try:
        return cls(**fields)
    except TypeError as exc:
        raise DeserializationError(str(exc)) from exc


class Scheduler:
    """Runs tasks from the back of a shared stack; data lives at the front."""

    def __init__(self):
        self._stack = BidirectionalStack(STACK_CAPACITY, LENGTH_SIZE)

    def push_task(self, task):
        """Push a task onto the task stack."""
        self._stack.push_back(encode_task(task))

    def push_data(self, data):
        """Push a CBOR-encodable value onto the data stack."""
        try:
            record = cbor2.dumps(data)
        except (TypeError, ValueError) as exc:
            raise SerializationError(str(exc)) from exc
        self._stack.push_front(record)

    def pop_task(self):
        """Remove and return the task on top of the task stack."""
        return decode_task(self._stack.pop_back())

    def pop_data(self):
        """Remove and return the value on top of the data stack."""
        record = self._stack.pop_front()
        try:
            return cbor2.loads(record)
        except (cbor2.CBORDecodeError, ValueError) as exc:
            raise DeserializationError(str(exc)) from exc

    def execute(self):
        """Execute the next task and schedule what it returns."""
        task = self.pop_task()
        try:
            follow_ups = task.execute(self)
        except SchedulerError as exc:
            raise ExecutionError(f"Task execution failed: {exc}") from exc

        if task.push_self():
            self.push_task(task)

        # Pushed in reverse so they run in the order they were returned.
        for follow_up in reversed(list(follow_ups)):
            self.push_task(follow_up)

    def execute_all(self):
        """Execute tasks until none are left."""
        while not self.is_empty():
            self.execute()

    def is_empty(self):
        """Return True if there are no tasks."""
        return self._stack.is_empty_back()

    def is_empty_data(self):
        """Return True if there is no data."""
        return self._stack.is_empty_front()

    def clear(self):
        """Drop all tasks and data."""
        self._stack.clear()