"""Exceptions raised by the scheduler and its byte stack."""


class SchedulerError(Exception):
    """Base class for every error raised by the scheduler."""

    default_message = "scheduler error"

    def __init__(self, message=None):
        super().__init__(self.default_message if message is None else message)


class _DetailedError(SchedulerError):
    """An error whose message is a fixed prefix followed by a detail."""

    prefix = ""

    def __init__(self, detail):
        self.detail = detail
        super().__init__(f"{self.prefix}: {detail}")


class EmptyStackError(SchedulerError):
    """The stack is empty and cannot be popped from."""

    default_message = "Empty stack - attempted to read from an empty stack"


class StackError(SchedulerError):
    """Base class for errors raised by the bidirectional stack."""

    default_message = "stack error"


class InsufficientCapacityError(StackError):
    """The stack has no room left for the record."""

    default_message = "Not enough space in BidirectionalStack"


class DataTooLargeError(StackError):
    """The record is longer than the stack allows."""

    default_message = "Data size exceeds maximum allowed length"


class StackUnderflowError(StackError):
    """A pop was attempted on an empty side of the stack."""

    default_message = "Stack underflow - attempted to read from empty stack"


class SerializationError(SchedulerError):
    """A task or value could not be encoded."""

    default_message = "serialization failed"


class DeserializationError(SchedulerError):
    """A task or value could not be decoded."""

    default_message = "deserialization failed"


class InvalidTaskLengthError(SchedulerError):
    """The task data is longer than allowed."""

    default_message = "Invalid task length - task data exceeds maximum allowed size"


class ExecutionError(_DetailedError):
    """A task failed while it was being executed."""

    prefix = "Execution error"


class TaskError(_DetailedError):
    """A task implementation reported a failure."""

    prefix = "Task error"


class InvalidDataError(_DetailedError):
    """Data handed to a task was not acceptable."""

    prefix = "Invalid data"