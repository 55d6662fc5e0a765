import pytest

from taskstack.errors import (
    DataTooLargeError,
    DeserializationError,
    EmptyStackError,
    ExecutionError,
    InsufficientCapacityError,
    InvalidDataError,
    InvalidTaskLengthError,
    SchedulerError,
    SerializationError,
    StackError,
    StackUnderflowError,
    TaskError,
)


@pytest.mark.parametrize(
    "cls, message",
    [
        (EmptyStackError, "Empty stack - attempted to read from an empty stack"),
        (InsufficientCapacityError, "Not enough space in BidirectionalStack"),
        (DataTooLargeError, "Data size exceeds maximum allowed length"),
        (StackUnderflowError, "Stack underflow - attempted to read from empty stack"),
        (
            InvalidTaskLengthError,
            "Invalid task length - task data exceeds maximum allowed size",
        ),
    ],
)
def test_fixed_messages(cls, message):
    assert str(cls()) == message


@pytest.mark.parametrize(
    "cls, prefix",
    [
        (ExecutionError, "Execution error: "),
        (TaskError, "Task error: "),
        (InvalidDataError, "Invalid data: "),
    ],
)
def test_detailed_messages(cls, prefix):
    error = cls("boom")
    assert str(error) == prefix + "boom"
    assert error.detail == "boom"


@pytest.mark.parametrize(
    "cls",
    [InsufficientCapacityError, DataTooLargeError, StackUnderflowError],
)
def test_stack_errors_caught_as_stack_and_scheduler_errors(cls):
    with pytest.raises(StackError) as info:
        raise cls()
    assert str(info.value) == cls.default_message
    with pytest.raises(SchedulerError):
        raise cls()


def test_serialization_errors_keep_given_message():
    assert str(SerializationError("bad value")) == "bad value"
    assert str(DeserializationError("bad bytes")) == "bad bytes"


def test_message_override_on_fixed_error():
    assert str(StackUnderflowError("custom")) == "custom"