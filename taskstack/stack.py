"""A fixed-size byte buffer holding two stacks that grow towards each other."""

from .errors import DataTooLargeError, InsufficientCapacityError, StackUnderflowError

_MAX_BACK_RECORD = 0xFF


class BidirectionalStack:
    """Two stacks of length-prefixed byte records sharing one buffer.

    The front stack grows upward from offset 0, the back stack grows downward
    from the end of the buffer, and both draw on the free space between them.
    Records on the back stack are at most 255 bytes long.
    """

    def __init__(self, capacity, length_size):
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if length_size < 1:
            raise ValueError("length_size must be at least 1")
        self.capacity = capacity
        self.length_size = length_size
        self._buffer = bytearray(capacity)
        self._front = 0
        self._back = capacity

    def available_capacity(self):
        """Return the number of free bytes between the two stacks."""
        return max(self._back - self._front, 0)

    def _require_space(self, size):
        if self.available_capacity() < size + self.length_size:
            raise InsufficientCapacityError()

    def push_front(self, data):
        """Push a record onto the front stack."""
        record = bytes(data)
        size = len(record)
        self._require_space(size)
        if size >= 1 << (8 * self.length_size):
            raise DataTooLargeError()
        end = self._front + size
        self._buffer[self._front:end] = record
        self._buffer[end:end + self.length_size] = size.to_bytes(self.length_size, "little")
        self._front = end + self.length_size

    def pop_front(self):
        """Remove and return the top record of the front stack."""
        if self.is_empty_front():
            raise StackUnderflowError()
        length_start = self._front - self.length_size
        size = int.from_bytes(self._buffer[length_start:self._front], "little")
        start = max(length_start - size, 0)
        record = bytes(self._buffer[start:length_start])
        self._front = start
        return record

    def push_back(self, data):
        """Push a record of at most 255 bytes onto the back stack."""
        record = bytes(data)
        size = len(record)
        if size > _MAX_BACK_RECORD:
            raise DataTooLargeError()
        self._require_space(size)
        start = self._back - size
        self._buffer[start:self._back] = record[::-1]
        length_start = start - self.length_size
        self._buffer[length_start:start] = size.to_bytes(self.length_size, "big")
        self._back = length_start

    def pop_back(self):
        """Remove and return the top record of the back stack."""
        if self.is_empty_back():
            raise StackUnderflowError()
        data_start = self._back + self.length_size
        size = int.from_bytes(self._buffer[self._back:data_start], "big")
        end = min(data_start + size, self.capacity)
        record = bytes(self._buffer[data_start:end])[::-1]
        self._back = end
        return record

    def is_empty_front(self):
        """Return True if the front stack holds no records."""
        return self._front == 0

    def is_empty_back(self):
        """Return True if the back stack holds no records."""
        return self._back == self.capacity

    def is_empty(self):
        """Return True if both stacks are empty."""
        return self.is_empty_front() and self.is_empty_back()

    def clear(self):
        """Drop every record from both stacks."""
        self._front = 0
        self._back = self.capacity