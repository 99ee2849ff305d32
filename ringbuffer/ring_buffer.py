# ringbuffer/ring_buffer.py
import logging
from typing import Any, List

from ringbuffer.errors import BufferEmpty, BufferFull, InvalidCapacity

logger = logging.getLogger(__name__)

REJECT = "reject"
OVERWRITE = "overwrite"
POLICIES = (REJECT, OVERWRITE)

# marks a slot that holds no value
_UNOCCUPIED = object()


class RingBuffer:
    """
    Fixed-capacity FIFO buffer storing up to `capacity` values.

    Backing storage has `capacity + 1` slots: one slot always stays free so that
    "empty" (write_index == read_index) and "full" (write_index + 1 == read_index,
    modulo the slot count) are told apart from the two cursors alone.

    When full, `policy` decides what `put` does: "reject" raises BufferFull,
    "overwrite" drops the oldest value to make room.
    Not thread-safe; callers sharing one instance must lock around it.
    """
    def __init__(self, capacity: int, policy: str = REJECT):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacity(f"capacity must be a positive integer, got {capacity!r}")
        if policy not in POLICIES:
            raise ValueError(f"unknown overflow policy {policy!r}, expected one of {POLICIES}")
        self._capacity = capacity
        self._policy = policy
        self._storage: List[Any] = [_UNOCCUPIED] * (capacity + 1)
        self._write_index = 0
        self._read_index = 0
        logger.debug("ring buffer created capacity=%d policy=%s", capacity, policy)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> str:
        return self._policy

    @property
    def write_index(self) -> int:
        return self._write_index

    @property
    def read_index(self) -> int:
        return self._read_index

    def _advance(self, index: int) -> int:
        return (index + 1) % len(self._storage)

    def is_empty(self) -> bool:
        return self._write_index == self._read_index

    def is_full(self) -> bool:
        return self._advance(self._write_index) == self._read_index

    def rejects_put(self) -> bool:
        """True when the next put would raise BufferFull."""
        return self._policy == REJECT and self.is_full()

    def size(self) -> int:
        """Number of stored values."""
        slots = len(self._storage)
        return (self._write_index - self._read_index + slots) % slots

    def __len__(self) -> int:
        return self.size()

    def put(self, value: Any) -> None:
        """Append `value`; on a full buffer apply the overflow policy."""
        if self.rejects_put():
            raise BufferFull(f"buffer full (capacity={self._capacity})")
        if self.is_full():
            dropped = self._storage[self._read_index]
            self._storage[self._read_index] = _UNOCCUPIED
            self._read_index = self._advance(self._read_index)
            logger.debug("overwrite policy dropped oldest value %r", dropped)
        self._storage[self._write_index] = value
        self._write_index = self._advance(self._write_index)

    def get(self) -> Any:
        """Remove and return the oldest value."""
        if self.is_empty():
            raise BufferEmpty("buffer empty")
        value = self._storage[self._read_index]
        self._storage[self._read_index] = _UNOCCUPIED
        self._read_index = self._advance(self._read_index)
        return value

    def peek(self) -> Any:
        """Return the oldest value without removing it."""
        if self.is_empty():
            raise BufferEmpty("buffer empty")
        return self._storage[self._read_index]

    def snapshot(self) -> List[Any]:
        """Return a list (oldest->newest)."""
        slots = len(self._storage)
        return [self._storage[(self._read_index + i) % slots] for i in range(self.size())]

    def clear(self) -> None:
        self._storage = [_UNOCCUPIED] * len(self._storage)
        self._write_index = 0
        self._read_index = 0

    def __repr__(self) -> str:
        return f"<RingBuffer {self.size()}/{self._capacity} policy={self._policy}>"
