# ringbuffer/sequence.py


class SequenceGenerator:
    """
    Monotonically increasing integer source.
    Used by the host and the simulator to produce distinguishable payloads,
    which are then passed to RingBuffer.put explicitly.
    """
    def __init__(self, start: int = 0):
        self._next = int(start)

    @property
    def peek(self) -> int:
        return self._next

    def next(self) -> int:
        value = self._next
        self._next += 1
        return value

    __next__ = next

    def __iter__(self):
        return self
