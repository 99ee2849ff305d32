# ringbuffer/errors.py
"""Exceptions raised by the ring buffer."""


class RingBufferError(Exception):
    """Base class for every ring buffer error."""


class InvalidCapacity(RingBufferError, ValueError):
    """Capacity must be a positive integer."""


class BufferFull(RingBufferError):
    """Put attempted with no free slot left (reject policy)."""


class BufferEmpty(RingBufferError):
    """Get attempted on a buffer holding no values."""


__all__ = ["RingBufferError", "InvalidCapacity", "BufferFull", "BufferEmpty"]
