"""Fast pseudo-random numbers drawn from a precomputed table, and unique ids."""

from __future__ import annotations

import random
import threading
from typing import ClassVar, Optional

_RAND_MAX = 4294967296.0
_UINT32_MASK = 0xFFFFFFFF
_DEFAULT_SIZE = 1323781
_INT_MAX_BITS = 31


class NumberGenerator:
    """Cycles through a table of random non-negative 31-bit integers."""

    _instance: ClassVar[Optional["NumberGenerator"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, size: int = _DEFAULT_SIZE, seed: Optional[int] = None) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        rng = random.Random(seed)
        self._numbers = [rng.getrandbits(_INT_MAX_BITS) for _ in range(size)]
        self._index = 0
        self._running_number = 0
        self._thread_id = 1 << 48

    @classmethod
    def get_instance(cls) -> "NumberGenerator":
        """Return the shared generator, creating it on first use."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def get_number_from_array(self) -> int:
        """Advance to the next table entry and return it."""
        self._index = (self._index + 1) % len(self._numbers)
        return self._numbers[self._index]

    def get_random_int(self, first: Optional[int] = None, second: Optional[int] = None) -> int:
        """Random integer.

        With no arguments: any table value. With one: in ``[0, first)``.
        With two: in ``[first, second]``.
        """
        if first is None:
            return self.get_number_from_array()
        if second is None:
            return self.get_number_from_array() % first
        delta = (second - first + 1) & _UINT32_MASK
        return (first + self.get_number_from_array() % delta) & _UINT32_MASK

    def get_large_random_int(self, range_: int) -> int:
        """Random integer in ``[0, range_]``."""
        return self.get_number_from_array() % ((range_ + 1) & _UINT32_MASK)

    def get_random_real(self, low: Optional[float] = None, high: Optional[float] = None) -> float:
        """Random real in ``[0, 1)``, or in ``[low, high]`` at a resolution of 0.001."""
        if low is None or high is None:
            return self.get_number_from_array() / _RAND_MAX
        steps = int((high - low) * 1000) & _UINT32_MASK
        return self.get_large_random_int(steps) / 1000.0 + low

    def get_id(self) -> int:
        """Return a new id, unique for this generator."""
        self._running_number += 1
        return self._thread_id | self._running_number