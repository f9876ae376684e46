"""Reusable transfer buffers for exchanging simulation data."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from alienbase.exceptions import BugReportException


@dataclass(frozen=True)
class ArraySizes:
    cell_array_size: int
    particle_array_size: int
    token_array_size: int


@dataclass(eq=False)
class DataAccessBuffer:
    """Fixed-capacity slots for cells, particles, tokens and string bytes, with fill counters."""

    cells: list[Any]
    particles: list[Any]
    tokens: list[Any]
    string_bytes: bytearray
    num_cells: int = 0
    num_particles: int = 0
    num_tokens: int = 0
    num_string_bytes: int = 0

    def clear(self) -> None:
        """Reset all fill counters to zero."""
        self.num_cells = 0
        self.num_particles = 0
        self.num_tokens = 0
        self.num_string_bytes = 0


@dataclass
class AccessDataCache:
    """Hands out buffers of the requested sizes, reusing released ones."""

    string_bytes_size: int
    _free: list[DataAccessBuffer] = field(default_factory=list, init=False, repr=False)
    _used: list[DataAccessBuffer] = field(default_factory=list, init=False, repr=False)
    _array_sizes: Optional[ArraySizes] = field(default=None, init=False, repr=False)

    def get_data(self, array_sizes: ArraySizes) -> DataAccessBuffer:
        """Return a cleared buffer; all cached buffers are dropped if the sizes changed."""
        if self._array_sizes != array_sizes:
            self._free.clear()
            self._used.clear()
            self._array_sizes = array_sizes
        buffer = self._free.pop(0) if self._free else self._new_buffer(array_sizes)
        self._used.append(buffer)
        buffer.clear()
        return buffer

    def release_data(self, data: DataAccessBuffer) -> None:
        """Return a buffer obtained from ``get_data`` for reuse; unknown buffers are ignored."""
        if data in self._used:
            self._used.remove(data)
            self._free.append(data)

    def _new_buffer(self, sizes: ArraySizes) -> DataAccessBuffer:
        try:
            return DataAccessBuffer(
                cells=[None] * sizes.cell_array_size,
                particles=[None] * sizes.particle_array_size,
                tokens=[None] * sizes.token_array_size,
                string_bytes=bytearray(self.string_bytes_size),
            )
        except MemoryError as error:
            raise BugReportException("There is not sufficient CPU memory available.") from error