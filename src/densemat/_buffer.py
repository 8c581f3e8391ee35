"""
Contiguous float64 Buffer

Fixed-size ctypes storage for matrix entries. Every layout of a Matrix
keeps its entries in one or more Buffers.
"""

import ctypes
from typing import Iterable, List

__all__ = ['Buffer']


_CTYPE = ctypes.c_double


class Buffer:
    """
    Fixed-size contiguous array of C doubles.

    Buffers never share memory: ``from_list`` and ``copy`` always
    allocate, and ``tolist`` always returns a new list.

    Example:
        >>> buf = Buffer.from_list([1, 2])
        >>> buf.iadd(buf)
        >>> buf.tolist()
        [2.0, 4.0]
    """

    __slots__ = ('_data',)

    def __init__(self, size: int):
        """Allocate a zero-filled buffer of ``size`` elements."""
        if size < 0:
            raise ValueError(f"Buffer size must be non-negative, got {size}")
        self._data = (_CTYPE * size)()

    @classmethod
    def from_list(cls, data: Iterable[float]) -> 'Buffer':
        """Create buffer holding a copy of ``data``."""
        values = [float(v) for v in data]
        buf = cls(len(values))
        buf._data[:] = values
        return buf

    @property
    def nbytes(self) -> int:
        """Total bytes."""
        return ctypes.sizeof(self._data)

    def _check_index(self, idx: int) -> int:
        if idx < 0 or idx >= len(self._data):
            raise IndexError(f"Index {idx} out of bounds [0, {len(self._data)})")
        return idx

    def __getitem__(self, idx: int) -> float:
        return self._data[self._check_index(idx)]

    def __setitem__(self, idx: int, value: float):
        self._data[self._check_index(idx)] = value

    def __len__(self) -> int:
        return len(self._data)

    def iadd(self, other: 'Buffer') -> None:
        """Add ``other`` element-wise in place. Sizes must match."""
        if len(other) != len(self):
            raise ValueError(f"Buffer sizes differ: {len(self)} != {len(other)}")
        # Snapshot first so iadd(self) reads the pre-call values
        addend = other.tolist()
        data = self._data
        for i, value in enumerate(addend):
            data[i] += value

    def copy(self) -> 'Buffer':
        """Create a deep copy."""
        new = Buffer(len(self))
        ctypes.memmove(
            ctypes.addressof(new._data), ctypes.addressof(self._data), self.nbytes
        )
        return new

    def tolist(self) -> List[float]:
        """Convert to a new Python list."""
        return list(self._data)
