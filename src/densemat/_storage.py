"""Storage Layouts.

This module defines how a Matrix keeps its entries in memory:
- Layout types (row-major, column-major, row arrays)
- An abstract Storage interface every layout implements
- Introspection metadata (StorageInfo)

Design Philosophy:
    The layout is an implementation detail hidden behind Matrix. All
    layouts answer the same questions with the same values, so callers
    never need to know which one backs a given matrix.

Layouts:
    - ROW_MAJOR: one Buffer, entry (i, j) at i * nb_columns + j
    - COLUMN_MAJOR: one Buffer, entry (i, j) at j * nb_rows + i
    - ROW_ARRAYS: one Buffer per row, entry (i, j) at rows[i][j]

Example:
    >>> storage = RowMajorStorage.from_row_major(2, 2, [1.0, 2.0, 3.0, 4.0])
    >>> storage.get(1, 0)
    3.0
    >>> storage.info.layout
    <Layout.ROW_MAJOR: 'row_major'>
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple, Type

from ._buffer import Buffer

__all__ = [
    'Layout',
    'StorageInfo',
    'Storage',
    'RowMajorStorage',
    'ColumnMajorStorage',
    'RowArraysStorage',
    'storage_class',
]


# =============================================================================
# Enumerations
# =============================================================================

class Layout(Enum):
    """Internal storage layout of a Matrix.

    Attributes:
        ROW_MAJOR: Single flat buffer, rows contiguous.
                   Cache-friendly for row-wise iteration. Default.

        COLUMN_MAJOR: Single flat buffer, columns contiguous.

        ROW_ARRAYS: One buffer per row (array of arrays).
                    Rows are independent allocations.

    Example:
        >>> mat.layout  # Layout.ROW_MAJOR
    """
    ROW_MAJOR = 'row_major'
    COLUMN_MAJOR = 'column_major'
    ROW_ARRAYS = 'row_arrays'


# =============================================================================
# Storage Information
# =============================================================================

@dataclass(frozen=True)
class StorageInfo:
    """Storage metadata for a Matrix.

    Attributes:
        layout: Storage layout.
        shape: Matrix dimensions (rows, columns).
        size: Number of entries (rows * columns).
        nbytes: Bytes held by the entry buffers.
        is_contiguous: Whether all entries live in a single buffer.

    Note:
        This is for introspection and debugging only.
    """
    layout: Layout
    shape: Tuple[int, int]
    size: int
    nbytes: int
    is_contiguous: bool = True

    def __repr__(self) -> str:
        return (
            f"StorageInfo(layout={self.layout.value}, shape={self.shape}, "
            f"size={self.size}, nbytes={self.nbytes})"
        )


# =============================================================================
# Abstract Storage
# =============================================================================

class Storage(ABC):
    """
    Abstract base class for matrix entry storage.

    Shapes are trusted: Matrix validates every argument before calling
    into a Storage, so implementations do not re-check preconditions.

    Required Methods (subclasses must implement):
        from_row_major(nb_rows, nb_columns, values): Build from row-major values
        get(row, column): Single entry
        row_major(): All entries in row-major order (new list)
        add(other): Element-wise in-place addition
        copy(): Deep copy
        nbytes: Bytes held
    """

    layout: Layout

    def __init__(self, nb_rows: int, nb_columns: int):
        self._nb_rows = nb_rows
        self._nb_columns = nb_columns

    # =========================================================================
    # Shape
    # =========================================================================

    @property
    def shape(self) -> Tuple[int, int]:
        """Dimensions (rows, columns)."""
        return (self._nb_rows, self._nb_columns)

    @property
    def size(self) -> int:
        """Number of entries."""
        return self._nb_rows * self._nb_columns

    @property
    def info(self) -> StorageInfo:
        return StorageInfo(
            layout=self.layout,
            shape=self.shape,
            size=self.size,
            nbytes=self.nbytes,
            is_contiguous=self.layout is not Layout.ROW_ARRAYS,
        )

    # =========================================================================
    # Abstract Methods
    # =========================================================================

    @classmethod
    @abstractmethod
    def from_row_major(
        cls, nb_rows: int, nb_columns: int, values: Sequence[float]
    ) -> 'Storage':
        """Create storage holding a copy of row-major ``values``."""
        ...

    @property
    @abstractmethod
    def nbytes(self) -> int:
        ...

    @abstractmethod
    def get(self, row: int, column: int) -> float:
        """Entry at (row, column). Indices must be in range."""
        ...

    @abstractmethod
    def row_major(self) -> List[float]:
        """New list of all entries in row-major order."""
        ...

    @abstractmethod
    def add(self, other: 'Storage') -> None:
        """Add ``other`` element-wise in place.

        ``other`` has the same shape but may use any layout.
        """
        ...

    @abstractmethod
    def copy(self) -> 'Storage':
        """Deep copy sharing no buffer with this storage."""
        ...

    # =========================================================================
    # Derived Methods
    # =========================================================================

    def row_arrays(self) -> List[List[float]]:
        """New list of new per-row lists."""
        flat = self.row_major()
        n = self._nb_columns
        return [flat[i * n:(i + 1) * n] for i in range(self._nb_rows)]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self._nb_rows}x{self._nb_columns}>"


# =============================================================================
# Row-Major Storage
# =============================================================================

class RowMajorStorage(Storage):
    """Entries in one Buffer, row after row."""

    layout = Layout.ROW_MAJOR

    def __init__(self, nb_rows: int, nb_columns: int, buffer: Buffer):
        super().__init__(nb_rows, nb_columns)
        self._buffer = buffer

    @classmethod
    def from_row_major(cls, nb_rows, nb_columns, values):
        return cls(nb_rows, nb_columns, Buffer.from_list(values))

    @property
    def nbytes(self) -> int:
        return self._buffer.nbytes

    def get(self, row: int, column: int) -> float:
        return self._buffer[row * self._nb_columns + column]

    def row_major(self) -> List[float]:
        return self._buffer.tolist()

    def add(self, other: Storage) -> None:
        if isinstance(other, RowMajorStorage):
            self._buffer.iadd(other._buffer)
            return
        addend = other.row_major()
        buf = self._buffer
        for i, value in enumerate(addend):
            buf[i] += value

    def copy(self) -> 'RowMajorStorage':
        return RowMajorStorage(self._nb_rows, self._nb_columns, self._buffer.copy())


# =============================================================================
# Column-Major Storage
# =============================================================================

class ColumnMajorStorage(Storage):
    """Entries in one Buffer, column after column."""

    layout = Layout.COLUMN_MAJOR

    def __init__(self, nb_rows: int, nb_columns: int, buffer: Buffer):
        super().__init__(nb_rows, nb_columns)
        self._buffer = buffer

    @classmethod
    def from_row_major(cls, nb_rows, nb_columns, values):
        buffer = Buffer(nb_rows * nb_columns)
        for row in range(nb_rows):
            for column in range(nb_columns):
                buffer[column * nb_rows + row] = values[row * nb_columns + column]
        return cls(nb_rows, nb_columns, buffer)

    @property
    def nbytes(self) -> int:
        return self._buffer.nbytes

    def get(self, row: int, column: int) -> float:
        return self._buffer[column * self._nb_rows + row]

    def row_major(self) -> List[float]:
        data = self._buffer.tolist()
        nb_rows = self._nb_rows
        return [
            data[column * nb_rows + row]
            for row in range(nb_rows)
            for column in range(self._nb_columns)
        ]

    def add(self, other: Storage) -> None:
        if isinstance(other, ColumnMajorStorage):
            self._buffer.iadd(other._buffer)
            return
        addend = other.row_major()
        buf = self._buffer
        nb_rows, nb_columns = self._nb_rows, self._nb_columns
        for row in range(nb_rows):
            for column in range(nb_columns):
                buf[column * nb_rows + row] += addend[row * nb_columns + column]

    def copy(self) -> 'ColumnMajorStorage':
        return ColumnMajorStorage(self._nb_rows, self._nb_columns, self._buffer.copy())


# =============================================================================
# Row-Arrays Storage
# =============================================================================

class RowArraysStorage(Storage):
    """One Buffer per row."""

    layout = Layout.ROW_ARRAYS

    def __init__(self, nb_rows: int, nb_columns: int, rows: List[Buffer]):
        super().__init__(nb_rows, nb_columns)
        self._rows = rows

    @classmethod
    def from_row_major(cls, nb_rows, nb_columns, values):
        rows = [
            Buffer.from_list(values[row * nb_columns:(row + 1) * nb_columns])
            for row in range(nb_rows)
        ]
        return cls(nb_rows, nb_columns, rows)

    @property
    def nbytes(self) -> int:
        return sum(row.nbytes for row in self._rows)

    def get(self, row: int, column: int) -> float:
        return self._rows[row][column]

    def row_major(self) -> List[float]:
        result = []
        for row in self._rows:
            result.extend(row.tolist())
        return result

    def row_arrays(self) -> List[List[float]]:
        return [row.tolist() for row in self._rows]

    def add(self, other: Storage) -> None:
        if isinstance(other, RowArraysStorage):
            addends = other._rows
        else:
            addends = [Buffer.from_list(row) for row in other.row_arrays()]
        for row, addend in zip(self._rows, addends):
            row.iadd(addend)

    def copy(self) -> 'RowArraysStorage':
        return RowArraysStorage(
            self._nb_rows, self._nb_columns, [row.copy() for row in self._rows]
        )


# =============================================================================
# Layout Dispatch
# =============================================================================

_STORAGE_CLASSES = {
    Layout.ROW_MAJOR: RowMajorStorage,
    Layout.COLUMN_MAJOR: ColumnMajorStorage,
    Layout.ROW_ARRAYS: RowArraysStorage,
}


def storage_class(layout: Layout) -> Type[Storage]:
    """Get the Storage implementation for ``layout``."""
    return _STORAGE_CLASSES[layout]
