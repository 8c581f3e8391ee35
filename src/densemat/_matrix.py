"""
Matrix - dense matrix of float64 entries.

A Matrix has a fixed shape and owns its entries exclusively:

- Construction copies the caller's data (copy-in)
- Every getter returns freshly allocated lists (copy-out)
- ``add`` is the only mutating operation and never changes the shape

The storage layout (row-major, column-major, or one array per row) is
chosen per matrix and has no observable effect on any result.

Typical usage:
    >>> m = Matrix(3, 2, [1, 0, 0, 1, 0, 0])
    >>> m.get_elements_row_arrays()
    [[1.0, 0.0], [0.0, 1.0], [0.0, 0.0]]
    >>> m.add(Matrix(3, 2, [0, 0, 0, 0, 2, 2]))
    >>> m.get_elements_row_arrays()
    [[1.0, 0.0], [0.0, 1.0], [2.0, 2.0]]
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from ._config import resolve_layout
from ._error import (
    ERROR_DIMENSION_MISMATCH,
    ERROR_INDEX_OUT_OF_BOUNDS,
    ERROR_INVALID_ARGUMENT,
    ERROR_NULL_POINTER,
    ERROR_TYPE_ERROR,
    InvalidArgument,
    check_argument,
)
from ._storage import Layout, Storage, StorageInfo, storage_class

logger = logging.getLogger("densemat.matrix")

__all__ = ['Matrix']


def _is_integer(value: Any) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def _as_float_array(data: Any, name: str) -> np.ndarray:
    """Copy ``data`` into a new float64 ndarray, mapping failures to InvalidArgument."""
    try:
        raw = np.asarray(data)
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgument.from_code(
            ERROR_TYPE_ERROR, f"`{name}` is not a sequence of real numbers ({e})"
        ) from e
    # Only bool, integer and float input; complex, strings and objects are rejected
    check_argument(
        raw.dtype.kind in 'biuf',
        ERROR_TYPE_ERROR,
        f"`{name}` is not a sequence of real numbers (dtype {raw.dtype})",
    )
    return raw.astype(np.float64)


class Matrix:
    """
    Dense matrix (from algebra) with float64 entries.

    Invariants:
        - 1 <= get_nb_rows()
        - 1 <= get_nb_columns()
        - len(get_elements_row_major()) == get_nb_rows() * get_nb_columns()

    Args:
        nb_rows: Number of rows (>= 1)
        nb_columns: Number of columns (>= 1)
        elements_row_major: Entries in row-major order,
            of length ``nb_rows * nb_columns``. Copied.
        layout: Storage layout; None uses the configured default

    Raises:
        InvalidArgument: If ``nb_rows < 1``, ``nb_columns < 1``,
            ``elements_row_major is None`` or its length is wrong
    """

    __slots__ = ("_storage",)

    # Mutable through add(), so not hashable
    __hash__ = None

    def __init__(
        self,
        nb_rows: int,
        nb_columns: int,
        elements_row_major: Sequence[float],
        layout: Optional[Union[Layout, str]] = None,
    ):
        check_argument(_is_integer(nb_rows), ERROR_TYPE_ERROR, "`nb_rows` is not an integer")
        check_argument(_is_integer(nb_columns), ERROR_TYPE_ERROR, "`nb_columns` is not an integer")
        check_argument(nb_rows >= 1, ERROR_INVALID_ARGUMENT, "`nb_rows` is less than 1")
        check_argument(nb_columns >= 1, ERROR_INVALID_ARGUMENT, "`nb_columns` is less than 1")
        check_argument(
            elements_row_major is not None, ERROR_NULL_POINTER, "`elements_row_major` is None"
        )

        elements = _as_float_array(elements_row_major, "elements_row_major")
        check_argument(
            elements.ndim == 1,
            ERROR_DIMENSION_MISMATCH,
            f"`elements_row_major` must be one-dimensional, got {elements.ndim}D",
        )
        nb_rows, nb_columns = int(nb_rows), int(nb_columns)
        check_argument(
            elements.shape[0] == nb_rows * nb_columns,
            ERROR_DIMENSION_MISMATCH,
            f"length of `elements_row_major` is wrong "
            f"(expected {nb_rows * nb_columns}, got {elements.shape[0]})",
        )

        storage_cls = storage_class(resolve_layout(layout))
        self._storage: Storage = storage_cls.from_row_major(
            nb_rows, nb_columns, elements.tolist()
        )

    # =========================================================================
    # Alternative Constructors
    # =========================================================================

    @classmethod
    def _from_storage(cls, storage: Storage) -> "Matrix":
        mat = cls.__new__(cls)
        mat._storage = storage
        return mat

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[float]],
        layout: Optional[Union[Layout, str]] = None,
    ) -> "Matrix":
        """
        Create a matrix from a sequence of equal-length rows.

        Raises:
            InvalidArgument: If rows is None, empty, ragged, or has empty rows
        """
        check_argument(rows is not None, ERROR_NULL_POINTER, "`rows` is None")
        return cls._from_2d(_as_float_array(rows, "rows"), "rows", layout)

    @classmethod
    def from_numpy(
        cls,
        array: Any,
        layout: Optional[Union[Layout, str]] = None,
    ) -> "Matrix":
        """
        Create a matrix from a 2-D array-like. The data is copied.

        Example:
            >>> Matrix.from_numpy(np.eye(2)).get_elements_row_major()
            [1.0, 0.0, 0.0, 1.0]
        """
        check_argument(array is not None, ERROR_NULL_POINTER, "`array` is None")
        return cls._from_2d(_as_float_array(array, "array"), "array", layout)

    @classmethod
    def _from_2d(cls, data: np.ndarray, name: str, layout) -> "Matrix":
        check_argument(
            data.ndim == 2,
            ERROR_DIMENSION_MISMATCH,
            f"`{name}` must be two-dimensional, got {data.ndim}D",
        )
        nb_rows, nb_columns = data.shape
        logger.debug(f"Building {nb_rows}x{nb_columns} matrix from 2-D `{name}`")
        return cls(nb_rows, nb_columns, data.ravel(order='C'), layout=layout)

    # =========================================================================
    # Shape
    # =========================================================================

    def get_nb_rows(self) -> int:
        return self._storage.shape[0]

    def get_nb_columns(self) -> int:
        """Number of columns: entry count divided by row count."""
        return self._storage.size // self.get_nb_rows()

    @property
    def shape(self) -> Tuple[int, int]:
        """Matrix shape (rows, columns)."""
        return (self.get_nb_rows(), self.get_nb_columns())

    @property
    def nrows(self) -> int:
        return self.get_nb_rows()

    @property
    def ncols(self) -> int:
        return self.get_nb_columns()

    @property
    def size(self) -> int:
        """Total number of entries."""
        return self._storage.size

    @property
    def layout(self) -> Layout:
        return self._storage.layout

    @property
    def storage_info(self) -> StorageInfo:
        """Storage metadata (layout, bytes held, contiguity)."""
        return self._storage.info

    # =========================================================================
    # Element Access
    # =========================================================================

    def get_elements_row_major(self) -> List[float]:
        """
        All entries in row-major order.

        Returns:
            New list of length rows * columns; entry (i, j) is at
            ``i * get_nb_columns() + j``. Mutating it does not affect
            this matrix.
        """
        return self._storage.row_major()

    def get_elements_row_arrays(self) -> List[List[float]]:
        """
        All entries as one list per row.

        Returns:
            New outer list of ``get_nb_rows()`` new inner lists, each of
            length ``get_nb_columns()``; ``result[i][j]`` is entry (i, j).
        """
        return self._storage.row_arrays()

    def get(self, row: int, column: int) -> float:
        """
        Get entry at (row, column).

        Raises:
            InvalidArgument: If an index is not an integer in range
        """
        nb_rows, nb_columns = self.shape
        check_argument(
            _is_integer(row) and _is_integer(column),
            ERROR_TYPE_ERROR,
            "indices must be integers",
        )
        check_argument(
            0 <= row < nb_rows and 0 <= column < nb_columns,
            ERROR_INDEX_OUT_OF_BOUNDS,
            f"({row}, {column}) outside {nb_rows}x{nb_columns} matrix",
        )
        return self._storage.get(int(row), int(column))

    def __getitem__(self, key) -> float:
        """Get entry at (row, column)."""
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError("Index must be (row, column) tuple")
        return self.get(key[0], key[1])

    # =========================================================================
    # Mutation
    # =========================================================================

    def add(self, other: "Matrix") -> None:
        """
        Add ``other`` to this matrix element-wise, in place.

        ``other`` is not modified. On failure this matrix is left unchanged.

        Raises:
            InvalidArgument: If other is None, not a Matrix, or its shape differs
        """
        check_argument(other is not None, ERROR_NULL_POINTER, "`other` is None")
        check_argument(
            isinstance(other, Matrix),
            ERROR_TYPE_ERROR,
            f"`other` must be a Matrix, got {type(other).__name__}",
        )
        shape, other_shape = self.shape, other.shape
        if other_shape != shape:
            logger.debug(f"Rejected add: shape {other_shape} onto {shape}")
            axis = "rows" if other_shape[0] != shape[0] else "columns"
            raise InvalidArgument.from_code(
                ERROR_DIMENSION_MISMATCH, f"`other` has a different number of {axis}"
            )

        self._storage.add(other._storage)

    # =========================================================================
    # Conversion
    # =========================================================================

    def copy(self, layout: Optional[Union[Layout, str]] = None) -> "Matrix":
        """
        Deep copy, optionally re-laid out.

        Args:
            layout: Layout of the copy; None keeps this matrix's layout
        """
        if layout is None or resolve_layout(layout) is self.layout:
            return self._from_storage(self._storage.copy())
        nb_rows, nb_columns = self.shape
        return Matrix(nb_rows, nb_columns, self.get_elements_row_major(), layout=layout)

    def to_numpy(self) -> np.ndarray:
        """New (rows, columns) float64 array."""
        return np.array(self.get_elements_row_major(), dtype=np.float64).reshape(self.shape)

    # =========================================================================
    # Magic Methods
    # =========================================================================

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (
            self.shape == other.shape
            and self.get_elements_row_major() == other.get_elements_row_major()
        )

    def __repr__(self) -> str:
        nb_rows, nb_columns = self.shape
        return f"<Matrix {nb_rows}x{nb_columns} layout={self.layout.value}>"

    def __len__(self) -> int:
        return self.get_nb_rows()
