"""
densemat - Dense Matrix Value Type

A fixed-shape dense matrix of float64 entries with:
- Copy-in construction from row-major data
- Copy-out element extraction (flat row-major or one list per row)
- Shape-checked, in-place element-wise addition
- Interchangeable storage layouts with identical observable behavior

Architecture:
    ┌──────────────────────────────────────────────┐
    │                    Matrix                    │
    ├──────────────────────────────────────────────┤
    │ Layout: ROW_MAJOR | COLUMN_MAJOR | ROW_ARRAYS│
    │ Storage: Buffer (ctypes float64)             │
    └──────────────────────────────────────────────┘

Example:
    >>> import densemat
    >>> from densemat import Matrix
    >>>
    >>> m = Matrix(3, 2, [1, 0, 0, 1, 0, 0])
    >>> m.shape
    (3, 2)
    >>> m.add(Matrix(3, 2, [0, 0, 0, 0, 2, 2]))
    >>> m.get_elements_row_arrays()
    [[1.0, 0.0], [0.0, 1.0], [2.0, 2.0]]
    >>>
    >>> # Pick a storage layout (no observable difference)
    >>> densemat.set_default_layout('column_major')
"""

__version__ = '0.1.0'

from ._error import (
    MatrixError,
    InvalidArgument,
    check_argument,
    # Error codes
    OK,
    ERROR_NULL_POINTER,
    ERROR_INVALID_ARGUMENT,
    ERROR_DIMENSION_MISMATCH,
    ERROR_INDEX_OUT_OF_BOUNDS,
    ERROR_TYPE_ERROR,
)

from ._storage import (
    Layout,
    StorageInfo,
)

from ._config import (
    get_config,
    set_default_layout,
    get_default_layout,
)

from ._matrix import Matrix

__all__ = [
    # Version
    '__version__',
    # Core class
    'Matrix',
    # Storage
    'Layout',
    'StorageInfo',
    # Error handling
    'MatrixError',
    'InvalidArgument',
    'check_argument',
    'OK',
    'ERROR_NULL_POINTER',
    'ERROR_INVALID_ARGUMENT',
    'ERROR_DIMENSION_MISMATCH',
    'ERROR_INDEX_OUT_OF_BOUNDS',
    'ERROR_TYPE_ERROR',
    # Configuration
    'get_config',
    'set_default_layout',
    'get_default_layout',
]
