"""
Global configuration for densemat.

Provides:
- Default storage layout for new matrices
- Layout name parsing (enum, value, or short alias)
- Initial default read from the DENSEMAT_LAYOUT environment variable
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from ._error import ERROR_INVALID_ARGUMENT, InvalidArgument
from ._storage import Layout

logger = logging.getLogger("densemat.config")

LAYOUT_ENV_VAR = "DENSEMAT_LAYOUT"

_LAYOUT_ALIASES = {
    'row': Layout.ROW_MAJOR,
    'column': Layout.COLUMN_MAJOR,
    'col': Layout.COLUMN_MAJOR,
    'rows': Layout.ROW_ARRAYS,
}


def parse_layout(value: Union[Layout, str]) -> Layout:
    """
    Convert a Layout or layout name to a Layout.

    Names are case-insensitive; 'row', 'column'/'col' and 'rows' are
    accepted as short aliases.

    Raises:
        InvalidArgument: If value names no layout
    """
    if isinstance(value, Layout):
        return value
    if isinstance(value, str):
        key = value.strip().lower().replace('-', '_')
        if key in _LAYOUT_ALIASES:
            return _LAYOUT_ALIASES[key]
        try:
            return Layout(key)
        except ValueError:
            pass
    raise InvalidArgument.from_code(
        ERROR_INVALID_ARGUMENT,
        f"unknown layout {value!r} (expected one of {[l.value for l in Layout]})",
    )


# =============================================================================
# Global Configuration State
# =============================================================================

class _Config:
    """
    Global configuration singleton.

    Manages the default layout used when a Matrix is built without one.
    """

    def __init__(self):
        self._default_layout = self._layout_from_env()

    @staticmethod
    def _layout_from_env() -> Layout:
        raw = os.environ.get(LAYOUT_ENV_VAR, '')
        if not raw:
            return Layout.ROW_MAJOR
        try:
            return parse_layout(raw)
        except InvalidArgument:
            logger.warning(
                f"Ignoring {LAYOUT_ENV_VAR}={raw!r}: not a layout, using row_major"
            )
            return Layout.ROW_MAJOR

    @property
    def default_layout(self) -> Layout:
        """Get default layout."""
        return self._default_layout

    @default_layout.setter
    def default_layout(self, value: Union[Layout, str]):
        """Set default layout."""
        layout = parse_layout(value)
        if layout is not self._default_layout:
            logger.debug(
                f"Default layout changed: {self._default_layout.value} -> {layout.value}"
            )
        self._default_layout = layout

    def reset(self) -> None:
        """Restore the default layout from the environment."""
        self._default_layout = self._layout_from_env()


# Global config instance
_config = _Config()


# =============================================================================
# Public API
# =============================================================================

def get_config() -> _Config:
    """Get global configuration instance."""
    return _config


def set_default_layout(layout: Union[Layout, str]) -> None:
    """
    Set the layout used for new matrices when none is given.

    Args:
        layout: Layout or name ('row_major', 'column_major', 'row_arrays')

    Example:
        >>> densemat.set_default_layout('column_major')
        >>> Matrix(2, 2, [1, 2, 3, 4]).layout
        <Layout.COLUMN_MAJOR: 'column_major'>
    """
    _config.default_layout = layout


def get_default_layout() -> Layout:
    """Get current default layout."""
    return _config.default_layout


def resolve_layout(layout: Optional[Union[Layout, str]] = None) -> Layout:
    """Parse ``layout``, falling back to the configured default for None."""
    if layout is None:
        return _config.default_layout
    return parse_layout(layout)
