"""
Tests for global configuration (default layout).
"""

import logging

import pytest

import densemat
from densemat import Layout, Matrix, InvalidArgument, get_config
from densemat._config import parse_layout, resolve_layout


class TestDefaultLayout:
    """Test the configured default layout."""

    def test_default_is_row_major(self):
        assert densemat.get_default_layout() is Layout.ROW_MAJOR
        assert Matrix(1, 1, [0]).layout is Layout.ROW_MAJOR

    def test_set_default_layout(self):
        densemat.set_default_layout('column_major')
        assert densemat.get_default_layout() is Layout.COLUMN_MAJOR
        assert Matrix(2, 2, [1, 2, 3, 4]).layout is Layout.COLUMN_MAJOR

    def test_explicit_layout_wins(self):
        densemat.set_default_layout(Layout.ROW_ARRAYS)
        assert Matrix(1, 1, [0], layout='row_major').layout is Layout.ROW_MAJOR

    def test_set_unknown_layout_keeps_previous(self):
        densemat.set_default_layout(Layout.COLUMN_MAJOR)
        with pytest.raises(InvalidArgument):
            densemat.set_default_layout('sparse')
        assert densemat.get_default_layout() is Layout.COLUMN_MAJOR

    def test_layout_change_is_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="densemat.config"):
            densemat.set_default_layout('row_arrays')
        assert "row_major -> row_arrays" in caplog.text

    def test_resolve_layout(self):
        assert resolve_layout(None) is Layout.ROW_MAJOR
        assert resolve_layout('column_major') is Layout.COLUMN_MAJOR


class TestParseLayout:
    """Test layout name parsing."""

    @pytest.mark.parametrize("name, expected", [
        ('row_major', Layout.ROW_MAJOR),
        ('ROW_MAJOR', Layout.ROW_MAJOR),
        ('row-major', Layout.ROW_MAJOR),
        ('row', Layout.ROW_MAJOR),
        ('column_major', Layout.COLUMN_MAJOR),
        ('col', Layout.COLUMN_MAJOR),
        ('column', Layout.COLUMN_MAJOR),
        ('row_arrays', Layout.ROW_ARRAYS),
        (' rows ', Layout.ROW_ARRAYS),
        (Layout.ROW_ARRAYS, Layout.ROW_ARRAYS),
    ])
    def test_parse(self, name, expected):
        assert parse_layout(name) is expected

    @pytest.mark.parametrize("value", ['', 'csr', 3, None])
    def test_parse_invalid(self, value):
        with pytest.raises(InvalidArgument) as exc_info:
            parse_layout(value)
        assert exc_info.value.code == densemat.ERROR_INVALID_ARGUMENT


class TestEnvironment:
    """Test DENSEMAT_LAYOUT handling."""

    def test_env_sets_default(self, monkeypatch):
        monkeypatch.setenv("DENSEMAT_LAYOUT", "column_major")
        get_config().reset()
        assert densemat.get_default_layout() is Layout.COLUMN_MAJOR

    def test_env_invalid_falls_back(self, monkeypatch, caplog):
        monkeypatch.setenv("DENSEMAT_LAYOUT", "diagonal")
        with caplog.at_level(logging.WARNING, logger="densemat.config"):
            get_config().reset()
        assert densemat.get_default_layout() is Layout.ROW_MAJOR
        assert "DENSEMAT_LAYOUT" in caplog.text
