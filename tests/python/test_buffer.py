"""
Tests for Buffer class.
"""

import pytest

from densemat._buffer import Buffer


class TestBufferCreation:
    """Test Buffer creation methods."""

    def test_buffer_is_zero_filled(self):
        buf = Buffer(4)
        assert len(buf) == 4
        assert buf.nbytes == 32
        assert buf.tolist() == [0.0, 0.0, 0.0, 0.0]

    def test_buffer_from_list(self):
        data = [1.5, 2.0, -3.25, 4.0]
        buf = Buffer.from_list(data)
        assert len(buf) == 4
        assert buf.tolist() == data

    def test_buffer_from_list_converts_ints(self):
        buf = Buffer.from_list([1, 2, 3])
        assert all(type(v) is float for v in buf.tolist())

    def test_buffer_from_list_copies(self):
        data = [1.0, 2.0]
        buf = Buffer.from_list(data)
        data[0] = 100.0
        assert buf[0] == 1.0

    def test_buffer_negative_size(self):
        with pytest.raises(ValueError):
            Buffer(-1)


class TestBufferIndexing:
    """Test Buffer indexing and assignment."""

    def test_buffer_getitem_setitem(self):
        buf = Buffer(5)
        buf[0] = 1.5
        buf[4] = 2.5
        assert buf[0] == 1.5
        assert buf[4] == 2.5
        assert buf[1] == 0.0

    @pytest.mark.parametrize("idx", [3, -1, -4])
    def test_buffer_index_bounds(self, idx):
        buf = Buffer(3)
        with pytest.raises(IndexError):
            buf[idx]
        with pytest.raises(IndexError):
            buf[idx] = 1.0


class TestBufferOperations:
    """Test copy and in-place addition."""

    def test_buffer_copy_is_deep(self):
        buf = Buffer.from_list([1.0, 2.0, 3.0])
        clone = buf.copy()
        clone[0] = 100.0
        assert buf.tolist() == [1.0, 2.0, 3.0]
        assert clone.tolist() == [100.0, 2.0, 3.0]

    def test_buffer_iadd(self):
        buf = Buffer.from_list([1.0, 2.0, 3.0])
        other = Buffer.from_list([0.5, 0.5, -3.0])
        buf.iadd(other)
        assert buf.tolist() == [1.5, 2.5, 0.0]
        assert other.tolist() == [0.5, 0.5, -3.0]

    def test_buffer_iadd_self(self):
        buf = Buffer.from_list([1.0, 2.0])
        buf.iadd(buf)
        assert buf.tolist() == [2.0, 4.0]

    def test_buffer_iadd_size_mismatch(self):
        with pytest.raises(ValueError):
            Buffer(2).iadd(Buffer(3))

    def test_buffer_tolist_is_fresh(self):
        buf = Buffer.from_list([1.0, 2.0])
        values = buf.tolist()
        values[0] = 5.0
        assert buf[0] == 1.0
