"""
Pytest configuration and shared fixtures for densemat tests.
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add src to path for imports
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root / "src"))

from densemat import Layout, Matrix, get_config


ALL_LAYOUTS = list(Layout)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def reset_config(monkeypatch):
    """Start every test from the row-major default and restore it afterwards."""
    monkeypatch.delenv("DENSEMAT_LAYOUT", raising=False)
    get_config().reset()
    yield
    get_config().reset()


@pytest.fixture(params=ALL_LAYOUTS, ids=lambda layout: layout.value)
def layout(request):
    """Run a test once per storage layout."""
    return request.param


@pytest.fixture
def reference_matrix(layout):
    """The 3x2 matrix used throughout the tests.

    Matrix:
    [[1, 0],
     [0, 1],
     [0, 0]]
    """
    return Matrix(3, 2, [1, 0, 0, 1, 0, 0], layout=layout)


@pytest.fixture
def random_elements():
    """Random 4x5 row-major entries."""
    rng = np.random.default_rng(42)
    return rng.standard_normal(20).tolist()

