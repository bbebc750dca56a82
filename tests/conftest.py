"""Shared fixtures for poissonvar tests."""

from __future__ import annotations

import numpy as np
import pytest

from poissonvar import matrix


@pytest.fixture
def rates():
    return [2, 4, 8, 16]


@pytest.fixture
def records():
    return [{"lambda": 2}, {"lambda": 4}, {"lambda": 8}, {"lambda": 16}]


@pytest.fixture
def nested_records():
    return [{"x": [9, 2]}, {"x": [9, 4]}, {"x": [9, 8]}, {"x": [9, 16]}]


@pytest.fixture
def ramp_matrix():
    """5x5 float64 matrix holding 0, 0.1, ..., 2.4 in row-major order."""
    return matrix((5, 5), data=np.arange(25) / 10, dtype="float64")
