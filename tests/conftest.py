"""Shared fixtures for the simulator test suite."""

import numpy as np
import pytest

from models.competitor import Competitor


@pytest.fixture
def rng():
    return np.random.default_rng(12345)


@pytest.fixture
def favourite():
    return Competitor(id=1, rating=1600.0)


@pytest.fixture
def underdog():
    return Competitor(id=2, rating=1200.0)


@pytest.fixture
def roster_of():
    """Factory for rosters of n competitors with ids 1..n and spread ratings."""
    def _make(n, base=1200.0, step=10.0):
        return [Competitor(id=i, rating=base + step * i) for i in range(1, n + 1)]
    return _make
