import numpy as np
import pytest

from chromablend import UnitRGB, UnitRGBA


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def unit_rgba_samples(rng):
    """A handful of random unit-float RGBA colors (alpha strictly below 1)."""
    values = rng.random((16, 4), dtype=np.float32)
    values[:, 3] *= np.float32(0.9)
    return [UnitRGBA(tuple(row)) for row in values]


@pytest.fixture
def unit_rgb_samples(rng):
    values = rng.random((16, 3), dtype=np.float32)
    return [UnitRGB(tuple(row)) for row in values]
