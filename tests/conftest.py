import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.fixture
def unit_square():
    """Unit square corners plus its centre."""
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0), (0.5, 0.5)]


@pytest.fixture
def square_hull():
    return [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.fixture
def triangle():
    # listed clockwise on purpose
    return [(0.0, 0.0), (2.0, 3.0), (4.0, 0.0)]


@pytest.fixture
def random_points():
    rng = np.random.RandomState(1234)
    return rng.uniform(-100, 100, size=(100, 2))


@pytest.fixture
def circle_points():
    angles = np.linspace(0, 2 * np.pi, 360, endpoint=False)
    rng = np.random.RandomState(7)
    rng.shuffle(angles)
    return np.column_stack([100 * np.cos(angles), 100 * np.sin(angles)])
