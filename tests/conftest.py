import matplotlib

matplotlib.use('Agg')

import pytest

from fractal_clock import Bounds


@pytest.fixture
def square_bounds():
    return Bounds.from_size(600, 600)
