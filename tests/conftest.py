import random

import pytest

from activation import sigmoid
from unit import Unit


@pytest.fixture
def preset_unit():
    return Unit(sigmoid, 0.25, weights=[0.05, 0.05], bias_weight=0)


@pytest.fixture
def seeded_rng():
    return random.Random(1234)
