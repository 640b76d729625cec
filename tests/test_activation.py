import math

import pytest

from activation import get_activation, identity, sigmoid, softsign


def test_sigmoid_values():
    assert sigmoid(0) == 0.5
    assert sigmoid(0.1) == pytest.approx(0.52497918747894)
    assert sigmoid(-0.1) == pytest.approx(1 - 0.52497918747894)


def test_sigmoid_large_inputs_do_not_overflow():
    assert sigmoid(1000) == 1.0
    assert sigmoid(-1000) == 0.0
    assert not math.isnan(sigmoid(-745.5))


def test_softsign_and_identity():
    assert softsign(1) == 0.5
    assert softsign(-3) == -0.75
    assert identity(2.5) == 2.5


def test_get_activation():
    assert get_activation('Sigmoid') is sigmoid
    assert get_activation('softsign') is softsign
    assert get_activation('identity') is identity
    with pytest.raises(ValueError):
        get_activation('tanh')
