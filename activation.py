import math
from typing import Callable, Dict


def sigmoid(x: float) -> float:
    # evita overflow de math.exp para x muito negativo
    if x >= 0:
        return 1.0 / (1.0 + math.exp(-x))
    z = math.exp(x)
    return z / (1.0 + z)


def softsign(x: float) -> float:
    return x / (1.0 + abs(x))


def identity(x: float) -> float:
    return x


_ACTIVATIONS: Dict[str, Callable[[float], float]] = {
    'sigmoid': sigmoid,
    'softsign': softsign,
    'identity': identity,
}


def get_activation(name: str) -> Callable[[float], float]:
    key = name.lower()
    if key not in _ACTIVATIONS:
        raise ValueError('unknown activation')
    return _ACTIVATIONS[key]
