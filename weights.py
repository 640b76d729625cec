import random
from typing import List, Optional


def random_weight(rng: Optional[random.Random] = None) -> float:
    source = random if rng is None else rng
    return source.uniform(-1.0, 1.0)


def initialize_weights(number_of_inputs: int, rng: Optional[random.Random] = None) -> List[float]:
    """Gera `number_of_inputs` pesos uniformes em (-1, 1).

    O `rng` é opcional para que os testes possam fixar a semente; sem ele usa o
    gerador global do módulo random.
    """
    if isinstance(number_of_inputs, bool) or not isinstance(number_of_inputs, int):
        raise ValueError("number_of_inputs must be an int")
    if number_of_inputs < 1:
        raise ValueError("number_of_inputs must be positive")
    return [random_weight(rng) for _ in range(number_of_inputs)]
