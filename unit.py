import logging
import numbers
import random
import threading
import uuid
from collections.abc import Sequence
from typing import Callable, List, Optional, Tuple

from errors import InvalidConfig, ShapeMismatch, StaleState
from weights import initialize_weights, random_weight

logger = logging.getLogger(__name__)


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _is_sequence(value) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


class Unit:
    """Unidade treinável tipo perceptron.

    Guarda um vetor de pesos de tamanho fixo N e um peso de bias. O bias é o
    peso de uma entrada implícita de valor -1: é subtraído no compute e
    atualizado como `bias - lr * delta`.

    Dois modos de construção:
        preset: `weights` e `bias_weight` informados
        random: `number_of_inputs` informado; pesos e bias sorteados em (-1, 1)
                a partir de `rng` (um random.Random)

    Todas as operações passam pelo mesmo lock, então uma unidade atende um
    pedido por vez e nunca expõe um vetor de pesos pela metade.
    """

    def __init__(
        self,
        activation_function: Callable[[float], float],
        learning_rate: float,
        weights: Optional[Sequence] = None,
        bias_weight: Optional[float] = None,
        number_of_inputs: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ):
        if not callable(activation_function):
            raise InvalidConfig("activation_function must be callable")
        if not _is_number(learning_rate) or learning_rate < 0:
            raise InvalidConfig("learning_rate must be a non-negative number")

        if weights is not None and number_of_inputs is not None:
            raise InvalidConfig("give either weights or number_of_inputs, not both")
        if weights is not None:
            initial_weights, initial_bias = self._preset(weights, bias_weight)
            mode = 'preset'
        elif number_of_inputs is not None:
            if bias_weight is not None:
                raise InvalidConfig("bias_weight requires preset weights")
            rng = random.Random() if rng is None else rng
            try:
                initial_weights = initialize_weights(number_of_inputs, rng)
            except ValueError as e:
                raise InvalidConfig(str(e)) from e
            initial_bias = random_weight(rng)
            mode = 'random'
        else:
            raise InvalidConfig("missing weights or number_of_inputs")

        self.id = str(uuid.uuid4())
        self._lock = threading.Lock()
        self._activation_fn = activation_function
        self._learning_rate = float(learning_rate)
        self._weights: List[float] = initial_weights
        self._bias_weight: float = initial_bias
        # last_inputs/last_output sempre vêm do mesmo compute()
        self._last_inputs: List[float] = []
        self._last_output: Optional[float] = None
        logger.debug("unit %s created (%s, inputs=%d)", self.id[:4], mode, len(initial_weights))

    @staticmethod
    def _preset(weights, bias_weight) -> Tuple[List[float], float]:
        if not _is_sequence(weights):
            raise InvalidConfig("weights must be a sequence")
        if len(weights) == 0:
            raise InvalidConfig("weights must not be empty")
        if not all(_is_number(w) for w in weights):
            raise InvalidConfig("weights must be numeric")
        if not _is_number(bias_weight):
            raise InvalidConfig("bias_weight must be numeric")
        # copia para não compartilhar a lista do chamador
        return list(weights), bias_weight

    # -------- operações --------
    def compute(self, inputs: Sequence) -> float:
        with self._lock:
            if not _is_sequence(inputs) or len(inputs) != len(self._weights):
                raise ShapeMismatch("input size mismatch")
            weighted_sum = 0
            for value, weight in zip(inputs, self._weights):
                weighted_sum += value * weight
            result = self._activation_fn(weighted_sum + self._bias_weight * -1)
            self._last_inputs = list(inputs)
            self._last_output = result
            return result

    def update_from_error(self, delta: float) -> Tuple[float, List[float]]:
        """Regra delta: w += lr * delta * x, com x = -1 para o bias.

        Retorna (delta, novos_pesos); o bias é atualizado mas não retornado.
        """
        with self._lock:
            return self._apply_delta(delta)

    def update_from_expected_output(self, expected_output: float) -> Tuple[float, List[float]]:
        """Deriva o delta supondo ativação sigmoide (saída em (0, 1)) e atualiza.

        A suposição não é verificada: com outra ativação o gradiente não faz sentido.
        """
        with self._lock:
            if self._last_output is None:
                raise StaleState("call compute first")
            o = self._last_output
            delta = o * (1 - o) * (expected_output - o)
            return self._apply_delta(delta)

    def _apply_delta(self, delta: float) -> Tuple[float, List[float]]:
        # chamado com o lock já adquirido
        if len(self._last_inputs) != len(self._weights):
            raise StaleState("call compute first")
        lr = self._learning_rate
        new_weights = [w + lr * delta * x for w, x in zip(self._weights, self._last_inputs)]
        new_bias = self._bias_weight + lr * delta * -1
        self._weights = new_weights
        self._bias_weight = new_bias
        logger.debug("unit %s updated (delta=%r)", self.id[:4], delta)
        return delta, list(new_weights)

    # -------- leitura --------
    @property
    def number_of_inputs(self) -> int:
        return len(self._weights)

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @property
    def weights(self) -> List[float]:
        with self._lock:
            return list(self._weights)

    @property
    def bias_weight(self) -> float:
        with self._lock:
            return self._bias_weight

    @property
    def last_inputs(self) -> List[float]:
        with self._lock:
            return list(self._last_inputs)

    @property
    def last_output(self) -> Optional[float]:
        with self._lock:
            return self._last_output

    def summary(self) -> str:
        with self._lock:
            parts = [f"inputs:{len(self._weights)}", f"lr:{self._learning_rate}", f"bias:{self._bias_weight:.3f}"]
            if self._last_output is not None:
                parts.append(f"last_output:{self._last_output:.4f}")
        return " | ".join(parts)

    def __len__(self) -> int:
        return len(self._weights)

    def __repr__(self) -> str:
        return f"Unit({self.id[:4]}, inputs={len(self._weights)}, bias={self._bias_weight:.3f})"
