"""Back-propagation training on top of a neural layer."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any

from perceptra.layer import NeuralLayer

__all__ = ["BPNeuralLayer", "calculate_hidden_deltas"]

Momentum = Callable[[float, float], float]


def calculate_hidden_deltas(
    current_layer: Iterable[Any], affected_layer: Iterable[Any], momentum: Momentum
) -> None:
    """Propagate the deltas of ``affected_layer`` back into ``current_layer``.

    Neuron ``i`` of the current layer feeds input ``i`` of every affected
    neuron; its new delta is ``momentum(old_delta, sum * derivative)``.
    """
    affected = list(affected_layer)
    for index, neuron in enumerate(current_layer):
        total = 0.0
        for other in affected:
            total += other.delta * other[index].weight
            total += other.delta * other.bias
        neuron.delta = momentum(neuron.delta, total * neuron.calculate_derivate())


class BPNeuralLayer(NeuralLayer):
    """A neural layer whose neurons can be trained by back-propagation.

    Besides what :class:`NeuralLayer` needs, each neuron carries a mutable
    ``delta`` and provides ``calculate_delta(expected, momentum)`` and
    ``calculate_derivate()``.
    """

    def calculate_deltas(self, prototype: Sequence[Sequence[float]], momentum: Momentum) -> None:
        """Calculate output-layer deltas from ``prototype = (inputs, expected)``."""
        expected = prototype[1]
        if len(expected) < len(self):
            raise ValueError(
                f"prototype has {len(expected)} expected values, layer has {len(self)} neurons"
            )
        for neuron, target in zip(self, expected):
            neuron.calculate_delta(target, momentum)

    def calculate_hidden_deltas(self, affected_layer: Iterable[Any], momentum: Momentum) -> None:
        """Calculate this hidden layer's deltas from the layer it feeds."""
        calculate_hidden_deltas(self, affected_layer, momentum)

    def calculate_weights(self, learning_rate: float) -> None:
        """Move every weight and bias against its gradient."""
        for neuron in self:
            delta = neuron.delta
            for index in range(len(neuron)):
                inp = neuron[index]
                inp.weight = inp.weight - learning_rate * inp.value * delta
            neuron.bias = neuron.bias - learning_rate * delta

    def get_delta(self, neuron_id: int) -> float:
        """Return the current delta of neuron ``neuron_id``."""
        return self[neuron_id].delta