"""A layer of neurons that feeds its outputs forward."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Protocol

__all__ = ["LayerMemento", "NeuralLayer"]


class _Input(Protocol):
    value: float
    weight: float


class _Neuron(Protocol):
    """What a layer expects from each of its neurons."""

    output: float
    bias: float

    def __len__(self) -> int: ...

    def __getitem__(self, index: int) -> _Input: ...

    def set_input(self, input_id: int, value: float) -> None: ...

    def calc_dot_product(self) -> float: ...

    def calculate_output(self, dot_product: float, dot_products: Sequence[float]) -> float: ...

    def get_memento(self) -> Any: ...

    def set_memento(self, memento: Any) -> None: ...


class _InputReceiver(Protocol):
    def set_input(self, input_id: int, value: float) -> None: ...


@dataclass(frozen=True)
class LayerMemento:
    """Saved state of every neuron in a layer, in neuron order."""

    neurons: tuple[Any, ...]


class NeuralLayer:
    """A fixed group of neurons that share the same inputs.

    Every neuron receives each input set on the layer. When outputs are
    calculated, all dot products are computed first so that activation
    functions such as softmax can see the whole layer.
    """

    def __init__(self, neurons: Iterable[_Neuron]) -> None:
        self._neurons: list[_Neuron] = list(neurons)
        if not self._neurons:
            raise ValueError("a layer needs at least one neuron")
        if any(len(neuron) < 1 for neuron in self._neurons):
            raise ValueError("every neuron needs at least one input")

    @property
    def inputs(self) -> int:
        """Number of inputs of each neuron."""
        return len(self._neurons[0])

    def __len__(self) -> int:
        return len(self._neurons)

    def __getitem__(self, index: int) -> _Neuron:
        return self._neurons[index]

    def __iter__(self) -> Iterator[_Neuron]:
        return iter(self._neurons)

    def get_output(self, output_id: int) -> float:
        """Return the last calculated output of neuron ``output_id``."""
        return self._neurons[output_id].output

    def set_input(self, input_id: int, value: float) -> None:
        """Set input ``input_id`` of every neuron to ``value``."""
        for neuron in self._neurons:
            neuron.set_input(input_id, value)

    def get_memento(self) -> LayerMemento:
        """Capture the state of every neuron."""
        return LayerMemento(tuple(neuron.get_memento() for neuron in self._neurons))

    def set_memento(self, memento: LayerMemento) -> None:
        """Restore the state captured by :meth:`get_memento`."""
        if len(memento.neurons) != len(self._neurons):
            raise ValueError(
                f"memento holds {len(memento.neurons)} neurons, layer has {len(self._neurons)}"
            )
        for neuron, state in zip(self._neurons, memento.neurons):
            neuron.set_memento(state)

    def calculate_outputs(self, next_layer: Optional[_InputReceiver] = None) -> None:
        """Calculate every neuron's output, feeding it to ``next_layer`` if given."""
        dot_products = [neuron.calc_dot_product() for neuron in self._neurons]
        for input_id, (neuron, dot_product) in enumerate(zip(self._neurons, dot_products)):
            output = neuron.calculate_output(dot_product, dot_products)
            if next_layer is not None:
                next_layer.set_input(input_id, output)