# perceptra

Neural layers that feed their outputs forward and learn by
back-propagation, together with error functions, a threshold wrapper for
activation functions, a least-recently-used cache and a listener registry.

The package needs nothing beyond the Python standard library. It supports
Python 3.10 and later.

## Modules

### `perceptra.layer`

`NeuralLayer(neurons)` holds a fixed, non-empty list of neuron objects. It
raises `ValueError` if the list is empty or if any neuron has no inputs.

- `len(layer)`, `layer[i]` and `iter(layer)` give the neurons.
  `layer.inputs` is the input count of the first neuron.
- `set_input(input_id, value)` sets that input on every neuron.
- `calculate_outputs(next_layer=None)` first computes every neuron's dot
  product. It then calls each neuron's `calculate_output(dot_product,
  dot_products)` with the full list of dot products, so a softmax-like
  activation can see the whole layer. If `next_layer` is given, output `i`
  is passed to `next_layer.set_input(i, output)`.
- `get_output(i)` returns neuron `i`'s `output` attribute.
- `get_memento()` returns a frozen `LayerMemento` that holds the neurons'
  own mementos in order. `set_memento(memento)` restores them. It raises
  `ValueError` if the neuron count differs.

### `perceptra.bp_layer`

`BPNeuralLayer` is a `NeuralLayer` with training steps:

- `calculate_deltas(prototype, momentum)` is for an output layer.
  `prototype` is `(inputs, expected_outputs)`. Each neuron's
  `calculate_delta(expected, momentum)` is called with its target. It raises
  `ValueError` if there are fewer targets than neurons.
- `calculate_hidden_deltas(affected_layer, momentum)` is for a hidden layer.
  For neuron `i` it sums `delta * weight_of_input_i + delta * bias` over the
  neurons of the following layer. The new delta is
  `momentum(old_delta, sum * neuron.calculate_derivate())`. The same
  computation is available as the module function
  `calculate_hidden_deltas(current_layer, affected_layer, momentum)`.
- `calculate_weights(learning_rate)` sets each weight to
  `weight - learning_rate * input * delta` and each bias to
  `bias - learning_rate * delta`.
- `get_delta(i)` returns neuron `i`'s delta.

`momentum` is any callable `(old_delta, new_delta) -> delta`. Use
`lambda old, new: new` for no momentum.

### `perceptra.errors`

- `squared_error(outputs, expected)` is the sum of `(output - target) ** 2`.
- `cross_entropy_error(outputs, expected)` is `-sum(target * log(output))`.
  A zero output counts as `log(0) = -inf`. A negative output gives `nan`.

Both raise `ValueError` when the two sequences differ in length.

### `perceptra.threshold`

`Threshold(func, threshold)` wraps an activation-function object.
`threshold` is an integer percentage from 0 to 100. Values outside that
range raise `ValueError`.

- `calculate(total, dot_products)` returns `1.0` when
  `func.calculate(total, dot_products)` is strictly greater than
  `threshold / 100`, and `0.0` otherwise.
- `sum`, `delta` and `derivate` are passed straight to `func`.

### `perceptra.lru_cache`

`LRUCache(capacity)` is a bounded cache.

- A capacity of `0` is treated as `1`. A negative capacity raises
  `ValueError`.
- `read(key, creator, drop=None)` returns the cached value and marks it as
  most recently used. When the key is missing, it stores and returns
  `creator(key)`. If the cache is already full, it first evicts the least
  recently used entry and calls `drop(key, value)` on it.
- `clear(drop=None)` calls `drop(key, value)` on every entry, then empties
  the cache.
- `len(cache)` is the number of entries. Iterating yields `(key, value)`
  pairs from most to least recently used. `reversed(cache)` yields them in
  the opposite order.

### `perceptra.observable`

`Observable` keeps listeners by identity, so unhashable objects work too.

- `add_listener(listener)` returns `False` if the listener is already
  registered.
- `remove_listener(listener)` returns `False` if the listener was not
  registered.
- The `listeners` property returns a tuple snapshot of the registered
  listeners.

## What you provide

The package has no neuron or activation-function classes. There is also no
network type that chains layers, no training loop and no way to save
models. You supply the neuron objects.

A neuron used in a `NeuralLayer` needs:

- `output` and `bias` attributes;
- `len()`, and indexing that returns inputs with `value` and `weight`
  attributes;
- `set_input(i, value)` and `calc_dot_product()`;
- `calculate_output(dot_product, dot_products)`, which returns the output;
- `get_memento()` and `set_memento(memento)`.

A neuron used in a `BPNeuralLayer` also needs:

- a `delta` attribute;
- `calculate_derivate()`;
- `calculate_delta(expected, momentum)`.

## Example

```python
import math
from dataclasses import dataclass

from perceptra.bp_layer import BPNeuralLayer
from perceptra.errors import squared_error


@dataclass
class Input:
    value: float = 0.0
    weight: float = 0.5


class SigmoidNeuron:
    def __init__(self, inputs):
        self.inputs = [Input() for _ in range(inputs)]
        self.bias = 0.0
        self.output = 0.0
        self.delta = 0.0

    def __len__(self):
        return len(self.inputs)

    def __getitem__(self, index):
        return self.inputs[index]

    def set_input(self, input_id, value):
        self.inputs[input_id].value = value

    def calc_dot_product(self):
        return sum(i.value * i.weight for i in self.inputs) + self.bias

    def calculate_output(self, dot_product, dot_products):
        self.output = 1.0 / (1.0 + math.exp(-dot_product))
        return self.output

    def calculate_derivate(self):
        return self.output * (1.0 - self.output)

    def calculate_delta(self, expected, momentum):
        new = (self.output - expected) * self.calculate_derivate()
        self.delta = momentum(self.delta, new)

    def get_memento(self):
        return tuple(i.weight for i in self.inputs), self.bias

    def set_memento(self, memento):
        weights, self.bias = memento
        for inp, weight in zip(self.inputs, weights):
            inp.weight = weight


layer = BPNeuralLayer(SigmoidNeuron(2) for _ in range(2))
prototype = ([0.5, 0.3], [1.0, 1.0])
for input_id, value in enumerate(prototype[0]):
    layer.set_input(input_id, value)

for _ in range(100):
    layer.calculate_outputs()
    layer.calculate_deltas(prototype, lambda old, new: new)
    layer.calculate_weights(0.5)

layer.calculate_outputs()
print(squared_error([n.output for n in layer], prototype[1]))
```

The LRU cache:

```python
from perceptra.lru_cache import LRUCache

cache = LRUCache(2)
cache.read("a", str.upper)   # "A", created
cache.read("b", str.upper)   # "B", created
cache.read("a", str.upper)   # "A", from the cache
cache.read("c", str.upper, lambda key, value: print("dropped", key))
# prints: dropped b
list(cache)                  # [("c", "C"), ("a", "A")]
```

## Install and test

```
pip install .
pip install .[test]
pytest
```