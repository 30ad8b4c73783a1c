"""
Feed-forward neural networks decoded from chromosomes.

A Network is an ordered list of Layers; a Layer is an ordered list of
Neurons; a Neuron holds one bias and one weight per input. Every neuron
applies a rectified linear activation, the output layer included:

    output_i = max(0, bias_i + sum_j(input_j * weight_ij))

Parameter order (shared by `from_weights` and `weights`):
    layer 1: neuron 1 bias, neuron 1 weights..., neuron 2 bias, ...
    layer 2: ...

Networks are immutable. When a chromosome changes, decode a new network.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Union

import numpy as np

from ..genetics.chromosome import Chromosome


@dataclass(frozen=True)
class LayerTopology:
    """Number of neurons in one layer (the first entry is the input size)."""
    neurons: int


Topology = Sequence[Union[int, LayerTopology]]


def layer_sizes(topology: Topology) -> List[int]:
    """
    Normalize a topology into a list of layer sizes.

    Raises:
        ValueError: If there are fewer than two layers or a size is not a
            positive integer
    """
    sizes = [
        layer.neurons if isinstance(layer, LayerTopology) else layer
        for layer in topology
    ]

    if len(sizes) < 2:
        raise ValueError(f"Topology needs at least 2 layers, got {len(sizes)}")
    for size in sizes:
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size < 1:
            raise ValueError(f"Layer sizes must be positive integers, got {size!r}")

    return [int(size) for size in sizes]


class Neuron:
    """A single rectified linear unit."""

    def __init__(self, bias: float, weights: Iterable[float]):
        weights = np.array(list(weights), dtype=np.float64)
        weights.flags.writeable = False

        self.bias = float(bias)
        self.weights = weights

    @property
    def input_size(self) -> int:
        return len(self.weights)

    @classmethod
    def random(cls, input_size: int, rng: np.random.Generator) -> 'Neuron':
        """Draw the bias, then each weight, uniformly from [-1, 1)."""
        bias = rng.uniform(-1.0, 1.0)
        weights = rng.uniform(-1.0, 1.0, size=input_size)
        return cls(bias, weights)

    @classmethod
    def from_weights(cls, input_size: int, weights: Iterator[float]) -> 'Neuron':
        """Consume the bias, then `input_size` weights, from an iterator."""
        try:
            bias = next(weights)
            neuron_weights = [next(weights) for _ in range(input_size)]
        except StopIteration:
            raise ValueError("Ran out of weights while building neuron") from None
        return cls(bias, neuron_weights)

    def parameters(self) -> np.ndarray:
        """Bias followed by weights."""
        return np.concatenate(([self.bias], self.weights))

    def propagate(self, inputs: np.ndarray) -> float:
        if len(inputs) != len(self.weights):
            raise ValueError(
                f"Expected {len(self.weights)} inputs, got {len(inputs)}"
            )
        return max(0.0, self.bias + float(np.dot(inputs, self.weights)))

    def __repr__(self) -> str:
        return f"Neuron(bias={self.bias:.3f}, inputs={self.input_size})"


class Layer:
    """An ordered group of neurons sharing the same inputs."""

    def __init__(self, neurons: Sequence[Neuron]):
        if not neurons:
            raise ValueError("A layer needs at least one neuron")
        input_sizes = {neuron.input_size for neuron in neurons}
        if len(input_sizes) != 1:
            raise ValueError(f"Neurons of a layer disagree on input size: {sorted(input_sizes)}")

        self.neurons = tuple(neurons)

    @property
    def input_size(self) -> int:
        return self.neurons[0].input_size

    @property
    def output_size(self) -> int:
        return len(self.neurons)

    @classmethod
    def random(cls, input_size: int, output_size: int, rng: np.random.Generator) -> 'Layer':
        return cls([Neuron.random(input_size, rng) for _ in range(output_size)])

    @classmethod
    def from_weights(cls, input_size: int, output_size: int, weights: Iterator[float]) -> 'Layer':
        return cls([Neuron.from_weights(input_size, weights) for _ in range(output_size)])

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([neuron.propagate(inputs) for neuron in self.neurons])

    def __repr__(self) -> str:
        return f"Layer({self.input_size} -> {self.output_size})"


class Network:
    """
    A feed-forward network of rectified linear layers.

    Build one with `Network.random` for a fresh random brain, or with
    `Network.from_chromosome` to decode an evolved genotype.
    """

    def __init__(self, layers: Sequence[Layer]):
        if not layers:
            raise ValueError("A network needs at least one layer")
        for previous, layer in zip(layers, layers[1:]):
            if previous.output_size != layer.input_size:
                raise ValueError(
                    f"Layer expects {layer.input_size} inputs but previous layer "
                    f"produces {previous.output_size}"
                )

        self.layers = tuple(layers)

    @property
    def topology(self) -> List[int]:
        """Layer sizes, input layer included."""
        return [self.layers[0].input_size] + [layer.output_size for layer in self.layers]

    @property
    def input_size(self) -> int:
        return self.layers[0].input_size

    @property
    def output_size(self) -> int:
        return self.layers[-1].output_size

    @staticmethod
    def parameter_count(topology: Topology) -> int:
        """
        Number of genes needed to encode a network with this topology.

        Each layer contributes neurons * inputs weights plus one bias per
        neuron.
        """
        sizes = layer_sizes(topology)
        return sum(
            n_out * n_in + n_out
            for n_in, n_out in zip(sizes, sizes[1:])
        )

    @classmethod
    def random(cls, topology: Topology, rng: np.random.Generator) -> 'Network':
        sizes = layer_sizes(topology)
        return cls([
            Layer.random(n_in, n_out, rng)
            for n_in, n_out in zip(sizes, sizes[1:])
        ])

    @classmethod
    def from_weights(cls, topology: Topology, weights: Iterable[float]) -> 'Network':
        """
        Decode a flat parameter sequence.

        Raises:
            ValueError: If the number of weights does not match the topology
        """
        sizes = layer_sizes(topology)
        weights = np.fromiter(weights, dtype=np.float64)

        expected = cls.parameter_count(sizes)
        if len(weights) != expected:
            raise ValueError(
                f"Topology {sizes} needs {expected} weights, got {len(weights)}"
            )

        remaining = iter(weights.tolist())
        return cls([
            Layer.from_weights(n_in, n_out, remaining)
            for n_in, n_out in zip(sizes, sizes[1:])
        ])

    @classmethod
    def from_chromosome(cls, topology: Topology, chromosome: Chromosome) -> 'Network':
        return cls.from_weights(topology, chromosome.genes)

    def weights(self) -> np.ndarray:
        """Flatten all parameters in decoding order."""
        return np.concatenate([
            neuron.parameters()
            for layer in self.layers
            for neuron in layer.neurons
        ])

    def to_chromosome(self) -> Chromosome:
        return Chromosome(self.weights())

    def propagate(self, inputs: Iterable[float]) -> np.ndarray:
        """
        Run a forward pass.

        Args:
            inputs: One value per input neuron

        Returns:
            Array with one value per output neuron (all >= 0)
        """
        outputs = np.asarray(list(inputs), dtype=np.float64)
        for layer in self.layers:
            outputs = layer.propagate(outputs)
        return outputs

    def __repr__(self) -> str:
        layers_str = '-'.join(str(size) for size in self.topology)
        return f"Network([{layers_str}], params={len(self.weights())})"
