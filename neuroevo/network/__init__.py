"""Feed-forward networks used as the phenotype of a chromosome."""

from .network import LayerTopology, Neuron, Layer, Network, layer_sizes

__all__ = [
    'LayerTopology',
    'Neuron',
    'Layer',
    'Network',
    'layer_sizes',
]
