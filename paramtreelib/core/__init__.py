"""Core abstractions: nodes, units, adapters, traversers and collectors."""

from .units import ParameterUnit
from .node import TreeNode, ParameterNode, GroupNode
from .adapter import TreeAdapter, ParameterTreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    create_traverser,
)
from .collector import (
    DataCollector,
    AddressCollector,
    QualifiedNameCollector,
    MetadataCollector,
    FullNodeCollector,
    CustomCollector,
    create_collector,
)

__all__ = [
    'ParameterUnit',
    'TreeNode',
    'ParameterNode',
    'GroupNode',
    'TreeAdapter',
    'ParameterTreeAdapter',
    'TreeTraverser',
    'BreadthFirstTraverser',
    'DepthFirstPreOrderTraverser',
    'DepthFirstPostOrderTraverser',
    'create_traverser',
    'DataCollector',
    'AddressCollector',
    'QualifiedNameCollector',
    'MetadataCollector',
    'FullNodeCollector',
    'CustomCollector',
    'create_collector',
]
