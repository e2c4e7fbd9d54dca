"""Two-pass tree construction: structure, dependency links, export."""

from .materializer import materialize_group, materialize_parameter
from .builder import PathIndex, TreeBuilder
from .resolver import DependencyResolver, ResolutionReport
from .exporter import ExportedGroup, ExportedParameter, ExportedTree, export_tree

__all__ = [
    'materialize_group',
    'materialize_parameter',
    'PathIndex',
    'TreeBuilder',
    'DependencyResolver',
    'ResolutionReport',
    'ExportedGroup',
    'ExportedParameter',
    'ExportedTree',
    'export_tree',
]
