"""paramtreelib - Parameter tree construction for audio engines.

paramtreelib walks an engine's cursor-based "first/next" parameter
enumeration, rebuilds the hierarchy of groups and parameters, resolves
each parameter's dependency names into addresses, and publishes an
immutable tree for UI and automation layers.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from paramtreelib import build_parameter_tree

    tree = build_parameter_tree(source)
    cutoff = tree.find("filter.cutoff")
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.units import ParameterUnit
from .core.node import TreeNode, ParameterNode, GroupNode
from .core.adapter import TreeAdapter, ParameterTreeAdapter
from .core.traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
)

# Sources
from .adapters.protocol import (
    SENTINEL,
    ROOT_ADDRESS,
    GroupRecord,
    ParameterRecord,
    ParameterSource,
)
from .adapters.enumeration import iter_groups, iter_parameters
from .adapters.memory import Parameter, ParameterSet

# Build pipeline
from .build.builder import PathIndex, TreeBuilder
from .build.resolver import DependencyResolver, ResolutionReport
from .build.exporter import ExportedGroup, ExportedParameter, ExportedTree, export_tree

# Configuration and errors
from .config import BuildConfig
from .errors import (
    ParamTreeError,
    ConfigurationError,
    CapacityError,
    TreeBuildError,
    InconsistentSourceError,
    EnumerationOverflowError,
)

# High-level API
from .api import (
    build_parameter_tree,
    build_and_resolve,
    traverse_parameters,
    collect_tree_data,
    find_node,
    get_tree_stats,
)

__all__ = [
    '__version__',
    # Core
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
    # Sources
    'SENTINEL',
    'ROOT_ADDRESS',
    'GroupRecord',
    'ParameterRecord',
    'ParameterSource',
    'iter_groups',
    'iter_parameters',
    'Parameter',
    'ParameterSet',
    # Build
    'PathIndex',
    'TreeBuilder',
    'DependencyResolver',
    'ResolutionReport',
    'ExportedGroup',
    'ExportedParameter',
    'ExportedTree',
    'export_tree',
    # Config / errors
    'BuildConfig',
    'ParamTreeError',
    'ConfigurationError',
    'CapacityError',
    'TreeBuildError',
    'InconsistentSourceError',
    'EnumerationOverflowError',
    # API
    'build_parameter_tree',
    'build_and_resolve',
    'traverse_parameters',
    'collect_tree_data',
    'find_node',
    'get_tree_stats',
]
