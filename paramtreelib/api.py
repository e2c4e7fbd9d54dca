"""High-level API for paramtreelib.

This module provides simple, functional interfaces for the common cases:
building a published tree from a source, and walking or inspecting a
built tree. They wrap the TreeBuilder / DependencyResolver / exporter
pipeline for ease of use.
"""

import logging
from dataclasses import replace
from typing import Any, Dict, Iterator, Optional, Tuple, Union

from .adapters.protocol import ParameterSource
from .build.builder import TreeBuilder
from .build.exporter import ExportedTree, export_tree
from .build.resolver import DependencyResolver, ResolutionReport
from .config import BuildConfig
from .core.adapter import ParameterTreeAdapter
from .core.collector import DataCollector, create_collector
from .core.node import GroupNode, ParameterNode, TreeNode
from .core.traverser import create_traverser
from .errors import TreeBuildError

logger = logging.getLogger(__name__)


def build_and_resolve(
    source: ParameterSource,
    config: Optional[BuildConfig] = None,
) -> Tuple[GroupNode, ResolutionReport]:
    """Run both build passes and return the internal tree.

    The path index built by the structural pass is handed to the resolver
    and dropped when this function returns.

    Args:
        source: Parameter source to enumerate
        config: Build configuration

    Returns:
        Tuple of (root group, resolution report)

    Raises:
        TreeBuildError: If the source is inconsistent or never terminates
    """
    config = config or BuildConfig()
    builder = TreeBuilder(source, config)
    try:
        root = builder.build()
    except TreeBuildError as e:
        logger.error("Parameter tree build failed: %s", e)
        raise

    report = DependencyResolver(builder.index, config).resolve(root)
    logger.info(
        "Built parameter tree: %d group(s), %d parameter(s), %d dependency link(s), %d unresolved",
        builder.group_count, builder.parameter_count, report.resolved, len(report.unresolved),
    )
    return root, report


def build_parameter_tree(
    source: ParameterSource,
    config: Optional[BuildConfig] = None,
    **kwargs
) -> ExportedTree:
    """Build, resolve and export the parameter tree of a source.

    This is the primary entry point. The returned tree is immutable and
    can be handed to any number of readers.

    Args:
        source: Parameter source to enumerate
        config: Build configuration
        **kwargs: Overrides for individual BuildConfig fields

    Returns:
        ExportedTree

    Example:
        >>> tree = build_parameter_tree(engine_params)
        >>> cutoff = tree.find("filter.cutoff")
        >>> [tree[a].key for a in cutoff.dependents]
    """
    config = config or BuildConfig()
    if kwargs:
        config = replace(config, **kwargs)

    root, _ = build_and_resolve(source, config)
    return export_tree(root, separator=config.separator)


def traverse_parameters(
    root: GroupNode,
    strategy: str = "dfs_pre",
) -> Iterator[ParameterNode]:
    """Yield every parameter of a built tree.

    Args:
        root: Root group
        strategy: Traversal strategy (bfs, dfs_pre, dfs_post)

    Yields:
        ParameterNode instances
    """
    traverser = create_traverser(strategy, ParameterTreeAdapter(root))
    yield from traverser.parameters(root)


def collect_tree_data(
    root: GroupNode,
    collector: Union[str, DataCollector] = "address",
    strategy: str = "dfs_pre",
    max_depth: Optional[int] = None,
) -> Iterator[Tuple[TreeNode, Any]]:
    """Traverse a built tree and collect data from each node.

    Args:
        root: Root group
        collector: Collector name (address, name, metadata, node) or instance
        strategy: Traversal strategy
        max_depth: Maximum depth to traverse

    Yields:
        Tuples of (node, collected_data)
    """
    adapter = ParameterTreeAdapter(root)
    if isinstance(collector, str):
        collector = create_collector(collector, adapter)

    traverser = create_traverser(strategy, adapter)
    for node, depth in traverser.traverse(root, max_depth=max_depth):
        yield node, collector.collect(node, depth)


def find_node(
    root: GroupNode,
    qualified_name: str,
    separator: str = ".",
) -> Optional[TreeNode]:
    """Find a node of a built tree by its qualified name.

    Args:
        root: Root group
        qualified_name: Separator-joined path, e.g. ``"filter.cutoff"``
        separator: Path separator

    Returns:
        The node or None
    """
    segments = [part for part in qualified_name.split(separator) if part]
    group: GroupNode = root
    for position, segment in enumerate(segments):
        last = position == len(segments) - 1
        if last:
            for param in group.parameters:
                if param.key == segment:
                    return param
        child = next((g for g in group.children if g.key == segment), None)
        if child is None:
            return None
        group = child
    return group


def get_tree_stats(root: GroupNode) -> Dict[str, Any]:
    """Get statistics about a built tree.

    Args:
        root: Root group

    Returns:
        Dictionary with tree statistics
    """
    stats = {
        'groups': 0,
        'parameters': 0,
        'declared_dependencies': 0,
        'resolved_dependencies': 0,
        'max_depth': 0,
        'units': {},
    }

    traverser = create_traverser("dfs_pre", ParameterTreeAdapter(root))
    for node, depth in traverser.traverse(root):
        stats['max_depth'] = max(stats['max_depth'], depth)
        if isinstance(node, ParameterNode):
            stats['parameters'] += 1
            stats['declared_dependencies'] += len(node.raw_dependents)
            stats['resolved_dependencies'] += len(node.resolved_dependents)
            unit = node.unit.name.lower()
            stats['units'][unit] = stats['units'].get(unit, 0) + 1
        elif node is not root:
            stats['groups'] += 1

    stats['unresolved_dependencies'] = (
        stats['declared_dependencies'] - stats['resolved_dependencies']
    )
    return stats
