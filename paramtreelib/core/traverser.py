"""Tree traversal strategies for paramtreelib.

Traversers walk a built parameter tree through a TreeAdapter. Every group
is owned by exactly one parent, so a walk never meets a node twice and
needs no cycle bookkeeping. Within a group the adapter decides the order;
ParameterTreeAdapter yields parameters before subgroups, which is the
order the engine enumerates them in.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, Iterator, Optional, Tuple

from .adapter import TreeAdapter
from .node import ParameterNode, TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: TreeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def parameters(self,
                   root: TreeNode,
                   max_depth: Optional[int] = None) -> Iterator[ParameterNode]:
        """Yield only the parameters, in this strategy's order.

        Groups are still walked, so their parameters are reached, but
        never yielded.
        """
        for node, _ in self.traverse(root, max_depth=max_depth):
            if isinstance(node, ParameterNode):
                yield node

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first traversal.

    Yields every node at depth N before any node at depth N+1: all
    top-level parameters and groups first, then their contents.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        queue: Deque[Tuple[TreeNode, int]] = deque([(root, 0)])

        while queue:
            node, depth = queue.popleft()

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth) and not node.is_leaf():
                queue.extend((child, depth + 1) for child in self.adapter.get_children(node))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal.

    Yields a group, then its parameters, then each subgroup in full. This
    matches the source's own enumeration order and is what the resolver
    and the high-level API use by default.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if self._should_yield(0, min_depth, max_depth):
            yield (root, 0)

        if self._should_explore(0, max_depth) and not root.is_leaf():
            for child in self.adapter.get_children(root):
                for node, depth in self.traverse(child, _shift(max_depth), min_depth - 1):
                    yield (node, depth + 1)


class DepthFirstPostOrderTraverser(TreeTraverser):
    """Depth-first post-order traversal.

    Yields a group after everything below it, so a consumer building
    immutable copies (the exporter) always has a group's children ready.
    """

    def traverse(self,
                 root: TreeNode,
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
        if self._should_explore(0, max_depth) and not root.is_leaf():
            for child in self.adapter.get_children(root):
                for node, depth in self.traverse(child, _shift(max_depth), min_depth - 1):
                    yield (node, depth + 1)

        if self._should_yield(0, min_depth, max_depth):
            yield (root, 0)


def _shift(max_depth: Optional[int]) -> Optional[int]:
    return None if max_depth is None else max_depth - 1


def create_traverser(strategy: str, adapter: TreeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre, dfs_post)
        adapter: TreeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs': DepthFirstPreOrderTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
        'dfs_post': DepthFirstPostOrderTraverser,
        'depth_first_post': DepthFirstPostOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
