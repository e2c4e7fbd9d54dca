"""TreeAdapter abstraction for paramtreelib.

The TreeAdapter provides the navigation logic for a tree structure,
decoupling the node representation from the traversal mechanism. The
resolver, the exporter and the high-level API all walk built trees
through ParameterTreeAdapter.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, Optional

from .node import GroupNode, TreeNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a tree structure."""

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Args:
            node: The child node

        Returns:
            Parent TreeNode or None if node is root
        """
        pass

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth


class ParameterTreeAdapter(TreeAdapter):
    """Adapter for trees of GroupNode and ParameterNode.

    Children of a group are its parameters followed by its subgroups,
    each in source order. That is the order every consumer sees.
    """

    def __init__(self, root: GroupNode):
        """Initialize adapter for one built tree.

        Args:
            root: Root group of the tree
        """
        self.root = root
        self._parents: Dict[int, GroupNode] = {}
        self._index_parents(root)

    def _index_parents(self, group: GroupNode) -> None:
        stack = [group]
        while stack:
            current = stack.pop()
            for param in current.parameters:
                self._parents[param.address] = current
            for child in current.children:
                self._parents[child.address] = current
                stack.append(child)

    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        if not isinstance(node, GroupNode):
            return iter(())
        return iter([*node.parameters, *node.children])

    def get_parent(self, node: TreeNode) -> Optional[GroupNode]:
        return self._parents.get(node.address)

    def get_depth(self, node: TreeNode) -> int:
        """Depth is the path length; the root has an empty path."""
        return len(node.path)
