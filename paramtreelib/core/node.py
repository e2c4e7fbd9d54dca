"""Node types of the parameter tree.

TreeNode is intentionally kept simple - it's primarily a data container.
Navigation is delegated to a TreeAdapter, so the traversal strategies
work on any tree that can describe its children.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from .units import ParameterUnit


class TreeNode(ABC):
    """Abstract base class for nodes in the parameter tree.

    Every node carries an address: the unique integer handle the engine
    and the automation layer use to refer to it.
    """

    address: int
    path: Tuple[str, ...]

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique identifier for this node.

        This identifier must be:
        - Unique within the tree
        - Stable across multiple traversals
        - Suitable for use as a cache key

        Returns:
            str: Unique, stable identifier for this node
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node is a leaf (has no children)."""
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return basic metadata about this node.

        Returns:
            Dict[str, Any]: Metadata dictionary
        """
        pass

    @property
    def key(self) -> str:
        return self.path[-1] if self.path else ""

    def __str__(self) -> str:
        """String representation defaults to identifier."""
        return self.identifier()

    def __repr__(self) -> str:
        """Detailed representation for debugging."""
        return f"{self.__class__.__name__}(id={self.identifier()!r}, address={self.address:#x})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same address."""
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.address == other.address

    def __hash__(self) -> int:
        """Hash based on address for use in sets and dicts."""
        return hash(self.address)


class ParameterNode(TreeNode):
    """A leaf knob: numeric range, unit and dependency relationships.

    ``raw_dependents`` holds the dependency names exactly as the source
    wrote them. ``resolved_dependents`` stays empty until the dependency
    resolver fills it with the addresses of the nodes those names refer to.
    """

    def __init__(self,
                 path: Tuple[str, ...],
                 display_name: str,
                 address: int,
                 range: Tuple[float, float],
                 unit: ParameterUnit = ParameterUnit.GENERIC,
                 raw_dependents: Tuple[str, ...] = (),
                 default: float = 0.0,
                 separator: str = "."):
        self.path = tuple(path)
        self.display_name = display_name
        self.address = address
        self.range = range
        self.unit = unit
        self.raw_dependents = tuple(raw_dependents)
        self.resolved_dependents: List[int] = []
        self.default = default
        self._separator = separator

    @property
    def min(self) -> float:
        return self.range[0]

    @property
    def max(self) -> float:
        return self.range[1]

    @property
    def group_path(self) -> Tuple[str, ...]:
        """Path of the group that owns this parameter."""
        return self.path[:-1]

    def identifier(self) -> str:
        return self._separator.join(self.path)

    def is_leaf(self) -> bool:
        return True

    def metadata(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'name': self.display_name,
            'type': 'parameter',
            'address': self.address,
            'min': self.min,
            'max': self.max,
            'default': self.default,
            'unit': self.unit.name.lower(),
            'dependents': list(self.raw_dependents),
        }


class GroupNode(TreeNode):
    """A named container of parameters and nested groups.

    Both lists keep source enumeration order. Each child group is owned
    by exactly one parent.
    """

    def __init__(self,
                 path: Tuple[str, ...],
                 display_name: str,
                 address: int,
                 parameters: Optional[List[ParameterNode]] = None,
                 children: Optional[List['GroupNode']] = None,
                 separator: str = "."):
        self.path = tuple(path)
        self.display_name = display_name
        self.address = address
        self.parameters: List[ParameterNode] = parameters if parameters is not None else []
        self.children: List[GroupNode] = children if children is not None else []
        self._separator = separator
        self._root_key = ""

    @property
    def key(self) -> str:
        return self.path[-1] if self.path else self._root_key

    @property
    def is_root(self) -> bool:
        return not self.path

    def identifier(self) -> str:
        # The root has an empty path; its key keeps the identifier non-empty
        if self.is_root:
            return self._root_key
        return self._separator.join(self.path)

    def is_leaf(self) -> bool:
        return not self.parameters and not self.children

    def metadata(self) -> Dict[str, Any]:
        return {
            'key': self.key,
            'name': self.display_name,
            'type': 'group',
            'address': self.address,
            'parameter_count': len(self.parameters),
            'group_count': len(self.children),
        }

    @classmethod
    def root(cls, key: str, display_name: str, address: int, separator: str = ".") -> 'GroupNode':
        """Create the synthetic root group, which has an empty path."""
        node = cls((), display_name, address, separator=separator)
        node._root_key = key
        return node
