"""Tree exporter.

Flattens the internal tree into the immutable structure UI and automation
layers consume. Every level keeps source enumeration order: a group's
children are its parameters followed by its subgroups.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple, Union

from ..core.adapter import ParameterTreeAdapter
from ..core.node import GroupNode, ParameterNode
from ..core.traverser import DepthFirstPostOrderTraverser
from ..core.units import ParameterUnit


@dataclass(frozen=True)
class ExportedParameter:
    """Read-only view of one resolved parameter."""
    key: str
    display_name: str
    path: Tuple[str, ...]
    address: int
    min: float
    max: float
    default: float
    unit: ParameterUnit
    dependents: Tuple[int, ...] = ()

    @property
    def range(self) -> Tuple[float, float]:
        return (self.min, self.max)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'parameter',
            'key': self.key,
            'name': self.display_name,
            'address': self.address,
            'min': self.min,
            'max': self.max,
            'default': self.default,
            'unit': self.unit.name.lower(),
            'dependents': list(self.dependents),
        }


@dataclass(frozen=True)
class ExportedGroup:
    """Read-only view of one group and everything below it."""
    key: str
    display_name: str
    path: Tuple[str, ...]
    address: int
    parameters: Tuple[ExportedParameter, ...] = ()
    groups: Tuple['ExportedGroup', ...] = ()

    @property
    def children(self) -> Tuple[Union[ExportedParameter, 'ExportedGroup'], ...]:
        """Parameters followed by subgroups, in source order."""
        return self.parameters + self.groups

    def to_dict(self) -> Dict[str, Any]:
        return {
            'type': 'group',
            'key': self.key,
            'name': self.display_name,
            'address': self.address,
            'children': [child.to_dict() for child in self.children],
        }


ExportedNode = Union[ExportedParameter, ExportedGroup]


@dataclass(frozen=True)
class ExportedTree:
    """The published parameter tree.

    Safe to share between any number of readers: nothing in it can be
    mutated after export.
    """
    root: ExportedGroup
    separator: str = "."
    by_address: Mapping[int, ExportedNode] = field(
        default_factory=lambda: MappingProxyType({}), compare=False, repr=False
    )

    @property
    def children(self) -> Tuple[ExportedNode, ...]:
        return self.root.children

    def __getitem__(self, address: int) -> ExportedNode:
        return self.by_address[address]

    def __contains__(self, address: object) -> bool:
        return address in self.by_address

    def __len__(self) -> int:
        """Number of nodes, the root group included."""
        return len(self.by_address)

    def parameters(self) -> Tuple[ExportedParameter, ...]:
        """All parameters, in depth-first source order."""
        found = []
        stack = [self.root]
        while stack:
            group = stack.pop()
            found.extend(group.parameters)
            stack.extend(reversed(group.groups))
        return tuple(found)

    def find(self, qualified_name: str) -> Optional[ExportedNode]:
        """Look a node up by its separator-joined path."""
        segments = [part for part in qualified_name.split(self.separator) if part]
        node: ExportedNode = self.root
        for segment in segments:
            if not isinstance(node, ExportedGroup):
                return None
            node = next((child for child in node.children if child.key == segment), None)
            if node is None:
                return None
        return node

    def dependents_of(self, address: int) -> Tuple[ExportedNode, ...]:
        """Nodes affected when the parameter at ``address`` changes."""
        node = self.by_address[address]
        if not isinstance(node, ExportedParameter):
            return ()
        return tuple(self.by_address[dep] for dep in node.dependents if dep in self.by_address)

    def to_dict(self) -> Dict[str, Any]:
        return self.root.to_dict()


def export_tree(root: GroupNode, separator: str = ".") -> ExportedTree:
    """Export a built and resolved tree.

    Args:
        root: Root group, after dependency resolution
        separator: Separator used by ExportedTree.find

    Returns:
        Immutable ExportedTree
    """
    adapter = ParameterTreeAdapter(root)
    exported: Dict[int, ExportedNode] = {}

    # Post-order: every child is exported before its group needs it
    for node, _ in DepthFirstPostOrderTraverser(adapter).traverse(root):
        if isinstance(node, ParameterNode):
            exported[node.address] = ExportedParameter(
                key=node.key,
                display_name=node.display_name,
                path=node.path,
                address=node.address,
                min=node.min,
                max=node.max,
                default=node.default,
                unit=node.unit,
                dependents=tuple(node.resolved_dependents),
            )
        else:
            exported[node.address] = ExportedGroup(
                key=node.key,
                display_name=node.display_name,
                path=node.path,
                address=node.address,
                parameters=tuple(exported[p.address] for p in node.parameters),
                groups=tuple(exported[g.address] for g in node.children),
            )

    return ExportedTree(
        root=exported[root.address],
        separator=separator,
        by_address=MappingProxyType(exported),
    )
