"""Data collection strategies for paramtreelib.

DataCollectors define what information to extract from nodes during
traversal, so the same walk can produce addresses, qualified names or
whole nodes.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict

from .adapter import TreeAdapter
from .node import TreeNode


class DataCollector(ABC):
    """Abstract base class for data collection strategies."""

    def __init__(self, adapter: TreeAdapter):
        """Initialize collector with an adapter.

        Args:
            adapter: TreeAdapter for additional node operations
        """
        self.adapter = adapter

    @abstractmethod
    def collect(self, node: TreeNode, depth: int) -> Any:
        """Collect data from a node.

        Args:
            node: The node to collect data from
            depth: Current depth in traversal

        Returns:
            Collected data (type depends on collector)
        """
        pass


class AddressCollector(DataCollector):
    """Collects only node addresses."""

    def collect(self, node: TreeNode, depth: int) -> int:
        return node.address


class QualifiedNameCollector(DataCollector):
    """Collects the fully-qualified name of each node."""

    def collect(self, node: TreeNode, depth: int) -> str:
        return node.identifier()


class MetadataCollector(DataCollector):
    """Collects the metadata dictionary of each node."""

    def collect(self, node: TreeNode, depth: int) -> Dict[str, Any]:
        return node.metadata()


class FullNodeCollector(DataCollector):
    """Collects complete node objects."""

    def collect(self, node: TreeNode, depth: int) -> TreeNode:
        return node


class CustomCollector(DataCollector):
    """Collector that uses a user-provided function."""

    def __init__(self, adapter: TreeAdapter, collect_func: Callable[[TreeNode, int], Any]):
        """Initialize with custom collection function.

        Args:
            adapter: TreeAdapter for tree navigation
            collect_func: Function(node, depth) -> Any
        """
        super().__init__(adapter)
        self.collect_func = collect_func

    def collect(self, node: TreeNode, depth: int) -> Any:
        return self.collect_func(node, depth)


def create_collector(name: str, adapter: TreeAdapter) -> DataCollector:
    """Create a collector by name (address, name, metadata, node).

    Raises:
        ValueError: If the name is not recognized
    """
    collectors = {
        'address': AddressCollector,
        'name': QualifiedNameCollector,
        'metadata': MetadataCollector,
        'node': FullNodeCollector,
    }
    if name not in collectors:
        raise ValueError(
            f"Unknown collector: {name}. Choose from: {', '.join(collectors.keys())}"
        )
    return collectors[name](adapter)
