"""Dependency resolver.

Second build pass: turns each parameter's raw dependency names into the
addresses of the nodes they refer to, using only the flat path index, so
the order in which groups are visited does not matter.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from ..config import BuildConfig
from ..core.adapter import ParameterTreeAdapter
from ..core.node import GroupNode, ParameterNode
from ..core.traverser import DepthFirstPreOrderTraverser
from .builder import PathIndex

logger = logging.getLogger(__name__)


@dataclass
class ResolutionReport:
    """Outcome of one resolution pass.

    Attributes:
        resolved: Number of dependency links attached
        unresolved: ``(parameter name, raw dependency name)`` for every dropped name
    """
    resolved: int = 0
    unresolved: List[Tuple[str, str]] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.unresolved


class DependencyResolver:
    """Attaches resolved dependent addresses to every parameter of a tree.

    A raw name is qualified relative to the declaring parameter's group:
    an unqualified name is a sibling of the parameter, a qualified name
    (``"env.attack"`` or ``"env::attack"``) is a path below the group.
    With ``search_ancestors`` enabled, a miss is retried against each
    enclosing group, innermost first, so a name can also reach a parent's
    parameters or a sibling group.
    """

    def __init__(self, index: PathIndex, config: Optional[BuildConfig] = None):
        self.index = index
        self.config = config or BuildConfig()

    def resolve(self, root: GroupNode) -> ResolutionReport:
        """Resolve every parameter below ``root``.

        Unresolved names are dropped; they never abort the pass.

        Returns:
            ResolutionReport describing what was linked and dropped
        """
        report = ResolutionReport()
        traverser = DepthFirstPreOrderTraverser(ParameterTreeAdapter(root))

        for param in traverser.parameters(root):
            self.resolve_parameter(param, report)

        logger.debug("Resolved %d dependency link(s), dropped %d",
                     report.resolved, len(report.unresolved))
        return report

    def resolve_parameter(self, param: ParameterNode,
                          report: Optional[ResolutionReport] = None) -> List[int]:
        """Fill ``param.resolved_dependents`` from its raw names.

        Resolving the same parameter again replaces the previous result.

        Returns:
            The resolved addresses, in raw-name order
        """
        resolved = []
        for name in param.raw_dependents:
            address = self.lookup(param.group_path, name)
            if address is None:
                logger.debug("Dropping unresolved dependency %r of %s", name, param.identifier())
                if report is not None:
                    report.unresolved.append((param.identifier(), name))
                continue
            resolved.append(address)

        param.resolved_dependents = resolved
        if report is not None:
            report.resolved += len(resolved)
        return resolved

    def lookup(self, group_path: Sequence[str], name: str) -> Optional[int]:
        """Find the address a raw name refers to from inside ``group_path``.

        Args:
            group_path: Path of the group declaring the dependency
            name: Raw dependency name

        Returns:
            Address of the referenced node, or None
        """
        segments = tuple(self.config.split_name(name))
        if not segments:
            return None

        base = tuple(group_path)
        address = self.index.lookup(base + segments)
        if address is not None or not self.config.search_ancestors:
            return address

        for depth in range(len(base) - 1, -1, -1):
            address = self.index.lookup(base[:depth] + segments)
            if address is not None:
                return address
        return None
