"""Tree builder.

First of the two build passes: walks the source depth-first and assembles
the group/parameter hierarchy, recording every node's fully-qualified
path in a PathIndex. No dependency is resolved here, because a
dependency may name a node that has not been visited yet.
"""

import logging
from typing import Dict, Iterator, Optional, Tuple

from ..adapters.enumeration import iter_groups, iter_parameters
from ..adapters.protocol import ROOT_ADDRESS, SENTINEL, ParameterSource
from ..config import BuildConfig
from ..core.node import GroupNode
from ..errors import ConfigurationError, InconsistentSourceError
from .materializer import materialize_group, materialize_parameter

logger = logging.getLogger(__name__)

Path = Tuple[str, ...]


class PathIndex:
    """Flat mapping from fully-qualified path to address.

    Lives only for the duration of one build: the builder fills it and
    the resolver reads it.
    """

    def __init__(self, separator: str = "."):
        self.separator = separator
        self._addresses: Dict[Path, int] = {}

    def add(self, path: Path, address: int) -> None:
        """Record a node's path.

        Raises:
            InconsistentSourceError: If the path is already taken
        """
        if path in self._addresses:
            raise InconsistentSourceError(
                f"Duplicate key {self.join(path)!r}: addresses "
                f"{self._addresses[path]:#x} and {address:#x}",
                cursor=address,
            )
        self._addresses[path] = address

    def lookup(self, path: Path) -> Optional[int]:
        return self._addresses.get(tuple(path))

    def join(self, path: Path) -> str:
        return self.separator.join(path)

    def __contains__(self, path: object) -> bool:
        return path in self._addresses

    def __len__(self) -> int:
        return len(self._addresses)

    def __iter__(self) -> Iterator[Path]:
        return iter(self._addresses)


class TreeBuilder:
    """Builds the unresolved parameter tree from a source.

    Example:
        >>> builder = TreeBuilder(source)
        >>> root = builder.build()
        >>> builder.index.lookup(("filter", "cutoff"))
    """

    def __init__(self, source: ParameterSource, config: Optional[BuildConfig] = None):
        """Create a builder.

        Args:
            source: Parameter source to enumerate
            config: Build configuration (defaults to BuildConfig())

        Raises:
            ConfigurationError: If the configuration is invalid
        """
        self.source = source
        self.config = config or BuildConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise ConfigurationError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.index = PathIndex(self.config.separator)
        self.group_count = 0
        self.parameter_count = 0
        self._addresses: Dict[int, Path] = {}

    def build(self) -> GroupNode:
        """Run the structural pass.

        Returns:
            The synthetic root group with the full hierarchy below it

        Raises:
            TreeBuildError: If the source is inconsistent or never terminates
        """
        self.index = PathIndex(self.config.separator)
        self.group_count = 0
        self.parameter_count = 0
        self._addresses = {}

        root = GroupNode.root(self.config.root_key, self.config.root_name,
                              ROOT_ADDRESS, separator=self.config.separator)
        self._claim(ROOT_ADDRESS, ())
        self._fill(root, SENTINEL)

        logger.debug("Built tree with %d group(s) and %d parameter(s)",
                     self.group_count, self.parameter_count)
        return root

    def _fill(self, group: GroupNode, cursor: int) -> None:
        """Populate ``group`` from the source, recursing into subgroups."""
        limit = self.config.max_items_per_level
        qualifiers = self.config.qualifiers
        separator = self.config.separator

        for address, record in iter_parameters(self.source, cursor, limit):
            param = materialize_parameter(record, address, group.path, qualifiers, separator)
            self._claim(address, param.path)
            self.index.add(param.path, address)
            group.parameters.append(param)
            self.parameter_count += 1

        for address, record in iter_groups(self.source, cursor, limit):
            child = materialize_group(record, address, group.path, qualifiers, separator)
            if len(child.path) > self.config.max_depth:
                raise InconsistentSourceError(
                    f"Group {self.index.join(child.path)!r} is nested deeper than "
                    f"{self.config.max_depth} levels",
                    cursor=address,
                )
            self._claim(address, child.path)
            self.index.add(child.path, address)
            self.group_count += 1
            self._fill(child, address)
            group.children.append(child)

    def _claim(self, address: int, path: Path) -> None:
        if address == ROOT_ADDRESS and path:
            raise InconsistentSourceError(
                f"Source handed out the reserved root address for {self.index.join(path)!r}",
                cursor=address,
            )
        if address in self._addresses:
            raise InconsistentSourceError(
                f"Address {address:#x} assigned to both "
                f"{self.index.join(self._addresses[address])!r} and {self.index.join(path)!r}",
                cursor=address,
            )
        self._addresses[address] = path
