"""In-memory parameter source.

A plain Python parameter tree that speaks the first/next cursor protocol.
Engines written in Python can describe their knobs with it directly, and
it serves as the reference source in tests.

Cursor encoding: each tree level takes one byte of a 64-bit cursor, most
significant byte first. A child at index ``i`` of its parent is encoded as
byte ``i``; every byte below the deepest level is 0xFF. The all-0xFF value
is the sentinel and addresses the top-level set.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from ..core.units import ParameterUnit
from ..errors import CapacityError, InconsistentSourceError
from .protocol import SENTINEL, GroupRecord, ParameterRecord

MAX_CHILDREN = 254      # 0xFF is reserved as the "no index" byte
MAX_LEVELS = 8          # one byte per level in a 64-bit cursor
_BYTE = 0xFF


@dataclass
class Parameter:
    """One knob of an in-memory parameter tree."""
    key: str
    name: str
    min: float = 0.0
    max: float = 1.0
    default: float = 0.0
    unit: Union[ParameterUnit, int] = ParameterUnit.GENERIC
    dependents: Sequence[str] = ()

    def to_record(self) -> ParameterRecord:
        return ParameterRecord(
            key=self.key,
            name=self.name,
            min=self.min,
            max=self.max,
            unit_code=int(self.unit),
            dependents=tuple(self.dependents) or None,
            default=self.default,
        )


@dataclass
class ParameterSet:
    """A named group of parameters and nested sets.

    Children keep insertion order; parameters and sets share one index
    space, which is what the cursor encoding addresses.

    The top-level set answers for the sentinel cursor and has no record of
    its own, so its key and name never reach the built tree. The root is
    labelled from ``BuildConfig.root_key`` / ``root_name``; pass the set's
    labels there to keep them.
    """
    key: str
    name: str
    children: List[Union[Parameter, 'ParameterSet']] = field(default_factory=list)

    def add(self, child: Union[Parameter, 'ParameterSet']) -> Union[Parameter, 'ParameterSet']:
        """Append a child.

        Args:
            child: Parameter or nested ParameterSet

        Returns:
            The child, so nested sets can be filled in place

        Raises:
            CapacityError: If the set already holds MAX_CHILDREN children
        """
        if len(self.children) >= MAX_CHILDREN:
            raise CapacityError(
                f"Parameter set {self.key!r} cannot hold more than {MAX_CHILDREN} children"
            )
        self.children.append(child)
        return child

    def add_parameter(self, key: str, name: str, **kwargs) -> Parameter:
        return self.add(Parameter(key, name, **kwargs))

    def add_set(self, key: str, name: str) -> 'ParameterSet':
        return self.add(ParameterSet(key, name))

    # Cursor protocol

    def first_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        found = self._first(cursor, ParameterSet)
        if found is None:
            return SENTINEL, None
        address, group = found
        return address, GroupRecord(key=group.key, name=group.name)

    def next_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        found = self._next(cursor, ParameterSet)
        if found is None:
            return SENTINEL, None
        address, group = found
        return address, GroupRecord(key=group.key, name=group.name)

    def first_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        found = self._first(cursor, Parameter)
        if found is None:
            return SENTINEL, None
        address, param = found
        return address, param.to_record()

    def next_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        found = self._next(cursor, Parameter)
        if found is None:
            return SENTINEL, None
        address, param = found
        return address, param.to_record()

    # Address lookups

    def node_at(self, address: int) -> Optional[Union[Parameter, 'ParameterSet']]:
        """Return the element a cursor points at, or None."""
        node: Union[Parameter, ParameterSet] = self
        for index in decode_cursor(address):
            if not isinstance(node, ParameterSet) or index >= len(node.children):
                return None
            node = node.children[index]
        return node

    def parameter_at(self, address: int) -> Optional[Parameter]:
        """Return the parameter a cursor points at, or None."""
        node = self.node_at(address)
        return node if isinstance(node, Parameter) else None

    def walk(self) -> Iterator[Tuple[int, Union[Parameter, 'ParameterSet']]]:
        """Yield ``(address, element)`` for every descendant, depth-first."""
        def _walk(node: ParameterSet, prefix: List[int]):
            for index, child in enumerate(node.children):
                indices = prefix + [index]
                yield encode_cursor(indices), child
                if isinstance(child, ParameterSet):
                    yield from _walk(child, indices)
        yield from _walk(self, [])

    def _first(self, cursor: int, kind: type):
        parent = decode_cursor(cursor)
        node = self.node_at(cursor)
        if not isinstance(node, ParameterSet):
            return None
        return self._scan(node, parent, 0, kind)

    def _next(self, cursor: int, kind: type):
        indices = decode_cursor(cursor)
        if not indices:
            return None
        parent = self.node_at(encode_cursor(indices[:-1]))
        if not isinstance(parent, ParameterSet):
            return None
        return self._scan(parent, indices[:-1], indices[-1] + 1, kind)

    @staticmethod
    def _scan(node: 'ParameterSet', prefix: List[int], start: int, kind: type):
        for index in range(start, len(node.children)):
            child = node.children[index]
            if not isinstance(child, kind):
                continue
            try:
                return encode_cursor(prefix + [index]), child
            except CapacityError as e:
                raise InconsistentSourceError(
                    f"{child.key!r} in set {node.key!r} is nested too deep to address: {e}",
                    cursor=encode_cursor(prefix),
                ) from e
        return None


def encode_cursor(indices: Sequence[int]) -> int:
    """Encode a list of child indices as a cursor.

    Raises:
        CapacityError: If the tree is deeper than MAX_LEVELS
    """
    if len(indices) > MAX_LEVELS:
        raise CapacityError(f"Parameter trees are limited to {MAX_LEVELS} levels")
    cursor = SENTINEL
    for level, index in enumerate(indices):
        shift = 8 * (MAX_LEVELS - 1 - level)
        cursor &= ~(_BYTE << shift)
        cursor |= index << shift
    return cursor


def decode_cursor(cursor: int) -> List[int]:
    """Decode a cursor into the list of child indices it addresses."""
    indices = []
    for level in range(MAX_LEVELS):
        index = (cursor >> (8 * (MAX_LEVELS - 1 - level))) & _BYTE
        if index == _BYTE:
            break
        indices.append(index)
    return indices
