"""The parameter source protocol.

A parameter source is the engine-side provider of raw parameter data. It
exposes four enumeration entry points that take a cursor and return the
updated cursor together with a raw record. A returned cursor equal to
SENTINEL means the enumeration is exhausted.

The cursor a source returns for an element is that element's address:
it is the handle the engine uses for value changes and the handle the
rest of paramtreelib uses for dependency links.
"""

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence, Tuple, runtime_checkable


# Reserved cursor value meaning "no such element" / "enumeration exhausted".
# Also passed as the parent cursor to enumerate the top level.
SENTINEL = 0xFFFF_FFFF_FFFF_FFFF

# Address of the synthetic root group. Sources never hand it out.
ROOT_ADDRESS = 0xFFFF_FFFF_FFFF_FFFE


@dataclass(frozen=True)
class GroupRecord:
    """Raw fields of one group as returned by a source."""
    key: str
    name: str


@dataclass(frozen=True)
class ParameterRecord:
    """Raw fields of one parameter as returned by a source."""
    key: str
    name: str
    min: float
    max: float
    unit_code: int = 0
    dependents: Optional[Sequence[str]] = None
    default: float = 0.0


@runtime_checkable
class ParameterSource(Protocol):
    """Cursor-based first/next enumeration over a parameter tree.

    ``first_*`` takes the cursor of a group (or SENTINEL for the top level)
    and returns the cursor of its first child of that kind. ``next_*``
    takes the cursor of a child and returns the cursor of the following
    sibling of the same kind. Both return ``(SENTINEL, None)`` when there
    is no such element.
    """

    def first_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        ...

    def next_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        ...

    def first_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        ...

    def next_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        ...
