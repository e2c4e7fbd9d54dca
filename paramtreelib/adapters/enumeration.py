"""Enumeration adapter for cursor-based parameter sources.

Turns the source's first/next calls into plain Python iterators, one per
tree level and element kind. Each iterator owns its own cursor, so the
group and parameter sequences of one level are independent.
"""

import logging
from typing import Callable, Iterator, Optional, Set, Tuple, TypeVar

from ..errors import EnumerationOverflowError, InconsistentSourceError
from .protocol import SENTINEL, GroupRecord, ParameterRecord, ParameterSource

logger = logging.getLogger(__name__)

R = TypeVar('R')

Step = Callable[[int], Tuple[int, Optional[R]]]


def enumerate_level(first: Step,
                    next_: Step,
                    parent: int,
                    max_items: int,
                    kind: str = "element") -> Iterator[Tuple[int, R]]:
    """Drive a first/next cursor pair until it reaches the sentinel.

    The returned generator is lazy, finite and not restartable: call
    this function again for a fresh cursor.

    Args:
        first: Source call returning the first child of ``parent``
        next_: Source call returning the sibling after a given cursor
        parent: Cursor of the parent group, SENTINEL for the top level
        max_items: Iteration cap; exceeding it means the cursor never terminates
        kind: Element kind, used in messages only

    Yields:
        ``(address, record)`` pairs in source order

    Raises:
        EnumerationOverflowError: If more than ``max_items`` elements are produced
        InconsistentSourceError: If a cursor repeats or a record is missing
    """
    seen: Set[int] = set()
    cursor, record = first(parent)
    count = 0

    while cursor != SENTINEL:
        if record is None:
            raise InconsistentSourceError(
                f"Source returned {kind} cursor {cursor:#x} without a record",
                cursor=cursor,
            )
        if cursor in seen:
            raise InconsistentSourceError(
                f"Source repeated {kind} cursor {cursor:#x} under parent {parent:#x}",
                cursor=cursor,
            )
        count += 1
        if count > max_items:
            raise EnumerationOverflowError(
                f"{kind.capitalize()} enumeration under parent {parent:#x} did not "
                f"terminate within {max_items} items",
                cursor=cursor,
                limit=max_items,
            )
        seen.add(cursor)

        yield cursor, record
        cursor, record = next_(cursor)

    if record is not None:
        raise InconsistentSourceError(
            f"Source returned a {kind} record together with the sentinel",
            cursor=parent,
        )

    logger.debug("Enumerated %d %s(s) under %#x", count, kind, parent)


def iter_groups(source: ParameterSource,
                parent: int = SENTINEL,
                max_items: int = 4096) -> Iterator[Tuple[int, GroupRecord]]:
    """Iterate the immediate child groups of ``parent``.

    Args:
        source: Parameter source to enumerate
        parent: Group cursor, SENTINEL for the top level
        max_items: Iteration cap

    Yields:
        ``(address, GroupRecord)`` pairs in source order
    """
    return enumerate_level(source.first_group, source.next_group,
                           parent, max_items, kind="group")


def iter_parameters(source: ParameterSource,
                    parent: int = SENTINEL,
                    max_items: int = 4096) -> Iterator[Tuple[int, ParameterRecord]]:
    """Iterate the immediate child parameters of ``parent``.

    Args:
        source: Parameter source to enumerate
        parent: Group cursor, SENTINEL for the top level
        max_items: Iteration cap

    Yields:
        ``(address, ParameterRecord)`` pairs in source order
    """
    return enumerate_level(source.first_parameter, source.next_parameter,
                           parent, max_items, kind="parameter")


class EnumerationLevel:
    """Both child sequences of one group.

    Each call to groups() or parameters() starts a fresh enumeration with
    its own cursor.
    """

    def __init__(self, source: ParameterSource, parent: int = SENTINEL,
                 max_items: int = 4096):
        self.source = source
        self.parent = parent
        self.max_items = max_items

    def groups(self) -> Iterator[Tuple[int, GroupRecord]]:
        return iter_groups(self.source, self.parent, self.max_items)

    def parameters(self) -> Iterator[Tuple[int, ParameterRecord]]:
        return iter_parameters(self.source, self.parent, self.max_items)

    def __repr__(self) -> str:
        return f"EnumerationLevel(parent={self.parent:#x})"
