"""Node materializer.

Converts one raw record plus its address into a typed node. Dependency
names are copied verbatim; they are qualified later by the resolver,
once the full tree and its path index exist.
"""

import logging
import math
from typing import Optional, Sequence, Tuple

from ..adapters.protocol import SENTINEL, GroupRecord, ParameterRecord
from ..core.node import GroupNode, ParameterNode
from ..core.units import ParameterUnit
from ..errors import InconsistentSourceError

logger = logging.getLogger(__name__)


def materialize_parameter(record: ParameterRecord,
                          address: int,
                          group_path: Tuple[str, ...],
                          qualifiers: Sequence[str] = (".",),
                          separator: str = ".") -> Optional[ParameterNode]:
    """Build a ParameterNode from a raw record.

    Args:
        record: Raw parameter fields from the source
        address: Cursor value the source reported for the record
        group_path: Path of the owning group
        qualifiers: Tokens that may not appear in a key
        separator: Join token for the node identifier

    Returns:
        The node, or None when ``address`` is the sentinel

    Raises:
        InconsistentSourceError: If the key, range or default is invalid
    """
    if address == SENTINEL:
        return None

    _check_key(record.key, address, qualifiers)

    low = _as_float(record.min, "min", record.key, address)
    high = _as_float(record.max, "max", record.key, address)
    default = _as_float(record.default, "default", record.key, address)
    if not (math.isfinite(low) and math.isfinite(high)):
        raise InconsistentSourceError(
            f"Parameter {record.key!r} has a non-finite range ({low}, {high})",
            cursor=address,
        )
    if low > high:
        raise InconsistentSourceError(
            f"Parameter {record.key!r} has min {low} greater than max {high}",
            cursor=address,
        )

    return ParameterNode(
        path=group_path + (record.key,),
        display_name=record.name,
        address=address,
        range=(low, high),
        unit=ParameterUnit.decode(record.unit_code),
        raw_dependents=tuple(record.dependents or ()),
        default=default,
        separator=separator,
    )


def materialize_group(record: GroupRecord,
                      address: int,
                      parent_path: Tuple[str, ...],
                      qualifiers: Sequence[str] = (".",),
                      separator: str = ".") -> Optional[GroupNode]:
    """Build an empty GroupNode from a raw record.

    Args:
        record: Raw group fields from the source
        address: Cursor value the source reported for the record
        parent_path: Path of the enclosing group

    Returns:
        The node, or None when ``address`` is the sentinel
    """
    if address == SENTINEL:
        return None

    _check_key(record.key, address, qualifiers)
    return GroupNode(parent_path + (record.key,), record.name, address, separator=separator)


def _check_key(key: str, address: int, qualifiers: Sequence[str]) -> None:
    if not key:
        raise InconsistentSourceError(f"Node at {address:#x} has an empty key", cursor=address)
    for token in qualifiers:
        if token in key:
            raise InconsistentSourceError(
                f"Key {key!r} contains the reserved separator {token!r}",
                cursor=address,
            )


def _as_float(value, field_name: str, key: str, address: int) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InconsistentSourceError(
            f"Parameter {key!r} has a non-numeric {field_name} {value!r}",
            cursor=address,
        ) from e
