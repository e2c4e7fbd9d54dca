"""Test fixtures for paramtreelib consumers.

Hand-scripted and deliberately misbehaving parameter sources, for testing
code that builds parameter trees without a real engine behind it.
"""

from collections import Counter
from itertools import count
from typing import Any, Dict, List, Mapping, Optional, Tuple

from ..adapters.protocol import SENTINEL, GroupRecord, ParameterRecord


class ScriptedSource:
    """Parameter source whose cursors and records are listed explicitly.

    Example:
        source = ScriptedSource()
        source.add_parameter(SENTINEL, 10, ParameterRecord("gain", "Gain", 0, 1))
        source.add_group(SENTINEL, 20, GroupRecord("env", "Envelope"))
        source.add_parameter(20, 21, ParameterRecord("attack", "Attack", 0, 5))
    """

    def __init__(self):
        self._groups: Dict[int, List[Tuple[int, GroupRecord]]] = {}
        self._params: Dict[int, List[Tuple[int, ParameterRecord]]] = {}
        self._position: Dict[int, Tuple[str, int, int]] = {}

    def add_group(self, parent: int, cursor: int, record: GroupRecord) -> int:
        siblings = self._groups.setdefault(parent, [])
        self._position[cursor] = ('group', parent, len(siblings))
        siblings.append((cursor, record))
        return cursor

    def add_parameter(self, parent: int, cursor: int, record: ParameterRecord) -> int:
        siblings = self._params.setdefault(parent, [])
        self._position[cursor] = ('parameter', parent, len(siblings))
        siblings.append((cursor, record))
        return cursor

    @classmethod
    def from_nested(cls, layout: Mapping[str, Any], start: int = 0) -> 'ScriptedSource':
        """Build a source from a nested description.

        ``layout`` has optional ``"parameters"`` (list of ParameterRecord or
        dicts of ParameterRecord fields) and ``"groups"`` (list of
        ``(key, name, layout)`` tuples). Cursors are handed out sequentially
        from ``start`` in depth-first order.
        """
        source = cls()
        counter = count(start)

        def _fill(parent: int, level: Mapping[str, Any]) -> None:
            for param in level.get('parameters', ()):
                record = param if isinstance(param, ParameterRecord) else ParameterRecord(**param)
                source.add_parameter(parent, next(counter), record)
            for key, name, child in level.get('groups', ()):
                cursor = source.add_group(parent, next(counter), GroupRecord(key, name))
                _fill(cursor, child)

        _fill(SENTINEL, layout)
        return source

    def first_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        return self._first(self._groups, cursor)

    def next_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        return self._next(self._groups, cursor, 'group')

    def first_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        return self._first(self._params, cursor)

    def next_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        return self._next(self._params, cursor, 'parameter')

    @staticmethod
    def _first(table, cursor):
        siblings = table.get(cursor)
        if not siblings:
            return SENTINEL, None
        return siblings[0]

    def _next(self, table, cursor, kind):
        position = self._position.get(cursor)
        if position is None or position[0] != kind:
            return SENTINEL, None
        _, parent, index = position
        siblings = table[parent]
        if index + 1 >= len(siblings):
            return SENTINEL, None
        return siblings[index + 1]


class RunawaySource:
    """Source whose parameter enumeration never reaches the sentinel.

    Every ``next_parameter`` call returns a fresh cursor and record, the
    way a corrupted engine-side cursor would.
    """

    def __init__(self, start: int = 1):
        self._counter = count(start)
        self.calls = 0

    def first_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        return SENTINEL, None

    def next_group(self, cursor: int) -> Tuple[int, Optional[GroupRecord]]:
        return SENTINEL, None

    def first_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        return self._fresh()

    def next_parameter(self, cursor: int) -> Tuple[int, Optional[ParameterRecord]]:
        return self._fresh()

    def _fresh(self) -> Tuple[int, ParameterRecord]:
        self.calls += 1
        cursor = next(self._counter)
        return cursor, ParameterRecord(f"p{cursor}", f"Param {cursor}", 0.0, 1.0)


class RecordingSource:
    """Wraps another source and counts calls per entry point."""

    def __init__(self, source):
        self._source = source
        self.calls: Counter = Counter()

    def first_group(self, cursor: int):
        self.calls['first_group'] += 1
        return self._source.first_group(cursor)

    def next_group(self, cursor: int):
        self.calls['next_group'] += 1
        return self._source.next_group(cursor)

    def first_parameter(self, cursor: int):
        self.calls['first_parameter'] += 1
        return self._source.first_parameter(cursor)

    def next_parameter(self, cursor: int):
        self.calls['next_parameter'] += 1
        return self._source.next_parameter(cursor)
