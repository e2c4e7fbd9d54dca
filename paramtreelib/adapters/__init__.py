"""Parameter sources and the enumeration adapter that walks them."""

from .protocol import SENTINEL, ROOT_ADDRESS, GroupRecord, ParameterRecord, ParameterSource
from .enumeration import EnumerationLevel, enumerate_level, iter_groups, iter_parameters
from .memory import Parameter, ParameterSet, decode_cursor, encode_cursor

__all__ = [
    'SENTINEL',
    'ROOT_ADDRESS',
    'GroupRecord',
    'ParameterRecord',
    'ParameterSource',
    'EnumerationLevel',
    'enumerate_level',
    'iter_groups',
    'iter_parameters',
    'Parameter',
    'ParameterSet',
    'decode_cursor',
    'encode_cursor',
]
