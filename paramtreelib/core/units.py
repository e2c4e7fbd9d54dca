"""Measurement units for parameters.

Unit codes are small integers written by the engine. Decoding is
defensive: a code outside the known enumeration maps to GENERIC.
"""

import logging
from enum import IntEnum
from typing import Any

logger = logging.getLogger(__name__)


class ParameterUnit(IntEnum):
    """Unit classification of a parameter, numbered as the engine numbers them."""
    GENERIC = 0
    INDEXED = 1
    BOOLEAN = 2
    PERCENT = 3
    SECONDS = 4
    SAMPLES = 5
    HERTZ = 6
    CENTS = 7
    SEMITONES = 8
    MIDI_NOTE_NUMBER = 9
    DECIBELS = 10
    LINEAR_GAIN = 11
    DEGREES = 12
    EQUAL_POWER_CROSSFADE = 13
    MILLISECONDS = 14

    @classmethod
    def decode(cls, code: Any) -> 'ParameterUnit':
        """Decode a raw unit code.

        Args:
            code: Unit code from a raw record (normally an int)

        Returns:
            The matching unit, or GENERIC for anything unrecognized
        """
        try:
            return cls(code)
        except (ValueError, TypeError):
            logger.debug("Unknown unit code %r, using GENERIC", code)
            return cls.GENERIC

    @property
    def suffix(self) -> str:
        """Short label a UI shows next to a value, empty when there is none."""
        return _SUFFIXES.get(self, "")

    @property
    def is_discrete(self) -> bool:
        """True for units rendered as toggles or pickers rather than sliders."""
        return self in (ParameterUnit.BOOLEAN, ParameterUnit.INDEXED)


_SUFFIXES = {
    ParameterUnit.HERTZ: "Hz",
    ParameterUnit.DECIBELS: "dB",
    ParameterUnit.PERCENT: "%",
    ParameterUnit.MILLISECONDS: "ms",
    ParameterUnit.SECONDS: "s",
    ParameterUnit.CENTS: "cents",
    ParameterUnit.SEMITONES: "st",
    ParameterUnit.LINEAR_GAIN: "x",
    ParameterUnit.DEGREES: "°",
    ParameterUnit.SAMPLES: "smp",
}
