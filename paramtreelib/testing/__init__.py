"""Testing utilities for paramtreelib consumers."""

from .fixtures import RecordingSource, RunawaySource, ScriptedSource

__all__ = ['ScriptedSource', 'RunawaySource', 'RecordingSource']
