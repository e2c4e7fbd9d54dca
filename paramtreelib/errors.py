"""Exception hierarchy for paramtreelib.

Only structural problems are errors. An exhausted enumeration, an unknown
unit code or a dependency name that matches nothing are normal outcomes and
never raise.
"""

from typing import Optional


class ParamTreeError(Exception):
    """Base class for all paramtreelib errors."""
    pass


class ConfigurationError(ParamTreeError, ValueError):
    """Raised when a BuildConfig fails validation."""
    pass


class CapacityError(ParamTreeError):
    """Raised when an in-memory parameter set cannot take another child."""
    pass


class TreeBuildError(ParamTreeError):
    """Fatal failure while building the parameter tree.

    No partial tree is ever published after this error. Callers are
    expected to treat it as a fatal initialization error since no
    UI or automation surface can exist without a tree.
    """
    pass


class InconsistentSourceError(TreeBuildError):
    """The parameter source returned contradictory data.

    Attributes:
        cursor: Cursor value the source was asked about, if known
    """

    def __init__(self, message: str, cursor: Optional[int] = None):
        super().__init__(message)
        self.cursor = cursor


class EnumerationOverflowError(InconsistentSourceError):
    """A first/next enumeration never reached the sentinel.

    Attributes:
        limit: The iteration cap that was exceeded
    """

    def __init__(self, message: str, cursor: Optional[int] = None, limit: int = 0):
        super().__init__(message, cursor)
        self.limit = limit
