"""
Exception types shared by the demos.

Only construction-time mistakes are raised. Expected conditions such as an
empty undo stack or an elevator refusing a move are logged and reported
through return values instead.
"""


class PatternDemoError(Exception):
    """Base class for errors raised by the demo packages."""
    pass


class CycleError(PatternDemoError, ValueError):
    """Raised when a box would contain itself, directly or through a descendant."""
    pass


class UnknownVisitorError(PatternDemoError, ValueError):
    """Raised when a visitor kind outside the supported set is requested."""
    pass


class OperationStateError(PatternDemoError, RuntimeError):
    """Raised when an operation is undone before it was ever executed."""
    pass
