"""Exception hierarchy for callable-tour.

Every error raised by the library inherits from :class:`CallableTourError`
so that callers can catch a single base class when they do not care about
the specific failure mode. Several also inherit the matching builtin so
that ordinary ``except TypeError`` style handlers keep working.
"""


class CallableTourError(Exception):
    """Base exception for all callable-tour operations."""


class SignatureMismatchError(CallableTourError, TypeError):
    """Raised when a callable cannot be bound to a delegate type.

    Examples include a target that takes fewer parameters than the
    prototype, or combining two delegates of different types.
    """


class EmptyDelegateError(CallableTourError):
    """Raised when invoking a delegate whose invocation list is empty."""


class EventAssignmentError(CallableTourError, AttributeError):
    """Raised when code outside a publisher replaces an event outright.

    Events only support ``+=`` and ``-=``; plain assignment would silently
    drop every existing subscriber.
    """


class ExpressionError(CallableTourError):
    """Raised when source text is not a single ``lambda`` expression."""


class ConfigurationError(CallableTourError, ValueError):
    """Raised when an environment setting has an invalid value."""
