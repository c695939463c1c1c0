"""Exception hierarchy for the typings worker."""


class TypingsWorkerError(Exception):
    """Base class for all typings worker errors."""


class ProtocolError(TypingsWorkerError):
    """Raised when the parent sends a message the worker cannot understand.

    An unknown request kind means the parent and worker disagree on the
    protocol version. This error is fatal and must not be swallowed.
    """


class ChannelClosedError(TypingsWorkerError):
    """Raised when the parent end of the channel has gone away."""
