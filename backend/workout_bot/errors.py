class TrackerError(Exception):
    """Base class for every error raised by the tracker core."""


class UsageError(TrackerError):
    """A command was called with too few arguments."""

    def __init__(self, usage: str):
        super().__init__(usage)
        self.usage = usage


class ValidationError(TrackerError):
    """An argument could not be parsed."""


class NotFoundError(TrackerError):
    def __init__(self, kind: str, key):
        super().__init__(f"{kind} {key!r} not found")
        self.kind = kind
        self.key = key


class ConflictError(TrackerError):
    """The store rejected a write (unique or foreign key constraint)."""


class InternalError(TrackerError):
    """Something below the handler failed; the user gets a generic reply."""


class HashingError(InternalError):
    pass


class TokenError(InternalError):
    pass


class StorageError(InternalError):
    pass


class TransportError(InternalError):
    pass


class ConfigError(Exception):
    """Startup cannot continue (missing settings, unreachable database)."""
