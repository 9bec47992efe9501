"""Custom exceptions for DevAssist."""


class DevAssistError(Exception):
    """Base exception for all DevAssist errors."""


class ConfigError(DevAssistError):
    """Configuration-related errors."""


class InvalidContextError(DevAssistError):
    """Raised when a record context cannot produce any metadata paths."""


class ContextUnavailableError(DevAssistError):
    """The record context could not be resolved."""


class ProfileUnavailableError(DevAssistError):
    """The current user's profile could not be resolved."""


class LookupFailedError(DevAssistError):
    """A pull-request lookup for a single metadata path failed."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Pull request lookup failed for '{path}': {reason}")
