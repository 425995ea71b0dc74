"""Exceptions raised inside the translation engine.

Only SessionNotInstalledError reaches host code. The others are raised at
component seams and recovered by the session (fallback resource, next
format) before any caller sees them.
"""


class TranslationError(Exception):
    """Base class for translation engine errors."""


class LocaleDetectionError(TranslationError):
    """The device locale could not be queried or parsed."""


class ResourceNotFoundError(TranslationError):
    """A translation resource does not exist in the asset source."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Translation resource not found: {name}")


class DecodeError(TranslationError):
    """Resource content could not be decoded in a given format."""

    def __init__(self, format_name: str, reason: str):
        self.format_name = format_name
        self.reason = reason
        super().__init__(f"Failed to decode {format_name} content: {reason}")


class SessionNotInstalledError(TranslationError):
    """No translation session has been installed in the registry."""
