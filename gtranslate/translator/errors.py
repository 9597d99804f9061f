"""Exceptions raised by the translators and the convenience API."""
from __future__ import annotations


class TranslatorError(Exception):
    """Base class for every failure surfaced by a translate call."""


class ValidationError(TranslatorError, ValueError):
    """Caller-supplied text or language failed the pre-flight checks."""


class SessionUnavailableError(TranslatorError):
    """The bootstrap page could not be fetched or lacked a required token."""


class TransportError(TranslatorError):
    """Network failure, unexpected HTTP status or undecodable body."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RateLimitedError(TransportError):
    """The provider answered with HTTP 429."""


class DecodeError(TransportError):
    """The declared content encoding could not be decoded."""


class TranslationFailedError(TranslatorError):
    """Well-formed response that carries no usable translation."""

    def __init__(self, message: str | None = None, *, code: int | None = None) -> None:
        self.code = code
        self.message = message or ""
        super().__init__(self.message or "translation failed")


class ResponseParseError(TranslatorError):
    """Response body does not match the provider's grammar."""
