"""Exception hierarchy for secret-box and sealed-box operations."""

from __future__ import annotations

from typing import Any, Mapping


class SodiumError(Exception):
    """Base error carrying a message and a mapping of contextual details."""

    def __init__(self, message: str | None = None, details: Mapping[str, Any] | None = None):
        self.message = message if message is not None else type(self).__name__
        self.details: dict[str, Any] = dict(details) if details else {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


class InvalidConfiguration(SodiumError):
    """The caller supplied a misconfigured key, nonce or similar parameter."""


class ValidationError(SodiumError):
    """Input data failed validation."""


class InvalidBoxKeyLength(InvalidConfiguration):
    """A box key does not have the required length."""


class InvalidBoxNonceLength(InvalidConfiguration):
    """A box nonce does not have the required length."""


class InvalidContent(ValidationError):
    """Decrypted content is not valid UTF-8 text."""


class FailedToOpenSecretBox(ValidationError):
    """A secret box could not be opened (authentication failed)."""


class FailedToOpenSealedBox(ValidationError):
    """A sealed box could not be opened (authentication failed)."""


class Base64DecodeError(ValidationError):
    """A value could not be decoded as standard base64."""