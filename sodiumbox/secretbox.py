"""Authenticated symmetric encryption (XSalsa20-Poly1305) with base64 I/O."""

from __future__ import annotations

import base64
import binascii
from typing import Any, Mapping

import nacl.exceptions
import nacl.secret
import nacl.utils

from .errors import (
    Base64DecodeError,
    FailedToOpenSecretBox,
    InvalidBoxKeyLength,
    InvalidBoxNonceLength,
    InvalidContent,
)

KEY_BYTES = nacl.secret.SecretBox.KEY_SIZE
NONCE_BYTES = nacl.secret.SecretBox.NONCE_SIZE


def _b64decode(value: str, context: Mapping[str, Any]) -> bytes:
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise Base64DecodeError(str(exc), context) from exc


def _b64encode(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


def _check_key(key: bytes, context: Mapping[str, Any]) -> bytes:
    if len(key) != KEY_BYTES:
        raise InvalidBoxKeyLength(f"Invalid box_key length required: {KEY_BYTES}", context)
    return key


def _check_nonce(nonce: bytes, context: Mapping[str, Any]) -> bytes:
    if len(nonce) != NONCE_BYTES:
        raise InvalidBoxNonceLength(f"Invalid box_nonce length required: {NONCE_BYTES}", context)
    return nonce


def _to_text(data: bytes, context: Mapping[str, Any]) -> str:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidContent(str(exc), context) from exc


def decrypt(
    data_b64: str,
    sb_key_b64: str,
    nonce_b64: str,
    context: Mapping[str, Any] | None = None,
) -> str:
    """Open a base64 secret box with a base64 key and nonce; return the UTF-8 plaintext.

    Empty input yields an empty string.
    """
    context = dict(context or {})
    if not data_b64:
        return ""

    data = _b64decode(data_b64, context)
    key = _b64decode(sb_key_b64, context)
    nonce = _b64decode(nonce_b64, context)

    nonce = _check_nonce(nonce, context)
    key = _check_key(key, context)

    try:
        plaintext = nacl.secret.SecretBox(key).decrypt(data, nonce)
    except nacl.exceptions.CryptoError as exc:
        raise FailedToOpenSecretBox("Decryption failed", context) from exc
    return _to_text(plaintext, context)


def crypt(
    data: str,
    sb_key_b64: str,
    context: Mapping[str, Any] | None = None,
) -> tuple[str, str]:
    """Seal text with a base64 key under a random nonce.

    Returns ``(nonce_b64, ciphertext_b64)``.
    """
    context = dict(context or {})
    nonce = nacl.utils.random(NONCE_BYTES)
    key = _check_key(_b64decode(sb_key_b64, context), context)
    sealed = nacl.secret.SecretBox(key).encrypt(data.encode("utf-8"), nonce)
    return _b64encode(nonce), _b64encode(sealed.ciphertext)