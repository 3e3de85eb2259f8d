"""Secret-box encryption with base64-encoded keys, nonces and ciphertexts."""

__version__ = "0.2.2"
__all__ = ["errors", "secretbox"]