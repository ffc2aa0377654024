"""Exception hierarchy for :mod:`sigcore`."""

from __future__ import annotations

__all__ = [
    "SigcoreError",
    "DecodingError",
    "SigningError",
    "GenerationError",
    "KeyLengthError",
]


class SigcoreError(RuntimeError):
    """Base class for signing core errors."""


class DecodingError(SigcoreError, ValueError):
    """Raised when an encoded signature does not follow the wire grammar."""


class SigningError(SigcoreError):
    """Raised when the Ed25519 primitive rejects a key or message."""


class GenerationError(SigcoreError):
    """Raised when keypair generation fails."""


class KeyLengthError(SigcoreError, ValueError):
    """Raised when a DER key payload has an unexpected size or prefix."""
