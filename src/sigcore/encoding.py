"""Text encoding for raw Ed25519 signatures.

An encoded signature is the multibase marker ``b`` followed by the RFC 4648
base32 encoding of the raw bytes, lowercase and without ``=`` padding. Only
the canonical spelling is accepted, so every accepted string re-encodes to
itself.
"""

from __future__ import annotations

import base64
import binascii
from typing import Final

from .errors import DecodingError
from .types import EncodedSig

__all__ = ["SIG_PREFIX", "encode_sig", "decode_sig"]

SIG_PREFIX: Final[str] = "b"
_ALPHABET: Final[frozenset[str]] = frozenset("abcdefghijklmnopqrstuvwxyz234567")


def encode_sig(raw: bytes) -> EncodedSig:
    """Encode raw signature bytes as an :data:`EncodedSig`."""

    body = base64.b32encode(raw).decode("ascii").rstrip("=").lower()
    return EncodedSig(SIG_PREFIX + body)


def decode_sig(encoded: str) -> bytes:
    """Decode an :data:`EncodedSig` back into raw bytes.

    Raises:
        DecodingError: If ``encoded`` is not a string in canonical form.
    """

    if not isinstance(encoded, str):
        raise DecodingError(
            f"Encoded signature must be str, got {type(encoded).__name__}"
        )
    if not encoded.startswith(SIG_PREFIX):
        raise DecodingError("Encoded signature is missing the 'b' prefix")

    body = encoded[len(SIG_PREFIX) :]
    if not _ALPHABET.issuperset(body):
        raise DecodingError("Encoded signature contains non-base32 characters")

    padding = "=" * (-len(body) % 8)
    try:
        raw = base64.b32decode(body.upper() + padding)
    except binascii.Error as exc:
        raise DecodingError(f"Malformed base32 signature: {exc}") from exc

    # Reject spellings with non-zero trailing bits.
    if encode_sig(raw) != encoded:
        raise DecodingError("Encoded signature is not in canonical form")
    return raw
