"""Translation between compact 32-byte Ed25519 keys and their DER containers.

Public keys travel as SubjectPublicKeyInfo (SPKI) and secret keys as PKCS8.
For Ed25519 both containers are a fixed ASN.1 header followed by the raw key,
so conversion is a matter of prepending or stripping that header.
"""

from __future__ import annotations

from typing import Final

from .errors import KeyLengthError
from .types import KeypairBuffers

__all__ = [
    "KEY_LENGTH",
    "DER_PREFIX_PUBLIC",
    "DER_PREFIX_SECRET",
    "DER_PUBLIC_LENGTH",
    "DER_SECRET_LENGTH",
    "shorten",
    "lengthen_public",
    "lengthen_secret",
]

KEY_LENGTH: Final[int] = 32

# SEQUENCE { SEQUENCE { OID 1.3.101.112 }, BIT STRING (33 bytes, 0 unused) }
DER_PREFIX_PUBLIC: Final[bytes] = bytes.fromhex("302a300506032b6570032100")
# SEQUENCE { INTEGER 0, SEQUENCE { OID 1.3.101.112 }, OCTET STRING { OCTET STRING (32) } }
DER_PREFIX_SECRET: Final[bytes] = bytes.fromhex("302e020100300506032b657004220420")

DER_PUBLIC_LENGTH: Final[int] = len(DER_PREFIX_PUBLIC) + KEY_LENGTH
DER_SECRET_LENGTH: Final[int] = len(DER_PREFIX_SECRET) + KEY_LENGTH


def _strip_prefix(der: bytes, prefix: bytes, expected_length: int, label: str) -> bytes:
    if len(der) != expected_length:
        msg = f"DER {label} key must be {expected_length} bytes, got {len(der)}"
        raise KeyLengthError(msg)
    if der[: len(prefix)] != prefix:
        raise KeyLengthError(f"DER {label} key has an unexpected ASN.1 header")
    return bytes(der[-KEY_LENGTH:])


def shorten(keypair_der: KeypairBuffers) -> KeypairBuffers:
    """Reduce a DER-encoded keypair to its raw 32-byte key material.

    Args:
        keypair_der: Keypair whose ``pubkey`` is a 44-byte SPKI blob and whose
            ``secret`` is a 48-byte PKCS8 blob.

    Returns:
        Keypair holding the trailing 32 bytes of each field.

    Raises:
        KeyLengthError: If either field does not have the exact Ed25519 DER
            length and header.
    """

    return KeypairBuffers(
        pubkey=_strip_prefix(
            keypair_der.pubkey, DER_PREFIX_PUBLIC, DER_PUBLIC_LENGTH, "public"
        ),
        secret=_strip_prefix(
            keypair_der.secret, DER_PREFIX_SECRET, DER_SECRET_LENGTH, "secret"
        ),
    )


def lengthen_public(pubkey: bytes) -> bytes:
    """Wrap a raw public key in the SPKI header."""

    return DER_PREFIX_PUBLIC + pubkey


def lengthen_secret(secret: bytes) -> bytes:
    """Wrap a raw secret key in the PKCS8 header."""

    return DER_PREFIX_SECRET + secret
