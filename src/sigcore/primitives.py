"""Ed25519 hashing, key generation, signing and verification.

Backed by the ``cryptography`` package. Keys cross this module's boundary
in their compact 32-byte form and are converted to DER (SPKI/PKCS8) only for
the calls into the library.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Final

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_der_private_key,
    load_der_public_key,
)

from .der import KEY_LENGTH, lengthen_public, lengthen_secret, shorten
from .encoding import decode_sig, encode_sig
from .errors import DecodingError, GenerationError, SigningError
from .types import EncodedSig, KeypairBuffers, Message

__all__ = [
    "sha256",
    "generate_keypair_buffers",
    "sign",
    "verify",
    "CryptographyCrypto",
]

LOGGER = logging.getLogger(__name__)

# Every way verification can fail on caller-supplied input. All of them
# produce the same ``False`` result.
_VERIFY_FAILURES: Final[tuple[type[Exception], ...]] = (
    DecodingError,
    InvalidSignature,
    UnsupportedAlgorithm,
    ValueError,
    TypeError,
)


def _to_bytes(msg: Message) -> bytes:
    if isinstance(msg, str):
        return msg.encode("utf-8")
    if isinstance(msg, (bytes, bytearray, memoryview)):
        return bytes(msg)
    raise TypeError(f"Message must be bytes or str, got {type(msg).__name__}")


def sha256(data: Message) -> bytes:
    """Return the 32-byte SHA-256 digest of ``data``.

    Strings are hashed over their UTF-8 encoding.

    Example:
        >>> sha256("").hex()
        'e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855'
    """

    return hashlib.sha256(_to_bytes(data)).digest()


def _generate_keypair_der() -> KeypairBuffers:
    private_key = Ed25519PrivateKey.generate()
    return KeypairBuffers(
        pubkey=private_key.public_key().public_bytes(
            encoding=Encoding.DER,
            format=PublicFormat.SubjectPublicKeyInfo,
        ),
        secret=private_key.private_bytes(
            encoding=Encoding.DER,
            format=PrivateFormat.PKCS8,
            encryption_algorithm=NoEncryption(),
        ),
    )


def generate_keypair_buffers() -> KeypairBuffers:
    """Generate a fresh Ed25519 keypair in compact 32/32-byte form.

    Randomness comes from OpenSSL's CSPRNG; there is no fallback source.

    Raises:
        GenerationError: If the primitive fails or returns DER of an
            unexpected shape.
    """

    try:
        return shorten(_generate_keypair_der())
    except Exception as exc:
        LOGGER.warning("Ed25519 keypair generation failed", exc_info=exc)
        raise GenerationError(f"Keypair generation failed: {exc}") from exc


def sign(keypair: KeypairBuffers, msg: Message) -> EncodedSig:
    """Sign ``msg`` with the keypair's secret key.

    Args:
        keypair: Compact keypair; only ``secret`` is used.
        msg: Message bytes, or text to be UTF-8 encoded.

    Returns:
        The encoded 64-byte Ed25519 signature. Signing is deterministic for a
        given key and message.

    Raises:
        SigningError: If the secret key is not a valid 32-byte Ed25519 key or
            the message has an unsupported type.
    """

    try:
        data = _to_bytes(msg)
        # DER loading ignores bytes past the 32-byte key.
        if len(keypair.secret) != KEY_LENGTH:
            raise ValueError(
                f"Secret key must be {KEY_LENGTH} bytes, got {len(keypair.secret)}"
            )
        private_key = load_der_private_key(
            lengthen_secret(keypair.secret), password=None
        )
        if not isinstance(private_key, Ed25519PrivateKey):
            raise TypeError(
                f"Expected an Ed25519 private key, got {type(private_key).__name__}"
            )
        signature = private_key.sign(data)
    except (ValueError, TypeError, AttributeError, UnsupportedAlgorithm) as exc:
        LOGGER.warning(
            "Ed25519 signing rejected", extra={"error_type": type(exc).__name__}
        )
        raise SigningError(f"Signing failed: {exc}") from exc
    return encode_sig(signature)


def _verify_or_raise(public_key: bytes, sig: EncodedSig, msg: Message) -> None:
    data = _to_bytes(msg)
    raw_signature = decode_sig(sig)
    if len(public_key) != KEY_LENGTH:
        raise ValueError(
            f"Public key must be {KEY_LENGTH} bytes, got {len(public_key)}"
        )
    loaded = load_der_public_key(lengthen_public(public_key))
    if not isinstance(loaded, Ed25519PublicKey):
        raise TypeError(f"Expected an Ed25519 public key, got {type(loaded).__name__}")
    loaded.verify(raw_signature, data)


def verify(public_key: bytes, sig: EncodedSig, msg: Message) -> bool:
    """Check an encoded signature against a raw 32-byte public key.

    Malformed keys, malformed signatures, wrong argument types and plain
    cryptographic mismatches all yield ``False``; this function does not
    raise for bad input.
    """

    try:
        _verify_or_raise(public_key, sig, msg)
    except _VERIFY_FAILURES as exc:
        LOGGER.debug("Signature rejected", extra={"reason": type(exc).__name__})
        return False
    return True


class CryptographyCrypto:
    """:class:`~sigcore.types.LowLevelCrypto` backend built on ``cryptography``.

    The class is used directly, without instantiation, wherever a backend is
    expected.
    """

    sha256 = staticmethod(sha256)
    generate_keypair_buffers = staticmethod(generate_keypair_buffers)
    sign = staticmethod(sign)
    verify = staticmethod(verify)
