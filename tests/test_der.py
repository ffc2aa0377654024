"""Tests for DER key translation."""

from __future__ import annotations

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_der_private_key,
    load_der_public_key,
)

from sigcore import der
from sigcore.errors import KeyLengthError
from sigcore.types import KeypairBuffers


def _library_der_pair() -> tuple[Ed25519PrivateKey, KeypairBuffers]:
    private_key = Ed25519PrivateKey.generate()
    pair = KeypairBuffers(
        pubkey=private_key.public_key().public_bytes(
            Encoding.DER, PublicFormat.SubjectPublicKeyInfo
        ),
        secret=private_key.private_bytes(
            Encoding.DER, PrivateFormat.PKCS8, NoEncryption()
        ),
    )
    return private_key, pair


def test_prefix_lengths() -> None:
    assert len(der.DER_PREFIX_PUBLIC) == 12
    assert len(der.DER_PREFIX_SECRET) == 16
    assert der.DER_PUBLIC_LENGTH == 44
    assert der.DER_SECRET_LENGTH == 48


def test_prefixes_match_library_serialization() -> None:
    """The library's own SPKI/PKCS8 output starts with the fixed headers."""

    _, pair = _library_der_pair()
    assert pair.pubkey.startswith(der.DER_PREFIX_PUBLIC)
    assert pair.secret.startswith(der.DER_PREFIX_SECRET)


def test_shorten_returns_raw_key_material() -> None:
    private_key, pair = _library_der_pair()
    short = der.shorten(pair)

    assert len(short.pubkey) == 32
    assert len(short.secret) == 32
    assert short.pubkey == private_key.public_key().public_bytes(
        Encoding.Raw, PublicFormat.Raw
    )
    assert short.secret == private_key.private_bytes(
        Encoding.Raw, PrivateFormat.Raw, NoEncryption()
    )


def test_lengthen_restores_library_der() -> None:
    _, pair = _library_der_pair()
    short = der.shorten(pair)

    assert der.lengthen_public(short.pubkey) == pair.pubkey
    assert der.lengthen_secret(short.secret) == pair.secret
    load_der_public_key(der.lengthen_public(short.pubkey))
    load_der_private_key(der.lengthen_secret(short.secret), password=None)


@pytest.mark.parametrize(
    ("pubkey", "secret"),
    [
        (der.DER_PREFIX_PUBLIC + b"\x01" * 31, der.DER_PREFIX_SECRET + b"\x02" * 32),
        (der.DER_PREFIX_PUBLIC + b"\x01" * 32, der.DER_PREFIX_SECRET + b"\x02" * 33),
        (b"\x01" * 32, b"\x02" * 32),
        (b"", b""),
    ],
)
def test_shorten_rejects_unexpected_lengths(pubkey: bytes, secret: bytes) -> None:
    """Wrong sizes fail loudly instead of silently taking the last 32 bytes."""

    with pytest.raises(KeyLengthError):
        der.shorten(KeypairBuffers(pubkey=pubkey, secret=secret))


def test_shorten_rejects_foreign_header() -> None:
    foreign = b"\xff" * 12 + b"\x01" * 32
    with pytest.raises(KeyLengthError, match="header"):
        der.shorten(
            KeypairBuffers(pubkey=foreign, secret=der.DER_PREFIX_SECRET + b"\x02" * 32)
        )


def test_lengthen_does_not_validate() -> None:
    """Lengthening a short key yields a short (malformed) DER blob."""

    assert len(der.lengthen_public(b"\x00" * 31)) == 43
    assert len(der.lengthen_secret(b"")) == 16
