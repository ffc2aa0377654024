"""Sigcore - Ed25519 hashing, key generation and signing primitives."""

from __future__ import annotations

from importlib import import_module
from typing import Any, TYPE_CHECKING

__all__ = [
    "sha256",
    "generate_keypair_buffers",
    "sign",
    "verify",
    "CryptographyCrypto",
    "KeypairBuffers",
    "EncodedSig",
    "LowLevelCrypto",
    "SigcoreError",
    "DecodingError",
    "SigningError",
    "GenerationError",
    "KeyLengthError",
]

if TYPE_CHECKING:
    from .errors import (
        DecodingError,
        GenerationError,
        KeyLengthError,
        SigcoreError,
        SigningError,
    )
    from .primitives import (
        CryptographyCrypto,
        generate_keypair_buffers,
        sha256,
        sign,
        verify,
    )
    from .types import EncodedSig, KeypairBuffers, LowLevelCrypto


def __getattr__(name: str) -> Any:
    """Lazily import modules so ``cryptography`` loads on first use."""

    module_map = {
        "sha256": "primitives",
        "generate_keypair_buffers": "primitives",
        "sign": "primitives",
        "verify": "primitives",
        "CryptographyCrypto": "primitives",
        "KeypairBuffers": "types",
        "EncodedSig": "types",
        "LowLevelCrypto": "types",
        "SigcoreError": "errors",
        "DecodingError": "errors",
        "SigningError": "errors",
        "GenerationError": "errors",
        "KeyLengthError": "errors",
    }

    if name not in module_map:
        raise AttributeError(name)

    module = import_module(f".{module_map[name]}", __name__)
    return getattr(module, name)
