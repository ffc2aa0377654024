"""Type definitions for the signing core."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NewType, Protocol, runtime_checkable

__all__ = [
    "EncodedSig",
    "KeypairBuffers",
    "LowLevelCrypto",
    "Message",
    "bytes_from_hex",
]

EncodedSig = NewType("EncodedSig", str)
"""Text encoding of a raw 64-byte Ed25519 signature."""

Message = bytes | str


@dataclass(frozen=True, slots=True)
class KeypairBuffers:
    """Ed25519 keypair held as raw byte strings.

    At the public interface both fields are 32 bytes. The DER codec also
    uses this container for the 44/48-byte DER forms before compaction.
    """

    pubkey: bytes
    secret: bytes

    @classmethod
    def from_hex(cls, pubkey_hex: str, secret_hex: str) -> "KeypairBuffers":
        """Build a keypair from hex strings (an optional ``0x`` prefix is allowed)."""

        return cls(
            pubkey=bytes_from_hex(pubkey_hex),
            secret=bytes_from_hex(secret_hex),
        )

    def pubkey_hex(self) -> str:
        return self.pubkey.hex()

    def secret_hex(self) -> str:
        return self.secret.hex()

    def __repr__(self) -> str:
        secret = self.secret.hex()
        masked = f"{secret[:4]}...{secret[-4:]}" if secret else ""
        return f"KeypairBuffers(pubkey={self.pubkey.hex()}, secret={masked})"


@runtime_checkable
class LowLevelCrypto(Protocol):
    """Interface implemented by interchangeable crypto backends."""

    def sha256(self, data: Message) -> bytes: ...

    def generate_keypair_buffers(self) -> KeypairBuffers: ...

    def sign(self, keypair: KeypairBuffers, msg: Message) -> EncodedSig: ...

    def verify(self, public_key: bytes, sig: EncodedSig, msg: Message) -> bool: ...


def bytes_from_hex(value: str) -> bytes:
    """Decode a hex string, accepting an optional ``0x`` prefix.

    Raises:
        ValueError: If ``value`` is not valid hex.
    """

    if value.startswith(("0x", "0X")):
        value = value[2:]
    return bytes.fromhex(value)
