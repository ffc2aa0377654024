"""Pytest configuration and fixtures."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from sigcore.primitives import generate_keypair_buffers
from sigcore.types import KeypairBuffers

# RFC 8032, section 7.1, TEST 1 (empty message).
RFC8032_SECRET = bytes.fromhex(
    "9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60"
)
RFC8032_PUBLIC = bytes.fromhex(
    "d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a"
)
RFC8032_SIGNATURE = bytes.fromhex(
    "e5564300c360ac729086e2cc806e828a84877f1eb8e5d974d873e065224901555"
    "fb8821590a33bacc61e39701cf9b46bd25bf5f0595bbe24655141438e7a100b"
)


@pytest.fixture
def keypair() -> KeypairBuffers:
    """Return a freshly generated compact keypair."""

    return generate_keypair_buffers()


@pytest.fixture
def rfc8032_keypair() -> KeypairBuffers:
    """Return the RFC 8032 test vector keypair."""

    return KeypairBuffers(pubkey=RFC8032_PUBLIC, secret=RFC8032_SECRET)


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings and logger state from leaking between tests."""

    for name in ("SIGCORE_LOG_LEVEL", "SIGCORE_JSON_LOGS", "SIGCORE_TRACE_ID"):
        monkeypatch.delenv(name, raising=False)
    logger = logging.getLogger("sigcore")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)


@pytest.fixture
def rfc8032_signature() -> bytes:
    """Return the RFC 8032 expected signature over the empty message."""

    return RFC8032_SIGNATURE
