from __future__ import annotations

from typing import Protocol

from nacl.encoding import RawEncoder
from nacl.hash import blake2b

from .constants import DIGEST_SIZE
from .exceptions import HasherError


class Hasher(Protocol):
    def hash(self, data: bytes) -> bytes: ...


class Blake2b160Hasher:
    """BLAKE2b with a 160-bit digest, the hash CIP-14 fingerprints are defined over."""

    def hash(self, data: bytes) -> bytes:
        return blake2b(data, digest_size=DIGEST_SIZE, encoder=RawEncoder)


DEFAULT_HASHER: Hasher = Blake2b160Hasher()


def digest(policy_bytes: bytes, name_bytes: bytes, hasher: Hasher | None = None) -> bytes:
    h = (hasher or DEFAULT_HASHER).hash(bytes(policy_bytes) + bytes(name_bytes))
    if len(h) < DIGEST_SIZE:
        raise HasherError(f"hasher returned {len(h)} bytes, expected at least {DIGEST_SIZE}")
    return h[:DIGEST_SIZE]
