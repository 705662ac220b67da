import hashlib
import unittest

from nacl.encoding import RawEncoder
from nacl.hash import blake2b

from libs.cardano_asset.exceptions import HasherError
from libs.cardano_asset.hashing import DEFAULT_HASHER, Blake2b160Hasher, digest

POLICY = bytes.fromhex("d5e6bf0500378d4f0da4e8dde6becec7621cd8cbf5cbb9b87013d4cc")


class Sha256Hasher:
    def hash(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


class ShortHasher:
    def hash(self, data: bytes) -> bytes:
        return b"\x00" * 19


class DigestTests(unittest.TestCase):
    def test_default_hasher_is_blake2b_160(self) -> None:
        self.assertIsInstance(DEFAULT_HASHER, Blake2b160Hasher)
        self.assertEqual(
            digest(POLICY, b"SpaceBud0"),
            blake2b(POLICY + b"SpaceBud0", digest_size=20, encoder=RawEncoder),
        )

    def test_matches_hashlib_blake2b(self) -> None:
        self.assertEqual(digest(POLICY, b"abc"), hashlib.blake2b(POLICY + b"abc", digest_size=20).digest())

    def test_digest_is_20_bytes_and_deterministic(self) -> None:
        first = digest(POLICY, b"")
        self.assertEqual(len(first), 20)
        self.assertEqual(first, digest(POLICY, b""))

    def test_plain_concatenation_without_separator(self) -> None:
        self.assertEqual(digest(POLICY, b"ab"), digest(POLICY + b"a", b"b"))

    def test_injected_hasher_is_truncated(self) -> None:
        self.assertEqual(digest(POLICY, b"x", Sha256Hasher()), hashlib.sha256(POLICY + b"x").digest()[:20])

    def test_short_hasher_output_is_rejected(self) -> None:
        with self.assertRaises(HasherError):
            digest(POLICY, b"x", ShortHasher())


if __name__ == "__main__":
    unittest.main()
