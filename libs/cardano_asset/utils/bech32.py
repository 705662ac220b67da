from __future__ import annotations

from typing import Iterable

from ..exceptions import (
    AlphabetOverflowError,
    ChecksumError,
    InvalidCharacterError,
    InvalidHrpError,
    InvalidPaddingError,
)

BECH32_ALPHABET = "qpzry9x8gf2tvdw0s3jn54khce6mua7l"
BECH32_CONST = 1
SEPARATOR = "1"
CHECKSUM_LENGTH = 6

_GEN = (0x3B6A57B2, 0x26508E6D, 0x1EA119FA, 0x3D4233DD, 0x2A1462B3)


def polymod(vals: Iterable[int]) -> int:
    chk = 1
    for v in vals:
        top = chk >> 25
        chk = ((chk & 0x1FFFFFF) << 5) ^ v
        for i in range(5):
            if (top >> i) & 1:
                chk ^= _GEN[i]
    return chk


def hrp_expand(hrp: str) -> list[int]:
    return [ord(x) >> 5 for x in hrp] + [0] + [ord(x) & 31 for x in hrp]


def validate_hrp(hrp: str) -> None:
    """Reject prefixes that would encode to a well-formed but meaningless string.

    A valid HRP is non-empty, printable US-ASCII (33..126), lowercase and does
    not contain the separator.
    """
    if not hrp:
        raise InvalidHrpError("empty HRP")
    for c in hrp:
        if ord(c) < 33 or ord(c) > 126:
            raise InvalidHrpError(f"invalid HRP character: {c!r}")
        if c == SEPARATOR:
            raise InvalidHrpError("HRP must not contain the separator '1'")
        if "A" <= c <= "Z":
            raise InvalidHrpError("HRP must be lowercase")


def create_checksum(hrp: str, data: list[int]) -> list[int]:
    vals = hrp_expand(hrp) + data
    mod = polymod(vals + [0] * CHECKSUM_LENGTH) ^ BECH32_CONST
    return [(mod >> 5 * (5 - i)) & 31 for i in range(CHECKSUM_LENGTH)]


def verify_checksum(hrp: str, data: Iterable[int]) -> bool:
    return polymod(hrp_expand(hrp) + list(data)) == BECH32_CONST


def convertbits(data: bytes | Iterable[int], from_bits: int, to_bits: int, *, pad: bool) -> bytes:
    """Regroup a sequence of ``from_bits``-wide values into ``to_bits``-wide values.

    With ``pad`` the trailing bits are zero-filled into one last group. Without
    it, leftover bits must be fewer than ``from_bits`` and all zero, otherwise the
    input could not come from a padded conversion and InvalidPaddingError is raised.
    """
    acc = 0
    bits = 0
    ret: list[int] = []
    maxv = (1 << to_bits) - 1
    for v in data:
        if v < 0 or v >> from_bits:
            raise InvalidPaddingError(f"value out of range for {from_bits}-bit input: {v}")
        acc = (acc << from_bits) | v
        bits += from_bits
        while bits >= to_bits:
            bits -= to_bits
            ret.append((acc >> bits) & maxv)
    if pad:
        if bits:
            ret.append((acc << (to_bits - bits)) & maxv)
    elif bits >= from_bits or ((acc << (to_bits - bits)) & maxv):
        raise InvalidPaddingError("invalid padding")
    return bytes(ret)


def encode_words(hrp: str, words: bytes | list[int]) -> str:
    validate_hrp(hrp)
    data = list(words)
    symbols = []
    for d in data + create_checksum(hrp, data):
        if d < 0 or d >= len(BECH32_ALPHABET):
            raise AlphabetOverflowError(d)
        symbols.append(BECH32_ALPHABET[d])
    return f"{hrp}{SEPARATOR}{''.join(symbols)}"


def encode(hrp: str, payload: bytes) -> str:
    words = convertbits(payload, 8, 5, pad=True)
    return encode_words(hrp, words)


def decode_words(bech: str) -> tuple[str, bytes]:
    if any(ord(c) < 33 or ord(c) > 126 for c in bech):
        raise InvalidCharacterError("invalid bech32: character out of range")
    if bech.lower() != bech and bech.upper() != bech:
        raise InvalidCharacterError("invalid bech32: mixed case")
    s = bech.lower()
    pos = s.rfind(SEPARATOR)
    if pos < 0:
        raise InvalidCharacterError("invalid bech32: no separator")
    if pos == 0:
        raise InvalidHrpError("empty HRP")
    if pos + CHECKSUM_LENGTH + 1 > len(s):
        raise InvalidCharacterError("invalid bech32: checksum too short")
    hrp, data = s[:pos], s[pos + 1 :]
    for c in data:
        if c not in BECH32_ALPHABET:
            raise InvalidCharacterError(f"invalid bech32 character: {c!r}")
    vals = [BECH32_ALPHABET.index(c) for c in data]
    if not verify_checksum(hrp, vals):
        raise ChecksumError("bech32 checksum failed")
    return hrp, bytes(vals[:-CHECKSUM_LENGTH])


def decode(bech: str, expected_hrp: str | None = None) -> bytes:
    hrp, words = decode_words(bech)
    if expected_hrp is not None and hrp != expected_hrp:
        raise InvalidHrpError(f"unexpected HRP: {hrp!r}")
    return convertbits(words, 5, 8, pad=False)
