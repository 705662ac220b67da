from __future__ import annotations

import re

from ..exceptions import InvalidHexError

_HEX_RE = re.compile(r"^[0-9a-fA-F]*$")
_LOWER_HEX_RE = re.compile(r"^[0-9a-f]*$")


def is_lower_hex(value: str) -> bool:
    return bool(_LOWER_HEX_RE.fullmatch(value))


def decode_hex(value: str) -> bytes:
    if not _HEX_RE.fullmatch(value):
        raise InvalidHexError(f"invalid hex encoding: {value!r}")
    if len(value) % 2:
        raise InvalidHexError("invalid hex encoding: odd length")
    return bytes.fromhex(value)
