from __future__ import annotations

from dataclasses import dataclass

from .constants import FINGERPRINT_HRP, MAX_ASSET_NAME_LENGTH, POLICY_ID_HEX_LENGTH
from .exceptions import AssetNameTooLongError, InvalidAssetIdError, InvalidPolicyIdError
from .hashing import Hasher, digest
from .utils import bech32 as b32
from .utils.hexutil import decode_hex, is_lower_hex


def _name_bytes(asset_name: str | bytes) -> bytes:
    return asset_name.encode("utf-8") if isinstance(asset_name, str) else bytes(asset_name)


def validate_policy_id(policy_id: str) -> None:
    if len(policy_id) != POLICY_ID_HEX_LENGTH or not is_lower_hex(policy_id):
        raise InvalidPolicyIdError(policy_id)


def validate_asset_name(asset_name: str | bytes) -> bytes:
    name = _name_bytes(asset_name)
    if len(name) > MAX_ASSET_NAME_LENGTH:
        raise AssetNameTooLongError(len(name))
    return name


def validate_asset_name_hex(asset_name_hex: str) -> None:
    validate_asset_name(decode_hex(asset_name_hex))


def fingerprint(policy_id: str, asset_name: str | bytes, hasher: Hasher | None = None) -> str:
    """Compute the CIP-14 fingerprint of a native token.

    Args:
        policy_id: 56 lowercase hex characters
        asset_name: raw asset name, ``str`` is taken as UTF-8

    Returns:
        ``asset1...`` bech32 string of ``blake2b-160(policy_id || asset_name)``
    """
    validate_policy_id(policy_id)
    name = validate_asset_name(asset_name)
    return b32.encode(FINGERPRINT_HRP, digest(decode_hex(policy_id), name, hasher))


def fingerprint_from_hex(policy_id: str, asset_name_hex: str, hasher: Hasher | None = None) -> str:
    return fingerprint(policy_id, decode_hex(asset_name_hex), hasher)


@dataclass(frozen=True, slots=True)
class Asset:
    policy_id: str
    asset_name: bytes = b""

    @classmethod
    def from_name(cls, policy_id: str, asset_name: str | bytes) -> "Asset":
        validate_policy_id(policy_id)
        return cls(policy_id=policy_id, asset_name=validate_asset_name(asset_name))

    @classmethod
    def from_hex(cls, policy_id: str, asset_name_hex: str) -> "Asset":
        validate_policy_id(policy_id)
        return cls(policy_id=policy_id, asset_name=validate_asset_name(decode_hex(asset_name_hex)))

    @property
    def asset_name_hex(self) -> str:
        return self.asset_name.hex()

    @property
    def asset_id(self) -> str:
        if not self.asset_name:
            return self.policy_id
        return f"{self.policy_id}.{self.asset_name_hex}"

    def fingerprint(self, hasher: Hasher | None = None) -> str:
        return fingerprint(self.policy_id, self.asset_name, hasher)

    def info(self, hasher: Hasher | None = None) -> "AssetInfo":
        return AssetInfo(
            asset=self,
            fingerprint=self.fingerprint(hasher),
            asset_name_hex=self.asset_name_hex,
            asset_id=self.asset_id,
        )

    def is_valid_utf8_name(self) -> bool:
        try:
            self.asset_name.decode("utf-8")
            return True
        except UnicodeDecodeError:
            return False

    def display_name(self) -> str:
        return self.asset_name.decode("utf-8") if self.is_valid_utf8_name() else self.asset_name_hex


@dataclass(frozen=True, slots=True)
class AssetInfo:
    asset: Asset
    fingerprint: str
    asset_name_hex: str
    asset_id: str

    @property
    def policy_id(self) -> str:
        return self.asset.policy_id


def parse_asset_id(asset_id: str) -> Asset:
    """Parse ``policyId.assetNameHex`` or a bare ``policyId``."""
    policy_id, _, asset_name_hex = asset_id.partition(".")
    if not policy_id:
        raise InvalidAssetIdError(asset_id)
    return Asset.from_hex(policy_id, asset_name_hex)
