from __future__ import annotations


class CardanoAssetError(ValueError): ...


class EncodingError(CardanoAssetError): ...


class InvalidPaddingError(EncodingError): ...


class AlphabetOverflowError(EncodingError):
    def __init__(self, value: int) -> None:
        super().__init__(f"invalid bech32 data symbol: {value}")
        self.value = value


class InvalidHrpError(EncodingError): ...


class InvalidCharacterError(EncodingError): ...


class ChecksumError(EncodingError): ...


class HasherError(CardanoAssetError): ...


class InvalidPolicyIdError(CardanoAssetError):
    def __init__(self, policy_id: str | None = None) -> None:
        super().__init__("invalid policy ID: must be 56 lowercase hex characters")
        self.policy_id = policy_id


class InvalidHexError(CardanoAssetError): ...


class AssetNameTooLongError(CardanoAssetError):
    def __init__(self, length: int) -> None:
        super().__init__(f"asset name too long: {length} bytes, max 32 bytes")
        self.length = length


class InvalidAssetIdError(CardanoAssetError):
    def __init__(self, asset_id: str | None = None) -> None:
        super().__init__("invalid asset ID: expected format policyId.assetNameHex or policyId")
        self.asset_id = asset_id
