FINGERPRINT_HRP = "asset"

POLICY_ID_LENGTH = 28
POLICY_ID_HEX_LENGTH = POLICY_ID_LENGTH * 2
MAX_ASSET_NAME_LENGTH = 32

DIGEST_SIZE = 20
