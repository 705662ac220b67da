from typing import List, Optional

from loguru import logger

from libs.cardano_asset.asset import parse_asset_id
from libs.cardano_asset.exceptions import CardanoAssetError
from utils.import_export import Export, FingerprintRow, Import


def fingerprint_asset_id(asset_id: str) -> FingerprintRow:
    try:
        asset = parse_asset_id(asset_id)
        info = asset.info()
    except CardanoAssetError as e:
        logger.error(f"[{asset_id}] failed: {e}")
        return FingerprintRow(asset_id=asset_id, error=str(e))

    logger.success(f"[{info.asset_id}] {asset.display_name()!r} -> {info.fingerprint}")
    return FingerprintRow(
        asset_id=info.asset_id,
        policy_id=info.policy_id,
        asset_name_hex=info.asset_name_hex,
        asset_name=asset.display_name(),
        fingerprint=info.fingerprint,
    )


def fingerprint_asset_ids(asset_ids: List[str]) -> List[FingerprintRow]:
    return [fingerprint_asset_id(asset_id) for asset_id in asset_ids]


def activity(files_dir: Optional[str] = None) -> Optional[str]:
    asset_ids = Import.asset_ids(files_dir=files_dir)
    if not asset_ids:
        return None

    logger.info(f"Start fingerprinting asset IDs: {len(asset_ids)}")
    rows = fingerprint_asset_ids(asset_ids)
    return Export.fingerprints_to_csv(rows, files_dir=files_dir)
