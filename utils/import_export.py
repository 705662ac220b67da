import csv
import os
from dataclasses import asdict, dataclass, fields
from typing import List, Optional

from loguru import logger

from data.config import ASSETS_FILE, EXPORT_FILE, FILES_DIR


@dataclass
class FingerprintRow:
    asset_id: str
    policy_id: str = ""
    asset_name_hex: str = ""
    asset_name: str = ""
    fingerprint: str = ""
    error: str = ""


def read_lines(path: str, files_dir: Optional[str] = None) -> List[str]:
    file_path = os.path.join(files_dir or FILES_DIR, path)
    if not os.path.isfile(file_path):
        return []
    with open(file_path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


class Import:
    @staticmethod
    def asset_ids(filename: str = ASSETS_FILE, files_dir: Optional[str] = None) -> List[str]:
        ids = read_lines(filename, files_dir)
        if not ids:
            logger.warning(f"Import: no asset IDs in {filename}")
        return ids


class Export:
    @staticmethod
    def fingerprints_to_csv(rows: List[FingerprintRow], filename: str = EXPORT_FILE, files_dir: Optional[str] = None) -> Optional[str]:
        if not rows:
            logger.warning("Export: no fingerprints, skip....")
            return None

        path = os.path.join(files_dir or FILES_DIR, filename)
        fieldnames = [f.name for f in fields(FingerprintRow)]

        with open(path, "w", encoding="utf-8", newline="") as f:
            writer = csv.DictWriter(f, fieldnames=fieldnames)
            writer.writeheader()
            for row in rows:
                writer.writerow(asdict(row))

        failed = sum(1 for row in rows if row.error)
        logger.success(f"Export: fingerprints to CSV | Rows exported: {len(rows)} | Failed: {failed} | Path: {path}")
        return path
