import os

ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FILES_DIR = os.getenv("CARDANO_ASSET_FILES_DIR") or os.path.join(ROOT_DIR, "files")
LOG_DIR = os.path.join(FILES_DIR, "logs")
LOG_FILE = os.path.join(LOG_DIR, "log.log")

ASSETS_FILE = "assets.txt"
EXPORT_FILE = "fingerprints.csv"

LOG_LEVEL = os.getenv("CARDANO_ASSET_LOG_LEVEL", "INFO").upper()
