import os
import shutil

from data.config import ASSETS_FILE, FILES_DIR, LOG_DIR


def touch(path: str) -> None:
    if not os.path.exists(path):
        with open(path, "w", encoding="utf-8"):
            pass


def create_files() -> None:
    os.makedirs(FILES_DIR, exist_ok=True)
    os.makedirs(LOG_DIR, exist_ok=True)
    touch(os.path.join(FILES_DIR, ASSETS_FILE))


def reset_folder() -> None:
    shutil.rmtree(FILES_DIR, ignore_errors=True)
    create_files()
