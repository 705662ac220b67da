import csv
import os
import tempfile
import unittest

from functions.activity import activity, fingerprint_asset_ids
from libs.cardano_asset.asset import fingerprint
from utils.import_export import Export, Import, read_lines

POLICY_ID = "d5e6bf0500378d4f0da4e8dde6becec7621cd8cbf5cbb9b87013d4cc"
ASSET_NAME_HEX = "537061636542756430"


class BatchFingerprintTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.files_dir = self._tmp.name

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def _write(self, filename: str, lines: list[str]) -> None:
        with open(os.path.join(self.files_dir, filename), "w", encoding="utf-8") as f:
            f.write("\n".join(lines))

    def test_read_lines_skips_blank_lines_and_missing_files(self) -> None:
        self._write("assets.txt", [f"  {POLICY_ID}  ", "", "   "])
        self.assertEqual(read_lines("assets.txt", self.files_dir), [POLICY_ID])
        self.assertEqual(read_lines("missing.txt", self.files_dir), [])
        self.assertEqual(Import.asset_ids("missing.txt", self.files_dir), [])

    def test_bad_lines_do_not_abort_the_batch(self) -> None:
        rows = fingerprint_asset_ids([f"{POLICY_ID}.{ASSET_NAME_HEX}", "bad.00", POLICY_ID])
        self.assertEqual(len(rows), 3)
        self.assertEqual(rows[0].fingerprint, fingerprint(POLICY_ID, "SpaceBud0"))
        self.assertEqual(rows[0].asset_name, "SpaceBud0")
        self.assertEqual(rows[1].fingerprint, "")
        self.assertIn("invalid policy ID", rows[1].error)
        self.assertEqual(rows[2].asset_id, POLICY_ID)
        self.assertEqual(rows[2].error, "")

    def test_export_skips_empty_rows(self) -> None:
        self.assertIsNone(Export.fingerprints_to_csv([], files_dir=self.files_dir))

    def test_activity_writes_csv(self) -> None:
        self._write("assets.txt", [f"{POLICY_ID}.{ASSET_NAME_HEX}", f"{POLICY_ID}.zz"])
        path = activity(files_dir=self.files_dir)
        self.assertEqual(path, os.path.join(self.files_dir, "fingerprints.csv"))

        with open(path, encoding="utf-8", newline="") as f:
            rows = list(csv.DictReader(f))

        self.assertEqual(len(rows), 2)
        self.assertEqual(
            list(rows[0].keys()),
            ["asset_id", "policy_id", "asset_name_hex", "asset_name", "fingerprint", "error"],
        )
        self.assertEqual(rows[0]["fingerprint"], fingerprint(POLICY_ID, "SpaceBud0"))
        self.assertIn("invalid hex", rows[1]["error"])

    def test_activity_without_input_returns_none(self) -> None:
        self.assertIsNone(activity(files_dir=self.files_dir))


if __name__ == "__main__":
    unittest.main()
