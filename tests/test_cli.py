#!/usr/bin/env python3
import json
import tempfile
import unittest
from pathlib import Path

from click.testing import CliRunner

from byztxt_toolkit.assemble import assemble_book
from byztxt_toolkit.cli import cli
from byztxt_toolkit.writer import save_verse


class CliTests(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()

    def test_gematria_greek(self):
        result = self.runner.invoke(cli, ["gematria", "λογος"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("standard 373", result.output)
        self.assertIn("ordinal  62", result.output)

    def test_gematria_latin(self):
        result = self.runner.invoke(cli, ["gematria", "--latin", "logov"])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("λογος", result.output)
        self.assertIn("standard 373", result.output)

    def test_parse_prints_selected_verse(self):
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "JOH.UTR"
            path.write_text("1:1 en 1722 {PREP} arch 746 {N-DSF}\n"
                            "1:2 outov 3778 {D-NSM}\n", encoding="utf-8")

            result = self.runner.invoke(
                cli, ["parse", str(path), "--chapter", "1", "--verse", "2"])

        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0]["book"], "John")
        self.assertEqual(data[0]["text"], "ουτος")

    def test_show_reads_imported_verse(self):
        with tempfile.TemporaryDirectory() as td:
            data_dir = Path(td) / "byztxt-TR"
            for record in assemble_book("John", "1:1 en 1722 {PREP} logov 3056 {N-NSM}"):
                save_verse(record, data_dir)

            found = self.runner.invoke(
                cli, ["--output-dir", td, "show", "John", "1", "1"])
            missing = self.runner.invoke(
                cli, ["--output-dir", td, "show", "John", "1", "2"])

        self.assertEqual(found.exit_code, 0, found.output)
        self.assertEqual(json.loads(found.output)["text"], "εν λογος")
        self.assertEqual(missing.exit_code, 1)
        self.assertIn("not found", missing.output)

    def test_parse_missing_file(self):
        result = self.runner.invoke(cli, ["parse", "does-not-exist.UTR"])

        self.assertEqual(result.exit_code, 1)
        self.assertIn("File not found", result.output)


if __name__ == "__main__":
    unittest.main()
