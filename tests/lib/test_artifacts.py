"""Tests for build artifact and flattened-file inspection."""

import tempfile
import unittest
from pathlib import Path

from test_utils import ARTIFACT_JSON

from ctdeploy.lib.artifacts import extract_compiler_version, file_stats


class ExtractCompilerVersionTests(unittest.TestCase):
    def _write(self, text: str) -> Path:
        td = tempfile.TemporaryDirectory()
        self.addCleanup(td.cleanup)
        path = Path(td.name) / "ConditionalTokens.json"
        path.write_text(text, encoding="utf-8")
        return path

    def test_pretty_printed_truffle_artifact(self) -> None:
        path = self._write(ARTIFACT_JSON)
        self.assertEqual(
            extract_compiler_version(path), "0.5.10+commit.5a6ea5b1.Emscripten.clang"
        )

    def test_version_beyond_lookahead_is_ignored(self) -> None:
        text = (
            "{\n"
            '  "compiler": {\n'
            '    "name": "solc",\n'
            '    "optimizer": true,\n'
            '    "version": "0.5.10"\n'
            "  }\n"
            "}\n"
        )
        self.assertIsNone(extract_compiler_version(self._write(text)))

    def test_no_compiler_key(self) -> None:
        path = self._write('{\n  "contractName": "X",\n  "version": "1"\n}\n')
        self.assertIsNone(extract_compiler_version(path))

    def test_first_match_wins(self) -> None:
        text = (
            '  "compiler": {\n'
            '    "version": "0.5.10"\n'
            "  },\n"
            '  "compiler": {\n'
            '    "version": "0.6.0"\n'
            "  }\n"
        )
        self.assertEqual(extract_compiler_version(self._write(text)), "0.5.10")


class FileStatsTests(unittest.TestCase):
    def test_counts_bytes_and_newlines(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "flat.sol"
            path.write_bytes(b"line one\nline two\nno newline")
            stats = file_stats(path)
        self.assertEqual(stats.size_bytes, 28)
        self.assertEqual(stats.lines, 2)

    def test_empty_file(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "flat.sol"
            path.write_bytes(b"")
            stats = file_stats(path)
        self.assertEqual((stats.size_bytes, stats.lines), (0, 0))
