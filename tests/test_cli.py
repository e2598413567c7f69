"""
Tests for the `lox` command line.
"""

import json
import os
import sys
import tempfile
import unittest

from click.testing import CliRunner

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from lox import __version__
from lox.cli import cli
from lox.config import EXIT_DATAERR, LOG_LEVEL
from lox.utils.logging import set_level

FIXTURE_DIR = os.path.join(os.path.dirname(__file__), "fixtures")


class TestScanCommand(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        self._tmpdir = tempfile.TemporaryDirectory()
        self.tmpdir = self._tmpdir.name

    def tearDown(self):
        self._tmpdir.cleanup()

    def _write(self, name: str, text: str) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def _write_bytes(self, name: str, data: bytes) -> str:
        path = os.path.join(self.tmpdir, name)
        with open(path, "wb") as f:
            f.write(data)
        return path

    def test_scan_prints_tokens(self):
        path = self._write("ok.lox", 'var language = "lox";\n')
        result = self.runner.invoke(cli, ["scan", path])

        self.assertEqual(result.exit_code, 0, result.output)
        lines = result.output.splitlines()
        self.assertEqual(lines[0], 'Found VAR ("var") at 1:1')
        self.assertEqual(lines[3], 'Found STRING (""lox"") "lox" at 1:16')
        self.assertEqual(lines[-1], 'Found EOF ("") at 2:1')

    def test_scan_reports_errors_and_fails(self):
        path = self._write("bad.lox", 'print @;\nvar s = "open')
        result = self.runner.invoke(cli, ["scan", path])

        self.assertEqual(result.exit_code, EXIT_DATAERR)
        self.assertIn("Unexpected character '@' at (1:7)", result.output)
        self.assertIn("Unterminated string at (2:9)", result.output)

    def test_scan_warnings_do_not_fail(self):
        path = self._write("warn.lox", "Var x;")
        result = self.runner.invoke(cli, ["scan", path])

        self.assertEqual(result.exit_code, 0)
        self.assertIn("warning: 'Var' is an identifier", result.output)

    def test_scan_json(self):
        path = self._write("ok.lox", "print 1.5;")
        result = self.runner.invoke(cli, ["scan", "--format", "json", path])

        self.assertEqual(result.exit_code, 0, result.output)
        tokens = json.loads(result.output)
        self.assertEqual([t["type"] for t in tokens], ["PRINT", "NUMBER", "SEMICOLON", "EOF"])
        self.assertEqual(tokens[1]["literal"], 1.5)
        self.assertEqual(tokens[1]["column"], 7)

    def test_scan_json_overflowing_number(self):
        path = self._write("big.lox", "1" * 400)
        result = self.runner.invoke(cli, ["scan", "--format", "json", path])

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertNotIn("Infinity", result.output)
        tokens = json.loads(result.output)
        self.assertEqual(tokens[0]["literal"], "inf")

    def test_scan_with_comments(self):
        path = self._write("c.lox", "// note\nx")
        result = self.runner.invoke(cli, ["scan", "--comments", path])

        self.assertEqual(result.exit_code, 0)
        self.assertIn('Found COMMENT ("// note") at 1:1', result.output)

    def test_missing_file_is_usage_error(self):
        result = self.runner.invoke(cli, ["scan", os.path.join(self.tmpdir, "nope.lox")])
        self.assertEqual(result.exit_code, 2)

    def test_undecodable_file_reports_error(self):
        path = self._write_bytes("latin.lox", b'var x = "\xff\xfe";\n')
        result = self.runner.invoke(cli, ["scan", path])

        self.assertNotEqual(result.exit_code, 0)
        self.assertIsInstance(result.exception, SystemExit)
        self.assertIn("not valid utf-8", result.output)
        self.assertIn("latin.lox", result.output)

    def test_every_fixture_scans_cleanly(self):
        """Mirror of the per-fixture harness: each file must exit 0."""
        fixtures = sorted(os.listdir(FIXTURE_DIR))
        self.assertTrue(fixtures)
        for name in fixtures:
            with self.subTest(fixture=name):
                result = self.runner.invoke(cli, ["scan", os.path.join(FIXTURE_DIR, name)])
                self.assertEqual(result.exit_code, 0, result.output)


class TestCliMisc(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()

    def tearDown(self):
        set_level(LOG_LEVEL)

    def test_repl_scans_each_line(self):
        result = self.runner.invoke(cli, ["repl"], input="var x = 1;\n@\n")

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("> ", result.output)
        self.assertIn('Found VAR ("var") at 1:1', result.output)
        self.assertIn("Unexpected character '@' at (1:1)", result.output)

    def test_repl_exits_on_end_of_input(self):
        result = self.runner.invoke(cli, ["repl"], input="")
        self.assertEqual(result.exit_code, 0)

    def test_version(self):
        result = self.runner.invoke(cli, ["--version"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn(__version__, result.output)

    def test_log_level_option(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "ok.lox")
            with open(path, "w", encoding="utf-8") as f:
                f.write("x")
            result = self.runner.invoke(cli, ["--log-level", "debug", "scan", path])
        self.assertEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
