"""
Command-line entry point behavioral tests.

Scope
- Validate -help/-X/-version dispatch and the default pretty-printed result.
- Validate that faults end the process and schema bugs are caught at start-up.

Conventions
- Test method names follow CamelCase per project convention.
- Output consoles are swapped for recording ones.
"""

from __future__ import annotations

import io
import unittest
from unittest import TestCase, mock

from rich.console import Console

from compilerargs import (
    ArgumentSet,
    CommonCompilerArguments,
    Flag,
    JvmCompilerArguments,
    __version__,
    cli,
    faults,
)


def recording():
    return Console(file=io.StringIO(), width=200, color_system=None)


class TestMain(TestCase):
    """main() dispatch."""

    def setUp(self):
        self.stdout = recording()
        self.stderr = recording()
        patches = (
            mock.patch.object(cli, "console", self.stdout),
            mock.patch.object(faults, "console", self.stderr),
        )
        for patch in patches:
            patch.start()
            self.addCleanup(patch.stop)

    def output(self):
        return self.stdout.file.getvalue()

    def testHelp(self):
        self.assertEqual(cli.main(["-help"], tool=CommonCompilerArguments), 0)
        self.assertIn("Usage: kotlinc <options> <source files>", self.output())
        self.assertIn("where possible options include:", self.output())
        self.assertIn("  -nowarn", self.output())
        self.assertNotIn("-Xno-inline", self.output())

    def testAdvancedHelp(self):
        self.assertEqual(cli.main(["-X"]), 0)
        self.assertIn("Usage: kotlinc-jvm <options> <source files>", self.output())
        self.assertIn("where advanced options include:", self.output())
        self.assertIn("-Xcoroutines={enable|warn|error}", self.output())
        self.assertIn("without any notice", self.output())

    def testVersion(self):
        self.assertEqual(cli.main(["-version"], tool=JvmCompilerArguments), 0)
        self.assertEqual(self.output().strip(), f"kotlinc-jvm {__version__}")

    def testPrettyPrintsArguments(self):
        self.assertEqual(cli.main(["-d", "out", "Main.kt"]), 0)
        self.assertIn("JvmCompilerArguments", self.output())
        self.assertIn("Main.kt", self.output())
        self.assertIn("out", self.output())

    def testUnknownFlagReportedAndKept(self):
        self.assertEqual(cli.main(["-Xno-such-thing"]), 0)
        self.assertIn("-Xno-such-thing", self.stderr.file.getvalue())
        self.assertIn("22201", self.stderr.file.getvalue())

    def testMissingValueExits(self):
        with self.assertRaises(SystemExit) as context:
            cli.main(["-d"])
        self.assertEqual(context.exception.code, 1)
        self.assertIn("no value passed for argument -d", self.stderr.file.getvalue())

    def testBrokenSchemaExitsBeforeParsing(self):
        class Broken(ArgumentSet, executable="broken"):
            quiet = Flag("quiet")

        with self.assertRaises(SystemExit) as context:
            cli.main(["-quiet"], tool=Broken)
        self.assertEqual(context.exception.code, 1)
        self.assertIn("has no description", self.stderr.file.getvalue())
        self.assertEqual(self.output(), "")


if __name__ == "__main__":
    unittest.main()
