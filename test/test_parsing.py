"""
Reference parser behavioral tests.

Scope
- Validate free arguments, flags, aliases and value-bearing options.
- Validate comma splitting and accumulation of multiple-valued options.
- Validate backward-compatible coroutines switches.
- Validate unknown flags and missing values.

Conventions
- Test method names follow CamelCase per project convention.
- Every parse starts from create_default_instance().
"""

from __future__ import annotations

import unittest
from unittest import TestCase

from compilerargs import (
    CommonCompilerArguments,
    Coroutines,
    JvmCompilerArguments,
    MissingValueError,
    UnknownFlagWarning,
    parse_command_line_arguments,
)


def parse(*tokens, tool=JvmCompilerArguments):
    return parse_command_line_arguments(tokens, tool.create_default_instance())


class TestParsing(TestCase):
    """Token handling."""

    def testReturnsGivenInstance(self):
        arguments = JvmCompilerArguments.create_default_instance()
        self.assertIs(parse_command_line_arguments([], arguments), arguments)

    def testEmptyKeepsDefaults(self):
        self.assertEqual(parse(), JvmCompilerArguments.create_default_instance())

    def testFreeArgumentsInOrder(self):
        arguments = parse("Main.kt", "-nowarn", "Util.kt")
        self.assertEqual(arguments.free_args, ["Main.kt", "Util.kt"])
        self.assertTrue(arguments.suppress_warnings)

    def testValueOptions(self):
        arguments = parse("-d", "out", "-jvm-target", "1.8", "-module-name", "app")
        self.assertEqual(arguments.destination, "out")
        self.assertEqual(arguments.jvm_target, "1.8")
        self.assertEqual(arguments.module_name, "app")

    def testAlias(self):
        self.assertEqual(parse("-cp", "lib/a.jar:lib/b.jar").classpath, "lib/a.jar:lib/b.jar")
        self.assertTrue(parse("-h").help)

    def testBaseOptionsOnDerivedSet(self):
        arguments = parse("-language-version", "1.1", "-Xno-inline", "-X")
        self.assertEqual(arguments.language_version, "1.1")
        self.assertTrue(arguments.no_inline)
        self.assertTrue(arguments.extra_help)

    def testMultipleValuesAccumulate(self):
        arguments = parse("-Xplugin", "a.jar,b.jar", "-Xplugin", "c.jar")
        self.assertEqual(arguments.plugin_classpaths, ["a.jar", "b.jar", "c.jar"])

    def testPluginOptionValueKeptWhole(self):
        arguments = parse("-P", "plugin:org.example:flag=on", tool=CommonCompilerArguments)
        self.assertEqual(arguments.plugin_options, ["plugin:org.example:flag=on"])

    def testValueMayLookLikeFlag(self):
        self.assertEqual(parse("-d", "-nowarn").destination, "-nowarn")

    def testCoroutinesSwitches(self):
        self.assertIs(parse("-Xcoroutines=enable").coroutines, Coroutines.ENABLE)
        self.assertIs(parse("-Xcoroutines=error").coroutines_error, True)
        self.assertIs(parse("-Xcoroutines=warn").coroutines_warn, True)

    def testLastCoroutinesSwitchWins(self):
        arguments = parse("-Xcoroutines=error", "-Xcoroutines=enable")
        self.assertIs(arguments.coroutines, Coroutines.ENABLE)
        self.assertIs(arguments.coroutines_error, False)

    def testUnknownFlagKept(self):
        with self.assertWarns(UnknownFlagWarning):
            arguments = parse("-Xno-such-thing", "Main.kt", "-whatever")
        self.assertEqual(arguments.unknown_extra_flags, ["-Xno-such-thing", "-whatever"])
        self.assertEqual(arguments.free_args, ["Main.kt"])

    def testDerivedOptionUnknownToBase(self):
        with self.assertWarns(UnknownFlagWarning):
            arguments = parse("-no-jdk", tool=CommonCompilerArguments)
        self.assertEqual(arguments.unknown_extra_flags, ["-no-jdk"])

    def testMissingValue(self):
        with self.assertRaises(MissingValueError) as context:
            parse("Main.kt", "-d")
        self.assertIn("-d", context.exception.message)
        self.assertIn("<directory|jar>", context.exception.options["hint"])


if __name__ == "__main__":
    unittest.main()
