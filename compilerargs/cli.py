"""
Command-line entry point.

Parses the process arguments into a compiler argument set and then:
- prints the standard synopsis for -help/-h, the advanced one for -X;
- prints the tool name and package version for -version;
- otherwise pretty-prints the parsed argument set.

The argument set's schema is validated once at start-up, so an authoring
mistake surfaces before any token is read.
"""
import sys

from rich.console import Console
from rich.pretty import pprint

from .compilers import CommonCompilerArguments, JvmCompilerArguments
from .faults import ArgumentsException, trigger
from .parsing import parse_command_line_arguments
from .usage import format_usage
from .utils import Unset, coalesce

console = Console()


def main(argv=Unset, /, *, tool=JvmCompilerArguments):
    """
    Run the front-end of `tool` (an ArgumentSet type) on `argv`.

    Returns the process exit status; faults are rendered on stderr and end
    the process with status 1.
    """
    from . import __version__

    prog = tool.executable_name()
    try:
        tool.validate()
        arguments = parse_command_line_arguments(
            list(coalesce(argv, sys.argv[1:])),
            tool.create_default_instance(),
            shell=True,
            prog=prog,
        )
    except ArgumentsException as fault:
        trigger(fault, shell=True, prog=prog, fancy=True)
        return 1

    if arguments.help or arguments.extra_help:
        console.out(format_usage(arguments, advanced=arguments.extra_help), end="", highlight=False)
    elif arguments.version:
        console.out(f"{prog} {__version__}", highlight=False)
    else:
        pprint(arguments, console=console, expand_all=True)
    return 0


def common():
    sys.exit(main(tool=CommonCompilerArguments))


def jvm():
    sys.exit(main(tool=JvmCompilerArguments))


__all__ = (
    "main",
    "common",
    "jvm",
)
