"""
Usage synopsis rendering for argument sets.

The renderer knows nothing about concrete tools: it discovers options from the
declaration table of the given set's type (ArgumentSet.fields(), most-derived
class first), keeps those of the requested tier and writes one aligned line per
option.

Layout
    Usage: kotlinc-jvm <options> <source files>
    where possible options include:
      -d <directory|jar>         Destination for generated class files
      -classpath (-cp) <path>
                                 Paths where to find user class files
      ...

- Descriptions start at column OPTION_NAME_PADDING_WIDTH (the javac/scalac
  convention). A name column that would come within OPTION_NAME_BREAK_MARGIN
  characters of it is followed by a line break, and the description starts at
  the same column on the next line.
- Variants of one Choice are merged into a single line placed where the first
  member is declared, e.g. "-Xcoroutines={enable|warn|error} <description>".
- The advanced synopsis ends with a notice that advanced options may change.

Contract violations in the schema (bad name count, missing description on an
option being rendered) raise the matching SchemaError; nothing is ever
reported through the rendered text.
"""
import io

from .arguments import Tier, Variant
from .faults import NameCardinalityError, MissingDescriptionError

OPTION_NAME_PADDING_WIDTH = 29
OPTION_NAME_BREAK_MARGIN = 4

ADVANCED_NOTICE = "Advanced options are non-standard and may be changed or removed without any notice."


def _describe(argument, advanced, /):
    """
    Format one option, or return None when it belongs to the other tier.
    """
    names = argument.names
    if len(names) not in (1, 2):
        raise NameCardinalityError(
            f"{argument.attribute!r} declares {len(names)} names, expected 1 or 2",
            hint="declare one primary name and at most one alias",
        )

    grouped = isinstance(argument, Variant)
    value = argument.placeholder if grouped else names[0]
    if (Tier.of(value) is Tier.ADVANCED) != advanced:
        return None

    line = "  -" + value

    if grouped:
        return f"{line} {argument.summary}"

    if argument.alias is not None:
        line += f" (-{argument.alias})"

    if argument.metavar is not None:
        line += " " + argument.metavar

    width = OPTION_NAME_PADDING_WIDTH
    if len(line) >= width - OPTION_NAME_BREAK_MARGIN:
        line += "\n"
        width += len(line)
    line = line.ljust(width)

    if argument.descr is None:
        raise MissingDescriptionError(
            f"no description for argument {names[0]!r}",
            hint="pass descr=... to the declaration",
        )
    return line + argument.descr


def iter_usage(arguments, /, advanced=False):
    """
    Yield the synopsis of an argument set line by line (without newlines;
    a line whose name column overflows contains one embedded newline).
    """
    yield f"Usage: {arguments.executable_name()} <options> <source files>"
    yield f"where {'advanced' if advanced else 'possible'} options include:"

    printed = set()
    for argument in type(arguments).arguments():
        if (line := _describe(argument, advanced)) is None:
            continue
        if isinstance(argument, Variant):
            if argument.group in printed:
                continue
            printed.add(argument.group)
        yield line

    if advanced:
        yield ""
        yield ADVANCED_NOTICE


def print_usage(target, arguments, /, advanced=False):
    """
    Write the synopsis of `arguments` to the text stream `target`.

    Parameters
    - target: any object accepted as print(file=...).
    - arguments: an ArgumentSet instance; it is only read.
    - advanced: False for the standard options, True for the advanced (-X) ones.
    """
    for line in iter_usage(arguments, advanced):
        print(line, file=target)


def format_usage(arguments, /, advanced=False):
    """
    Return the text print_usage() would write.
    """
    buffer = io.StringIO()
    print_usage(buffer, arguments, advanced)
    return buffer.getvalue()


__all__ = (
    "OPTION_NAME_PADDING_WIDTH",
    "OPTION_NAME_BREAK_MARGIN",
    "ADVANCED_NOTICE",
    "iter_usage",
    "print_usage",
    "format_usage",
)
