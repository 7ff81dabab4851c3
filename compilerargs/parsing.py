"""
Reference command-line parser for argument sets.

Fills an argument set from process arguments using the same declaration table
the usage renderer reads:
- a token not starting with "-" is a free argument;
- "-<name>" is looked up among every option's names (primary and alias,
  most-derived class first);
- flags and variants are switched on; options consume the next token, and
  multiple-valued options split it on "," and append the parts;
- unrecognized flags are kept in unknown_extra_flags and reported with an
  UnknownFlagWarning.

Values are stored as given: no value validation and no mutual-exclusion
checks happen here. Selecting several variants of one choice leaves the last
one selected.
"""
from .arguments import Flag, Option, Variant
from .faults import MissingValueError, UnknownFlagWarning, trigger


def parse_command_line_arguments(args, result, /, **options):
    """
    Parse `args` into the argument set `result` and return it.

    Parameters
    - args: iterable of string tokens (without the program name).
    - result: an ArgumentSet instance, usually create_default_instance().
    - options: forwarded to trigger() for warnings (e.g. shell=True).

    Raises
    - MissingValueError: a value-bearing option is the last token.
    """
    arguments = {}
    for argument in type(result).arguments():
        for name in argument.names:
            arguments.setdefault(name, argument)

    tokens = iter(args)
    for token in tokens:
        if not token.startswith("-"):
            result.free_args.append(token)
            continue

        if (argument := arguments.get(token[1:])) is None:
            result.unknown_extra_flags.append(token)
            trigger(
                UnknownFlagWarning(f"flag {token!r} is not recognized by {result.executable_name()}"),
                **{"hint": "run with -help (or -X for advanced options) to list the options", **options},
            )
            continue

        if isinstance(argument, Flag | Variant):
            setattr(result, argument.attribute, True)
            continue

        assert isinstance(argument, Option)
        try:
            value = next(tokens)
        except StopIteration:
            raise MissingValueError(
                f"no value passed for argument {token}",
                hint=f"write {token} {argument.metavar or '<value>'}",
            ) from None

        if argument.multiple:
            getattr(result, argument.attribute).extend(value.split(","))
        else:
            setattr(result, argument.attribute, value)

    return result


__all__ = (
    "parse_command_line_arguments",
)
