"""
Compilerargs faults (errors and warnings) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every fault. Codes are
  grouped by domain (schema authoring, parsing, warnings) so logs and searches
  stay predictable.
- ArgumentsException / ArgumentsWarning: base types that carry a message plus
  options and know how to render themselves with rich.
- trigger(): central entry point to surface any fault (respecting shell/fancy/colorful).

Schema faults are contract violations made while declaring an argument set:
they must never reach an end user, and are raised eagerly by validate() and by
the usage renderer. Parse faults concern the tokens handed to the reference
parser.

Integration
- Library code raises the concrete exceptions directly.
- The command-line entry point catches ArgumentsException and calls
  trigger(fault, shell=True, ...) to render it on stderr and exit.
"""
import inspect
import sys
import warnings
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .utils import Unset, coalesce

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - schema authoring (2110x)
      • NAME_CARDINALITY, MISSING_DESCRIPTION, DUPLICATE_NAME, UNBOUND_VARIANT
    - parsing (2120x)
      • MISSING_VALUE
    - warnings (2220x)
      • UNKNOWN_FLAG
    """
    # --- schema errors (2110x) ---
    NAME_CARDINALITY            = 21101
    MISSING_DESCRIPTION         = 21102
    DUPLICATE_NAME              = 21103
    UNBOUND_VARIANT             = 21104

    # --- parse errors (2120x) ---
    MISSING_VALUE               = 21201

    # --- warnings (2220x) ---
    UNKNOWN_FLAG                = 22201

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _renderer(fault, palette, /):
    """
    Build the (styler, text) pair shared by exception and warning renderers.
    """
    styles = defaultdict(str, palette | getattr(__import__("__main__"), "__styles__", {}))
    colorful = fault.options.get("colorful", True)

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        if not fragment:
            return Text("")
        if not colorful:
            return Text(str(fragment))
        return Text(str(fragment), style)

    return styler, text


def _render(fault, kind, palette, /):
    styler, text = _renderer(fault, palette)

    prog = text(getattr(__import__("__main__"), "__prog__", fault.options.get("prog", "compilerargs")), styler("prog-name"))
    header = Text.assemble(
        "[ ",
        prog,
        " — ",
        text(fault.code.normalize() if isinstance(fault.code, FaultCode) else "-", styler("code")),
        " | ",
        text(fault.title.title(), styler(kind + "-title")),
        " ]"
    )
    message = text(fault.message, styler(kind + "-message"))
    renders = [message]
    if hint := fault.options.get("hint"):
        renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(hint, styler("hint"))))

    if fault.options.get("fancy", False):
        return Panel(Group(*renders), title=header, title_align="left")

    return Group(header, *renders)


class ArgumentsException(Exception):
    """
    Base class of every compilerargs error.

    Subclasses pin a default FaultCode and title; both may be overridden
    through options (e.g. by trigger()).
    """
    code = Unset
    title = "argument error"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = coalesce(message, "")
        self.options = MappingProxyType(options)
        self.code = options.get("code", type(self).code)
        self.title = options.get("title", type(self).title)

    def __rich__(self):
        return _render(self, "error", {
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",
            "hint": "italic #9CE19C",
        })

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None
        console.print(self)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class SchemaError(ArgumentsException):
    title = "schema error"


class NameCardinalityError(SchemaError):
    code = FaultCode.NAME_CARDINALITY
    title = "bad name count"


class MissingDescriptionError(SchemaError):
    code = FaultCode.MISSING_DESCRIPTION
    title = "missing description"


class DuplicateNameError(SchemaError):
    code = FaultCode.DUPLICATE_NAME
    title = "duplicate name"


class UnboundVariantError(SchemaError):
    code = FaultCode.UNBOUND_VARIANT
    title = "unbound variant"


class MissingValueError(ArgumentsException):
    code = FaultCode.MISSING_VALUE
    title = "missing value"


class ArgumentsWarning(Warning):
    """
    Base class of every compilerargs warning.
    """
    code = Unset
    title = "argument warning"

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(coalesce(message, ""))
        self.message = coalesce(message, "")
        self.options = MappingProxyType(options)
        self.code = options.get("code", type(self).code)
        self.title = options.get("title", type(self).title)

    def __rich__(self):
        return _render(self, "warning", {
            "prog-name": "bold #E6E6F0",
            "code": "bold #FFB400",  # amber fault code for warnings
            "warning-title": "bold #FFC2E0",
            "warning-message": "#D6D6DE",
            "hint-arrow": "#B8EFAF dim",
            "hint": "italic #B8EFAF",
        })

    def __trigger__(self):
        if not self.options.get("shell", False):
            return warnings.warn(self, stacklevel=len(inspect.stack()))
        console.print(self)

    def __replace__(self, *unused, **overrides):
        assert not unused, "positional arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownFlagWarning(ArgumentsWarning):
    code = FaultCode.UNKNOWN_FLAG
    title = "unknown flag"


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see base classes).
    - options are merged into the fault via __replace__(**options) before triggering.
    - in shell mode, rendering happens via the rich stderr console; otherwise
      errors are raised and warnings go through warnings.warn().

    typical options
    - shell, fancy, colorful, prog, hint
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    fault.__replace__(**options).__trigger__()


__all__ = (
    "FaultCode",
    "ArgumentsException",
    "SchemaError",
    "NameCardinalityError",
    "MissingDescriptionError",
    "DuplicateNameError",
    "UnboundVariantError",
    "MissingValueError",
    "ArgumentsWarning",
    "UnknownFlagWarning",
    "trigger",
)
