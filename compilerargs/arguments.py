r"""
Compilerargs field and option declarations.

Overview
- Declarations
  • Field: plain, nameless storage on an argument set (positional leftovers,
    unknown flags, internal state). Never rendered.
  • Flag: named boolean switch, e.g. -nowarn.
  • Option: named, value-bearing option with a placeholder, e.g. -d <directory|jar>;
    multiple=True collects comma-separated values into a list.
  • Variant: one member of a multi-way Choice exposed under its own
    backward-compatible name, e.g. -Xcoroutines=warn. Reading it yields a bool,
    assigning True selects the member in the backing store field.

- Choice
  • StrEnum base for multi-way settings. Subclasses set __key__ (the shared
    name prefix) and __descr__ (the description of the merged usage line).

- Tier
  • Basic or Advanced visibility, derived from a name: names starting with the
    reserved prefix "X" (and longer than the prefix) are Advanced.

Declarations are data descriptors: declared as class attributes of an argument
set, they read and write the instance __dict__ under their attribute name.

Metadata (sanitized on construction)
- names: tuple of shell-style names without the leading dash ("help", "h").
  Each must be a non-empty string without whitespace; duplicates are rejected.
  The count is a schema contract checked by validate() and by the renderer.
- descr: Unset | str (possibly empty). Unset becomes None ("missing").
- metavar: Unset | str, non-empty when provided. Unset becomes None.

Quick example:
    >>> class Arguments(ArgumentSet):
    ...     help = Flag("help", "h", descr="Print a synopsis of standard options")
    ...     destination = Option("d", descr="Destination for generated class files", metavar="<directory|jar>")
"""
import functools
import operator
import re
from enum import StrEnum

from .utils import *

ADVANCED_PREFIX = "X"


class Tier(StrEnum):
    """
    Visibility tier of an option.
    """
    BASIC = "basic"
    ADVANCED = "advanced"

    @classmethod
    def of(cls, name, /):
        """
        Derive the tier of a (primary or synthetic) name.

        A name is Advanced when it starts with the reserved prefix and has at
        least one more character; the bare prefix itself is Basic.
        """
        if name.startswith(ADVANCED_PREFIX) and len(name) > len(ADVANCED_PREFIX):
            return cls.ADVANCED
        return cls.BASIC


class Choice(StrEnum):
    """
    Base for multi-way settings selected through "<key>=<member>" switches.

    Subclasses define the members (their order is the rendering order) and two
    class-level attributes:
    - __key__: shared name prefix of the switches, e.g. "Xcoroutines".
    - __descr__: description of the merged usage line.
    """
    __key__ = ""
    __descr__ = ""

    @classmethod
    def placeholder(cls):
        """
        Synthetic name listing every member: "<key>={a|b|c}".
        """
        return "%s={%s}" % (cls.__key__, "|".join(member.value for member in cls))


class ArgumentType(type):
    """
    Metaclass that turns declarations into introspectable descriptors.

    Responsibilities
    - Expose fields listed in __introspectable__ as read-only properties via mirror().
    - Provide stable __repr__/__rich_repr__ implementations for diagnostics.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    - __displayable__ (if set) narrows which properties are shown by __rich_repr__;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_metadata(cls, metadata, /):
    """
    Internal: validate and normalize option metadata in place.

    Raises
    - TypeError: non-string names, descr or metavar.
    - ValueError: empty, dashed, blank-containing or duplicated names; empty metavar.

    Notes
    - The number of names is deliberately not checked here: it is a schema
      contract reported by validate() and by the usage renderer.
    - descr may be an empty string; only Unset means "missing".
    """
    names = []
    for name in metadata["names"]:
        if not isinstance(name, str):
            raise TypeError(f"{cls.__typename__} names must be strings")
        elif not (name := name.strip()):
            raise ValueError(f"{cls.__typename__} names cannot be empty-strings")
        elif name.startswith("-") or re.search(r"\s", name):
            raise ValueError(f"{cls.__typename__} names must be given without a leading dash or whitespace")
        elif name in names:
            raise ValueError(f"{cls.__typename__} names cannot contain duplicates")
        names.append(name)
    metadata["names"] = tuple(names)

    if not isinstance(descr := metadata["descr"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'descr' must be a string")
    metadata["descr"] = coalesce(descr)

    if not isinstance(metavar := metadata["metavar"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'metavar' must be a string")
    elif isinstance(metavar, str) and not (metavar := metavar.strip()):
        raise ValueError(f"{cls.__typename__} 'metavar' cannot be empty")
    metadata["metavar"] = coalesce(metavar)


class Field(metaclass=ArgumentType):
    """
    Nameless storage declared on an argument set.

    Each instance gets its own value: either the declared default or, when a
    factory is given, a fresh factory() result on first access.
    """

    __introspectable__ = ("attribute",)
    __displayable__ = ("attribute", "default")

    def __init__(self, default=None, /, *, factory=Unset):
        if factory is not Unset and not callable(factory):
            raise TypeError(f"{type(self).__typename__} 'factory' must be callable")
        self._default = default
        self._factory = factory
        self._attribute = Unset
        self._owner = Unset

    def __set_name__(self, owner, name):
        self._attribute = name
        self._owner = owner

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        try:
            return instance.__dict__[self._attribute]
        except KeyError:
            value = instance.__dict__[self._attribute] = self.initial()
            return value

    def __set__(self, instance, value):
        instance.__dict__[self._attribute] = value

    @property
    def owner(self):
        return coalesce(self._owner)

    @property
    def default(self):
        return self.initial()

    def initial(self):
        """
        Value a freshly constructed argument set holds for this field.
        """
        if self._factory is not Unset:
            return self._factory()
        return self._default


class Argument(Field):
    """
    Named field: a recognized command-line option.

    Derived metadata
    - primary: first name (None when no name was declared).
    - alias: second name, if any.
    - tier: Tier.of(primary).
    - group: key shared by options rendered as one usage line; a plain
      argument is its own group.
    """

    __introspectable__ = ("attribute", "names", "descr", "metavar")
    __displayable__ = ("names", "descr", "metavar", "default")

    def __init__(self, *names, descr=Unset, metavar=Unset, default=None, factory=Unset):
        super().__init__(default, factory=factory)
        metadata = {
            "names": names,
            "descr": descr,
            "metavar": metavar,
        }
        _sanitize_metadata(type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

    @property
    def primary(self):
        return self._names[0] if self._names else None

    @property
    def alias(self):
        return self._names[1] if len(self._names) > 1 else None

    @property
    def tier(self):
        return Tier.of(self.primary or "")

    @property
    def group(self):
        return self.primary


class Flag(Argument):
    """
    Named boolean switch; False unless given on the command line.
    """

    def __init__(self, *names, descr=Unset):
        super().__init__(*names, descr=descr, default=False)


class Option(Argument):
    """
    Named option carrying a string value.

    With multiple=True the value is a list (empty by default) and every
    occurrence appends its comma-separated parts.
    """

    __introspectable__ = ("attribute", "names", "descr", "metavar", "multiple")
    __displayable__ = ("names", "descr", "metavar", "default", "multiple")

    def __init__(self, *names, descr=Unset, metavar=Unset, default=None, multiple=False):
        if multiple and default is not None:
            raise TypeError(f"{type(self).__typename__} cannot have both 'multiple' and 'default'")
        super().__init__(*names, descr=descr, metavar=metavar, default=default, factory=list if multiple else Unset)
        self._multiple = bool(multiple)


class Variant(Argument):
    """
    One member of a Choice, exposed as its own boolean switch.

    The switch is named "<key>=<member>" and reads as True while the backing
    store field holds that member. Assigning True selects it; assigning False
    to the active member is rejected since there is no "nothing selected"
    state, and assigning False to an inactive one changes nothing.
    """

    __introspectable__ = ("attribute", "names", "descr", "metavar", "choice", "store")
    __displayable__ = ("names", "choice", "store")

    def __init__(self, choice, /, *, store, descr=""):
        if not isinstance(choice, Choice):
            raise TypeError(f"{type(self).__typename__} 'choice' must be a choice member")
        if not isinstance(store, str) or not store.isidentifier():
            raise TypeError(f"{type(self).__typename__} 'store' must be an attribute name")
        super().__init__(f"{type(choice).__key__}={choice.value}", descr=descr, default=False)
        self._choice = choice
        self._store = store

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        return getattr(instance, self._store) == self._choice

    def __set__(self, instance, value):
        if value:
            setattr(instance, self._store, self._choice)
        elif getattr(instance, self._store) == self._choice:
            raise ValueError(
                f"cannot deselect {self.primary!r}, select another {type(self._choice).__key__} variant instead"
            )

    @property
    def group(self):
        return self.primary.partition("=")[0]

    @property
    def placeholder(self):
        return type(self._choice).placeholder()

    @property
    def summary(self):
        """
        Description of the merged usage line of the whole group.
        """
        return type(self._choice).__descr__


__all__ = (
    # Constants
    "ADVANCED_PREFIX",

    # Enumerations
    "Tier",
    "Choice",

    # Declarations
    "Field",
    "Argument",
    "Flag",
    "Option",
    "Variant",
)
