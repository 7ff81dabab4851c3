"""
Compilerargs argument sets.

An argument set is a plain class whose body declares fields and options
(see compilerargs.arguments). Tool-specific sets extend a shared base by
subclassing it and declaring more options; they never redeclare a name an
ancestor already uses (checked by validate()).

Registration table
- ArgumentSetType records, for every class, the fields declared in its own
  body in declaration order (cls.__fields__).
- fields() walks the MRO most-derived class first and yields each class's own
  table in order. This is the one traversal used by the renderer, the parser
  and validate(), so all three agree on option order.

Executable identity
- Passed as a class keyword, inherited by subclasses that do not set their own:
      class JvmCompilerArguments(CommonCompilerArguments, executable="kotlinc-jvm"): ...

Lifecycle
- One instance per invocation: create_default_instance() (or plain
  construction), filled by a parser, then read-only while rendered.
"""
from .arguments import Field, Argument, Variant
from .faults import (
    NameCardinalityError,
    MissingDescriptionError,
    DuplicateNameError,
    UnboundVariantError,
)
from .utils import Unset


class ArgumentSetType(type):
    """
    Metaclass recording each class's declared fields and executable name.
    """

    def __new__(cls, name, bases, namespace, /, *, executable=Unset, **options):
        self = super().__new__(cls, name, bases, namespace, **options)
        self.__fields__ = tuple(object for object in namespace.values() if isinstance(object, Field))
        if executable is not Unset:
            if not isinstance(executable, str) or not (executable := executable.strip()):
                raise TypeError(f"{name} 'executable' must be a non-empty string")
            self.__executable__ = executable
        return self


class ArgumentSet(metaclass=ArgumentSetType, executable="compilerargs"):
    """
    Base of every argument set.

    Besides the declared options, each set has two collections filled by the
    parser and only read afterwards:
    - free_args: positional arguments, in order.
    - unknown_extra_flags: flags no declared option recognized, in order.
    """

    free_args = Field(factory=list)
    unknown_extra_flags = Field(factory=list)

    def __init__(self, **values):
        attributes = {field.attribute for field in type(self).fields()}
        for name, value in values.items():
            if name not in attributes:
                raise TypeError(f"{type(self).__name__}() got an unexpected keyword argument {name!r}")
            setattr(self, name, value)

    @classmethod
    def create_default_instance(cls):
        """
        Return a new set with every field at its declared default.
        """
        return cls()

    @classmethod
    def executable_name(cls):
        return cls.__executable__

    @classmethod
    def fields(cls):
        """
        Yield every declared field, most-derived class first, each class's
        fields in declaration order.
        """
        for klass in cls.__mro__:
            yield from vars(klass).get("__fields__", ())

    @classmethod
    def arguments(cls):
        """
        Yield the named fields (options) in fields() order.
        """
        return (field for field in cls.fields() if isinstance(field, Argument))

    @classmethod
    def validate(cls):
        validate(cls)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return all(getattr(self, name) == getattr(other, name) for name, _ in self.__rich_repr__())

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({', '.join('%s=%r' % item for item in self.__rich_repr__())})"

    def __rich_repr__(self):
        # Variants are views over their store and would only repeat it.
        for field in type(self).fields():
            if not isinstance(field, Variant):
                yield field.attribute, getattr(self, field.attribute)


def validate(cls, /):
    """
    Check the whole declaration table of an argument set type once.

    Contract
    - every option declares one primary name and at most one alias;
    - every option outside a group has a description, and every group has
      a merged-line description;
    - no name is declared twice across the ancestry, except by members of
      the same group;
    - no field attribute is redeclared by a subclass;
    - every variant stores into a declared field, and all members of a
      group belong to the same Choice.

    Raises the matching SchemaError subclass on the first violation.
    """
    if not isinstance(cls, type) or not issubclass(cls, ArgumentSet):
        raise TypeError("validate() argument must be an argument set type")

    attributes = {}
    for field in cls.fields():
        if (previous := attributes.setdefault(field.attribute, field)) is not field:
            raise DuplicateNameError(
                f"{field.owner.__name__}.{field.attribute} is shadowed by {previous.owner.__name__}.{previous.attribute}",
                hint="give the redeclared field a new attribute name",
            )

    names = {}
    groups = {}

    for argument in cls.arguments():
        where = f"{argument.owner.__name__}.{argument.attribute}"

        if len(argument.names) not in (1, 2):
            raise NameCardinalityError(
                f"{where} declares {len(argument.names)} names",
                hint="declare one primary name and at most one alias",
            )

        if isinstance(argument, Variant):
            if argument.store not in attributes:
                raise UnboundVariantError(
                    f"{where} stores into {argument.store!r} which is not a declared field",
                    hint="declare the store as a field on the argument set",
                )
            if groups.setdefault(argument.group, type(argument.choice)) is not type(argument.choice):
                raise UnboundVariantError(
                    f"{where} joins group {argument.group!r} with a different choice",
                    hint="members of one group must share their choice type",
                )
            if not argument.summary:
                raise MissingDescriptionError(
                    f"{where} belongs to group {argument.group!r} which has no description",
                    hint="set __descr__ on the choice type",
                )
        elif argument.descr is None:
            raise MissingDescriptionError(
                f"{where} has no description",
                hint="pass descr=... to the declaration",
            )

        for name in argument.names:
            if (previous := names.setdefault(name, argument)) is argument:
                continue
            if isinstance(previous, Variant) and isinstance(argument, Variant) and previous.group == argument.group:
                continue
            raise DuplicateNameError(
                f"{where} redeclares {name!r} already declared by {previous.owner.__name__}.{previous.attribute}",
                hint="each name may be declared once across the ancestry",
            )


__all__ = (
    "ArgumentSetType",
    "ArgumentSet",
    "validate",
)
