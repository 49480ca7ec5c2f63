"""Domain enumerations."""

from enum import Enum, auto


class Severity(Enum):
    """Diagnostic severity."""

    ERROR = auto()  # declaration rejected
    WARNING = auto()  # declaration accepted, warning shown


class Qualifier(Enum):
    """Method qualifiers resolved by the host front end."""

    REMOTE = "remote"
    RESOURCE = "resource"
    ISOLATED = "isolated"
    PUBLIC = "public"
    PRIVATE = "private"
    TRANSACTIONAL = "transactional"


class ArgumentKind(Enum):
    """Syntactic kind of a call argument."""

    POSITIONAL = "positional"
    NAMED = "named"
    REST = "rest"


class ExpressionKind(Enum):
    """Syntactic kind of the expression carried by a call argument.

    Only the kinds the listener inspector distinguishes are named;
    everything else maps to OTHER.
    """

    SIMPLE_NAME_REFERENCE = "simple_name_reference"
    MAPPING_CONSTRUCTOR = "mapping_constructor"
    NUMERIC_LITERAL = "numeric_literal"
    STRING_LITERAL = "string_literal"
    OTHER = "other"
