"""Domain enumerations."""

from enum import Enum, auto


class Kind(Enum):
    """Primitive descriptor tag.

    Value is the display name used in error messages.
    """

    STRING = "a string"
    NUMBER = "a number"
    BOOLEAN = "a boolean"
    FUNCTION = "a function"
    OBJECT = "an object"  # any Mapping
    ARRAY = "an array"  # list or tuple
    PATTERN = "a regular expression"


class SentinelKind(Enum):
    """Sentinel descriptor tag: matched by identity, not by type."""

    UNDEFINED = "undefined"
    NULL = "null"
    NAN = "NaN"


class ValidationMode(Enum):
    """Argument-count and extra-key policy.

    EXACT: more arguments than descriptors fail, shapes reject unexpected keys.
    MINIMUM: extra arguments and extra shape keys are tolerated.
    """

    EXACT = auto()
    MINIMUM = auto()

    @property
    def allow_extra_keys(self) -> bool:
        """Shapes tolerate keys they do not name."""
        return self is ValidationMode.MINIMUM
