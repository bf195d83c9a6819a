"""sigensure - runtime argument validation and assertion helpers."""

__version__ = "0.1.0"

from sigensure.application.assertions import (
    check_type,
    check_type_minimum,
    defined,
    that,
    todo,
    unreachable,
)
from sigensure.application.descriptors import to_descriptor
from sigensure.application.validator import (
    check_signature,
    signature,
    signature_minimum,
)
from sigensure.domain.exceptions import (
    ArgumentCountError,
    ArgumentTypeError,
    EnsureError,
    InvalidDescriptorError,
    SignatureError,
    UnexpectedKeysError,
)
from sigensure.domain.model import (
    UNDEFINED,
    ClassOf,
    Descriptor,
    Primitive,
    Sentinel,
    Shape,
    Union,
    ValidationMode,
)
from sigensure.presentation.decorators import checked

EXACT = ValidationMode.EXACT
MINIMUM = ValidationMode.MINIMUM

__all__ = [
    "__version__",
    # Assertions
    "that",
    "unreachable",
    "todo",
    "defined",
    "check_type",
    "check_type_minimum",
    # Signatures
    "check_signature",
    "signature",
    "signature_minimum",
    "checked",
    "ValidationMode",
    "EXACT",
    "MINIMUM",
    # Descriptors
    "to_descriptor",
    "Descriptor",
    "Primitive",
    "Sentinel",
    "Shape",
    "ClassOf",
    "Union",
    "UNDEFINED",
    # Errors
    "EnsureError",
    "SignatureError",
    "ArgumentCountError",
    "ArgumentTypeError",
    "UnexpectedKeysError",
    "InvalidDescriptorError",
]
