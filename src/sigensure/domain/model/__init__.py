"""Domain model: descriptors, parameter specs, modes and sentinels."""

from sigensure.domain.model.descriptor import (
    DESCRIPTOR_TYPES,
    ClassOf,
    Descriptor,
    Primitive,
    Sentinel,
    Shape,
    Union,
)
from sigensure.domain.model.enums import Kind, SentinelKind, ValidationMode
from sigensure.domain.model.parameter import ParameterSpec, default_name
from sigensure.domain.model.sentinels import UNDEFINED

__all__ = [
    # Descriptors
    "Descriptor",
    "DESCRIPTOR_TYPES",
    "Primitive",
    "Sentinel",
    "Shape",
    "ClassOf",
    "Union",
    # Enums
    "Kind",
    "SentinelKind",
    "ValidationMode",
    # Parameters
    "ParameterSpec",
    "default_name",
    # Sentinels
    "UNDEFINED",
]
