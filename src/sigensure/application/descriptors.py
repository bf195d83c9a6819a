"""Descriptor literals → Descriptor value objects.

Callers write descriptors as plain Python:

    str, int, bool, dict, list, tuple, re.Pattern, Callable  primitives
    UNDEFINED, None, math.nan                          sentinels
    {"port": int, "host": str}                         shape
    [str, None]  or  (str, None)                       union
    MyClass                                            instance of class

to_descriptor() is the only place that interprets literals.
FAIL-FIRST: anything else raises InvalidDescriptorError immediately.
"""

from __future__ import annotations

import re
import types
from collections.abc import Callable, Mapping, Sequence
from numbers import Real

from sigensure.domain.exceptions import InvalidDescriptorError
from sigensure.domain.model.descriptor import (
    DESCRIPTOR_TYPES,
    ClassOf,
    Descriptor,
    Primitive,
    Sentinel,
    Shape,
    Union,
)
from sigensure.domain.model.enums import Kind, SentinelKind
from sigensure.domain.model.naming import is_nan
from sigensure.domain.model.sentinels import UNDEFINED

_PRIMITIVES: Mapping[type, Kind] = {
    str: Kind.STRING,
    int: Kind.NUMBER,
    float: Kind.NUMBER,
    Real: Kind.NUMBER,
    bool: Kind.BOOLEAN,
    Callable: Kind.FUNCTION,  # type: ignore[dict-item]
    types.FunctionType: Kind.FUNCTION,
    dict: Kind.OBJECT,
    list: Kind.ARRAY,
    tuple: Kind.ARRAY,
    re.Pattern: Kind.PATTERN,
}


def to_descriptor(raw: object) -> Descriptor:
    """Normalize descriptor literal.

    Args:
        raw: Descriptor literal or already-built Descriptor

    Returns:
        Descriptor value object

    Raises:
        InvalidDescriptorError: raw is not a descriptor literal
    """
    if isinstance(raw, DESCRIPTOR_TYPES):
        return raw
    if raw is UNDEFINED:
        return Sentinel(SentinelKind.UNDEFINED)
    if raw is None:
        return Sentinel(SentinelKind.NULL)
    if is_nan(raw):
        return Sentinel(SentinelKind.NAN)
    if isinstance(raw, type):
        kind = _PRIMITIVES.get(raw)
        return Primitive(kind) if kind is not None else ClassOf.of(raw)
    if isinstance(raw, Mapping):
        return _to_shape(raw)
    if isinstance(raw, (list, tuple)):
        return _to_union(raw)
    raise InvalidDescriptorError(raw)


def to_descriptors(raw: Sequence[object]) -> tuple[Descriptor, ...]:
    """Normalize a descriptor list (one entry per parameter)."""
    if isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise InvalidDescriptorError(raw, "expected a sequence of descriptors")
    return tuple(to_descriptor(item) for item in raw)


def _to_shape(raw: Mapping[object, object]) -> Shape:
    fields: list[tuple[str, Descriptor]] = []
    for key, value in raw.items():
        if not isinstance(key, str):
            raise InvalidDescriptorError(raw, f"shape key {key!r} is not a string")
        fields.append((key, to_descriptor(value)))
    return Shape(tuple(fields))


def _to_union(raw: Sequence[object]) -> Union:
    if not raw:
        raise InvalidDescriptorError(raw, "union must have at least one member")
    return Union(tuple(to_descriptor(item) for item in raw))
