"""Signature validator: call arguments vs. declared descriptors.

Evaluation order (first failure wins, nothing is aggregated):
    1. count check (EXACT only: too many arguments)
    2. per-argument check, left to right

Missing arguments are read as UNDEFINED and fail (or pass, for optional
descriptors) at step 2. There is no dedicated "too few arguments" error.

Pure and synchronous: arguments are never mutated.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import NoReturn

from sigensure.application.descriptors import to_descriptor, to_descriptors
from sigensure.domain.exceptions import (
    ArgumentCountError,
    ArgumentTypeError,
    SignatureError,
    UnexpectedKeysError,
)
from sigensure.domain.model.descriptor import (
    ClassOf,
    Descriptor,
    Primitive,
    Sentinel,
    Shape,
    Union,
)
from sigensure.domain.model.enums import Kind, SentinelKind, ValidationMode
from sigensure.domain.model.naming import describe_value, is_nan, is_number
from sigensure.domain.model.parameter import ParameterSpec
from sigensure.domain.model.sentinels import UNDEFINED

logger = logging.getLogger(__name__)


def check_signature(
    mode: ValidationMode,
    args: Sequence[object],
    descriptors: Sequence[object] = (),
    names: Sequence[str] | None = None,
) -> None:
    """Validate call arguments against descriptors.

    Args:
        mode: EXACT or MINIMUM
        args: Actual arguments, in call order
        descriptors: One descriptor literal per parameter
        names: Display names by position. Missing/empty = "Argument #N"

    Raises:
        ArgumentCountError: EXACT mode, more args than descriptors
        ArgumentTypeError: first argument not matching its descriptor
        UnexpectedKeysError: EXACT mode, record argument with undeclared keys
        InvalidDescriptorError: malformed descriptor literal
    """
    __tracebackhide__ = True

    specs = build_parameter_specs(descriptors, names)

    if mode is ValidationMode.EXACT and len(args) > len(specs):
        _fail(ArgumentCountError(expected=len(specs), got=len(args)))

    for spec in specs:
        index = spec.position - 1
        value = args[index] if index < len(args) else UNDEFINED
        error = find_error(value, spec.descriptor, spec.display_name, mode)
        if error is not None:
            _fail(error)


def signature(
    args: Sequence[object],
    descriptors: Sequence[object] = (),
    names: Sequence[str] | None = None,
) -> None:
    """check_signature in EXACT mode."""
    __tracebackhide__ = True
    check_signature(ValidationMode.EXACT, args, descriptors, names)


def signature_minimum(
    args: Sequence[object],
    descriptors: Sequence[object] = (),
    names: Sequence[str] | None = None,
) -> None:
    """check_signature in MINIMUM mode: extra arguments and extra keys allowed."""
    __tracebackhide__ = True
    check_signature(ValidationMode.MINIMUM, args, descriptors, names)


def check_value(value: object, descriptor: object, name: str, mode: ValidationMode) -> None:
    """Validate one value with the per-argument rules.

    Raises:
        ArgumentTypeError, UnexpectedKeysError: value does not match
    """
    __tracebackhide__ = True
    error = find_error(value, to_descriptor(descriptor), name, mode)
    if error is not None:
        _fail(error)


def build_parameter_specs(
    descriptors: Sequence[object],
    names: Sequence[str] | None = None,
) -> tuple[ParameterSpec, ...]:
    """Pair descriptors with 1-based positions and optional names."""
    normalized = to_descriptors(descriptors)
    names = names or ()
    return tuple(
        ParameterSpec(
            position=i + 1,
            descriptor=descriptor,
            name=names[i] if i < len(names) and names[i] else None,
        )
        for i, descriptor in enumerate(normalized)
    )


def find_error(
    value: object,
    descriptor: Descriptor,
    name: str,
    mode: ValidationMode,
) -> SignatureError | None:
    """Check value against descriptor.

    Returns:
        Error to raise, None if value matches
    """
    match descriptor:
        case Union(members=members):
            if any(find_error(value, m, name, mode) is None for m in members):
                return None
            return _type_error(name, descriptor, value)
        case Shape():
            return _shape_error(value, descriptor, name, mode)
        case Primitive(kind=kind):
            return None if _matches_kind(value, kind) else _type_error(name, descriptor, value)
        case Sentinel(kind=kind):
            return None if _matches_sentinel(value, kind) else _type_error(name, descriptor, value)
        case ClassOf(check=check):
            return None if check(value) else _type_error(name, descriptor, value)
    raise TypeError(f"unknown descriptor: {descriptor!r}")


def _shape_error(
    value: object,
    shape: Shape,
    name: str,
    mode: ValidationMode,
) -> SignatureError | None:
    if not isinstance(value, Mapping):
        return _type_error(name, shape, value)

    for key, field in shape.fields:
        error = find_error(value.get(key, UNDEFINED), field, f"{name}.{key}", mode)
        if error is not None:
            return error

    if not mode.allow_extra_keys:
        declared = shape.keys
        extra = [str(key) for key in value if key not in declared]
        if extra:
            return UnexpectedKeysError(name, extra)

    return None


def _matches_kind(value: object, kind: Kind) -> bool:
    match kind:
        case Kind.STRING:
            return isinstance(value, str)
        case Kind.NUMBER:
            return is_number(value)
        case Kind.BOOLEAN:
            return isinstance(value, bool)
        case Kind.FUNCTION:
            return callable(value)
        case Kind.OBJECT:
            return isinstance(value, Mapping)
        case Kind.ARRAY:
            return isinstance(value, (list, tuple))
        case Kind.PATTERN:
            return isinstance(value, re.Pattern)


def _matches_sentinel(value: object, kind: SentinelKind) -> bool:
    match kind:
        case SentinelKind.UNDEFINED:
            return value is UNDEFINED
        case SentinelKind.NULL:
            return value is None
        case SentinelKind.NAN:
            return is_nan(value)


def _type_error(name: str, descriptor: Descriptor, value: object) -> ArgumentTypeError:
    return ArgumentTypeError(name, expected=descriptor.display_name, actual=describe_value(value))


def _fail(error: SignatureError) -> NoReturn:
    __tracebackhide__ = True
    logger.debug("ensure check failed: %s", error)
    raise error
