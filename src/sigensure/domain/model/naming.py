"""Display names for descriptors and actual values.

Pure functions. Shared by descriptor display names and error messages
so "expected" and "actual" read the same way.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping, Sequence
from numbers import Real

from sigensure.domain.model.enums import Kind, SentinelKind
from sigensure.domain.model.sentinels import UNDEFINED

ANONYMOUS = "<anon>"

_VOWEL_START = re.compile(r"^[aeiou<]", re.IGNORECASE)


def with_article(noun: str) -> str:
    """Prefix noun with "a" or "an".

    "<anon> instance" takes "an", like a vowel.
    """
    article = "an" if _VOWEL_START.match(noun) else "a"
    return f"{article} {noun}"


def class_display_name(name: str | None) -> str:
    """Display name for instances of a class: "a MyClass instance"."""
    return with_article(f"{name or ANONYMOUS} instance")


def join_alternatives(names: Sequence[str]) -> str:
    """Join names as English alternatives.

    ("a",) -> "a"; ("a", "b") -> "a or b"; ("a", "b", "c") -> "a, b, or c"
    """
    if not names:
        raise ValueError("names must not be empty")
    if len(names) == 1:
        return names[0]
    if len(names) == 2:
        return f"{names[0]} or {names[1]}"
    return f"{', '.join(names[:-1])}, or {names[-1]}"


def is_nan(value: object) -> bool:
    """True only for float NaN (never raises for non-numbers)."""
    return isinstance(value, float) and math.isnan(value)


def is_number(value: object) -> bool:
    """Real number, excluding bool and NaN."""
    return isinstance(value, Real) and not isinstance(value, bool) and not is_nan(value)


def describe_value(value: object) -> str:
    """Describe actual value for "but it was ..." part of messages.

    Order matters: bool before number, sentinels before everything.
    """
    if value is UNDEFINED:
        return SentinelKind.UNDEFINED.value
    if value is None:
        return SentinelKind.NULL.value
    if is_nan(value):
        return SentinelKind.NAN.value
    if isinstance(value, bool):
        return Kind.BOOLEAN.value
    if is_number(value):
        return Kind.NUMBER.value
    if isinstance(value, str):
        return Kind.STRING.value
    if isinstance(value, re.Pattern):
        return Kind.PATTERN.value
    if isinstance(value, Mapping):
        return Kind.OBJECT.value
    if isinstance(value, (list, tuple)):
        return Kind.ARRAY.value
    if callable(value):
        return Kind.FUNCTION.value
    return class_display_name(type(value).__name__)
