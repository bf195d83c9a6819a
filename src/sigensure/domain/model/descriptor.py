"""Type descriptors: what an argument is allowed to be.

Tagged union of immutable value objects:

    Descriptor = Primitive | Sentinel | Shape | ClassOf | Union

Matching lives in application.validator (single dispatch over the tag).
Descriptors only know their display name.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sigensure.domain.model.enums import Kind, SentinelKind
from sigensure.domain.model.naming import class_display_name, join_alternatives


@dataclass(frozen=True, slots=True)
class Primitive:
    """Built-in runtime kind (string, number, boolean, ...).

    Attributes:
        kind: Primitive tag
    """

    kind: Kind

    @property
    def display_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class Sentinel:
    """Exact value: UNDEFINED, None or NaN.

    Attributes:
        kind: Sentinel tag
    """

    kind: SentinelKind

    @property
    def display_name(self) -> str:
        return self.kind.value


@dataclass(frozen=True, slots=True)
class Shape:
    """Record with required, typed keys.

    Attributes:
        fields: (key, descriptor) pairs in declaration order
    """

    fields: tuple[tuple[str, Descriptor], ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        keys = [key for key, _ in self.fields]
        for key in keys:
            if not isinstance(key, str):
                raise TypeError(f"shape keys must be str, got {type(key).__name__}")
        if len(set(keys)) != len(keys):
            raise ValueError("shape keys must be unique")

    @property
    def keys(self) -> frozenset[str]:
        return frozenset(key for key, _ in self.fields)

    @property
    def display_name(self) -> str:
        return Kind.OBJECT.value


@dataclass(frozen=True, slots=True)
class ClassOf:
    """Instance of a class, or anything passing a conformance test.

    Attributes:
        check: Conformance test (isinstance for classes)
        name: Class name for messages. None = anonymous ("<anon>")
    """

    check: Callable[[object], bool]
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not callable(self.check):
            raise TypeError(f"check must be callable, got {type(self.check).__name__}")

    @classmethod
    def of(cls, klass: type) -> ClassOf:
        """Descriptor for instances of klass. Empty __name__ counts as anonymous."""

        def check(value: object) -> bool:
            return isinstance(value, klass)

        return cls(check=check, name=getattr(klass, "__name__", None) or None)

    @property
    def display_name(self) -> str:
        return class_display_name(self.name)


@dataclass(frozen=True, slots=True)
class Union:
    """Any of several descriptors, in declaration order.

    Attributes:
        members: Alternatives (non-empty)
    """

    members: tuple[Descriptor, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.members:
            raise ValueError("union must have at least one member")

    @property
    def display_name(self) -> str:
        return join_alternatives([member.display_name for member in self.members])


type Descriptor = Primitive | Sentinel | Shape | ClassOf | Union

DESCRIPTOR_TYPES = (Primitive, Sentinel, Shape, ClassOf, Union)
