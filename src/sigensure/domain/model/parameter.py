"""Parameter spec value object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sigensure.domain.model.descriptor import Descriptor


def default_name(position: int) -> str:
    """Generic display name for 1-based position."""
    return f"Argument #{position}"


@dataclass(frozen=True, slots=True)
class ParameterSpec:
    """Expected argument at one position.

    Attributes:
        position: 1-based position in the call
        descriptor: What the argument must be
        name: Display name, None = "Argument #N"
    """

    position: int
    descriptor: Descriptor
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.position < 1:
            raise ValueError(f"position must be >= 1, got {self.position}")

    @property
    def display_name(self) -> str:
        return self.name or default_name(self.position)
