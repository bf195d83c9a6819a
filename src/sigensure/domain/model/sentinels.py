"""UNDEFINED sentinel: stands for an argument that was never supplied.

None is a real value ("null"), so absence needs its own marker.
Enum singleton: survives copy/pickle with identity intact.
"""

from enum import Enum
from typing import Final


class _Undefined(Enum):
    UNDEFINED = "undefined"

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined.UNDEFINED
