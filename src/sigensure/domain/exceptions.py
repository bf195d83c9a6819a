"""Domain exceptions: all public errors of sigensure.

EnsureError is the one failure kind raised by assertion helpers and the
signature validator. It does NOT inherit TypeError/ValueError/AssertionError:
callers catch ensure failures without catching unexpected faults.

InvalidDescriptorError is a programming error in the descriptor itself,
so it is a TypeError and NOT an EnsureError.
"""

from __future__ import annotations

from collections.abc import Sequence


class EnsureError(Exception):
    """Base for all ensure failures.

    Allows: except EnsureError to catch every violated check.

    Attributes:
        message: Human-readable diagnostic (the only diagnostic).
    """

    def __init__(self, message: str) -> None:
        """Initialize with message."""
        self.message = message
        super().__init__(message)


class SignatureError(EnsureError):
    """Call arguments do not match the declared signature."""


class ArgumentCountError(SignatureError):
    """More arguments than the signature declares.

    Attributes:
        expected: Number of declared parameters.
        got: Number of actual arguments.
    """

    def __init__(self, expected: int, got: int) -> None:
        """Initialize with expected and actual counts."""
        self.expected = expected
        self.got = got
        super().__init__(
            f"Function called with too many arguments: expected {expected} but got {got}"
        )


class ArgumentTypeError(SignatureError):
    """Argument does not match its descriptor.

    Attributes:
        name: Display name of the argument ("Argument #1", "options.port").
        expected: Display name of the descriptor ("a string").
        actual: Description of the actual value ("a number").
    """

    def __init__(self, name: str, expected: str, actual: str) -> None:
        """Initialize with argument name, expected and actual descriptions."""
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(f"{name} must be {expected}, but it was {actual}")


class UnexpectedKeysError(SignatureError):
    """Record argument has keys its shape does not declare.

    Raised in EXACT mode only.

    Attributes:
        name: Display name of the argument.
        keys: Unexpected keys, in the argument's order.
    """

    def __init__(self, name: str, keys: Sequence[str]) -> None:
        """Initialize with argument name and unexpected keys."""
        if not keys:
            raise ValueError("UnexpectedKeysError requires at least one key")

        self.name = name
        self.keys = tuple(keys)
        noun = "key" if len(self.keys) == 1 else "keys"
        super().__init__(f"{name} had unexpected {noun}: {', '.join(self.keys)}")


class InvalidDescriptorError(TypeError):
    """Value cannot be used as a type descriptor.

    Attributes:
        got: The offending value.
    """

    def __init__(self, got: object, reason: str | None = None) -> None:
        """Initialize with offending value and optional reason."""
        self.got = got
        message = f"not a type descriptor: {got!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
