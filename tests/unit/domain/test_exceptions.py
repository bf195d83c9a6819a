"""Tests for domain/exceptions.py."""

import pytest

from sigensure.domain.exceptions import (
    ArgumentCountError,
    ArgumentTypeError,
    EnsureError,
    InvalidDescriptorError,
    SignatureError,
    UnexpectedKeysError,
)


class TestEnsureError:
    """Tests for EnsureError root exception."""

    def test_has_message_attribute(self) -> None:
        err = EnsureError("boom")
        assert err.message == "boom"
        assert str(err) == "boom"

    @pytest.mark.parametrize("builtin", [TypeError, ValueError, AssertionError, RuntimeError])
    def test_is_not_a_builtin_fault(self, builtin: type[Exception]) -> None:
        assert not issubclass(EnsureError, builtin)

    def test_signature_errors_are_ensure_errors(self) -> None:
        for cls in (SignatureError, ArgumentCountError, ArgumentTypeError, UnexpectedKeysError):
            assert issubclass(cls, EnsureError)


class TestArgumentCountError:
    """Tests for ArgumentCountError."""

    def test_message_format(self) -> None:
        err = ArgumentCountError(expected=1, got=2)
        assert str(err) == "Function called with too many arguments: expected 1 but got 2"

    def test_has_count_attributes(self) -> None:
        err = ArgumentCountError(expected=0, got=3)
        assert err.expected == 0
        assert err.got == 3


class TestArgumentTypeError:
    """Tests for ArgumentTypeError."""

    def test_message_format(self) -> None:
        err = ArgumentTypeError("Argument #1", "a string", "a number")
        assert str(err) == "Argument #1 must be a string, but it was a number"

    def test_has_attributes(self) -> None:
        err = ArgumentTypeError("port", "a number", "null")
        assert err.name == "port"
        assert err.expected == "a number"
        assert err.actual == "null"


class TestUnexpectedKeysError:
    """Tests for UnexpectedKeysError."""

    def test_single_key_message(self) -> None:
        err = UnexpectedKeysError("options", ["extra"])
        assert str(err) == "options had unexpected key: extra"

    def test_multiple_keys_message(self) -> None:
        err = UnexpectedKeysError("options", ["a", "b"])
        assert str(err) == "options had unexpected keys: a, b"
        assert err.keys == ("a", "b")

    def test_no_keys_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one key"):
            UnexpectedKeysError("options", [])


class TestInvalidDescriptorError:
    """Tests for InvalidDescriptorError."""

    def test_is_type_error_not_ensure_error(self) -> None:
        assert issubclass(InvalidDescriptorError, TypeError)
        assert not issubclass(InvalidDescriptorError, EnsureError)

    def test_message_includes_value(self) -> None:
        err = InvalidDescriptorError(42)
        assert str(err) == "not a type descriptor: 42"
        assert err.got == 42

    def test_message_includes_reason(self) -> None:
        err = InvalidDescriptorError([], "union must have at least one member")
        assert str(err) == "not a type descriptor: [] (union must have at least one member)"
