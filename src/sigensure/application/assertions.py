"""Assertion helpers: one-shot runtime checks raising EnsureError.

Stateless. Used defensively in library code and as test helpers:

    that(port > 0, "port must be positive")
    defined(config.get("host", UNDEFINED), "host")
    check_type(options, {"port": int}, "options")
"""

from __future__ import annotations

import logging
from typing import NoReturn

from sigensure.application.validator import check_value
from sigensure.domain.exceptions import EnsureError
from sigensure.domain.model.enums import ValidationMode
from sigensure.domain.model.sentinels import UNDEFINED

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_NAME = "variable"


def that(condition: bool, message: str | None = None) -> None:
    """Fail unless condition is True.

    Non-bool condition is itself an error, whatever the message says.
    """
    __tracebackhide__ = True
    if not isinstance(condition, bool):
        _fail("Expected condition to be true or false")
    if not condition:
        _fail(message or "Expected condition to be true")


def unreachable(message: str | None = None) -> NoReturn:
    """Mark code that must never run."""
    __tracebackhide__ = True
    _fail(_with_detail("Unreachable code executed", message))


def todo(message: str | None = None) -> NoReturn:
    """Mark code that is not written yet."""
    __tracebackhide__ = True
    _fail(_with_detail("To-do code executed", message))


def defined(value: object, name: str | None = None) -> None:
    """Fail if value is UNDEFINED. None counts as defined."""
    __tracebackhide__ = True
    if value is UNDEFINED:
        _fail(f"{name or DEFAULT_VARIABLE_NAME} was not defined")


def check_type(value: object, descriptor: object, name: str = DEFAULT_VARIABLE_NAME) -> None:
    """Fail unless value matches descriptor. Record values must not have extra keys."""
    __tracebackhide__ = True
    check_value(value, descriptor, name, ValidationMode.EXACT)


def check_type_minimum(
    value: object,
    descriptor: object,
    name: str = DEFAULT_VARIABLE_NAME,
) -> None:
    """Like check_type, but record values may carry extra keys."""
    __tracebackhide__ = True
    check_value(value, descriptor, name, ValidationMode.MINIMUM)


def _with_detail(base: str, detail: str | None) -> str:
    return f"{base}: {detail}" if detail else base


def _fail(message: str) -> NoReturn:
    __tracebackhide__ = True
    logger.debug("ensure check failed: %s", message)
    raise EnsureError(message)
