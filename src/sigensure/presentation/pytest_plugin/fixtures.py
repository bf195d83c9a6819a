"""pytest fixtures and helpers for ensure failure reporting."""

from __future__ import annotations

import pytest

from sigensure.application.reporters.console import ConsoleConfig, ConsoleReporter
from sigensure.domain.exceptions import EnsureError

SECTION_TITLE = "ensure"


def _get_ini_value(config: pytest.Config, name: str, default: str) -> str:
    """Get ini value from pytest config with fallback.

    Args:
        config: pytest Config object
        name: ini option name
        default: default value if not set

    Returns:
        String value of ini option
    """
    value = config.getini(name)
    if value:
        return str(value)
    return default


def reporter_from_config(config: pytest.Config) -> ConsoleReporter:
    """Build ConsoleReporter from ensure_report_* ini options.

    Raises:
        pytest.UsageError: ensure_report_width is not a positive integer
    """
    raw_width = _get_ini_value(config, "ensure_report_width", "120")
    try:
        width = int(raw_width)
    except ValueError:
        raise pytest.UsageError(
            f"ensure_report_width must be an integer, got {raw_width!r}"
        ) from None
    if width < 1:
        raise pytest.UsageError(f"ensure_report_width must be >= 1, got {width}")

    color = bool(config.getini("ensure_report_color"))
    return ConsoleReporter(ConsoleConfig(width=width, color=color))


def ensure_section(exc: BaseException, reporter: ConsoleReporter) -> tuple[str, str] | None:
    """Report section (title, text) for an ensure failure, None for other exceptions."""
    if not isinstance(exc, EnsureError):
        return None
    return SECTION_TITLE, reporter.report(exc)


@pytest.fixture(scope="session")
def ensure_reporter(request: pytest.FixtureRequest) -> ConsoleReporter:
    """ConsoleReporter configured from ini options.

    Returns:
        ConsoleReporter for rendering EnsureError
    """
    return reporter_from_config(request.config)
