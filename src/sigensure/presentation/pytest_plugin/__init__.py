"""pytest plugin for sigensure.

Attaches a rendered report to tests failing with an EnsureError.

Provides fixtures:
    ensure_reporter: ConsoleReporter configured from ini options

Configuration (pytest.ini or pyproject.toml):
    ensure_report: Add "ensure" report section on failure (default: true)
    ensure_report_width: Report width in columns (default: 120)
    ensure_report_color: ANSI styles in report (default: false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from sigensure.presentation.pytest_plugin.fixtures import (
    ensure_reporter,
    ensure_section,
    reporter_from_config,
)

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["ensure_reporter"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "ensure_report",
        type="bool",
        default=True,
        help="Add an 'ensure' report section to tests failing with EnsureError",
    )
    parser.addini(
        "ensure_report_width",
        type="string",
        default="120",
        help="Width of the ensure failure report",
    )
    parser.addini(
        "ensure_report_color",
        type="bool",
        default=False,
        help="Use ANSI styles in the ensure failure report",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "ensure: mark test as exercising ensure checks",
    )


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(
    item: pytest.Item,
    call: pytest.CallInfo[None],
) -> Generator[None, pytest.TestReport, None]:
    """Append rendered ensure failure to the failing test's report."""
    outcome = yield
    report = outcome.get_result()

    if call.excinfo is None or not item.config.getini("ensure_report"):
        return

    section = ensure_section(call.excinfo.value, reporter_from_config(item.config))
    if section is not None:
        report.sections.append(section)
