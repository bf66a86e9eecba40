# Copyright (c) 2025 - 2026, HaiyangLi <quantocean.li at gmail dot com>
# SPDX-License-Identifier: Apache-2.0

"""Display utilities for rule results.

Rich table output on a terminal, plain text lines otherwise.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from rich.box import ROUNDED
from rich.console import Console
from rich.table import Table
from rich.text import Text

from proprules.core.result import RuleResult

__all__ = ("display_results", "format_results", "in_console", "results_table")

_console: Console | None = None


def _get_console() -> Console:
    global _console
    if _console is None:
        _console = Console()
    return _console


def in_console() -> bool:
    """Check if running in a terminal with TTY."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def format_results(results: Iterable[RuleResult]) -> str:
    """One line per broken rule: '<property>: <description>'."""
    return "\n".join(
        f"{r.property_name}: {r.description}" for r in results if not r.passed
    )


def results_table(results: Iterable[RuleResult], *, title: str | None = None) -> Table:
    """Build a Rich table with one row per result."""
    table = Table(
        title=title,
        box=ROUNDED,
        header_style="bold bright_cyan",
        title_justify="left",
    )
    table.add_column("Property", style="bright_cyan")
    table.add_column("Rule")
    table.add_column("Status")
    table.add_column("Description", overflow="fold")

    for result in results:
        status = "[bold bright_green]ok[/]" if result.passed else "[bold bright_red]broken[/]"
        table.add_row(
            Text(result.property_name),
            Text(result.rule_name),
            status,
            Text(result.description),
        )
    return table


def display_results(
    results: Iterable[RuleResult],
    *,
    title: str | None = None,
    console: Console | None = None,
) -> None:
    """Print results as a table, or as plain lines off-terminal.

    Args:
        results: Rule results to show.
        title: Optional table title.
        console: Console to print to; forces table output.
    """
    results = list(results)
    if console is None and not in_console():
        if title:
            print(f"\n--- {title} ---")
        print(format_results(results) or "All rules passed")
        return

    (console or _get_console()).print(results_table(results, title=title))
