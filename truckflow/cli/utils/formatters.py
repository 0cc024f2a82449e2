"""Output formatting utilities for CLI."""

from typing import Any, List, Optional, Sequence

import click


def format_success(message: str) -> str:
    """Format a success message with green color."""
    return click.style(f"✓ {message}", fg="green", bold=True)


def format_error(message: str) -> str:
    """Format an error message with red color."""
    return click.style(f"✗ {message}", fg="red", bold=True)


def format_warning(message: str) -> str:
    """Format a warning message with yellow color."""
    return click.style(f"⚠ {message}", fg="yellow", bold=True)


def format_info(message: str) -> str:
    """Format an info message with blue color."""
    return click.style(f"ℹ {message}", fg="blue")


def format_table(
    headers: List[str],
    rows: Sequence[Sequence[Any]],
    max_width: int = 40,
    align_right: Optional[Sequence[int]] = None,
) -> str:
    """Format data as a plain-text table.

    Args:
        headers: List of column headers
        rows: Data rows (each row is a sequence of cell values)
        max_width: Maximum width for each column (longer cells are truncated)
        align_right: Indexes of columns to right-align (amounts, miles)

    Returns:
        Formatted table as a string

    Example:
        >>> print(format_table(["Broker", "Revenue"], [["TQL", "$900.00"]],
        ...                    align_right=[1]))
        +--------+---------+
        | Broker | Revenue |
        +--------+---------+
        | TQL    | $900.00 |
        +--------+---------+
    """
    if not headers:
        return ""

    right = set(align_right or [])

    col_widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row[: len(headers)]):
            col_widths[i] = max(col_widths[i], len(str(cell)))
    col_widths = [min(w, max_width) for w in col_widths]

    def render(cells: Sequence[Any]) -> str:
        formatted = []
        for i, width in enumerate(col_widths):
            text = str(cells[i]) if i < len(cells) else ""
            text = text[:width]
            if i in right:
                formatted.append(f" {text:>{width}} ")
            else:
                formatted.append(f" {text:<{width}} ")
        return "|" + "|".join(formatted) + "|"

    separator = "+" + "+".join("-" * (w + 2) for w in col_widths) + "+"

    lines = [separator, render(headers), separator]
    if rows:
        lines.extend(render(row) for row in rows)
        lines.append(separator)

    return "\n".join(lines)
