"""Reusable HTML table helpers for the report email."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from html import escape

from patch_report.core.config import (
    GRAY_BACKGROUND,
    HEADER_ROW_STYLE,
    TABLE_CLOSE,
    TABLE_OPEN,
    WHITE_BACKGROUND,
)
from patch_report.core.models import HtmlTableRow


def column_header_row(names: Sequence[str]) -> str:
    cells = "".join(f"<td>{escape(name)}</td>" for name in names)
    return f'{TABLE_OPEN}<tr style="{HEADER_ROW_STYLE}">{cells}</tr>'


def row_backgrounds() -> Iterator[str]:
    """White, gray, white, ... restarting each time it is called."""
    while True:
        yield WHITE_BACKGROUND
        yield GRAY_BACKGROUND


def render_rows(rows: Iterable[HtmlTableRow]) -> str:
    return "".join(row.to_html_row(color) for row, color in zip(rows, row_backgrounds()))


def render_section(header: str, column_header: str, rows: Iterable[HtmlTableRow]) -> str:
    """Section header, column row, one row per record, closing tag.

    An empty ``rows`` still yields a well-formed table with just the column row.
    """
    return "".join([header, column_header, render_rows(rows), TABLE_CLOSE])
