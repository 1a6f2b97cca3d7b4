"""Domain data models for JIRA issues and the patches tracked against them.

Every model that appears in a report table implements ``to_html_row``; the
table renderer only relies on that capability (see ``HtmlTableRow``).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from html import escape
from typing import Protocol

from .config import DATE_FORMAT, EMPTY_CELL, STATE_LABELS, PatchState


class HtmlTableRow(Protocol):
    def to_html_row(self, background_color: str) -> str: ...


def _text(value) -> str:
    if value is None or value == "":
        return EMPTY_CELL
    return escape(str(value))


def _date(value: date | None) -> str:
    if value is None:
        return EMPTY_CELL
    return value.strftime(DATE_FORMAT)


def _link(key: str, url: str | None) -> str:
    if not url:
        return escape(key)
    return f'<a href="{escape(url, quote=True)}">{escape(key)}</a>'


def _row(background_color: str, cells: list[str]) -> str:
    body = "".join(f"<td>{cell}</td>" for cell in cells)
    return f'<tr style="background-color:{background_color}">{body}</tr>'


@dataclass(frozen=True, slots=True)
class OpenPatch:
    issue_key: str
    name: str
    state: PatchState
    days_in_state: int | None = None
    report_date: date | None = None
    issue_url: str | None = None
    product: str | None = None
    assignee: str | None = None
    lifecycle: str | None = None

    def to_html_row(self, background_color: str) -> str:
        return _row(
            background_color,
            [
                _link(self.issue_key, self.issue_url),
                _text(self.name),
                _text(self.product),
                _text(self.assignee),
                _text(self.lifecycle or STATE_LABELS[self.state]),
                _text(self.days_in_state),
            ],
        )


@dataclass(frozen=True, slots=True)
class InactivePatch:
    issue_key: str
    name: str
    jira_create_date: date | None = None
    issue_url: str | None = None
    product: str | None = None
    assignee: str | None = None
    lifecycle: str | None = None

    def to_html_row(self, background_color: str) -> str:
        return _row(
            background_color,
            [
                _link(self.issue_key, self.issue_url),
                _text(self.name),
                _text(self.product),
                _text(self.assignee),
                _text(self.lifecycle),
                _date(self.jira_create_date),
            ],
        )


@dataclass(frozen=True, slots=True)
class Issue:
    key: str
    title: str | None = None
    url: str | None = None
    report_date: date | None = None
    created: date | None = None
    open_patches: tuple[OpenPatch, ...] = field(default_factory=tuple)
    inactive_patches: tuple[InactivePatch, ...] = field(default_factory=tuple)
    released_patches: tuple[OpenPatch, ...] = field(default_factory=tuple)

    def to_html_row(self, background_color: str) -> str:
        """Summary row: one line per issue with its patch counts."""
        return _row(
            background_color,
            [
                _link(self.key, self.url),
                _text(self.title),
                str(len(self.open_patches)),
                str(len(self.inactive_patches)),
                str(len(self.released_patches)),
                _date(self.report_date),
            ],
        )


@dataclass(frozen=True, slots=True)
class ReleasedIssueRow:
    """An issue displayed in the released section, listing its released patches."""

    issue: Issue

    def to_html_row(self, background_color: str) -> str:
        names = ", ".join(patch.name for patch in self.issue.released_patches)
        return _row(
            background_color,
            [
                _link(self.issue.key, self.issue.url),
                _text(self.issue.title),
                _text(names),
            ],
        )
