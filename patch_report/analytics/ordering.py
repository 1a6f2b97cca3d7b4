"""Presentation orders for report buckets.

All orders are stable (``sorted`` with a key) and return new lists. A missing
date sorts as the earliest possible date, so undated records lead their
section in input order. A missing days-in-state counter sorts last.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import date

from patch_report.core.models import InactivePatch, Issue, OpenPatch


def _date_key(value: date | None) -> tuple[int, date]:
    if value is None:
        return (0, date.min)
    return (1, value)


def by_days_in_state(patches: Iterable[OpenPatch]) -> list[OpenPatch]:
    """Longest time in the current state first."""
    return sorted(
        patches,
        key=lambda p: (p.days_in_state is None, -(p.days_in_state or 0)),
    )


def by_jira_date(patches: Iterable[InactivePatch]) -> list[InactivePatch]:
    return sorted(patches, key=lambda p: _date_key(p.jira_create_date))


def by_report_date(issues: Iterable[Issue]) -> list[Issue]:
    return sorted(issues, key=lambda i: _date_key(i.report_date))


def by_released_report_date(issues: Iterable[Issue]) -> list[Issue]:
    # Released section rows are whole issues; ordered on the issue's report date.
    return sorted(issues, key=lambda i: _date_key(i.report_date))


ORDERING_POLICIES: dict[str, Callable[[Iterable], list]] = {
    "days_in_state": by_days_in_state,
    "jira_date": by_jira_date,
    "report_date": by_report_date,
    "released_report_date": by_released_report_date,
}
