"""Mapping raw tracker issue JSON into Issue / patch model instances."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date
from typing import Any

import pandas as pd

from .aging import report_today, work_days_between
from .config import TIMEZONE, PatchState
from .models import InactivePatch, Issue, OpenPatch
from .status import is_released_state, normalize_patch_state

logger = logging.getLogger(__name__)


def parse_date(val: Any) -> date | None:
    """Calendar date of ``val`` in the report timezone, or ``None`` if unparseable."""
    if val is None or val == "" or not pd.api.types.is_scalar(val):
        return None
    ts = pd.to_datetime(val, utc=True, errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    return ts.tz_convert(TIMEZONE).date()


def _parse_int(val: Any) -> int | None:
    if val is None or val == "" or not pd.api.types.is_scalar(val):
        return None
    number = pd.to_numeric(val, errors="coerce")
    if pd.isna(number):
        return None
    return int(number)


def _require(value: Any, what: str, issue_key: str, strict: bool) -> None:
    if strict and value is None:
        raise ValueError(f"Malformed record {issue_key}: missing {what}")


def map_patch(
    raw: dict[str, Any],
    issue: dict[str, Any],
    *,
    strict: bool = False,
    today: date | None = None,
) -> OpenPatch | InactivePatch:
    """Build an open, released or inactive patch from a raw patch dict.

    Released lifecycle states always produce an ``OpenPatch`` in the
    ``RELEASED`` state; otherwise ``"active": false`` selects an
    ``InactivePatch``. ``issue`` supplies the parent key and URL.
    """
    issue_key = issue["key"]
    if not isinstance(raw, dict):
        raise ValueError(f"Malformed record {issue_key}: patch entry {raw!r} is not an object")
    name = raw.get("name")
    _require(name, "patch name", issue_key, strict)
    lifecycle = raw.get("lifecycle") or raw.get("state")
    state = normalize_patch_state(lifecycle)
    released = is_released_state(state)
    common = {
        "issue_key": issue_key,
        "issue_url": issue.get("url"),
        "name": name or "",
        "product": raw.get("product"),
        "assignee": raw.get("assignee"),
        "lifecycle": lifecycle,
    }

    if not released and raw.get("active", True) is False:
        created = parse_date(raw.get("jira_create_date") or issue.get("created"))
        _require(created, f"JIRA create date for {name}", issue_key, strict)
        return InactivePatch(jira_create_date=created, **common)

    if strict and state is PatchState.UNKNOWN:
        raise ValueError(f"Malformed record {issue_key}: unrecognized lifecycle state {lifecycle!r}")
    days = _parse_int(raw.get("days_in_state"))
    if days is None and raw.get("state_since"):
        days = work_days_between(parse_date(raw.get("state_since")), today or report_today())
    if not released:
        _require(days, f"days in state for {name}", issue_key, strict)
    return OpenPatch(
        state=state,
        days_in_state=days,
        report_date=parse_date(raw.get("report_date") or issue.get("report_date")),
        **common,
    )


def map_issue(raw: dict[str, Any], *, strict: bool = False, today: date | None = None) -> Issue:
    if not isinstance(raw, dict):
        raise ValueError(f"Malformed record: issue entry {raw!r} is not an object")
    key = raw.get("key")
    if not key or not isinstance(key, str):
        raise ValueError(f"Malformed record: issue without key ({sorted(raw)!r})")
    report_date = parse_date(raw.get("report_date"))
    _require(report_date, "report date", key, strict)
    raw_patches = raw.get("patches") or []
    if not isinstance(raw_patches, list):
        raise ValueError(f"Malformed record {key}: patches must be a list, got {type(raw_patches).__name__}")

    open_patches: list[OpenPatch] = []
    inactive: list[InactivePatch] = []
    released: list[OpenPatch] = []
    for raw_patch in raw_patches:
        patch = map_patch(raw_patch, raw, strict=strict, today=today)
        if isinstance(patch, InactivePatch):
            inactive.append(patch)
        elif is_released_state(patch.state):
            released.append(patch)
        else:
            open_patches.append(patch)

    return Issue(
        key=key,
        title=raw.get("title"),
        url=raw.get("url"),
        report_date=report_date,
        created=parse_date(raw.get("created")),
        open_patches=tuple(open_patches),
        inactive_patches=tuple(inactive),
        released_patches=tuple(released),
    )


def map_issues(
    raws: Iterable[dict[str, Any]], *, strict: bool = False, today: date | None = None
) -> list[Issue]:
    issues = [map_issue(raw, strict=strict, today=today) for raw in raws]
    logger.debug("Mapped %s issues", len(issues))
    return issues
