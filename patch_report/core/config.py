"""Central configuration: lifecycle states, report templates, and shared constants."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

# =============================================================================
# Report Settings
# =============================================================================
TIMEZONE = "Asia/Colombo"
DEFAULT_AUDIENCE = "internal"
AUDIENCES: frozenset[str] = frozenset({"internal", "customer"})


# =============================================================================
# Patch Lifecycle States
# =============================================================================
class PatchState(str, Enum):
    IN_DEV = "IN_DEV"
    IN_PATCH_QUEUE = "IN_PATCH_QUEUE"
    IN_SIGNING = "IN_SIGNING"
    RELEASED = "RELEASED"
    ON_HOLD = "ON_HOLD"
    BROKEN = "BROKEN"
    UNKNOWN = "UNKNOWN"


# States that route an open patch into the development section
DEVELOPMENT_STATES: frozenset[PatchState] = frozenset({PatchState.IN_DEV, PatchState.IN_PATCH_QUEUE})

# States that route an open patch into the signing section
SIGNING_STATES: frozenset[PatchState] = frozenset({PatchState.IN_SIGNING})

# Map lifecycle strings from the patch management tool to canonical states.
# Keys are lowercase with spaces, dashes and underscores removed.
STATE_ALIASES: dict[str, PatchState] = {
    # Development
    "indev": PatchState.IN_DEV,
    "development": PatchState.IN_DEV,
    "predevelopment": PatchState.IN_DEV,
    "preqadevelopment": PatchState.IN_DEV,
    "failedqa": PatchState.IN_DEV,
    "regression": PatchState.IN_DEV,
    # Queue
    "inpatchqueue": PatchState.IN_PATCH_QUEUE,
    "queued": PatchState.IN_PATCH_QUEUE,
    "patchqueue": PatchState.IN_PATCH_QUEUE,
    # Signing
    "insigning": PatchState.IN_SIGNING,
    "readytosign": PatchState.IN_SIGNING,
    "signing": PatchState.IN_SIGNING,
    "staging": PatchState.IN_SIGNING,
    "testing": PatchState.IN_SIGNING,
    # Released
    "released": PatchState.RELEASED,
    "releasednotautomated": PatchState.RELEASED,
    "releasednotinpublicsvn": PatchState.RELEASED,
    # Parked
    "onhold": PatchState.ON_HOLD,
    "broken": PatchState.BROKEN,
}

# Human readable labels for the lifecycle column
STATE_LABELS: dict[PatchState, str] = {
    PatchState.IN_DEV: "In Development",
    PatchState.IN_PATCH_QUEUE: "In Patch Queue",
    PatchState.IN_SIGNING: "In Signing",
    PatchState.RELEASED: "Released",
    PatchState.ON_HOLD: "On Hold",
    PatchState.BROKEN: "Broken",
    PatchState.UNKNOWN: "Unknown",
}

# =============================================================================
# Table Styling
# =============================================================================
WHITE_BACKGROUND = "#ffffff"
GRAY_BACKGROUND = "#f2f2f2"

TABLE_OPEN = '<table border="1" cellpadding="4" cellspacing="0" style="border-collapse:collapse;width:100%">'
TABLE_CLOSE = "</table>"
HEADER_ROW_STYLE = "background-color:#0c2c5a;color:#ffffff;font-weight:bold"

# =============================================================================
# Section Headers
# =============================================================================
SECTION_HEADER_DEV = "<h3>Patches In Development</h3>"
SECTION_HEADER_INACTIVE = "<h3>Inactive Patches</h3>"
SECTION_HEADER_SIGNING = "<h3>Patches In Signing</h3>"
SECTION_HEADER_RELEASED = "<h3>Released Patches</h3>"
SECTION_HEADER_SUMMARY = "<h3>Summary Of JIRA Issues</h3>"

# =============================================================================
# Column Names
# =============================================================================
COLUMN_NAMES_DEV: Sequence[str] = (
    "JIRA",
    "Patch",
    "Product",
    "Assignee",
    "Lifecycle State",
    "Work Days Since Report Date",
)

COLUMN_NAMES_INACTIVE: Sequence[str] = (
    "JIRA",
    "Patch",
    "Product",
    "Assignee",
    "Lifecycle State",
    "JIRA Create Date",
)

COLUMN_NAMES_SIGNING: Sequence[str] = (
    "JIRA",
    "Patch",
    "Product",
    "Assignee",
    "Lifecycle State",
    "Work Days In Signing",
)

COLUMN_NAMES_RELEASED: Sequence[str] = (
    "JIRA",
    "Title",
    "Released Patches",
)

COLUMN_NAMES_SUMMARY: Sequence[str] = (
    "JIRA",
    "Title",
    "Open Patches",
    "Inactive Patches",
    "Released Patches",
    "Report Date",
)

# =============================================================================
# Email Envelope
# =============================================================================
EMAIL_HEADER_INTERNAL = (
    "<html><body>"
    "<p>Hi all,</p>"
    "<p>Below is the patch status report for {report_date}. "
    "It lists every patch tracked against an open JIRA issue.</p>"
)

EMAIL_HEADER_CUSTOMER = (
    "<html><body>"
    "<p>Hi all,</p>"
    "<p>Below is the status of customer related patches for {report_date}.</p>"
)

EMAIL_FOOTER = (
    "<p>Thanks,<br/>Patch Status Reporter</p>"
    "<p><small>This is an auto-generated email.</small></p>"
    "</body></html>"
)

DATE_FORMAT = "%Y-%m-%d"
EMPTY_CELL = "-"


@dataclass(slots=True)
class ReportSettings:
    templates_file: str = "report.yaml"
    encoding: str = "utf-8"


SETTINGS = ReportSettings()
