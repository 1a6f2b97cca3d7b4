"""Patch status report: classify, order and render patches tracked against JIRA issues."""

from patch_report.analytics.classifier import ReportBuckets, classify
from patch_report.core.config import PatchState
from patch_report.core.mappers import map_issue, map_issues
from patch_report.core.models import InactivePatch, Issue, OpenPatch, ReleasedIssueRow
from patch_report.report import build_email_body, email_header

__all__ = [
    "InactivePatch",
    "Issue",
    "OpenPatch",
    "PatchState",
    "ReleasedIssueRow",
    "ReportBuckets",
    "build_email_body",
    "classify",
    "email_header",
    "map_issue",
    "map_issues",
]
