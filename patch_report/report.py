"""Assemble the patch status email body from an issue collection."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date

from patch_report.analytics.classifier import classify
from patch_report.analytics.ordering import ORDERING_POLICIES
from patch_report.core.config import (
    AUDIENCES,
    DATE_FORMAT,
    EMAIL_FOOTER,
    EMAIL_HEADER_CUSTOMER,
    EMAIL_HEADER_INTERNAL,
)
from patch_report.core.models import Issue, ReleasedIssueRow
from patch_report.core.template_config import DEFAULT_TEMPLATES, SectionTemplate
from patch_report.visual.tables import column_header_row, render_section

logger = logging.getLogger(__name__)

# Ordering policy applied to each section before rendering
SECTION_ORDERING: dict[str, str] = {
    "development": "days_in_state",
    "inactive": "jira_date",
    "signing": "days_in_state",
    "released": "released_report_date",
    "summary": "report_date",
}


def email_header(audience: str, report_date: date) -> str:
    """HTML preamble for the ``internal`` or ``customer`` mailing list."""
    if audience not in AUDIENCES:
        raise ValueError(f"Unknown audience {audience!r}; expected one of {sorted(AUDIENCES)}")
    template = EMAIL_HEADER_INTERNAL if audience == "internal" else EMAIL_HEADER_CUSTOMER
    return template.format(report_date=report_date.strftime(DATE_FORMAT))


def build_email_body(
    issues: Sequence[Issue],
    header: str,
    *,
    templates: dict[str, SectionTemplate] | None = None,
    footer: str = EMAIL_FOOTER,
) -> str:
    """Return the full email body.

    Sections, in order: development, inactive, signing, released, summary,
    preceded by ``header`` and followed by ``footer``. Every section is
    rendered even when empty. The input issues are not modified.
    """
    templates = templates or DEFAULT_TEMPLATES
    buckets = classify(issues)

    def section(name: str, records, row=None) -> str:
        template = templates[name]
        ordered = ORDERING_POLICIES[SECTION_ORDERING[name]](records)
        rows = [row(record) for record in ordered] if row else ordered
        return render_section(template.header, column_header_row(template.columns), rows)

    parts = [
        header,
        section("development", buckets.development),
        section("inactive", buckets.inactive_patches),
        section("signing", buckets.signing),
        section("released", buckets.released_issues, row=ReleasedIssueRow),
        section("summary", issues),
        footer,
    ]
    body = "".join(parts)
    logger.debug("Built email body for %s issues (%s chars)", len(issues), len(body))
    return body
