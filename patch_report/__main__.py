"""Render the patch status email body from a JSON snapshot of tracker issues.

Usage:
  python -m patch_report snapshot.json --audience customer -o report.html
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path

from patch_report.core.aging import report_today
from patch_report.core.config import AUDIENCES, DEFAULT_AUDIENCE, SETTINGS
from patch_report.core.mappers import map_issues
from patch_report.core.template_config import load_section_templates
from patch_report.report import build_email_body, email_header

logger = logging.getLogger("patch_report")


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="patch_report", description=__doc__.splitlines()[0])
    parser.add_argument("snapshot", type=Path, help="JSON file holding a list of issue records")
    parser.add_argument("--audience", choices=sorted(AUDIENCES), default=DEFAULT_AUDIENCE)
    parser.add_argument("--date", type=date.fromisoformat, default=None, help="report date (YYYY-MM-DD)")
    parser.add_argument("--strict", action="store_true", help="reject records with missing fields")
    parser.add_argument("--templates", type=Path, default=Path(SETTINGS.templates_file))
    parser.add_argument("-o", "--output", type=Path, default=None)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    today = args.date or report_today()
    try:
        raw = json.loads(args.snapshot.read_text(encoding=SETTINGS.encoding))
        if not isinstance(raw, list):
            raise ValueError(f"{args.snapshot} must hold a JSON list of issues")
        issues = map_issues(raw, strict=args.strict, today=today)
    except (OSError, ValueError) as exc:
        print(f"patch_report: {exc}", file=sys.stderr)
        return 2

    body = build_email_body(
        issues,
        email_header(args.audience, today),
        templates=load_section_templates(args.templates),
    )
    if args.output:
        args.output.write_text(body, encoding=SETTINGS.encoding)
        logger.info("Wrote report for %s issues to %s", len(issues), args.output)
    else:
        sys.stdout.write(body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
