"""Load section headers and column names from YAML (with fallbacks)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import yaml

from .config import (
    COLUMN_NAMES_DEV,
    COLUMN_NAMES_INACTIVE,
    COLUMN_NAMES_RELEASED,
    COLUMN_NAMES_SIGNING,
    COLUMN_NAMES_SUMMARY,
    SECTION_HEADER_DEV,
    SECTION_HEADER_INACTIVE,
    SECTION_HEADER_RELEASED,
    SECTION_HEADER_SIGNING,
    SECTION_HEADER_SUMMARY,
    SETTINGS,
)

logger = logging.getLogger(__name__)

SECTION_KEYS: Sequence[str] = ("development", "inactive", "signing", "released", "summary")


@dataclass(frozen=True, slots=True)
class SectionTemplate:
    header: str
    columns: tuple[str, ...]


DEFAULT_TEMPLATES: dict[str, SectionTemplate] = {
    "development": SectionTemplate(SECTION_HEADER_DEV, tuple(COLUMN_NAMES_DEV)),
    "inactive": SectionTemplate(SECTION_HEADER_INACTIVE, tuple(COLUMN_NAMES_INACTIVE)),
    "signing": SectionTemplate(SECTION_HEADER_SIGNING, tuple(COLUMN_NAMES_SIGNING)),
    "released": SectionTemplate(SECTION_HEADER_RELEASED, tuple(COLUMN_NAMES_RELEASED)),
    "summary": SectionTemplate(SECTION_HEADER_SUMMARY, tuple(COLUMN_NAMES_SUMMARY)),
}


def load_section_templates(path: str | Path | None = None) -> dict[str, SectionTemplate]:
    """Return the section templates, overriding defaults from ``path`` if it exists.

    The YAML file holds a ``sections`` mapping keyed by section name, each with
    an optional ``header`` string and ``columns`` list. Missing keys fall back to
    the built-in templates; an unreadable file falls back entirely.
    """
    templates = dict(DEFAULT_TEMPLATES)
    if path is None:
        return templates
    yaml_path = Path(path)
    if not yaml_path.exists():
        return templates
    try:
        data = yaml.safe_load(yaml_path.read_text(encoding=SETTINGS.encoding)) or {}
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Failed to load report templates from %s: %s", yaml_path, exc)
        return templates
    sections = data.get("sections") if isinstance(data, dict) else None
    if not isinstance(sections, dict):
        sections = {}
    for name, override in sections.items():
        if name not in templates:
            logger.warning("Ignoring unknown report section %r in %s", name, yaml_path)
            continue
        if not isinstance(override, dict):
            continue
        base = templates[name]
        columns = override.get("columns") or base.columns
        templates[name] = SectionTemplate(
            header=str(override.get("header") or base.header),
            columns=tuple(str(c) for c in columns),
        )
    return templates
