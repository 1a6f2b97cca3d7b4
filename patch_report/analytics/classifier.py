"""Partition the patches of an issue collection into report buckets (pure functions)."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from patch_report.core.models import InactivePatch, Issue, OpenPatch
from patch_report.core.status import is_development_state, is_signing_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReportBuckets:
    open_patches: tuple[OpenPatch, ...]
    inactive_patches: tuple[InactivePatch, ...]
    released_issues: tuple[Issue, ...]
    development: tuple[OpenPatch, ...]
    signing: tuple[OpenPatch, ...]


def collect_open_patches(issues: Sequence[Issue]) -> list[OpenPatch]:
    return [patch for issue in issues for patch in issue.open_patches]


def collect_inactive_patches(issues: Sequence[Issue]) -> list[InactivePatch]:
    """Inactive patches of issues that have no open patch at all."""
    return [patch for issue in issues if not issue.open_patches for patch in issue.inactive_patches]


def collect_released_issues(issues: Sequence[Issue]) -> list[Issue]:
    return [issue for issue in issues if issue.released_patches]


def split_by_state(open_patches: Sequence[OpenPatch]) -> tuple[list[OpenPatch], list[OpenPatch]]:
    """Split open patches into (development, signing).

    Patches in any other state belong to neither list and are dropped.
    """
    development: list[OpenPatch] = []
    signing: list[OpenPatch] = []
    for patch in open_patches:
        if is_development_state(patch.state):
            development.append(patch)
        elif is_signing_state(patch.state):
            signing.append(patch)
        else:
            logger.debug("Dropping %s/%s in state %s", patch.issue_key, patch.name, patch.state.value)
    return development, signing


def classify(issues: Sequence[Issue]) -> ReportBuckets:
    open_patches = collect_open_patches(issues)
    development, signing = split_by_state(open_patches)
    buckets = ReportBuckets(
        open_patches=tuple(open_patches),
        inactive_patches=tuple(collect_inactive_patches(issues)),
        released_issues=tuple(collect_released_issues(issues)),
        development=tuple(development),
        signing=tuple(signing),
    )
    logger.debug(
        "Classified %s issues: %s in development, %s in signing, %s inactive, %s released issues",
        len(issues),
        len(buckets.development),
        len(buckets.signing),
        len(buckets.inactive_patches),
        len(buckets.released_issues),
    )
    return buckets
