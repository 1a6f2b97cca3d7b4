"""Lifecycle state normalization and categorization utilities.

Raw lifecycle strings come from the patch management tool in several
spellings ("ReadyToSign", "ready to sign", "READY_TO_SIGN"). This module maps
them onto ``PatchState`` using STATE_ALIASES from config.py.
"""

from __future__ import annotations

from .config import DEVELOPMENT_STATES, SIGNING_STATES, STATE_ALIASES, PatchState


def _alias_key(value: str) -> str:
    return "".join(ch for ch in value.lower() if ch not in " -_")


def normalize_patch_state(value: str | PatchState | None) -> PatchState:
    """Map a raw lifecycle string to its canonical ``PatchState``.

    Returns ``PatchState.UNKNOWN`` for empty or unmapped values, which keeps
    new lifecycle states visible in the summary instead of failing the run.

    Parameters
    ----------
    value : str | PatchState | None
        Raw lifecycle string, or an already normalized state.

    Returns
    -------
    PatchState
        Canonical state.

    Examples
    --------
    >>> normalize_patch_state("ReadyToSign")
    <PatchState.IN_SIGNING: 'IN_SIGNING'>
    >>> normalize_patch_state("in_dev")
    <PatchState.IN_DEV: 'IN_DEV'>
    >>> normalize_patch_state("something new")
    <PatchState.UNKNOWN: 'UNKNOWN'>
    """
    if isinstance(value, PatchState):
        return value
    if not value:
        return PatchState.UNKNOWN
    key = _alias_key(str(value).strip())
    if key in STATE_ALIASES:
        return STATE_ALIASES[key]
    for state in PatchState:
        if key == _alias_key(state.value):
            return state
    return PatchState.UNKNOWN


def is_development_state(state: PatchState) -> bool:
    return state in DEVELOPMENT_STATES


def is_signing_state(state: PatchState) -> bool:
    return state in SIGNING_STATES


def is_released_state(state: PatchState) -> bool:
    return state is PatchState.RELEASED
