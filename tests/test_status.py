from patch_report.core.config import PatchState
from patch_report.core.status import is_development_state, is_signing_state, normalize_patch_state


def test_state_aliases():
    assert normalize_patch_state("Development") is PatchState.IN_DEV
    assert normalize_patch_state("Queued") is PatchState.IN_PATCH_QUEUE
    assert normalize_patch_state("ReadyToSign") is PatchState.IN_SIGNING
    assert normalize_patch_state("ready to sign") is PatchState.IN_SIGNING
    assert normalize_patch_state("ReleasedNotInPublicSVN") is PatchState.RELEASED


def test_state_canonical_spellings():
    assert normalize_patch_state("IN_DEV") is PatchState.IN_DEV
    assert normalize_patch_state("in-patch-queue") is PatchState.IN_PATCH_QUEUE
    assert normalize_patch_state(PatchState.IN_SIGNING) is PatchState.IN_SIGNING


def test_unknown_states():
    assert normalize_patch_state(None) is PatchState.UNKNOWN
    assert normalize_patch_state("") is PatchState.UNKNOWN
    assert normalize_patch_state("some new state") is PatchState.UNKNOWN


def test_state_groups():
    assert is_development_state(PatchState.IN_DEV)
    assert is_development_state(PatchState.IN_PATCH_QUEUE)
    assert not is_development_state(PatchState.IN_SIGNING)
    assert is_signing_state(PatchState.IN_SIGNING)
    assert not is_signing_state(PatchState.ON_HOLD)
