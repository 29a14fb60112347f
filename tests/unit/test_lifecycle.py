import pytest

from customer_sync.domain.lifecycle import (
    ALLOWED_TRANSITIONS,
    CANCELLABLE_STATES,
    SubmissionState,
    is_allowed_transition,
)


@pytest.mark.unit
def test_every_state_has_a_transition_entry() -> None:
    assert set(ALLOWED_TRANSITIONS) == set(SubmissionState)


@pytest.mark.unit
def test_submitting_cannot_jump_back_to_idle_or_editing() -> None:
    assert is_allowed_transition(SubmissionState.SUBMITTING, SubmissionState.IDLE) is False
    assert is_allowed_transition(SubmissionState.SUBMITTING, SubmissionState.EDITING) is False
    assert is_allowed_transition(SubmissionState.SUBMITTING, SubmissionState.FAILED) is True
    assert SubmissionState.SUBMITTING not in CANCELLABLE_STATES
