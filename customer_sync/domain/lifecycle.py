from __future__ import annotations

from enum import StrEnum


class SubmissionState(StrEnum):
    IDLE = "idle"
    EDITING = "editing"
    VALIDATING = "validating"
    SUBMITTING = "submitting"
    SUCCESS_CLOSING = "success_closing"
    FAILED = "failed"


ALLOWED_TRANSITIONS: dict[SubmissionState, set[SubmissionState]] = {
    SubmissionState.IDLE: {SubmissionState.EDITING},
    SubmissionState.EDITING: {SubmissionState.VALIDATING, SubmissionState.IDLE},
    SubmissionState.VALIDATING: {SubmissionState.EDITING, SubmissionState.SUBMITTING, SubmissionState.IDLE},
    SubmissionState.SUBMITTING: {SubmissionState.SUCCESS_CLOSING, SubmissionState.FAILED},
    SubmissionState.SUCCESS_CLOSING: {SubmissionState.IDLE},
    SubmissionState.FAILED: {SubmissionState.EDITING, SubmissionState.IDLE},
}

# States from which cancel is honored.
CANCELLABLE_STATES: frozenset[SubmissionState] = frozenset(
    {
        SubmissionState.IDLE,
        SubmissionState.EDITING,
        SubmissionState.VALIDATING,
        SubmissionState.FAILED,
    }
)


def is_allowed_transition(from_state: SubmissionState, to_state: SubmissionState) -> bool:
    return to_state in ALLOWED_TRANSITIONS.get(from_state, set())
