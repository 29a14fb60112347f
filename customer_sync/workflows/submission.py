from __future__ import annotations

import asyncio
from dataclasses import replace
import logging

from customer_sync.domain.contracts import CustomersClient, Revalidate
from customer_sync.domain.error_taxonomy import UNEXPECTED_ERROR_MESSAGE
from customer_sync.domain.errors import DomainInvariantError, RemoteWriteError
from customer_sync.domain.lifecycle import CANCELLABLE_STATES, SubmissionState, is_allowed_transition
from customer_sync.domain.models import FieldErrors, FormField, FormState, SubmissionSnapshot, SubmitResult
from customer_sync.domain.validation import build_create_command, validate_form

logger = logging.getLogger("customer_sync.submission")


class SubmissionWorkflow:
    """Add-customer dialog state machine.

    Owns the transient form state and drives validate -> create -> revalidate.
    Only the ``revalidate`` callback reaches outside the workflow.
    """

    def __init__(self, *, client: CustomersClient, revalidate: Revalidate) -> None:
        self._client = client
        self._revalidate = revalidate
        self.state = SubmissionState.IDLE
        self.form = FormState()
        self.field_errors = FieldErrors()
        self.is_submitting = False
        self.submit_error = ""
        self.transitions: list[tuple[str, str]] = []
        self._revalidations: set[asyncio.Task[None]] = set()

    @property
    def dialog_open(self) -> bool:
        return self.state != SubmissionState.IDLE

    def snapshot(self) -> SubmissionSnapshot:
        return SubmissionSnapshot(
            state=self.state.value,
            dialog_open=self.dialog_open,
            form=self.form,
            field_errors=self.field_errors,
            is_submitting=self.is_submitting,
            submit_error=self.submit_error,
        )

    def open(self) -> None:
        if self.state == SubmissionState.IDLE:
            self._transition(SubmissionState.EDITING)

    def set_field(self, name: FormField | str, value: str) -> None:
        if self.state != SubmissionState.EDITING:
            raise DomainInvariantError(f"form is not editable in state: {self.state}")
        field_name = FormField(name)
        self.form = replace(self.form, **{field_name.value: value})

    async def submit(self) -> SubmitResult:
        if self.is_submitting:
            logger.info("submit ignored while in flight", extra={"state": self.state.value})
            return SubmitResult(accepted=False)
        if self.state == SubmissionState.IDLE:
            logger.info("submit ignored while dialog is closed", extra={"state": self.state.value})
            return SubmitResult(accepted=False)

        self._transition(SubmissionState.VALIDATING)
        errors = validate_form(self.form)
        self.field_errors = errors
        if errors.any():
            self._transition(SubmissionState.EDITING)
            return SubmitResult(accepted=True, field_errors=errors)

        self._transition(SubmissionState.SUBMITTING)
        self.is_submitting = True
        self.submit_error = ""
        command = build_create_command(self.form)

        try:
            await self._client.create_customer(command)
        except RemoteWriteError as exc:
            logger.warning(
                "customer create rejected",
                extra={"error_code": exc.api_error.code, "status_code": exc.status_code},
            )
            return self._fail(exc.api_error.message)
        except Exception:
            logger.exception("customer create crashed")
            return self._fail(UNEXPECTED_ERROR_MESSAGE)

        self._transition(SubmissionState.SUCCESS_CLOSING)
        task = asyncio.get_running_loop().create_task(self._run_revalidate())
        self._revalidations.add(task)
        task.add_done_callback(self._revalidations.discard)
        self._reset()
        self.is_submitting = False
        self._transition(SubmissionState.IDLE)
        logger.info("customer created")
        return SubmitResult(accepted=True, created=True)

    async def wait_revalidated(self) -> None:
        while self._revalidations:
            await asyncio.gather(*list(self._revalidations))

    async def _run_revalidate(self) -> None:
        try:
            await self._revalidate()
        except Exception:
            logger.exception("revalidation after create failed")

    def cancel(self) -> bool:
        if self.state not in CANCELLABLE_STATES:
            logger.info("cancel ignored", extra={"state": self.state.value})
            return False
        self._reset()
        if self.state != SubmissionState.IDLE:
            self._transition(SubmissionState.IDLE)
        return True

    def _fail(self, message: str) -> SubmitResult:
        self._transition(SubmissionState.FAILED)
        self.submit_error = message or UNEXPECTED_ERROR_MESSAGE
        self.is_submitting = False
        self._transition(SubmissionState.EDITING)
        return SubmitResult(accepted=True, submit_error=self.submit_error)

    def _reset(self) -> None:
        if self.is_submitting and self.state != SubmissionState.SUCCESS_CLOSING:
            raise DomainInvariantError("form cannot be reset while submitting")
        self.form = FormState()
        self.field_errors = FieldErrors()
        self.submit_error = ""

    def _transition(self, to_state: SubmissionState) -> None:
        from_state = self.state
        if not is_allowed_transition(from_state, to_state):
            raise DomainInvariantError(f"invalid transition: {from_state} -> {to_state}")
        self.transitions.append((from_state.value, to_state.value))
        self.state = to_state
        logger.debug("submission transition", extra={"state": to_state.value})
