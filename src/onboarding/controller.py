"""
Onboarding controller - drives the wizard's step-flow state machine.

Input handlers replace the record synchronously. ``next()`` is the only
operation that awaits: it validates the step being left, submits the step
payload to the step service, merges the response and moves the pointer one
step forward. Every error path leaves the controller re-submittable: same
step, same record, busy cleared, error set.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Tuple

from src.error_handler import ErrorNormalizer, normalize_step_error
from src.integrations.contracts.interfaces import StepService
from src.onboarding import flow_definition as flows
from src.onboarding.flow_definition import ClientType, StepName
from src.onboarding.observability import FlowEvent, FlowObserver, LoggingFlowObserver
from src.onboarding.options import PERIOD_OPTIONS, option_values
from src.onboarding.payload import build_payload, serialize_payload
from src.onboarding.record import InputKind, OnboardingRecord, RecordFieldError, coerce_input
from src.onboarding.validation import validate_step

logger = logging.getLogger(__name__)


class OnboardingController:
    def __init__(
        self,
        step_service: StepService,
        *,
        record: Optional[OnboardingRecord] = None,
        observer: Optional[FlowObserver] = None,
        error_normalizer: ErrorNormalizer = normalize_step_error,
    ) -> None:
        self.step_service = step_service
        self.observer = observer or LoggingFlowObserver()
        self.error_normalizer = error_normalizer
        self._record = record or OnboardingRecord()
        self._error: Optional[str] = None
        self._busy = False
        self._emit(FlowEvent.STEP_ENTERED, step=self.current_step.value)

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def record(self) -> OnboardingRecord:
        return self._record

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def is_busy(self) -> bool:
        return self._busy

    @property
    def current_step(self) -> StepName:
        return self._record.current_step_name

    @property
    def sequence(self) -> Tuple[StepName, ...]:
        return flows.sequence_for(self._record.client_type)

    @property
    def step_index(self) -> int:
        return flows.index_of(self.current_step, self.sequence)

    @property
    def is_first_step(self) -> bool:
        return flows.is_first(self.current_step, self.sequence)

    @property
    def is_last_step(self) -> bool:
        return flows.is_last(self.current_step, self.sequence)

    @property
    def is_business(self) -> bool:
        return self._record.client_type is ClientType.BUSINESS

    @property
    def is_person(self) -> bool:
        return self._record.client_type is ClientType.PERSON

    # ------------------------------------------------------------------
    # Input handlers
    # ------------------------------------------------------------------

    def on_client_type_change(self, value: Optional[ClientType | str]) -> None:
        """
        Switch client type and rewind to the first step of the new flow.

        Driver and vehicle answers already on the record are kept, so
        switching back and forth does not lose what was typed.
        """
        try:
            client_type = ClientType(value) if value else None
        except ValueError:
            self._error = f"Unknown client type '{value}'."
            return
        first = flows.sequence_for(client_type)[0]
        self._record = self._record.with_changes(client_type=client_type, current_step_name=first)
        self._error = None
        logger.debug("clientType change: %s", value)
        self._emit(FlowEvent.STEP_ENTERED, step=first.value, client_type=value)

    def on_field_change(self, name: str, raw_value: Any, input_kind: InputKind | str = InputKind.TEXT) -> None:
        """Coerce a raw input value and replace the record with a copy carrying it."""
        value = coerce_input(raw_value, input_kind)
        try:
            self._record = self._record.with_changes(**{name: value})
        except RecordFieldError as exc:
            self._error = exc.message
            return
        logger.debug("input change: %s => %r", name, value)

    def on_coverages_change(self, ids: Optional[Iterable[str]]) -> None:
        try:
            self._record = self._record.with_changes(selected_coverage_ids=list(ids or []))
        except RecordFieldError as exc:
            self._error = exc.message

    def on_period_change(self, value: str) -> None:
        if str(value) not in option_values(PERIOD_OPTIONS):
            self._error = f"Unsupported contract period '{value}'."
            return
        self._record = self._record.with_changes(contract_period=str(value))
        logger.debug("Contract period changed to: %s", value)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    async def next(self) -> bool:
        """Submit the current step and advance on success.

        Returns True when the step service accepted the submission. The
        fragment is merged over the live record, so edits made while the
        call was pending survive. The pointer moves one step forward unless
        the step is terminal or the user moved it (or switched client type)
        while the call was pending. Never raises; failures are reported
        through ``error``. Calls made while one is in flight are rejected.
        """
        if self._busy:
            logger.warning("next() ignored: a step submission is already in flight")
            return False

        self._busy = True
        self._error = None
        step = self.current_step
        client_type = self._record.client_type
        try:
            result = validate_step(step, self._record)
            if not result.ok:
                self._error = result.message
                self._emit(FlowEvent.VALIDATION_FAILED, step=step.value, message=result.message)
                return False

            ordinal = flows.ordinal_for(step, client_type)
            payload = build_payload(self._record, ordinal)
            self._emit(FlowEvent.REMOTE_CALL_STARTED, step=step.value, ordinal=ordinal)
            fragment = await self.step_service.save_step(serialize_payload(payload))

            merged = self._record.merge(fragment or {})
            self._emit(FlowEvent.REMOTE_CALL_SUCCEEDED, step=step.value, fields=sorted((fragment or {}).keys()))
            if merged.current_step_name is not step or merged.client_type is not client_type:
                logger.info("Step %s saved; pointer changed while pending, not advancing", step.value)
                self._record = merged
                return True

            sequence = flows.sequence_for(merged.client_type)
            if flows.is_last(step, sequence):
                self._record = merged
                return True
            following = flows.next_step(step, sequence)
            self._record = merged.with_changes(current_step_name=following)
            self._emit(FlowEvent.STEP_ADVANCED, step=following.value, previous=step.value)
            return True
        except Exception as exc:
            logger.exception("Step submission failed at %s", step.value)
            self._error = self.error_normalizer(exc)
            self._emit(FlowEvent.REMOTE_CALL_FAILED, step=step.value, message=self._error)
            return False
        finally:
            self._busy = False

    def previous(self) -> bool:
        """Move back one step; no validation and no remote call."""
        if self.is_first_step:
            return False
        step = self.current_step
        prior = flows.previous_step(step, self.sequence)
        self._record = self._record.with_changes(current_step_name=prior)
        self._emit(FlowEvent.STEP_RETREATED, step=prior.value, previous=step.value)
        return True

    def done(self) -> None:
        self._error = None
        self._emit(
            FlowEvent.ONBOARDING_COMPLETED,
            policy_id=self._record.policy_id,
            contract_id=self._record.contract_id,
        )

    def _emit(self, event: FlowEvent, **details: Any) -> None:
        try:
            self.observer.on_event(event, **details)
        except Exception:
            logger.exception("Flow observer failed on %s", event.value)
