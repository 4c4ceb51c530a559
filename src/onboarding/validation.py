"""Step-local preconditions checked before a step is submitted.

Only the step being left is checked. Deeper validation happens on the step
service, whose failures come back through the error channel.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from src.onboarding.flow_definition import ClientType, StepName
from src.onboarding.record import OnboardingRecord


@dataclass(frozen=True)
class StepValidationResult:
    ok: bool
    message: Optional[str] = None


OK = StepValidationResult(ok=True)


def _strip(v: Any) -> str:
    return "" if v is None else str(v).strip()


def _fail(message: str) -> StepValidationResult:
    return StepValidationResult(ok=False, message=message)


def _validate_account(record: OnboardingRecord) -> StepValidationResult:
    if record.client_type is None:
        return _fail("Select a Client Type to proceed.")
    if record.client_type is ClientType.PERSON and not (_strip(record.first_name) and _strip(record.last_name)):
        return _fail("First Name and Last Name are required for Person accounts.")
    if record.client_type is ClientType.BUSINESS and not _strip(record.business_name):
        return _fail("Business Name is required for Business accounts.")
    return OK


def _validate_driver(record: OnboardingRecord) -> StepValidationResult:
    if not (_strip(record.driver_first_name) and _strip(record.driver_last_name)):
        return _fail("Driver First Name and Last Name are required.")
    return OK


StepRule = Callable[[OnboardingRecord], StepValidationResult]

_RULES: Dict[StepName, StepRule] = {
    StepName.ACCOUNT: _validate_account,
    StepName.DRIVER: _validate_driver,
}


def validate_step(step: StepName | str, record: OnboardingRecord) -> StepValidationResult:
    """Check the local preconditions for leaving ``step``."""
    rule = _RULES.get(StepName(step))
    return rule(record) if rule else OK
