"""
Flow definition for the policy onboarding wizard.

Two things live here and nowhere else:
- the ordered step sequence for each client type
- the step numbers understood by the remote step service

The step numbers are a table, not a position in the sequence: BUSINESS inserts
a DRIVER step, so every later step shifts by one on the service side.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Mapping, Optional, Tuple


class FlowConfigurationError(RuntimeError):
    """Raised when the flow tables are inconsistent with each other or with the service."""


class ClientType(str, Enum):
    PERSON = "PERSON"
    BUSINESS = "BUSINESS"


class StepName(str, Enum):
    ACCOUNT = "ACCOUNT"
    DRIVER = "DRIVER"
    VEHICLE = "VEHICLE"
    REVIEW = "REVIEW"
    COVERAGES = "COVERAGES"
    FINALIZE = "FINALIZE"
    DOWNLOAD = "DOWNLOAD"


FLOWS: Dict[ClientType, Tuple[StepName, ...]] = {
    ClientType.PERSON: (
        StepName.ACCOUNT,
        StepName.VEHICLE,
        StepName.REVIEW,
        StepName.COVERAGES,
        StepName.FINALIZE,
        StepName.DOWNLOAD,
    ),
    ClientType.BUSINESS: (
        StepName.ACCOUNT,
        StepName.DRIVER,
        StepName.VEHICLE,
        StepName.REVIEW,
        StepName.COVERAGES,
        StepName.FINALIZE,
        StepName.DOWNLOAD,
    ),
}

DEFAULT_CLIENT_TYPE = ClientType.PERSON

# Must match the step service's own numbering (see verify_ordinals).
STEP_ORDINALS: Dict[ClientType, Dict[StepName, int]] = {
    ClientType.PERSON: {
        StepName.ACCOUNT: 1,
        StepName.VEHICLE: 2,
        StepName.REVIEW: 3,
        StepName.COVERAGES: 4,
        StepName.FINALIZE: 5,
        StepName.DOWNLOAD: 6,
    },
    ClientType.BUSINESS: {
        StepName.ACCOUNT: 1,
        StepName.DRIVER: 2,
        StepName.VEHICLE: 3,
        StepName.REVIEW: 4,
        StepName.COVERAGES: 5,
        StepName.FINALIZE: 6,
        StepName.DOWNLOAD: 7,
    },
}


def _client_type(value: Optional[ClientType | str]) -> ClientType:
    if value is None or value == "":
        return DEFAULT_CLIENT_TYPE
    try:
        return ClientType(value)
    except ValueError as exc:
        raise FlowConfigurationError(f"Unknown client type '{value}'.") from exc


def sequence_for(client_type: Optional[ClientType | str]) -> Tuple[StepName, ...]:
    """Return the ordered steps for a client type (PERSON when not chosen yet)."""
    return FLOWS[_client_type(client_type)]


def ordinal_for(step: StepName | str, client_type: Optional[ClientType | str]) -> int:
    """Return the step number the remote service expects for ``step``."""
    ctype = _client_type(client_type)
    try:
        return STEP_ORDINALS[ctype][StepName(step)]
    except (KeyError, ValueError) as exc:
        raise FlowConfigurationError(f"No step number for {step} in the {ctype.value} flow.") from exc


def index_of(step: StepName | str, sequence: Tuple[StepName, ...]) -> int:
    try:
        return sequence.index(StepName(step))
    except ValueError as exc:
        raise FlowConfigurationError(f"Step {step} is not part of this flow.") from exc


def is_first(step: StepName | str, sequence: Tuple[StepName, ...]) -> bool:
    return index_of(step, sequence) == 0


def is_last(step: StepName | str, sequence: Tuple[StepName, ...]) -> bool:
    return index_of(step, sequence) == len(sequence) - 1


def next_step(step: StepName | str, sequence: Tuple[StepName, ...]) -> StepName:
    """Step after ``step``; the last step maps to itself."""
    idx = index_of(step, sequence)
    return sequence[min(idx + 1, len(sequence) - 1)]


def previous_step(step: StepName | str, sequence: Tuple[StepName, ...]) -> StepName:
    """Step before ``step``; the first step maps to itself."""
    idx = index_of(step, sequence)
    return sequence[max(idx - 1, 0)]


def check_flow_tables() -> None:
    """Check that every sequence step has a number and that numbers increase along the flow."""
    problems: List[str] = []
    for ctype, steps in FLOWS.items():
        numbers = STEP_ORDINALS.get(ctype, {})
        previous = 0
        for step in steps:
            number = numbers.get(step)
            if number is None:
                problems.append(f"{ctype.value}.{step.value} has no step number")
                continue
            if number <= previous:
                problems.append(f"{ctype.value}.{step.value}={number} does not follow {previous}")
            previous = number
        extra = set(numbers) - set(steps)
        for step in sorted(extra, key=lambda s: s.value):
            problems.append(f"{ctype.value}.{step.value} is numbered but not in the flow")
    if problems:
        raise FlowConfigurationError("Invalid flow tables: " + "; ".join(problems))


def verify_ordinals(remote_numbering: Mapping[str, Mapping[str, int]]) -> None:
    """
    Compare the step service's numbering with the local table.

    ``remote_numbering`` maps client type -> step name -> number, using the
    plain string values. Any difference is a deployment problem, so all of
    them are reported at once.
    """
    mismatches: List[str] = []
    for ctype, local in STEP_ORDINALS.items():
        remote = {str(k): int(v) for k, v in (remote_numbering.get(ctype.value) or {}).items()}
        for step, number in local.items():
            if step.value not in remote:
                mismatches.append(f"{ctype.value}.{step.value} missing on service")
            elif remote[step.value] != number:
                mismatches.append(f"{ctype.value}.{step.value} local={number} service={remote[step.value]}")
    if mismatches:
        raise FlowConfigurationError("Step numbering differs from the step service: " + "; ".join(mismatches))


check_flow_tables()
