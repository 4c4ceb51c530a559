"""
Policy onboarding wizard core.

- flow_definition: step sequences per client type and service step numbers
- record: the accumulating onboarding record
- validation / payload: step preconditions and the step payload builder
- controller: the step-flow state machine
- coverage_catalog: cached coverage options
"""

from .controller import OnboardingController
from .coverage_catalog import CoverageCatalog
from .flow_definition import (
    ClientType,
    FlowConfigurationError,
    StepName,
    ordinal_for,
    sequence_for,
    verify_ordinals,
)
from .observability import FlowEvent, LoggingFlowObserver, RecordingFlowObserver
from .payload import build_payload, serialize_payload
from .record import InputKind, OnboardingRecord, RecordFieldError, UnknownFieldError
from .validation import StepValidationResult, validate_step

__all__ = [
    "ClientType",
    "CoverageCatalog",
    "FlowConfigurationError",
    "FlowEvent",
    "InputKind",
    "LoggingFlowObserver",
    "OnboardingController",
    "OnboardingRecord",
    "RecordFieldError",
    "RecordingFlowObserver",
    "StepName",
    "StepValidationResult",
    "UnknownFieldError",
    "build_payload",
    "ordinal_for",
    "sequence_for",
    "serialize_payload",
    "validate_step",
    "verify_ordinals",
]
