"""Trace points emitted by the onboarding controller."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, List, Protocol, Tuple

logger = logging.getLogger(__name__)


class FlowEvent(str, Enum):
    STEP_ENTERED = "step_entered"
    VALIDATION_FAILED = "validation_failed"
    REMOTE_CALL_STARTED = "remote_call_started"
    REMOTE_CALL_SUCCEEDED = "remote_call_succeeded"
    REMOTE_CALL_FAILED = "remote_call_failed"
    STEP_ADVANCED = "step_advanced"
    STEP_RETREATED = "step_retreated"
    ONBOARDING_COMPLETED = "onboarding_completed"


class FlowObserver(Protocol):
    def on_event(self, event: FlowEvent, **details: Any) -> None: ...


_WARNING_EVENTS = {FlowEvent.VALIDATION_FAILED, FlowEvent.REMOTE_CALL_FAILED}


class LoggingFlowObserver:
    """Default observer: one log line per event."""

    def __init__(self, log: logging.Logger | None = None) -> None:
        self.log = log or logger

    def on_event(self, event: FlowEvent, **details: Any) -> None:
        level = logging.WARNING if event in _WARNING_EVENTS else logging.INFO
        extras = " ".join(f"{k}={v}" for k, v in details.items())
        self.log.log(level, "[onboarding] %s %s", event.value, extras)


class RecordingFlowObserver:
    """Keeps every event in memory; handy for tests and demos."""

    def __init__(self) -> None:
        self.events: List[Tuple[FlowEvent, dict]] = []

    def on_event(self, event: FlowEvent, **details: Any) -> None:
        self.events.append((event, dict(details)))

    def names(self) -> List[FlowEvent]:
        return [event for event, _ in self.events]
