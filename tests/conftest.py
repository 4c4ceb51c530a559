"""Pytest fixtures for onboarding wizard tests."""

import json

import pytest

from src.integrations.clients.mocks.step_service import MockStepServiceClient
from src.integrations.contracts.interfaces import StepService
from src.onboarding.observability import RecordingFlowObserver


class FakeStepService(StepService):
    """Scripted step service: returns queued responses or raises queued errors."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    async def save_step(self, dto_json):
        self.calls.append(json.loads(dto_json))
        outcome = self.responses.pop(0) if self.responses else {}
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome


@pytest.fixture
def fake_service():
    return FakeStepService()


@pytest.fixture
def mock_service(tmp_path):
    """Mock step service writing interactions under a temp folder."""
    return MockStepServiceClient(output_root=tmp_path)


@pytest.fixture
def observer():
    return RecordingFlowObserver()
