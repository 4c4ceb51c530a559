"""Registry for step-specific step-service mock builders."""

from __future__ import annotations

from typing import Any, Callable, Dict

from .account import build_account_mock, build_driver_mock
from .policy import build_coverages_mock, build_download_mock, build_finalize_mock, build_review_mock
from .vehicle import build_vehicle_mock

StepMockBuilder = Callable[[Dict[str, Any], Dict[str, Dict[str, Any]]], Dict[str, Any]]

_REGISTRY: Dict[str, StepMockBuilder] = {
    "ACCOUNT": build_account_mock,
    "DRIVER": build_driver_mock,
    "VEHICLE": build_vehicle_mock,
    "REVIEW": build_review_mock,
    "COVERAGES": build_coverages_mock,
    "FINALIZE": build_finalize_mock,
    "DOWNLOAD": build_download_mock,
}


def get_step_mock_builder(step_name: str) -> StepMockBuilder:
    """Return the mock builder for a service-side step name."""
    return _REGISTRY[step_name]
