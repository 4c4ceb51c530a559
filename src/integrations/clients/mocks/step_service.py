"""Mock step-service client with per-step handlers.

Decodes the submitted step payload, resolves the service-side step name from
``currentStep`` and ``clientType`` using the service's own numbering, and
routes to a step-specific mock builder. When ``output_root`` is set, each
interaction is written to ``<output_root>/<STEP>/`` as JSON.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from src.integrations.clients.mocks.local_coverage_catalogue import DEFAULT_COVERAGES
from src.integrations.contracts.interfaces import StepService, StepServiceError
from src.integrations.contracts.step_submission import page_error_body
from src.integrations.policy.response_wrappers import normalize_coverage_list

from .step_mocks import get_step_mock_builder

logger = logging.getLogger(__name__)

# The service keeps its own numbering; it must agree with
# src.onboarding.flow_definition.STEP_ORDINALS.
SERVICE_STEP_NUMBERS: Dict[str, Dict[str, int]] = {
    "PERSON": {"ACCOUNT": 1, "VEHICLE": 2, "REVIEW": 3, "COVERAGES": 4, "FINALIZE": 5, "DOWNLOAD": 6},
    "BUSINESS": {"ACCOUNT": 1, "DRIVER": 2, "VEHICLE": 3, "REVIEW": 4, "COVERAGES": 5, "FINALIZE": 6, "DOWNLOAD": 7},
}


class MockStepServiceClient(StepService):
    """Step service stand-in that never touches the network."""

    def __init__(
        self,
        coverages: Optional[List[Dict[str, Any]]] = None,
        output_root: Optional[Path] = None,
    ) -> None:
        raw = coverages if coverages is not None else DEFAULT_COVERAGES
        self.coverages = {o.id: {**o.metadata, "name": o.name} for o in normalize_coverage_list(raw)}
        self.output_root = Path(output_root) if output_root else None
        self.submissions: List[Dict[str, Any]] = []

    @staticmethod
    def step_numbering() -> Dict[str, Dict[str, int]]:
        return {ctype: dict(steps) for ctype, steps in SERVICE_STEP_NUMBERS.items()}

    async def save_step(self, dto_json: str) -> Dict[str, Any]:
        payload = self._decode(dto_json)
        self.submissions.append(payload)
        step_name = self._resolve_step(payload)
        logger.info("Mock step service: %s (%s)", step_name, payload.get("clientType"))

        builder = get_step_mock_builder(step_name)
        try:
            response = builder(payload, self.coverages)
        except StepServiceError as exc:
            self._write_mock_output(step_name, payload, {"error": exc.body})
            raise
        self._write_mock_output(step_name, payload, response)
        return response

    @staticmethod
    def _decode(dto_json: str) -> Dict[str, Any]:
        try:
            payload = json.loads(dto_json)
        except (TypeError, ValueError) as exc:
            raise StepServiceError("Invalid step payload", body={"message": "Step payload is not valid JSON."}, status_code=400) from exc
        if not isinstance(payload, dict):
            raise StepServiceError("Invalid step payload", body={"message": "Step payload must be an object."}, status_code=400)
        return payload

    @staticmethod
    def _resolve_step(payload: Dict[str, Any]) -> str:
        client_type = payload.get("clientType") or "PERSON"
        numbering = SERVICE_STEP_NUMBERS.get(client_type)
        if numbering is None:
            raise StepServiceError(
                "Unknown client type",
                body=page_error_body(f"Unknown client type '{client_type}'."),
                status_code=400,
            )
        step_number = payload.get("currentStep")
        for name, number in numbering.items():
            if number == step_number:
                return name
        raise StepServiceError(
            "Unknown step",
            body=page_error_body(f"Unknown step {step_number} for {client_type}."),
            status_code=400,
        )

    def _write_mock_output(self, step_name: str, payload: Dict[str, Any], response: Dict[str, Any]) -> Optional[Path]:
        if self.output_root is None:
            return None
        step_dir = self.output_root / step_name
        step_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S%fZ")
        file_path = step_dir / f"{timestamp}.json"
        output_document = {
            "created_at": datetime.now(timezone.utc).isoformat(),
            "step": step_name,
            "input": payload,
            "output": response,
        }
        try:
            file_path.write_text(json.dumps(output_document, indent=2, default=str), encoding="utf-8")
        except OSError:
            logger.exception("Failed to write step mock output file: %s", file_path)
        return file_path
