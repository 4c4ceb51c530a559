"""
Real Step Service HTTP Client.

Purpose:
- Posts each wizard step's payload to the onboarding step endpoint
- Returns the record fragment sent back by the service

Usage:
- Selected by src/integrations/selection.py when a step service URL is configured
- Called by OnboardingController through the StepService interface

Error handling:
- HTTP error responses become StepServiceError carrying the decoded JSON body
  (pageErrors / message / fieldErrors), so the controller can surface the
  most specific message
- Transport failures become StepServiceError with the transport message
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Optional

import httpx

from src.integrations.contracts.interfaces import StepService, StepServiceError
from src.integrations.contracts.step_submission import StepSubmission
from src.integrations.policy.response_wrappers import normalize_step_response

logger = logging.getLogger(__name__)


class HttpStepServiceClient(StepService):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        save_step_path: Optional[str] = None,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("ONBOARDING_STEP_API_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("ONBOARDING_STEP_API_KEY", "")
        self.save_step_path = save_step_path or os.getenv("ONBOARDING_SAVE_STEP_PATH", "/onboarding/save-step")
        self.timeout_seconds = timeout_seconds
        self.transport = transport
        if not self.base_url:
            logger.warning("Onboarding step service URL is not set.")

    async def save_step(self, dto_json: str) -> Dict[str, Any]:
        if not self.base_url:
            raise StepServiceError("ONBOARDING_STEP_API_URL is not configured.")

        headers: Dict[str, str] = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        url = f"{self.base_url}{self.save_step_path}"
        body = StepSubmission(dto_json=dto_json).model_dump(by_alias=True)
        try:
            logger.info("Submitting onboarding step to %s", url)
            logger.debug("Request payload: %s", dto_json)
            async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
                response = await client.post(url, json=body, headers=headers)
                response.raise_for_status()
                data = response.json() if response.content else {}
                logger.info("Received step response: status=%s", response.status_code)
        except httpx.HTTPStatusError as e:
            logger.error("HTTP error from step service: %s %s", e.response.status_code, e.response.text)
            raise StepServiceError(
                f"Step service returned HTTP {e.response.status_code}",
                body=_decode_error_body(e.response),
                status_code=e.response.status_code,
            ) from e
        except httpx.RequestError as e:
            logger.error("Request error connecting to step service: %s", e)
            raise StepServiceError(f"Could not reach the step service: {e}") from e

        return normalize_step_response(data)


def _decode_error_body(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        data = response.json()
    except ValueError:
        return None
    if isinstance(data, dict):
        # FastAPI-style {"detail": {...}} wrapper
        detail = data.get("detail")
        if isinstance(detail, dict) and len(data) == 1:
            return detail
        if isinstance(detail, str) and "message" not in data:
            return {"message": detail}
        return data
    if isinstance(data, list) and data and isinstance(data[0], dict) and "message" in data[0]:
        return {"pageErrors": data}
    return None
