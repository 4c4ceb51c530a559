"""
Step submission contracts.

Defines the request/response structures exchanged with the step service:
- the request envelope carrying the serialized step payload
- the structured error body returned when a step is rejected

These contracts are used by both:
- clients/mocks/step_service.py (simulated step service)
- clients/real_http/step_service.py (real API calls)
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class StepSubmission(BaseModel):
    """Request envelope for a step submission."""

    model_config = ConfigDict(populate_by_name=True)

    dto_json: str = Field(alias="dtoJson")


class PageError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: Optional[str] = None
    status_code: Optional[str] = Field(default=None, alias="statusCode")


class StepErrorBody(BaseModel):
    """Structured error body returned by the step service."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    page_errors: List[PageError] = Field(default_factory=list, alias="pageErrors")
    message: Optional[str] = None
    field_errors: Optional[Dict[str, Any]] = Field(default=None, alias="fieldErrors")

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def page_error_body(*messages: str) -> Dict[str, Any]:
    """Shortcut for a page-level error body."""
    return StepErrorBody(page_errors=[PageError(message=m) for m in messages]).to_wire()


__all__ = [
    "PageError",
    "StepErrorBody",
    "StepSubmission",
    "page_error_body",
]
