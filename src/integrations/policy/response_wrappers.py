from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.integrations.contracts.interfaces import CoverageOption
from src.integrations.contracts.step_submission import StepErrorBody


class IntegrationResponseError(ValueError):
    def __init__(self, message: str, *, payload: Optional[Any] = None) -> None:
        super().__init__(message)
        self.payload = payload if payload is not None else {}


class CoverageItemModel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    raw: Dict[str, Any] = Field(default_factory=dict)


def normalize_step_response(raw: Any) -> Dict[str, Any]:
    """Return the record fragment sent back by the step service."""
    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise IntegrationResponseError(
            f"Step service returned {type(raw).__name__}, expected an object.",
            payload=raw,
        )
    # Some deployments wrap the DTO: {"dto": {...}}
    inner = raw.get("dto")
    if isinstance(inner, dict) and len(raw) == 1:
        return dict(inner)
    return dict(raw)


def normalize_coverage_list(raw: Any) -> List[CoverageOption]:
    """Normalize a catalogue listing into CoverageOption items.

    Accepts ``[{id, name}]`` as well as record-style ``[{Id, Name}]`` entries.
    """
    if isinstance(raw, dict):
        raw = _first_non_empty(raw, "coverages", "records", "items")
    if not isinstance(raw, list):
        raise IntegrationResponseError("Coverage catalogue did not return a list.", payload=raw)

    options: List[CoverageOption] = []
    for item in raw:
        if not isinstance(item, dict):
            raise IntegrationResponseError(f"Invalid coverage entry: {item!r}", payload=raw)
        model = _build_model(
            CoverageItemModel,
            {
                "id": str(_first_non_empty(item, "id", "Id", "value")),
                "name": str(_first_non_empty(item, "name", "Name", "label")),
                "raw": item,
            },
            item,
        )
        options.append(CoverageOption(id=model.id, name=model.name, metadata=model.raw))
    return options


def parse_error_body(raw: Any) -> Optional[StepErrorBody]:
    """Parse a structured step error body; None when ``raw`` is not one."""
    if not isinstance(raw, dict):
        return None
    try:
        return StepErrorBody.model_validate(raw)
    except ValidationError:
        return None


def _first_non_empty(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    if default is not None:
        return default
    raise IntegrationResponseError(f"Missing required field. Checked keys: {', '.join(keys)}", payload=data)


def _build_model(model_type, payload: Dict[str, Any], raw: Dict[str, Any]):
    try:
        return model_type(**payload)
    except ValidationError as exc:
        raise IntegrationResponseError(f"Response validation failed: {exc}", payload=raw) from exc
