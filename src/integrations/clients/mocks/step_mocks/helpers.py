"""Shared helpers for the step-service mock builders."""

from __future__ import annotations

import calendar
import re
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List
from uuid import uuid4

from src.integrations.contracts.interfaces import StepServiceError
from src.integrations.contracts.step_submission import page_error_body

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MONEY_STEP = Decimal("0.01")


def new_mock_id(prefix: str) -> str:
    return f"{prefix}-MOCK-{uuid4().hex[:8].upper()}"


def blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def reject(message: str) -> StepServiceError:
    return StepServiceError(message, body=page_error_body(message), status_code=400)


def reject_fields(field_errors: Dict[str, str]) -> StepServiceError:
    return StepServiceError("Validation failed", body={"fieldErrors": field_errors}, status_code=400)


def email_is_valid(value: Any) -> bool:
    return bool(_EMAIL_RE.match(str(value).strip()))


def period_months(payload: Dict[str, Any]) -> int:
    try:
        return int(payload.get("contractPeriod") or 12)
    except (TypeError, ValueError):
        return 12


def money(amount: Decimal) -> float:
    return float(amount.quantize(MONEY_STEP, rounding=ROUND_HALF_UP))


def add_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def check_picklist(errors: Dict[str, str], payload: Dict[str, Any], field: str, label: str, options: List[Dict[str, str]]) -> None:
    """Record a field error when ``field`` is set to a value outside its picklist."""
    value = payload.get(field)
    if blank(value):
        return
    allowed = [o["value"] for o in options]
    if value not in allowed:
        errors[field] = f"{label} must be one of: {', '.join(allowed)}"
