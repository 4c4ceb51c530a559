"""
Formatted values for the review and download steps.

Amounts are shown in MAD; missing values render as "-".
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional

from src.onboarding.record import OnboardingRecord

CURRENCY = "MAD"
UNKNOWN_COVERAGE = "Unknown Coverage"


def format_amount(value: Any, currency: str = CURRENCY) -> str:
    if value in (None, "", 0):
        return "-"
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        return "-"
    return f"{currency} {amount:,.2f}"


def format_datetime(value: Optional[datetime]) -> str:
    if not value:
        return "-"
    return value.strftime("%B %d, %Y %I:%M %p").replace(" 0", " ")


def yes_no(value: Optional[bool]) -> str:
    return "Yes" if value else "No"


def coverage_premium_rows(record: OnboardingRecord) -> List[Dict[str, str]]:
    """One row per priced coverage, in the order the service returned them."""
    if not record.coverage_premiums or not record.coverage_names:
        return []
    return [
        {
            "id": coverage_id,
            "name": record.coverage_names.get(coverage_id) or UNKNOWN_COVERAGE,
            "premium": format_amount(premium),
        }
        for coverage_id, premium in record.coverage_premiums.items()
    ]


def review_summary(record: OnboardingRecord) -> Dict[str, Any]:
    return {
        "vehicleIsNew": yes_no(record.vehicle_is_new),
        "vehicleTrailer": yes_no(record.vehicle_trailer),
        "vehicleValue": format_amount(record.vehicle_value),
        "premium": format_amount(record.premium),
        "coveragePremiums": coverage_premium_rows(record),
        "contractStartDate": format_datetime(record.contract_start_date),
        "contractEndDate": format_datetime(record.contract_end_date),
    }
