"""REVIEW, COVERAGES, FINALIZE and DOWNLOAD step mocks.

Premiums here are flat placeholders (base premium prorated by contract
period) so the wizard can run end to end; they are not a rating engine.
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from .helpers import add_months, blank, money, new_mock_id, period_months, reject, reject_fields

DEFAULT_BASE_PREMIUM = Decimal("500")


def build_review_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    _ = coverages
    if blank(payload.get("accId")):
        raise reject("Account must be saved before review.")
    policy_id = payload.get("policyId") or new_mock_id("POL")
    return {
        "policyId": policy_id,
        "policyName": f"Motor Policy {policy_id}",
        "contractId": payload.get("contractId") or new_mock_id("CTR"),
    }


def build_coverages_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    selected = payload.get("selectedCoverageIds") or []
    if not selected:
        raise reject("Select at least one coverage.")
    unknown = [c for c in selected if c not in coverages]
    if unknown:
        raise reject_fields({"selectedCoverageIds": f"Unknown coverage(s): {', '.join(unknown)}"})

    months = period_months(payload)
    premiums: Dict[str, float] = {}
    names: Dict[str, str] = {}
    total = Decimal("0")
    for coverage_id in selected:
        entry = coverages[coverage_id]
        base = Decimal(str(entry.get("basePremium", DEFAULT_BASE_PREMIUM)))
        amount = base * Decimal(months) / Decimal(12)
        premiums[coverage_id] = money(amount)
        names[coverage_id] = str(entry.get("name", coverage_id))
        total += amount

    return {
        "coveragePremiums": premiums,
        "coverageNames": names,
        "premium": money(total),
        "contractPeriod": str(months),
    }


def build_finalize_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    _ = coverages
    if blank(payload.get("policyId")):
        raise reject("Policy must be reviewed before finalizing.")
    if not payload.get("selectedCoverageIds"):
        raise reject("Select at least one coverage.")
    start = datetime.now(timezone.utc).replace(microsecond=0)
    end = add_months(start, period_months(payload))
    return {
        "contractStartDate": start.isoformat(),
        "contractEndDate": end.isoformat(),
    }


def build_download_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    _ = payload, coverages
    return {}
