"""
Step payload builder.

The step service applies partial updates, so the inclusion rules differ per
field kind:
- number / boolean / date fields are left out when they have no value
  (the service reads a missing key as "not provided")
- string and id fields are always sent; null means "clear this field"
- selectedCoverageIds is always sent as a list, even when empty
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple

from src.onboarding.record import FIELD_KINDS, FieldKind, OnboardingRecord

logger = logging.getLogger(__name__)

# Wire order. Display-only fields assigned by the service are not sent back.
PAYLOAD_FIELDS: Tuple[str, ...] = (
    # Account / driver
    "clientType",
    "accId",
    "firstName",
    "lastName",
    "birthDate",
    "phoneNumber",
    "city",
    "nationalId",
    "driverLicense",
    "licenseIssuanceDate",
    "email",
    "businessName",
    "registerOfCommerce",
    "brokerAccountId",
    "contactId",
    "driverFirstName",
    "driverLastName",
    "categoryLicense",
    # Vehicle
    "vehicleId",
    "vehiclePlate",
    "vehicleIsNew",
    "vehicleStartDateOfCirculation",
    "vehicleBodyType",
    "vehicleNumberOfPassengers",
    "vehicleBrand",
    "vehicleCylinder",
    "vehicleFiscalHorsepower",
    "vehicleUsage",
    "vehicleMake",
    "vehicleModel",
    "vehicleFuelType",
    "vehicleTrailer",
    "vehicleValue",
    # Policy / contract
    "policyId",
    "contractId",
    "premium",
    # Coverages
    "contractPeriod",
    "selectedCoverageIds",
)


def _include(kind: FieldKind, value: Any) -> bool:
    if kind is FieldKind.NUMBER:
        return value is not None and value != ""
    if kind is FieldKind.BOOLEAN:
        return value is True or value is False
    if kind is FieldKind.DATE:
        return bool(value)
    if kind is FieldKind.LIST:
        return value is not None
    return True


def build_payload(record: OnboardingRecord, resolved_step_ordinal: int) -> Dict[str, Any]:
    """Build the minimal JSON-ready payload for one step submission."""
    raw = record.to_wire()
    payload: Dict[str, Any] = {"currentStep": int(resolved_step_ordinal)}
    for name in PAYLOAD_FIELDS:
        value = raw.get(name)
        kind = FIELD_KINDS[name]
        if not _include(kind, value):
            continue
        payload[name] = list(value) if kind is FieldKind.LIST else value
    return payload


def serialize_payload(payload: Dict[str, Any]) -> str:
    body = json.dumps(payload)
    logger.debug("Step payload: %s", body)
    return body
