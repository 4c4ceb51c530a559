"""VEHICLE step mock."""

from __future__ import annotations

from typing import Any, Dict

from src.onboarding.options import BODY_TYPE_OPTIONS, FUEL_TYPE_OPTIONS, MAKE_OPTIONS, VEHICLE_USAGE_OPTIONS

from .helpers import blank, check_picklist, new_mock_id, reject, reject_fields

_PICKLISTS = (
    ("vehicleUsage", "Vehicle Usage", VEHICLE_USAGE_OPTIONS),
    ("vehicleBodyType", "Vehicle Body Type", BODY_TYPE_OPTIONS),
    ("vehicleFuelType", "Vehicle Fuel Type", FUEL_TYPE_OPTIONS),
    ("vehicleMake", "Vehicle Make", MAKE_OPTIONS),
)


def build_vehicle_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    _ = coverages
    if blank(payload.get("vehiclePlate")):
        raise reject("Vehicle plate is required.")

    errors: Dict[str, str] = {}
    for field in ("vehicleNumberOfPassengers", "vehicleCylinder", "vehicleFiscalHorsepower", "vehicleValue"):
        value = payload.get(field)
        if value is None:
            continue
        try:
            if float(value) < 0:
                errors[field] = f"{field} must be at least 0"
        except (TypeError, ValueError):
            errors[field] = f"{field} must be a number"
    for field, label, options in _PICKLISTS:
        check_picklist(errors, payload, field, label, options)
    if errors:
        raise reject_fields(errors)

    return {"vehicleId": payload.get("vehicleId") or new_mock_id("VEH")}
