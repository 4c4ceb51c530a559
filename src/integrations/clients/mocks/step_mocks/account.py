"""ACCOUNT and DRIVER step mocks."""

from __future__ import annotations

from typing import Any, Dict

from src.onboarding.options import CATEGORY_LICENSE_OPTIONS

from .helpers import blank, check_picklist, email_is_valid, new_mock_id, reject, reject_fields


def build_account_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    _ = coverages
    client_type = payload.get("clientType")
    if client_type not in ("PERSON", "BUSINESS"):
        raise reject("Client type is required.")

    errors: Dict[str, str] = {}
    if client_type == "BUSINESS" and blank(payload.get("businessName")):
        errors["businessName"] = "Business Name is required"
    if client_type == "PERSON":
        for field, label in (("firstName", "First Name"), ("lastName", "Last Name")):
            if blank(payload.get(field)):
                errors[field] = f"{label} is required"
    if not blank(payload.get("email")) and not email_is_valid(payload["email"]):
        errors["email"] = "Email is not valid"
    if errors:
        raise reject_fields(errors)

    fragment: Dict[str, Any] = {"accId": payload.get("accId") or new_mock_id("ACC")}
    if client_type == "PERSON" and blank(payload.get("contactId")):
        fragment["contactId"] = new_mock_id("CON")
    return fragment


def build_driver_mock(payload: Dict[str, Any], coverages: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    _ = coverages
    if blank(payload.get("accId")):
        raise reject("Account must be saved before the driver.")
    if blank(payload.get("driverFirstName")) or blank(payload.get("driverLastName")):
        raise reject("Driver First Name and Last Name are required.")
    errors: Dict[str, str] = {}
    check_picklist(errors, payload, "categoryLicense", "Category License", CATEGORY_LICENSE_OPTIONS)
    if errors:
        raise reject_fields(errors)
    return {"contactId": payload.get("contactId") or new_mock_id("CON")}
