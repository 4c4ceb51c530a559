import json

import pytest

from src.onboarding.payload import PAYLOAD_FIELDS, build_payload, serialize_payload
from src.onboarding.record import OnboardingRecord

NUMBER_FIELDS = ["vehicleNumberOfPassengers", "vehicleCylinder", "vehicleFiscalHorsepower", "vehicleValue", "premium"]


def test_current_step_is_always_the_resolved_ordinal():
    payload = build_payload(OnboardingRecord(), 3)
    assert payload["currentStep"] == 3
    assert isinstance(payload["currentStep"], int)


@pytest.mark.parametrize("field", NUMBER_FIELDS)
def test_empty_numeric_fields_are_omitted(field):
    assert field not in build_payload(OnboardingRecord().with_changes(**{field: ""}), 1)
    assert field not in build_payload(OnboardingRecord().with_changes(**{field: None}), 1)


def test_numeric_zero_is_sent():
    payload = build_payload(OnboardingRecord().with_changes(vehicleValue=0), 2)
    assert payload["vehicleValue"] == 0


@pytest.mark.parametrize("field", ["vehicleIsNew", "vehicleTrailer"])
def test_unset_booleans_are_omitted_and_false_is_sent(field):
    assert field not in build_payload(OnboardingRecord().with_changes(**{field: None}), 2)
    assert build_payload(OnboardingRecord(), 2)[field] is False
    assert build_payload(OnboardingRecord().with_changes(**{field: True}), 2)[field] is True


def test_dates_only_when_present():
    record = OnboardingRecord().with_changes(birthDate="1990-05-15")
    payload = build_payload(record, 1)
    assert payload["birthDate"] == "1990-05-15"
    assert "licenseIssuanceDate" not in payload
    assert "vehicleStartDateOfCirculation" not in payload


def test_null_strings_are_sent_as_null():
    payload = build_payload(OnboardingRecord(), 1)
    for field in ("accId", "firstName", "businessName", "vehiclePlate", "policyId", "contractId", "clientType"):
        assert field in payload
        assert payload[field] is None


def test_selected_coverages_always_sent_as_list():
    assert build_payload(OnboardingRecord(), 4)["selectedCoverageIds"] == []
    record = OnboardingRecord().with_changes(selectedCoverageIds=["B", "A"])
    assert build_payload(record, 4)["selectedCoverageIds"] == ["B", "A"]


def test_display_only_and_pointer_fields_are_not_sent():
    record = OnboardingRecord().merge(
        {"coverageNames": {"A": "x"}, "coveragePremiums": {"A": 1}, "contractStartDate": "2026-01-01T00:00:00"}
    )
    payload = build_payload(record, 5)
    for field in ("coverageNames", "coveragePremiums", "contractStartDate", "contractEndDate", "currentStepName", "policyName"):
        assert field not in payload
    assert set(payload) <= set(PAYLOAD_FIELDS) | {"currentStep"}


def test_serialized_payload_is_json():
    record = OnboardingRecord().with_changes(clientType="PERSON", firstName="Ana", vehicleValue="15000.5")
    decoded = json.loads(serialize_payload(build_payload(record, 1)))
    assert decoded["firstName"] == "Ana"
    assert decoded["vehicleValue"] == 15000.5
    assert decoded["contractPeriod"] == "12"
