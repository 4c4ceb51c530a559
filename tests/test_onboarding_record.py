from datetime import date

import pytest

from src.onboarding.flow_definition import ClientType, StepName
from src.onboarding.record import (
    FIELD_KINDS,
    FieldKind,
    InputKind,
    OnboardingRecord,
    RecordFieldError,
    UnknownFieldError,
    coerce_input,
    resolve_field_name,
)


def test_new_record_defaults():
    record = OnboardingRecord()
    assert record.client_type is None
    assert record.current_step_name is StepName.ACCOUNT
    assert record.first_name is None
    assert record.vehicle_is_new is False
    assert record.vehicle_trailer is False
    assert record.contract_period == "12"
    assert record.selected_coverage_ids == []


def test_with_changes_returns_a_new_record():
    original = OnboardingRecord()
    changed = original.with_changes(firstName="Ana")
    assert changed is not original
    assert changed.first_name == "Ana"
    assert original.first_name is None


def test_record_is_frozen():
    record = OnboardingRecord()
    with pytest.raises(Exception):
        record.first_name = "Ana"


def test_wire_and_python_names_are_both_accepted():
    record = OnboardingRecord().with_changes(last_name="Popescu", vehiclePlate="1-A-2")
    assert record.last_name == "Popescu"
    assert record.vehicle_plate == "1-A-2"
    assert resolve_field_name("vehicle_plate") == "vehiclePlate"


def test_unknown_field_is_rejected():
    with pytest.raises(UnknownFieldError):
        OnboardingRecord().with_changes(favouriteColour="blue")


def test_blank_numeric_and_date_values_become_none():
    record = OnboardingRecord().with_changes(vehicleValue="", birthDate="", vehicleCylinder="1600")
    assert record.vehicle_value is None
    assert record.birth_date is None
    assert record.vehicle_cylinder == 1600


def test_invalid_number_raises_record_field_error():
    with pytest.raises(RecordFieldError) as exc_info:
        OnboardingRecord().with_changes(vehicleValue="lots")
    assert exc_info.value.message == "Vehicle Value must be a number"
    assert "vehicleValue" in exc_info.value.field_errors


def test_invalid_contract_period_is_rejected():
    with pytest.raises(RecordFieldError):
        OnboardingRecord().with_changes(contractPeriod="7")


def test_step_must_belong_to_client_type_flow():
    with pytest.raises(RecordFieldError):
        OnboardingRecord().with_changes(client_type=ClientType.PERSON, current_step_name=StepName.DRIVER)


def test_merge_server_values_win_and_extras_are_kept():
    record = OnboardingRecord().with_changes(firstName="Ana", premium=100)
    merged = record.merge({"premium": 1200, "accId": "001", "contractPeriod": 24, "serverNote": "ok"})
    assert merged.premium == 1200
    assert merged.acc_id == "001"
    assert merged.contract_period == "24"
    assert merged.first_name == "Ana"
    assert merged.to_wire()["serverNote"] == "ok"


def test_merge_ignores_step_pointer_from_server():
    record = OnboardingRecord().with_changes(clientType="PERSON")
    merged = record.merge({"currentStepName": "REVIEW"})
    assert merged.current_step_name is StepName.ACCOUNT


def test_merge_parses_server_dates_and_maps():
    merged = OnboardingRecord().merge(
        {
            "contractStartDate": "2026-01-01T10:00:00+00:00",
            "coveragePremiums": {"COV-RC": 900},
            "coverageNames": {"COV-RC": "Civil Liability"},
        }
    )
    assert merged.contract_start_date.year == 2026
    assert merged.coverage_premiums == {"COV-RC": 900.0}


def test_to_wire_uses_camel_case_and_iso_dates():
    wire = OnboardingRecord().with_changes(birthDate=date(1990, 5, 15), clientType="BUSINESS").to_wire()
    assert wire["birthDate"] == "1990-05-15"
    assert wire["clientType"] == "BUSINESS"
    assert wire["currentStepName"] == "ACCOUNT"


def test_field_kinds():
    assert FIELD_KINDS["vehicleValue"] is FieldKind.NUMBER
    assert FIELD_KINDS["vehicleIsNew"] is FieldKind.BOOLEAN
    assert FIELD_KINDS["licenseIssuanceDate"] is FieldKind.DATE
    assert FIELD_KINDS["selectedCoverageIds"] is FieldKind.LIST
    assert FIELD_KINDS["accId"] is FieldKind.STRING


@pytest.mark.parametrize(
    "raw, kind, expected",
    [
        (True, InputKind.CHECKBOX, True),
        ("on", "checkbox", True),
        ("", InputKind.CHECKBOX, False),
        ("", InputKind.NUMBER, None),
        ("42", InputKind.NUMBER, "42"),
        ("", "date", None),
        ("", InputKind.TEXT, ""),
        ("x", "combobox", "x"),
    ],
)
def test_coerce_input(raw, kind, expected):
    assert coerce_input(raw, kind) == expected
