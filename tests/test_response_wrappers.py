import pytest

from src.integrations.contracts.step_submission import page_error_body
from src.integrations.policy.response_wrappers import (
    IntegrationResponseError,
    normalize_coverage_list,
    normalize_step_response,
    parse_error_body,
)


def test_step_response_passthrough_and_unwrap():
    assert normalize_step_response({"accId": "001"}) == {"accId": "001"}
    assert normalize_step_response({"dto": {"accId": "001"}}) == {"accId": "001"}
    assert normalize_step_response(None) == {}


def test_step_response_must_be_an_object():
    with pytest.raises(IntegrationResponseError):
        normalize_step_response(["accId"])


def test_coverage_list_accepts_record_style_keys():
    options = normalize_coverage_list({"records": [{"Id": "a1", "Name": "Theft"}, {"id": 7, "name": "Fire"}]})
    assert [(o.id, o.name) for o in options] == [("a1", "Theft"), ("7", "Fire")]
    assert options[0].metadata == {"Id": "a1", "Name": "Theft"}


def test_coverage_list_rejects_missing_name():
    with pytest.raises(IntegrationResponseError):
        normalize_coverage_list([{"id": "a1"}])


def test_parse_error_body():
    body = parse_error_body(page_error_body("Invalid plate"))
    assert body.page_errors[0].message == "Invalid plate"
    assert parse_error_body("oops") is None
