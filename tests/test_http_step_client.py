"""Exercise the real HTTP clients against the mock FastAPI app in-process."""

import json

import httpx
import pytest

from src.api.main import app
from src.integrations.clients.real_http.coverage_catalogue import HttpCoverageCatalogueClient
from src.integrations.clients.real_http.step_service import HttpStepServiceClient
from src.integrations.contracts.interfaces import StepServiceError
from src.onboarding import OnboardingController

BASE_URL = "http://testserver/api/v1/mock/onboarding"


def _step_client(**kwargs) -> HttpStepServiceClient:
    return HttpStepServiceClient(
        base_url=BASE_URL,
        api_key="test-key",
        save_step_path="/save-step",
        transport=httpx.ASGITransport(app=app),
        **kwargs,
    )


@pytest.mark.asyncio
async def test_save_step_success():
    client = _step_client()
    response = await client.save_step(json.dumps({"currentStep": 1, "clientType": "BUSINESS", "businessName": "Atlas"}))
    assert response["accId"].startswith("ACC-MOCK-")


@pytest.mark.asyncio
async def test_rejection_becomes_step_service_error():
    client = _step_client()
    with pytest.raises(StepServiceError) as exc_info:
        await client.save_step(json.dumps({"currentStep": 2, "clientType": "PERSON"}))

    assert exc_info.value.status_code == 400
    assert exc_info.value.body == {"pageErrors": [{"message": "Vehicle plate is required."}]}


@pytest.mark.asyncio
async def test_missing_base_url_raises():
    client = HttpStepServiceClient(base_url="http://placeholder")
    client.base_url = ""
    with pytest.raises(StepServiceError):
        await client.save_step("{}")


@pytest.mark.asyncio
async def test_transport_failure_becomes_step_service_error():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = HttpStepServiceClient(base_url="http://down", transport=httpx.MockTransport(refuse))
    with pytest.raises(StepServiceError) as exc_info:
        await client.save_step("{}")
    assert "connection refused" in exc_info.value.message


@pytest.mark.asyncio
async def test_list_coverages():
    client = HttpCoverageCatalogueClient(
        base_url=BASE_URL,
        coverages_path="/coverages",
        transport=httpx.ASGITransport(app=app),
    )
    coverages = await client.list_coverages()
    assert coverages[0].id == "COV-RC"
    assert all(c.name for c in coverages)


@pytest.mark.asyncio
async def test_controller_surfaces_http_page_error():
    controller = OnboardingController(_step_client())
    controller.on_client_type_change("PERSON")
    controller.on_field_change("firstName", "Ana")
    controller.on_field_change("lastName", "Popescu")
    assert await controller.next() is True

    assert await controller.next() is False
    assert controller.error == "Vehicle plate is required."
    assert controller.current_step.value == "VEHICLE"


@pytest.mark.asyncio
async def test_health_lists_mock_endpoints():
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=app), base_url="http://testserver") as client:
        response = await client.get("/health")
    assert response.status_code == 200
    assert f"{BASE_URL.removeprefix('http://testserver')}/save-step" in response.json()["endpoints"]


@pytest.mark.asyncio
async def test_request_logging_uses_lazy_arguments(caplog):
    client = _step_client()
    with caplog.at_level("INFO", logger="src.integrations.clients.real_http.step_service"):
        await client.save_step(json.dumps({"currentStep": 1, "clientType": "BUSINESS", "businessName": "Atlas"}))

    submitted = [r for r in caplog.records if r.msg == "Submitting onboarding step to %s"]
    assert submitted and submitted[0].args == (f"{BASE_URL}/save-step",)
    assert "Received step response: status=200" in caplog.messages
