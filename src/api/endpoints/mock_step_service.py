"""
Mock onboarding step-service endpoints.

Expose the mock step service and local coverage catalogue over HTTP so the
real HTTP clients (and a browser form) can be exercised without the partner
system. Remove or disable in production.
"""

from typing import Any, Dict, List

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from src.integrations.clients.mocks.local_coverage_catalogue import LocalCoverageCatalogueClient
from src.integrations.clients.mocks.step_service import MockStepServiceClient
from src.integrations.contracts.interfaces import StepServiceError
from src.integrations.contracts.step_submission import StepSubmission

router = APIRouter(prefix="/api/v1/mock/onboarding", tags=["Mock Onboarding"])

coverage_client = LocalCoverageCatalogueClient()
step_client = MockStepServiceClient(coverages=coverage_client.raw_coverages)


@router.post("/save-step")
async def save_step(submission: StepSubmission):
    """
    Submit one wizard step to the mock step service.

    Example payload:
    {
        "dtoJson": "{\\"currentStep\\": 1, \\"clientType\\": \\"PERSON\\", \\"firstName\\": \\"Ana\\", \\"lastName\\": \\"Popescu\\"}"
    }
    """
    try:
        return await step_client.save_step(submission.dto_json)
    except StepServiceError as exc:
        return JSONResponse(status_code=exc.status_code or 400, content=exc.body or {"message": exc.message})


@router.get("/coverages")
async def list_coverages() -> List[Dict[str, Any]]:
    coverages = await coverage_client.list_coverages()
    return [{"id": c.id, "name": c.name} for c in coverages]
