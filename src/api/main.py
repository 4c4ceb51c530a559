"""
FastAPI application - mock onboarding step service

Run locally with:
    uvicorn src.api.main:app --reload
"""

from dotenv import load_dotenv

load_dotenv()

import logging
import os
from datetime import datetime

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from src.api.endpoints.mock_step_service import router as mock_step_service_router
from src.integrations.policy.response_wrappers import IntegrationResponseError

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Policy Onboarding Mock API",
    description="Mock step-processing service and coverage catalogue for the onboarding wizard",
    version="1.0.0",
)

# Browser forms call the mock directly during development
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("ONBOARDING_CORS_ORIGINS", "*").split(","),
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

app.include_router(mock_step_service_router)


@app.exception_handler(IntegrationResponseError)
async def integration_response_error_handler(request: Request, exc: IntegrationResponseError):
    logger.error("Malformed integration data on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"message": str(exc)})


@app.get("/health", tags=["Health"])
async def health_check():
    return {
        "service": "Policy Onboarding Mock API",
        "status": "healthy",
        "endpoints": [route.path for route in mock_step_service_router.routes],
        "timestamp": datetime.now().isoformat(),
    }
