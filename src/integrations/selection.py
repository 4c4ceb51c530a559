"""
Mock vs real client selection.

This is the ONE place that decides which step service and coverage catalogue
clients the wizard talks to.
"""

from __future__ import annotations

import logging
from pathlib import Path

from src.integrations.clients.mocks.local_coverage_catalogue import LocalCoverageCatalogueClient
from src.integrations.clients.mocks.step_service import MockStepServiceClient
from src.integrations.clients.real_http.coverage_catalogue import HttpCoverageCatalogueClient
from src.integrations.clients.real_http.step_service import HttpStepServiceClient
from src.integrations.contracts.interfaces import CoverageCatalogueClient, StepService
from src.onboarding.flow_definition import verify_ordinals
from src.utils.config_loader import OnboardingConfig

logger = logging.getLogger(__name__)


def select_coverage_client(config: OnboardingConfig) -> CoverageCatalogueClient:
    if config.use_real_integrations():
        svc = config.step_service
        return HttpCoverageCatalogueClient(
            base_url=svc.base_url,
            api_key=svc.api_key,
            coverages_path=svc.coverages_path,
            timeout_seconds=svc.timeout_seconds,
        )
    return LocalCoverageCatalogueClient(path=Path(config.coverage_file) if config.coverage_file else None)


def select_step_service(config: OnboardingConfig) -> StepService:
    if config.use_real_integrations():
        svc = config.step_service
        logger.info("Using real step service at %s", svc.base_url)
        return HttpStepServiceClient(
            base_url=svc.base_url,
            api_key=svc.api_key,
            save_step_path=svc.save_step_path,
            timeout_seconds=svc.timeout_seconds,
        )

    catalogue = select_coverage_client(config)
    coverages = catalogue.raw_coverages if isinstance(catalogue, LocalCoverageCatalogueClient) else None
    client = MockStepServiceClient(
        coverages=coverages,
        output_root=Path(config.mock_output_dir) if config.mock_output_dir else None,
    )
    verify_ordinals(client.step_numbering())
    logger.info("Using mock step service")
    return client
