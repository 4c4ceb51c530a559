"""
Coverage Catalogue HTTP Client.

Purpose:
- Fetches the selectable coverages (id, name) from the catalogue endpoint
- Normalizes entries into CoverageOption items

Caching is done by src.onboarding.coverage_catalog.CoverageCatalog, not here.
"""

from __future__ import annotations

import logging
import os
from typing import List, Optional

import httpx

from src.integrations.contracts.interfaces import CoverageCatalogueClient, CoverageOption
from src.integrations.policy.response_wrappers import normalize_coverage_list

logger = logging.getLogger(__name__)


class HttpCoverageCatalogueClient(CoverageCatalogueClient):
    def __init__(
        self,
        base_url: Optional[str] = None,
        api_key: Optional[str] = None,
        coverages_path: Optional[str] = None,
        timeout_seconds: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = (base_url or os.getenv("ONBOARDING_STEP_API_URL", "")).rstrip("/")
        self.api_key = api_key or os.getenv("ONBOARDING_STEP_API_KEY", "")
        self.coverages_path = coverages_path or os.getenv("ONBOARDING_COVERAGES_PATH", "/onboarding/coverages")
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def list_coverages(self) -> List[CoverageOption]:
        if not self.base_url:
            raise ValueError("ONBOARDING_STEP_API_URL is not configured.")

        headers = {"Authorization": f"Bearer {self.api_key}"} if self.api_key else {}
        url = f"{self.base_url}{self.coverages_path}"
        logger.info("Fetching coverage catalogue from %s", url)
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
            data = response.json()
        return normalize_coverage_list(data)
