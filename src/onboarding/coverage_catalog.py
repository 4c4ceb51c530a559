"""Read-through cache over the coverage catalogue."""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, List, Optional

from src.integrations.contracts.interfaces import CoverageCatalogueClient, CoverageOption

logger = logging.getLogger(__name__)


class CoverageCatalog:
    """
    Fetches the coverage list once and reuses it for the lifetime of the instance.

    A failed fetch is logged and leaves the current options in place (empty
    until the first success); the next call tries again.
    """

    def __init__(self, client: CoverageCatalogueClient) -> None:
        self.client = client
        self._coverages: List[CoverageOption] = []
        self._loaded = False
        self._lock = asyncio.Lock()

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def coverages(self) -> List[CoverageOption]:
        return list(self._coverages)

    @property
    def options(self) -> List[Dict[str, str]]:
        """Picklist entries for the coverage multi-select."""
        return [{"label": c.name, "value": c.id} for c in self._coverages]

    async def load(self) -> List[CoverageOption]:
        if self._loaded:
            return self.coverages
        async with self._lock:
            if self._loaded:
                return self.coverages
            try:
                coverages = await self.client.list_coverages()
            except Exception:
                logger.exception("Coverages load error")
                return self.coverages
            self._coverages = list(coverages)
            self._loaded = True
            logger.info("Loaded %d coverage options", len(self._coverages))
        return self.coverages

    async def get_options(self) -> List[Dict[str, str]]:
        await self.load()
        return self.options

    def name_for(self, coverage_id: str) -> Optional[str]:
        for coverage in self._coverages:
            if coverage.id == coverage_id:
                return coverage.name
        return None
