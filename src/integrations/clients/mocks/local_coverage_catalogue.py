"""
Local Coverage Catalogue Client (Mock/Local).

Purpose:
- Development-time coverage catalogue used when the remote catalogue is not reachable.
- Loads coverages from a YAML file when one is configured, otherwise serves a
  built-in list.

Expected YAML shape:

    coverages:
      - id: COV-RC
        name: Civil Liability
        basePremium: 900

Swap:
Replace with clients/real_http/coverage_catalogue.py once the catalogue endpoint
is configured (see src/integrations/selection.py).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from src.integrations.contracts.interfaces import CoverageCatalogueClient, CoverageOption
from src.integrations.policy.response_wrappers import normalize_coverage_list

logger = logging.getLogger(__name__)

DEFAULT_COVERAGES: List[Dict[str, Any]] = [
    {"id": "COV-RC", "name": "Civil Liability", "basePremium": 900.0},
    {"id": "COV-DR", "name": "Legal Defense and Recourse", "basePremium": 150.0},
    {"id": "COV-BG", "name": "Glass Breakage", "basePremium": 250.0},
    {"id": "COV-VOL", "name": "Theft", "basePremium": 600.0},
    {"id": "COV-INC", "name": "Fire", "basePremium": 300.0},
    {"id": "COV-PT", "name": "Personal Injury to Driver", "basePremium": 200.0},
    {"id": "COV-ASS", "name": "Roadside Assistance", "basePremium": 180.0},
]


def load_coverage_file(path: Path) -> List[Dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(f"Coverage file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    items = data.get("coverages", []) if isinstance(data, dict) else data
    logger.info("Loaded %d coverages from %s", len(items), path)
    return list(items)


class LocalCoverageCatalogueClient(CoverageCatalogueClient):
    def __init__(self, path: Optional[Path] = None, coverages: Optional[List[Dict[str, Any]]] = None) -> None:
        if coverages is not None:
            self._raw = list(coverages)
        elif path is not None:
            self._raw = load_coverage_file(Path(path))
        else:
            self._raw = list(DEFAULT_COVERAGES)

    @property
    def raw_coverages(self) -> List[Dict[str, Any]]:
        return list(self._raw)

    async def list_coverages(self) -> List[CoverageOption]:
        return normalize_coverage_list(self._raw)
