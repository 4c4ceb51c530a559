"""
Contracts (data models and client interfaces).

This folder defines the request/response shapes for the onboarding wizard's
external collaborators:
- the step-processing service (one call per wizard step)
- the read-only coverage catalogue

Why this exists:
- Mock and real clients return the same shapes
- The controller depends on these interfaces, never on a transport

Both mock and real HTTP clients must implement these interfaces.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Shared data models
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CoverageOption:
    id: str
    name: str
    metadata: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)


class StepServiceError(Exception):
    """Failure reported by (or while reaching) the step service.

    Attributes:
        message: transport-level or generic message.
        body: decoded structured error body, if the service sent one
              (``pageErrors`` / ``message`` / ``fieldErrors``).
        status_code: HTTP status when the failure came from an HTTP response.
    """

    def __init__(self, message: str = "", *, body: Optional[Dict[str, Any]] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.body = body
        self.status_code = status_code


# ---------------------------------------------------------------------------
# Abstract client interfaces
# ---------------------------------------------------------------------------

class StepService(ABC):
    """Every step-processing client must implement this interface."""

    @abstractmethod
    async def save_step(self, dto_json: str) -> Dict[str, Any]:
        """Submit one step's JSON payload; return the updated record fragment.

        Raises StepServiceError when the service rejects the step or cannot
        be reached.
        """


class CoverageCatalogueClient(ABC):
    """Every coverage catalogue source must implement this interface."""

    @abstractmethod
    async def list_coverages(self) -> List[CoverageOption]:
        """Return all selectable coverages."""
