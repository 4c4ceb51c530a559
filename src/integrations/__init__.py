"""
Integrations layer.
This package contains all code used to communicate with the onboarding wizard's
external systems:
- the step-processing service (one submission per wizard step)
- the coverage catalogue (selectable coverages)

Key rule:
- The onboarding controller MUST NOT call external APIs directly.
- It talks to integration clients (under src/integrations/clients) through the
  interfaces in src/integrations/contracts.
- We use MOCK clients during development and swap to REAL_HTTP clients when APIs are available.

Switching implementations:
- The selection of mock vs real clients happens in ONE place (src/integrations/selection.py).
"""

from .contracts.interfaces import (
    CoverageCatalogueClient,
    CoverageOption,
    StepService,
    StepServiceError,
)
from .contracts.step_submission import PageError, StepErrorBody, StepSubmission, page_error_body

__all__ = [
    "CoverageCatalogueClient", "CoverageOption", "StepService", "StepServiceError",
    "PageError", "StepErrorBody", "StepSubmission", "page_error_body",
]
