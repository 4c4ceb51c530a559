"""
Contracts (data models).

This folder defines the request/response shapes for external integrations:
- step submission request envelope and structured error body
- coverage catalogue entries
- the StepService / CoverageCatalogueClient interfaces

Both mock and real HTTP clients should use these contracts.
"""
