"""
Real HTTP integration clients.

These clients communicate with the partner system via HTTP (httpx):
- the onboarding step-processing endpoint
- the coverage catalogue endpoint

Important:
- Must implement the same interfaces as the mock clients
- Must return data shaped according to src/integrations/contracts/*

Switching:
The selection of mock vs real clients happens in src/integrations/selection.py only.
"""
