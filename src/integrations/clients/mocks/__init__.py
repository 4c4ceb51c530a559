"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- the partner step service is not available
- we want to run the wizard end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients.
- Mock clients should return data shaped according to src/integrations/contracts/*

Switching to real:
Set INTEGRATIONS_MODE=real (or a step service URL) and src/integrations/selection.py
picks clients/real_http/* instead.
"""
