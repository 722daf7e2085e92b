"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- kintone/: Request building for the kintone REST API (ApiClient)
- http/: HTTP transport (httpx)
- logging/: Structured logging adapters (structlog)

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
