"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- authorization/: Casbin authority enforcer
- logging/: structlog console adapter
- security/: JWT token service

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
