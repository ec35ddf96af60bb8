"""Application layer - Use cases and orchestration.

This layer orchestrates domain logic for the presentation layer:
- services/: Stateless application services (AuthorizationService)

The application layer contains no framework code.
"""
