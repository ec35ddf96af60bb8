"""Presentation layer - API endpoints and HTTP concerns.

FastAPI routers, authentication and authorization dependencies, trace
middleware and RFC 7807 error responses. The layer is thin: handlers consult
the authorization service and translate results to HTTP responses.

Structure:
- routers/system.py: Non-versioned root, health and config endpoints
- routers/api/v1/: Registry-generated API version 1 endpoints
"""
