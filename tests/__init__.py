"""Test suite for the ball badminton association authorization API.

Test structure follows the test pyramid:
- unit/: Unit tests - domain enums, entity, authorization gate, adapters
  with mocked dependencies
- integration/: Adapters against real PyJWT and Casbin
- api/: HTTP endpoints end-to-end through the FastAPI TestClient
"""
