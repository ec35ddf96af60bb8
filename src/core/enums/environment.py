"""Application environment types.

Defines the runtime environments for the association API.
Used by Settings to pick the log renderer and to gate debug endpoints.

Environments:
- DEVELOPMENT: Local development, colored console logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
