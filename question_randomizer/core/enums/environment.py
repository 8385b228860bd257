"""Application environment types.

Environments:
- DEVELOPMENT: Local development, tables created on startup
- TESTING: Automated test execution (JSON logs, throwaway database)
- CI: Continuous integration
- PRODUCTION: Migrations managed externally, no table bootstrap
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
