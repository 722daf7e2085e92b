"""Runtime environment types.

Used by Settings to pick environment-specific behavior, most notably the
log renderer chosen by the container.

Environments:
- DEVELOPMENT: Local scripts, human-readable logs
- TESTING: Automated test execution
- CI: Continuous integration environment
- PRODUCTION: Scheduled jobs and deployed integrations
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
