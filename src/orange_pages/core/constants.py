"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

# Redirect targets handed to the routing layer
DASHBOARD_PATH = "/dashboard"
LOGIN_PATH = "/login"

# Session tokens
SESSION_TOKEN_AUDIENCE = "authenticated"
ORGANIZATION_HEADER = "X-Organization-Id"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"
