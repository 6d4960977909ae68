"""
Client Exception Classes
Every failure the client surfaces carries an ErrorKind so callers can
branch on the kind instead of inspecting HTTP status codes.
"""

import enum
from typing import Optional


class ErrorKind(str, enum.Enum):
    """Category of a failed call"""
    AUTH = "auth"                      # Login/signup rejected
    AUTH_EXPIRED = "auth_expired"      # 401 from any endpoint
    REQUEST_FAILED = "request_failed"  # Other non-2xx or transport failure
    FORBIDDEN = "forbidden"            # Page needs a role the user lacks
    CONFIGURATION = "configuration"


# ============================================================================
# BASE
# ============================================================================

class HomeMatchError(Exception):
    """Base exception class for all client errors"""

    kind: ErrorKind = ErrorKind.REQUEST_FAILED
    default_message = "API request failed"

    def __init__(
        self,
        message: Optional[str] = None,
        status_code: Optional[int] = None,
        endpoint: Optional[str] = None
    ):
        self.message = message or self.default_message
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(self.message)

    @property
    def error_code(self) -> str:
        return self.kind.value.upper()


# ============================================================================
# REQUEST EXCEPTIONS
# ============================================================================

class ApiRequestError(HomeMatchError):
    """Raised for any non-2xx response other than 401, and for network failures"""

    kind = ErrorKind.REQUEST_FAILED
    default_message = "API request failed"


# ============================================================================
# AUTHENTICATION EXCEPTIONS
# ============================================================================

class AuthError(HomeMatchError):
    """Raised when the backend rejects a login or signup"""

    kind = ErrorKind.AUTH
    default_message = "Authentication failed"


class AuthExpiredError(AuthError):
    """Raised when any call comes back 401; the local session is already cleared"""

    kind = ErrorKind.AUTH_EXPIRED
    default_message = "Authentication expired. Please log in again."


class AdminAccessDenied(HomeMatchError):
    """Raised when a non-admin opens an admin-only page"""

    kind = ErrorKind.FORBIDDEN
    default_message = "Admin role required"


# ============================================================================
# CONFIGURATION EXCEPTIONS
# ============================================================================

class ConfigurationError(HomeMatchError):
    """Raised when settings name an unsupported backend"""

    kind = ErrorKind.CONFIGURATION
    default_message = "Invalid configuration"
