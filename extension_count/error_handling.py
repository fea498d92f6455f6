# ============================================================================
#  File:    error_handling.py
#  Purpose: Error codes, standardized messages, and scan error types
# ============================================================================
# SECTION 1: Imports and Globals
# ============================================================================
#
from typing import Any, Dict, Optional
#
# ============================================================================
# SECTION 2: Error Codes and Messages
# ============================================================================
ERROR_CODES = {
    'E002': 'Config validation failed',
    'E004': 'File operation error',
    'E999': 'Unknown error'
}
#
# ============================================================================
# SECTION 3: Error Handling Utilities
# ============================================================================
# Function 3.1: get_error_message
# Purpose: Formats a standardized error message from an error code.
# ============================================================================
#
def get_error_message(code, detail=None):
    """Formats a standardized error message from an error code."""
    message = ERROR_CODES.get(code, ERROR_CODES['E999'])
    if detail:
        return f"[{code}] {message}: {str(detail)}"
    return f"[{code}] {message}"
#
# ============================================================================
# SECTION 4: Error Types
# ============================================================================

class ApplicationError(Exception):
    """
    Base error for everything the reporter raises on purpose.

    Carries a code from ERROR_CODES plus free-form context so callers can
    print a standardized message.
    """

    def __init__(self, message: str, error_type: str = "E999", context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.error_type = error_type
        self.context = context or {}

    @property
    def message(self) -> str:
        """Standardized message, e.g. ``[E004] File operation error: ...``."""
        return get_error_message(self.error_type, str(self))

class FilesystemError(ApplicationError):
    """A folder could not be scanned: missing, not a directory, or unreadable."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"{path}: {reason}", error_type="E004", context={'path': path, 'reason': reason})
        self.path = path
        self.reason = reason

class ConfigurationError(ApplicationError):
    """Settings or labels file could not be loaded or failed validation."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message, error_type="E002", context={'path': path} if path else {})
        self.path = path
#
#
## End of script
