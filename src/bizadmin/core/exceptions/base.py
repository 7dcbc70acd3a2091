"""Base exceptions for bizadmin.

All exceptions inherit from BizAdminError and carry an error code and a
details mapping so they can be logged and serialised uniformly.
"""

from typing import Any, Dict, Optional


class BizAdminError(Exception):
    """Base exception for all bizadmin errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}



def create_error_response(exception: BizAdminError) -> Dict[str, Any]:
    """Error body returned by the HTTP endpoints: ``{"error": message}``."""
    return {"error": exception.message}
