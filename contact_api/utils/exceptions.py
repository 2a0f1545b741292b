"""
Exceptions raised by the submission service and mapped to HTTP responses.

Every exception carries the status code and the JSON body the API answers
with, so routes only raise and the handler in main.py renders.
"""
from typing import Optional, Dict, Any

GENERIC_ERROR_MESSAGE = "Error al procesar la solicitud"


class BaseAPIException(Exception):
    """
    Base exception class for all API-related errors.
    Provides consistent error response format.
    """

    def __init__(self, message: str, detail: Optional[str] = None, status_code: int = 500):
        self.message = message
        self.detail = detail or message
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Body of the error response"""
        return {"success": False, "message": self.message}


class ValidationError(BaseAPIException):
    """A submitted field failed its rule (400 Bad Request)."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message, f"{field}: {message}", 400)

    def to_dict(self) -> Dict[str, Any]:
        return {"success": False, "field": self.field, "message": self.message}


class SubmissionStoreError(BaseAPIException):
    """
    The submissions file could not be read or written, or holds something
    other than a JSON array (500). The cause stays in ``detail`` for the logs;
    clients only see the generic message.
    """

    def __init__(self, detail: str):
        super().__init__(GENERIC_ERROR_MESSAGE, detail, 500)
