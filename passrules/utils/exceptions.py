from fastapi import HTTPException, status
from typing import Optional


class PasswordRulesError(Exception):
    """Base class for errors raised while building or applying rules."""


class ValidationError(PasswordRulesError, ValueError):
    """A configuration field, selector string or argument list is invalid."""


class MissingInputError(PasswordRulesError, TypeError):
    """A stage that needs concrete text received None."""


class ResourceLoadError(PasswordRulesError, RuntimeError):
    """A static resource (the prefix dictionary) is missing or malformed."""


class APIException(HTTPException):
    """Flexible API Exception."""

    def __init__(self, status_code: int, code: str, message: Optional[str] = None):
        detail = {"code": code, "message": message or "An error occurred"}
        super().__init__(status_code=status_code, detail=detail)


class BadRequestError(APIException):
    """400 Bad Request Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST, code=code, message=message
        )


class ServerError(APIException):
    """500 Internal Server Error."""

    def __init__(self, code: str, message: Optional[str] = None):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            code=code,
            message=message,
        )
