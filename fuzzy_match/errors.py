"""Structured error handling."""
from typing import Any, Dict, Optional
import uuid

from fastapi import Request, status
from fastapi.responses import JSONResponse


class MatchError(Exception):
    """Base error for the matching service."""

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.code = code
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class UnknownStrategyError(MatchError):
    """Requested comparison strategy does not exist."""

    def __init__(self, strategy: str, supported: list):
        super().__init__(
            code="unknown_strategy",
            message=f"Unknown strategy: {strategy}",
            status_code=status.HTTP_404_NOT_FOUND,
            details={"strategy": strategy, "supported": supported},
        )


class InputTooLongError(MatchError):
    """An input string exceeds the configured length limit."""

    def __init__(self, field: str, length: int, max_length: int):
        super().__init__(
            code="input_too_long",
            message=f"Input '{field}' has {length} characters, maximum is {max_length}",
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details={"field": field, "length": length, "max_length": max_length},
        )


def _error_content(request_id: str, code: str, message: str, details: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "request_id": request_id,
        "error": {
            "code": code,
            "message": message,
            "details": details,
        },
    }


async def match_error_handler(request: Request, exc: MatchError) -> JSONResponse:
    """Handle MatchError exceptions."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_content(request_id, exc.code, exc.message, exc.details),
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unexpected exceptions."""
    request_id = getattr(request.state, "request_id", str(uuid.uuid4()))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_content(
            request_id,
            "internal_error",
            "An unexpected error occurred",
            {"type": type(exc).__name__},
        ),
    )
