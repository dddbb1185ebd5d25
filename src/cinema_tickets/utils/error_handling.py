"""Custom exceptions and helpers for consistent error responses."""

import json
from typing import Any, Dict

from cinema_tickets.models.response import OperationTag, PurchaseResult


class AppError(Exception):
    """Base class for application errors."""

    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.status_code = status_code


class PurchaseViolation(AppError):
    """Raised by any purchase stage that rejects the request."""

    def __init__(self, operation: OperationTag, message: str):
        super().__init__(message, status_code=400)
        self.operation = OperationTag(operation)
        self.message = message


def to_result(error: PurchaseViolation) -> PurchaseResult:
    """Convert a PurchaseViolation into a failure result."""
    return PurchaseResult.failure(
        error.operation, error.message, status_code=error.status_code
    )


def to_response(result: PurchaseResult) -> Dict[str, Any]:
    """Render a result as a Lambda proxy integration response."""
    return {
        "statusCode": result.status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(result.to_payload()),
    }
