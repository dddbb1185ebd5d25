"""Purchase outcome returned to callers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict

from pydantic import BaseModel, ConfigDict

SUCCESS_TITLE = "Success"
FAILURE_TITLE = "An error occured"
SUCCESS_DETAIL = "Ticket purchase completed successfully"


class OperationTag(str, Enum):
    """Pipeline stage that produced a result or log entry."""

    VALIDATE_ACCOUNT = "validateAccount"
    PROCESS_TICKETS = "processTickets"
    VALIDATE_RULES = "validateRules"
    PROCESS_PAYMENT = "processPayment"
    RESERVE_SEATS = "reserveSeats"
    PURCHASE_TICKETS = "purchaseTickets"


class PurchaseResult(BaseModel):
    """Outcome of a single purchase call, success or failure."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    type: OperationTag
    title: str
    detail: str

    @classmethod
    def success(cls) -> PurchaseResult:
        return cls(
            status_code=200,
            type=OperationTag.PURCHASE_TICKETS,
            title=SUCCESS_TITLE,
            detail=SUCCESS_DETAIL,
        )

    @classmethod
    def failure(
        cls, operation: OperationTag, message: str, status_code: int = 400
    ) -> PurchaseResult:
        return cls(
            status_code=status_code,
            type=operation,
            title=FAILURE_TITLE,
            detail=message,
        )

    @property
    def ok(self) -> bool:
        return self.status_code == 200

    def to_payload(self) -> Dict[str, Any]:
        """Wire shape shared by responses and log entries."""
        return {
            "statusCode": self.status_code,
            "type": self.type.value,
            "title": self.title,
            "detail": self.detail,
        }
