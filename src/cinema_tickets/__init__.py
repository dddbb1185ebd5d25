"""Cinema ticket purchasing: validation, pricing, payment and seat reservation."""

from cinema_tickets.models import (  # noqa: F401
    OperationTag,
    PurchaseResult,
    TicketCategory,
    TicketCounts,
    TicketRequest,
)
from cinema_tickets.services.ticket_service import TicketService  # noqa: F401
from cinema_tickets.utils.error_handling import PurchaseViolation  # noqa: F401

__version__ = "1.0.0"
