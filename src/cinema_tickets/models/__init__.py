"""Models for ticket purchase requests and outcomes."""

from cinema_tickets.models.response import OperationTag, PurchaseResult  # noqa: F401
from cinema_tickets.models.ticket import (  # noqa: F401
    TicketCategory,
    TicketCounts,
    TicketRequest,
)
