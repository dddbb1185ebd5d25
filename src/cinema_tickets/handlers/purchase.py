"""
Ticket purchase handler.

Parses POST /purchases, builds TicketRequest values and delegates to the
TicketService. The service already returns a PurchaseResult for every
business failure; this module only maps bad payloads to the same shape.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from cinema_tickets.models.response import OperationTag, PurchaseResult
from cinema_tickets.models.ticket import TicketRequest
from cinema_tickets.utils.error_handling import to_response
from cinema_tickets.utils.logging_config import get_logger, log_operation

logger = get_logger(__name__)

_ticket_service: Optional["TicketService"] = None


def _get_ticket_service():
    """Lazy-load TicketService."""
    global _ticket_service
    if _ticket_service is None:
        from cinema_tickets.services.ticket_service import TicketService
        _ticket_service = TicketService()
    return _ticket_service


def _parse_tickets(raw: Any) -> List[TicketRequest]:
    if not isinstance(raw, list):
        raise ValueError("tickets must be a list")
    return [
        TicketRequest(category=item.get("type"), quantity=item.get("quantity"))
        if isinstance(item, dict)
        else TicketRequest.model_validate(item)
        for item in raw
    ]


def lambda_handler(event, context) -> Dict[str, Any]:
    """Handle POST /purchases."""
    try:
        body = event.get("body") or "{}"
        if not isinstance(body, (str, bytes, bytearray)):
            raise ValueError("body must be a JSON string")
        payload = json.loads(body)
        if not isinstance(payload, dict):
            raise ValueError("body must be a JSON object")
        tickets = _parse_tickets(payload.get("tickets", []))
    except (ValueError, ValidationError, RecursionError) as exc:
        # json.JSONDecodeError is a ValueError subclass; deep nesting overflows the decoder
        result = PurchaseResult.failure(
            OperationTag.PROCESS_TICKETS, f"Invalid request: {exc}"
        )
        log_operation(logger, "error", result.to_payload())
        return to_response(result)

    result = _get_ticket_service().purchase_tickets(payload.get("accountId"), *tickets)
    return to_response(result)
