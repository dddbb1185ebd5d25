"""
Ticket purchase service.

Runs one purchase end to end: account check, ticket aggregation, business
rules, pricing, payment and seat reservation. Every stage raises
PurchaseViolation on failure and the entry point turns that into a
PurchaseResult, so callers always get a value back.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from cinema_tickets.config.settings import PurchaseSettings
from cinema_tickets.models.response import (
    SUCCESS_TITLE,
    OperationTag,
    PurchaseResult,
)
from cinema_tickets.models.ticket import TicketCategory, TicketCounts, TicketRequest
from cinema_tickets.services.payment_service import PaymentGateway, TicketPaymentService
from cinema_tickets.services.seat_reservation_service import (
    SeatReservation,
    SeatReservationService,
)
from cinema_tickets.utils.error_handling import PurchaseViolation, to_result
from cinema_tickets.utils.logging_config import get_logger, log_operation
from cinema_tickets.utils.validators import is_positive_integer

logger = get_logger(__name__)

# Log-only correlation types; they never appear on a result.
CALCULATE_TOTAL = "calculateTotal"
PURCHASE_COMPLETE = "purchaseComplete"


class TicketService:
    """Validates and processes cinema ticket purchases."""

    def __init__(
        self,
        payment_service: Optional[PaymentGateway] = None,
        reservation_service: Optional[SeatReservation] = None,
        settings: Optional[PurchaseSettings] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.payment_service = (
            payment_service if payment_service is not None else TicketPaymentService()
        )
        self.reservation_service = (
            reservation_service
            if reservation_service is not None
            else SeatReservationService()
        )
        self.settings = settings if settings is not None else PurchaseSettings()
        self.logger = log if log is not None else logger

    def purchase_tickets(
        self, account_id: Any, *ticket_requests: TicketRequest
    ) -> PurchaseResult:
        """Purchase tickets for an account.

        Never raises: a rejected purchase comes back as a 400 result tagged
        with the stage that refused it.
        """
        try:
            self._validate_account(account_id)
            counts = self._process_ticket_requests(ticket_requests)
            total_cost = self.calculate_total(counts)
            self._log_success(CALCULATE_TOTAL, f"Order total: £{total_cost}")
            self._process_payment(account_id, total_cost)
            self._reserve_seats(account_id, counts.seats_needed)
        except PurchaseViolation as exc:
            result = to_result(exc)
            log_operation(self.logger, "error", result.to_payload())
            return result

        return self._complete()

    def count_tickets(self, ticket_requests: Iterable[TicketRequest]) -> TicketCounts:
        """Sum quantities per category."""
        adults = children = infants = 0
        for request in ticket_requests:
            if not isinstance(request, TicketRequest):
                raise PurchaseViolation(
                    OperationTag.PROCESS_TICKETS, f"Invalid ticket request: {request!r}"
                )
            if request.category is TicketCategory.ADULT:
                adults += request.quantity
            elif request.category is TicketCategory.CHILD:
                children += request.quantity
            elif request.category is TicketCategory.INFANT:
                infants += request.quantity
            else:
                raise AssertionError(f"Unhandled ticket category: {request.category}")
        return TicketCounts(adults=adults, children=children, infants=infants)

    def validate_rules(self, counts: TicketCounts) -> None:
        """Apply purchase rules; the first one broken is reported."""
        limit = self.settings.max_tickets_per_purchase

        if counts.total <= 0:
            raise PurchaseViolation(
                OperationTag.VALIDATE_RULES, "Cannot purchase zero tickets."
            )
        if counts.total > limit:
            raise PurchaseViolation(
                OperationTag.VALIDATE_RULES,
                f"Cannot purchase more than {limit} tickets at once.",
            )
        if counts.adults < counts.infants:
            raise PurchaseViolation(
                OperationTag.VALIDATE_RULES,
                "Must have at least one adult per infant ticket.",
            )
        if counts.children > 0 and counts.adults == 0:
            raise PurchaseViolation(
                OperationTag.VALIDATE_RULES,
                "Children must be accompanied by at least one adult.",
            )

    def calculate_total(self, counts: TicketCounts) -> int:
        """Price the order in whole pounds. Pure; the pipeline logs the total."""
        prices = self.settings
        total_cost = (
            counts.adults * prices.price_for(TicketCategory.ADULT)
            + counts.children * prices.price_for(TicketCategory.CHILD)
            + counts.infants * prices.price_for(TicketCategory.INFANT)
        )
        return total_cost

    def _validate_account(self, account_id: Any) -> None:
        if not is_positive_integer(account_id):
            raise PurchaseViolation(
                OperationTag.VALIDATE_ACCOUNT, "Account ID must be a positive integer."
            )
        self._log_success(
            OperationTag.VALIDATE_ACCOUNT.value,
            f"Account {account_id} validated successfully",
        )

    def _process_ticket_requests(self, ticket_requests: tuple) -> TicketCounts:
        if not ticket_requests:
            raise PurchaseViolation(OperationTag.PROCESS_TICKETS, "No tickets requested.")

        counts = self.count_tickets(ticket_requests)
        self.validate_rules(counts)

        self._log_success(
            OperationTag.PROCESS_TICKETS.value,
            f"Validated: {counts.adults} adults, {counts.children} children, "
            f"{counts.infants} infants",
        )
        return counts

    def _process_payment(self, account_id: int, total_cost: int) -> None:
        try:
            self.payment_service.make_payment(account_id, total_cost)
        except Exception as exc:
            raise PurchaseViolation(
                OperationTag.PROCESS_PAYMENT, f"Payment processing failed: {exc}"
            ) from exc

    def _reserve_seats(self, account_id: int, seats_needed: int) -> None:
        try:
            self.reservation_service.reserve_seat(account_id, seats_needed)
        except Exception as exc:
            raise PurchaseViolation(
                OperationTag.RESERVE_SEATS, f"Seat reservation failed: {exc}"
            ) from exc

        self._log_success(
            OperationTag.RESERVE_SEATS.value,
            f"Reserved {seats_needed} seats for account {account_id}",
        )

    def _complete(self) -> PurchaseResult:
        result = PurchaseResult.success()
        self._log_success(PURCHASE_COMPLETE, "Ticket purchase successful")
        log_operation(self.logger, "info", result.to_payload())
        return result

    def _log_success(self, operation: str, detail: str) -> None:
        log_operation(
            self.logger,
            "info",
            {"type": operation, "title": SUCCESS_TITLE, "detail": detail},
        )
