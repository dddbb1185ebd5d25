"""
Pricing and purchase limits.

Passed into the ticket service rather than read from module globals, so an
alternate tariff never leaks between callers.
"""

from dataclasses import dataclass

from cinema_tickets.models.ticket import TicketCategory


@dataclass(frozen=True)
class PurchaseSettings:
    """Unit prices in whole pounds plus the per-purchase ticket cap."""

    adult_price: int = 25
    child_price: int = 15
    infant_price: int = 0
    max_tickets_per_purchase: int = 25

    def price_for(self, category: TicketCategory) -> int:
        """Return the unit price for a ticket category."""
        prices = {
            TicketCategory.ADULT: self.adult_price,
            TicketCategory.CHILD: self.child_price,
            TicketCategory.INFANT: self.infant_price,
        }
        return prices[TicketCategory(category)]
