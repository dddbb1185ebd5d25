"""Ticket request models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TicketCategory(str, Enum):
    """Ticket classes sold at the box office."""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"


class TicketRequest(BaseModel):
    """A number of tickets of one category.

    Quantity is strict: bools, floats and numeric strings are refused at
    construction.
    """

    model_config = ConfigDict(frozen=True)

    category: TicketCategory
    quantity: int = Field(ge=0, strict=True)

    @classmethod
    def of(cls, category: TicketCategory | str, quantity: int) -> TicketRequest:
        return cls(category=category, quantity=quantity)


@dataclass(frozen=True)
class TicketCounts:
    """Per-category totals for one purchase."""

    adults: int = 0
    children: int = 0
    infants: int = 0

    @property
    def total(self) -> int:
        return self.adults + self.children + self.infants

    @property
    def seats_needed(self) -> int:
        # Infants sit on an adult's lap.
        return self.adults + self.children
