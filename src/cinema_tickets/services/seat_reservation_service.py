"""Seat booking provider used once payment has been taken."""

from typing import Protocol


class SeatReservation(Protocol):
    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        ...


class SeatReservationService:
    """Default booking client; only argument types are checked locally."""

    def reserve_seat(self, account_id: int, total_seats_to_allocate: int) -> None:
        if not isinstance(account_id, int) or isinstance(account_id, bool):
            raise TypeError("accountId must be an integer")
        if not isinstance(total_seats_to_allocate, int) or isinstance(
            total_seats_to_allocate, bool
        ):
            raise TypeError("totalSeatsToAllocate must be an integer")
