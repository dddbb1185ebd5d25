"""Payment gateway used to charge an account for its tickets."""

from typing import Protocol


class PaymentGateway(Protocol):
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        ...


class TicketPaymentService:
    """Default gateway client.

    Charging happens on the provider's side; locally we only guard the
    argument types the provider accepts.
    """

    def make_payment(self, account_id: int, total_amount_to_pay: int) -> None:
        if not isinstance(account_id, int) or isinstance(account_id, bool):
            raise TypeError("accountId must be an integer")
        if not isinstance(total_amount_to_pay, int) or isinstance(
            total_amount_to_pay, bool
        ):
            raise TypeError("totalAmountToPay must be an integer")
