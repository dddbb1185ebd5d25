"""
Purchase handler tests.

Run with: pytest tests/unit/test_purchase_handler.py -v
"""

import json
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

SRC_PATH = Path(__file__).parent.parent.parent / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from cinema_tickets.handlers import purchase  # noqa: E402
from cinema_tickets.services.ticket_service import TicketService  # noqa: E402


@pytest.fixture(autouse=True)
def stub_service(monkeypatch):
    """Swap the lazy singleton for a service with mocked collaborators."""
    service = TicketService(
        payment_service=MagicMock(),
        reservation_service=MagicMock(),
        log=MagicMock(),
    )
    monkeypatch.setattr(purchase, "_ticket_service", service)
    monkeypatch.setattr(purchase, "logger", MagicMock())
    yield service


def _event(body) -> dict:
    return {"body": body if isinstance(body, str) else json.dumps(body)}


def test_purchase_happy_path(stub_service):
    """A valid order returns 200 and charges the account."""
    resp = purchase.lambda_handler(
        _event({"accountId": 42, "tickets": [{"type": "ADULT", "quantity": 2}, {"type": "CHILD", "quantity": 1}]}),
        None,
    )

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"])["type"] == "purchaseTickets"
    stub_service.payment_service.make_payment.assert_called_once_with(42, 65)
    stub_service.reservation_service.reserve_seat.assert_called_once_with(42, 3)


def test_business_rule_failure_passes_through():
    """Rule violations keep the service's tag and message."""
    resp = purchase.lambda_handler(
        _event({"accountId": 42, "tickets": [{"type": "CHILD", "quantity": 1}]}), None
    )

    assert resp["statusCode"] == 400
    body = json.loads(resp["body"])
    assert body["type"] == "validateRules"
    assert body["detail"] == "Children must be accompanied by at least one adult."


def test_missing_tickets_reports_no_tickets():
    """An order without tickets fails at processTickets."""
    resp = purchase.lambda_handler(_event({"accountId": 42}), None)

    body = json.loads(resp["body"])
    assert body["type"] == "processTickets"
    assert body["detail"] == "No tickets requested."


def test_string_account_id_rejected():
    """Numeric strings are not coerced into account ids."""
    resp = purchase.lambda_handler(
        _event({"accountId": "42", "tickets": [{"type": "ADULT", "quantity": 1}]}), None
    )

    assert json.loads(resp["body"])["type"] == "validateAccount"


@pytest.mark.parametrize(
    "body",
    [
        "{not json",
        "[]",
        {"accountId": 42, "tickets": "ADULT"},
        {"accountId": 42, "tickets": [{"type": "SENIOR", "quantity": 1}]},
        {"accountId": 42, "tickets": [{"type": "ADULT", "quantity": "2"}]},
    ],
)
def test_bad_payload_returns_400(body):
    """Malformed payloads map to a processTickets failure."""
    resp = purchase.lambda_handler(_event(body), None)

    assert resp["statusCode"] == 400
    parsed = json.loads(resp["body"])
    assert parsed["type"] == "processTickets"
    assert parsed["title"] == "An error occured"
    assert parsed["detail"].startswith("Invalid request:")


def test_event_without_body_is_an_empty_order(stub_service):
    """A missing body parses as {} and reaches the service, account first."""
    resp = purchase.lambda_handler({}, None)

    assert resp["statusCode"] == 400
    body = json.loads(resp["body"])
    assert body["type"] == "validateAccount"
    assert body["detail"] == "Account ID must be a positive integer."
    stub_service.payment_service.make_payment.assert_not_called()


def test_body_with_only_account_reports_no_tickets():
    """An empty order with a valid account fails at processTickets."""
    resp = purchase.lambda_handler({"body": json.dumps({"accountId": 42})}, None)

    body = json.loads(resp["body"])
    assert body["type"] == "processTickets"
    assert body["detail"] == "No tickets requested."


@pytest.mark.parametrize(
    "event",
    [
        {"body": "[" * 100000 + "]" * 100000},
        {"body": {"accountId": 42}},
        {"body": 12345},
    ],
)
def test_unparseable_body_returns_400(event):
    """Deeply nested or non-string bodies still map to a 400 result."""
    resp = purchase.lambda_handler(event, None)

    assert resp["statusCode"] == 400
    parsed = json.loads(resp["body"])
    assert parsed["type"] == "processTickets"
    assert parsed["detail"].startswith("Invalid request:")
