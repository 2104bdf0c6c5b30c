"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest
from rest_framework.test import APIClient

from tickets.domain import PricingRules
from tickets.gateways import SeatReservationGateway, TicketPaymentGateway
from tickets.services import TicketService


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def gateways() -> Mock:
    """Payment and reservation doubles attached to one parent to capture call order."""
    parent = Mock()
    parent.attach_mock(Mock(spec=TicketPaymentGateway), "payment")
    parent.attach_mock(Mock(spec=SeatReservationGateway), "reservation")
    return parent


@pytest.fixture
def rules() -> PricingRules:
    return PricingRules(adult_price=25, child_price=15, max_tickets=25)


@pytest.fixture
def service(gateways: Mock, rules: PricingRules) -> TicketService:
    return TicketService(
        payment_gateway=gateways.payment,
        reservation_gateway=gateways.reservation,
        rules=rules,
    )
