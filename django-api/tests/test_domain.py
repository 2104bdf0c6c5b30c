"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import pytest

from tickets.domain import AccountId, Money, PricingRules, SeatCount, TicketType
from tickets.domain.errors import ErrorCode, InfantsExceedAdultsError, TicketLimitExceededError


class TestMoney:
    """Tests for Money value object."""

    def test_money_accepts_positive_amount(self):
        """Money can be created with positive amount."""
        assert Money(65).amount == 65

    def test_money_accepts_zero(self):
        """Money can be created with zero."""
        assert Money(0).amount == 0

    def test_money_rejects_negative_amount(self):
        """Money raises ValueError for negative amount."""
        with pytest.raises(ValueError):
            Money(-1)

    def test_money_arithmetic(self):
        """Money supports addition and multiplication by a quantity."""
        assert Money(25).times(2) + Money(15) == Money(65)


class TestSeatCount:
    """Tests for SeatCount value object."""

    def test_seat_count_accepts_positive_value(self):
        assert SeatCount(3).value == 3

    def test_seat_count_accepts_zero(self):
        assert SeatCount(0).value == 0

    def test_seat_count_rejects_negative_value(self):
        """SeatCount raises ValueError for negative value."""
        with pytest.raises(ValueError):
            SeatCount(-1)


class TestAccountId:
    """Tests for AccountId value object."""

    def test_from_value_positive(self):
        assert AccountId.from_value(1).value == 1

    @pytest.mark.parametrize("value", [0, -1])
    def test_from_value_rejects_non_positive(self, value):
        """AccountId raises ValueError for zero and negative IDs."""
        with pytest.raises(ValueError):
            AccountId.from_value(value)

    def test_from_value_rejects_none(self):
        with pytest.raises(ValueError):
            AccountId.from_value(None)

    @pytest.mark.parametrize("value", [1.5, 2.0, True, "1"])
    def test_from_value_rejects_non_integers(self, value):
        """AccountId raises ValueError for floats, bools and strings."""
        with pytest.raises(ValueError):
            AccountId.from_value(value)


class TestTicketType:
    """Tests for the TicketType enum."""

    def test_exactly_three_variants(self):
        assert {t.value for t in TicketType} == {"ADULT", "CHILD", "INFANT"}

    def test_infants_do_not_occupy_seats(self):
        assert TicketType.ADULT.occupies_seat
        assert TicketType.CHILD.occupies_seat
        assert not TicketType.INFANT.occupies_seat


class TestPricingRules:
    """Tests for PricingRules configuration."""

    def test_defaults(self):
        rules = PricingRules()
        assert (rules.adult_price, rules.child_price, rules.max_tickets) == (25, 15, 25)

    def test_price_of_each_type(self):
        rules = PricingRules(adult_price=20, child_price=10)
        assert rules.price_of(TicketType.ADULT) == Money(20)
        assert rules.price_of(TicketType.CHILD) == Money(10)
        assert rules.price_of(TicketType.INFANT) == Money(0)

    def test_infants_are_free_whatever_the_other_prices(self):
        rules = PricingRules(adult_price=100, child_price=50)
        assert rules.price_of(TicketType.INFANT) == Money(0)

    @pytest.mark.parametrize("child_price", [0, -1])
    def test_rejects_non_positive_child_price(self, child_price):
        with pytest.raises(ValueError):
            PricingRules(child_price=child_price)

    @pytest.mark.parametrize("adult_price", [10, 15])
    def test_adult_price_must_exceed_child_price(self, adult_price):
        """Equal prices are rejected as well as lower ones."""
        with pytest.raises(ValueError):
            PricingRules(adult_price=adult_price, child_price=15)

    def test_infant_price_is_not_configurable(self):
        with pytest.raises(TypeError):
            PricingRules(infant_price=5)

    def test_rejects_zero_ticket_cap(self):
        with pytest.raises(ValueError):
            PricingRules(max_tickets=0)


class TestDomainErrors:
    """Tests for domain error rendering."""

    def test_str_includes_code_and_message(self):
        assert str(InfantsExceedAdultsError()) == (
            "INFANTS_EXCEED_ADULTS: Cannot have more infant tickets than adult tickets"
        )

    def test_limit_message_names_the_cap(self):
        error = TicketLimitExceededError(25)
        assert error.code is ErrorCode.TICKET_LIMIT_EXCEEDED
        assert error.max_tickets == 25
        assert "25 tickets" in error.message
