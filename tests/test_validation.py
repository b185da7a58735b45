from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from card_ledger.errors import ErrorKind, ValidationError
from card_ledger.models.transaction import TransactionStatus
from card_ledger.validation import (
    to_utc_naive,
    validate_amount,
    validate_card_last_four,
    validate_category_name,
    validate_id,
    validate_status,
)


class TestValidateId:
    def test_parses_numeric_string(self):
        assert validate_id("42") == 42

    def test_passes_ints_through(self):
        assert validate_id(7) == 7

    @pytest.mark.parametrize("value", ["abc", "", "1.5", "12x"])
    def test_rejects_non_numeric(self, value):
        with pytest.raises(ValidationError) as exc_info:
            validate_id(value, "category ID")

        assert exc_info.value.message == "Invalid category ID"
        assert exc_info.value.kind is ErrorKind.VALIDATION

    def test_default_resource_name(self):
        with pytest.raises(ValidationError, match="Invalid ID"):
            validate_id("nope")


class TestValidateCardLastFour:
    @pytest.mark.parametrize("card", ["0000", "1234", "9999"])
    def test_accepts_four_digits(self, card):
        validate_card_last_four(card)

    @pytest.mark.parametrize("card", ["123", "12345", "12a4", "", " 123", "12 4"])
    def test_rejects_anything_else(self, card):
        with pytest.raises(ValidationError, match="Card number must be exactly 4 digits"):
            validate_card_last_four(card)


class TestValidateAmount:
    @pytest.mark.parametrize("amount", [Decimal("0.01"), 0.01, 1, Decimal("99999.99")])
    def test_accepts_positive(self, amount):
        assert validate_amount(amount) > 0

    @pytest.mark.parametrize("amount, expected", [
        (Decimal("10.005"), Decimal("10.01")),
        (0.1, Decimal("0.10")),
        (7, Decimal("7.00")),
    ])
    def test_rounds_to_cents(self, amount, expected):
        assert validate_amount(amount) == expected

    @pytest.mark.parametrize("amount", [
        0, Decimal("0"), Decimal("-0.01"), -5, float("nan"), float("inf"), 0.001, Decimal("0.004"),
    ])
    def test_rejects_values_below_one_cent(self, amount):
        with pytest.raises(ValidationError, match="Amount must be greater than 0"):
            validate_amount(amount)


class TestValidateCategoryName:
    @pytest.mark.parametrize("name", ["x", "Food", "x" * 100, "  "])
    def test_accepts_lengths_one_to_hundred(self, name):
        validate_category_name(name)

    @pytest.mark.parametrize("name", ["", "x" * 101])
    def test_rejects_out_of_range(self, name):
        with pytest.raises(ValidationError, match="Category name must be between 1 and 100 characters"):
            validate_category_name(name)


class TestValidateStatus:
    def test_accepts_strings_and_enum(self):
        assert validate_status("approved") is TransactionStatus.APPROVED
        assert validate_status(TransactionStatus.REJECTED) is TransactionStatus.REJECTED

    def test_rejects_unknown_status(self):
        with pytest.raises(ValidationError, match="Status must be one of: pending, approved, rejected"):
            validate_status("done")


class TestToUtcNaive:
    def test_converts_aware_datetimes_to_utc(self):
        value = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))

        assert to_utc_naive(value) == datetime(2024, 1, 1, 10, 0)

    def test_leaves_naive_and_none_alone(self):
        naive = datetime(2024, 1, 1, 12, 0)

        assert to_utc_naive(naive) is naive
        assert to_utc_naive(None) is None
