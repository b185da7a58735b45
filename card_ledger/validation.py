"""
Stateless checks for primitive field constraints.
Each check returns normally (or the normalized value) or raises ValidationError.
"""
import re
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional, Union

from .errors import ValidationError
from .models.transaction import TransactionStatus

CARD_LAST_FOUR_PATTERN = re.compile(r"^\d{4}$")
AMOUNT_QUANTUM = Decimal("0.01")
CATEGORY_NAME_MIN_LENGTH = 1
CATEGORY_NAME_MAX_LENGTH = 100


def validate_id(value: Union[str, int], resource_name: str = "ID") -> int:
    """Parse a path or payload identifier into an int"""
    if isinstance(value, bool):
        raise ValidationError(f"Invalid {resource_name}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid {resource_name}")


def validate_card_last_four(card_last_four: str) -> None:
    if not isinstance(card_last_four, str) or not CARD_LAST_FOUR_PATTERN.match(card_last_four):
        raise ValidationError("Card number must be exactly 4 digits")


def validate_amount(amount: Union[Decimal, float, int]) -> Decimal:
    """Return the amount rounded to cents, which is what the ledger stores"""
    # NaN compares unequal to itself
    if amount is None or isinstance(amount, bool) or amount != amount:
        raise ValidationError("Amount must be greater than 0")
    try:
        cents = Decimal(str(amount)).quantize(AMOUNT_QUANTUM, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise ValidationError("Amount must be greater than 0")
    if cents <= 0:
        raise ValidationError("Amount must be greater than 0")
    return cents


def validate_category_name(name: str) -> None:
    # Whitespace is not trimmed: "  " is a valid two-character name
    if not isinstance(name, str) or not CATEGORY_NAME_MIN_LENGTH <= len(name) <= CATEGORY_NAME_MAX_LENGTH:
        raise ValidationError("Category name must be between 1 and 100 characters")


def validate_status(status: Union[str, TransactionStatus]) -> TransactionStatus:
    try:
        return TransactionStatus(status)
    except ValueError:
        allowed = ", ".join(s.value for s in TransactionStatus)
        raise ValidationError(f"Status must be one of: {allowed}")


def to_utc_naive(value: Optional[datetime]) -> Optional[datetime]:
    """Convert an aware datetime to naive UTC; naive values are assumed UTC already"""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)
