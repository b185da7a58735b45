"""Transaction service: validation, partial updates, status changes and the expense summary."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional, Union

from ..errors import NotFoundError, ValidationError
from ..logger import get_logger
from ..models.transaction import Transaction, TransactionStatus, utcnow
from ..repositories.categories import CategoryRepository
from ..repositories.transactions import (
    ExpenseSummary,
    TransactionQuery,
    TransactionRepository,
    TransactionWithCategory,
)
from ..schemas import TransactionFilters
from ..validation import (
    to_utc_naive,
    validate_amount,
    validate_card_last_four,
    validate_id,
    validate_status,
)

logger = get_logger("services.transactions")

UPDATABLE_FIELDS = ("card_last_four", "amount", "category_id", "transaction_date", "status")


class TransactionService:
    """Service for managing card transactions."""

    def __init__(self, repository: TransactionRepository, categories: CategoryRepository):
        """Initialize the transaction service.

        Args:
            repository: Persistence implementation for transactions.
            categories: Category persistence, used to check category references.
        """
        self.repository = repository
        self.categories = categories

    def _require(self, transaction_id: int) -> Transaction:
        transaction = self.repository.find_by_id(transaction_id)
        if transaction is None:
            raise NotFoundError("Transaction")
        return transaction

    def _require_category(self, category_id: int) -> None:
        if self.categories.find_by_id(category_id) is None:
            raise NotFoundError("Category")

    def create(
        self,
        card_last_four: str,
        amount: Union[Decimal, float, int],
        category_id: int,
        transaction_date: Optional[datetime] = None,
        status: Optional[Union[str, TransactionStatus]] = None,
    ) -> Transaction:
        """Record a new transaction.

        Args:
            card_last_four: Exactly four decimal digits.
            amount: Strictly positive amount, rounded to cents.
            category_id: ID of an existing category.
            transaction_date: When the charge happened; defaults to now.
            status: Initial status; defaults to pending.

        Raises:
            ValidationError: If card digits, amount or status are invalid.
            NotFoundError: If the category does not exist.
        """
        validate_card_last_four(card_last_four)
        amount = validate_amount(amount)
        category_id = validate_id(category_id, "category ID")
        status = validate_status(status) if status is not None else TransactionStatus.PENDING

        self._require_category(category_id)

        transaction = self.repository.create({
            "card_last_four": card_last_four,
            "amount": amount,
            "category_id": category_id,
            "transaction_date": to_utc_naive(transaction_date) or utcnow(),
            "status": status.value,
        })
        logger.info("Created transaction %s for category %s", transaction.id, category_id)
        return transaction

    def update(self, transaction_id: int, changes: Mapping[str, Any]) -> Transaction:
        """Apply a partial update.

        Only the fields present in ``changes`` (and not None) are written;
        everything else keeps its current value.

        Raises:
            NotFoundError: If the transaction or a new category does not exist.
            ValidationError: If a supplied field is invalid or not updatable.
        """
        self._require(transaction_id)

        unknown = sorted(set(changes) - set(UPDATABLE_FIELDS))
        if unknown:
            raise ValidationError(f"Unknown transaction fields: {', '.join(unknown)}")

        values: Dict[str, Any] = {}
        for field, value in changes.items():
            if value is None:
                continue
            if field == "card_last_four":
                validate_card_last_four(value)
            elif field == "amount":
                value = validate_amount(value)
            elif field == "category_id":
                value = validate_id(value, "category ID")
                self._require_category(value)
            elif field == "status":
                value = validate_status(value).value
            elif field == "transaction_date":
                value = to_utc_naive(value)
            values[field] = value

        if not values:
            return self._require(transaction_id)

        transaction = self.repository.update(transaction_id, values)
        if transaction is None:
            raise NotFoundError("Transaction")
        logger.info("Updated transaction %s (%s)", transaction_id, ", ".join(sorted(values)))
        return transaction

    def delete(self, transaction_id: int) -> None:
        """Delete a transaction.

        Raises:
            NotFoundError: If the transaction does not exist.
        """
        self._require(transaction_id)
        if not self.repository.delete(transaction_id):
            raise NotFoundError("Transaction")
        logger.info("Deleted transaction %s", transaction_id)

    def get_all(self, filters: Optional[TransactionFilters] = None) -> List[TransactionWithCategory]:
        """List transactions matching every supplied filter, with category names."""
        if filters is None:
            return self.repository.find_all()
        return self.repository.find_all(TransactionQuery(
            category_id=filters.category_id,
            status=validate_status(filters.status) if filters.status is not None else None,
            date_from=to_utc_naive(filters.date_from),
            date_to=to_utc_naive(filters.date_to),
        ))

    def update_status(self, transaction_id: int, status: Union[str, TransactionStatus]) -> Transaction:
        """Set a transaction's status.

        Any status may follow any other, including the current one.

        Raises:
            ValidationError: If the status is not pending, approved or rejected.
            NotFoundError: If the transaction does not exist.
        """
        status = validate_status(status)
        previous = self._require(transaction_id)

        transaction = self.repository.update_status(transaction_id, status)
        if transaction is None:
            raise NotFoundError("Transaction")
        logger.info("Transaction %s status %s -> %s", transaction_id, previous.status, status.value)
        return transaction

    def get_expense_summary(self) -> List[ExpenseSummary]:
        """Total amount and count per category that has transactions."""
        return self.repository.get_expense_summary_by_category()
