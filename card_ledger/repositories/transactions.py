from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, List, Mapping, Optional, Protocol

from sqlalchemy import func

from ..models.category import Category
from ..models.transaction import Transaction, TransactionStatus
from .base import BaseRepository

# Display name for transactions whose category no longer exists
UNKNOWN_CATEGORY_NAME = "Unknown"


@dataclass(frozen=True)
class TransactionWithCategory:
    """A transaction row joined with its category's name."""

    id: int
    card_last_four: str
    amount: Decimal
    category_id: int
    category_name: str
    transaction_date: datetime
    status: TransactionStatus
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class TransactionQuery:
    """Listing criteria; unset fields do not filter."""

    category_id: Optional[int] = None
    status: Optional[TransactionStatus] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None


@dataclass(frozen=True)
class ExpenseSummary:
    """Total amount and transaction count for one category."""

    category_id: int
    category_name: str
    total_amount: Decimal
    transaction_count: int


class TransactionRepository(Protocol):
    """Persistence contract the transaction service depends on."""

    def find_all(self, query: Optional[TransactionQuery] = None) -> List[TransactionWithCategory]:
        ...

    def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        ...

    def create(self, values: Mapping[str, Any]) -> Transaction:
        ...

    def update(self, transaction_id: int, values: Mapping[str, Any]) -> Optional[Transaction]:
        ...

    def delete(self, transaction_id: int) -> bool:
        ...

    def update_status(self, transaction_id: int, status: TransactionStatus) -> Optional[Transaction]:
        ...

    def get_expense_summary_by_category(self) -> List[ExpenseSummary]:
        ...


def _as_decimal(value) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class SqlTransactionRepository(BaseRepository[Transaction]):
    model = Transaction

    def find_all(self, query: Optional[TransactionQuery] = None) -> List[TransactionWithCategory]:
        """List transactions with their category name, newest first.

        All set criteria must match (AND). Transactions pointing at a
        deleted category are kept and reported under "Unknown".
        """
        with self.session() as db:
            rows = db.query(Transaction, Category.name.label("category_name")).outerjoin(
                Category, Transaction.category_id == Category.id
            )

            if query is not None:
                if query.category_id is not None:
                    rows = rows.filter(Transaction.category_id == query.category_id)
                if query.status is not None:
                    rows = rows.filter(Transaction.status == TransactionStatus(query.status).value)
                if query.date_from is not None:
                    rows = rows.filter(Transaction.transaction_date >= query.date_from)
                if query.date_to is not None:
                    rows = rows.filter(Transaction.transaction_date <= query.date_to)

            rows = rows.order_by(Transaction.transaction_date.desc(), Transaction.id.desc())

            return [
                TransactionWithCategory(
                    id=transaction.id,
                    card_last_four=transaction.card_last_four,
                    amount=_as_decimal(transaction.amount),
                    category_id=transaction.category_id,
                    category_name=category_name or UNKNOWN_CATEGORY_NAME,
                    transaction_date=transaction.transaction_date,
                    status=TransactionStatus(transaction.status),
                    created_at=transaction.created_at,
                    updated_at=transaction.updated_at,
                )
                for transaction, category_name in rows.all()
            ]

    def create(self, values: Mapping[str, Any]) -> Transaction:
        return self.insert(values)

    def update(self, transaction_id: int, values: Mapping[str, Any]) -> Optional[Transaction]:
        return self.update_by_id(transaction_id, values)

    def delete(self, transaction_id: int) -> bool:
        return self.delete_by_id(transaction_id)

    def update_status(self, transaction_id: int, status: TransactionStatus) -> Optional[Transaction]:
        return self.update_by_id(transaction_id, {"status": TransactionStatus(status).value})

    def get_expense_summary_by_category(self) -> List[ExpenseSummary]:
        """Sum and count every transaction, grouped by category"""
        with self.session() as db:
            rows = db.query(
                Transaction.category_id,
                Category.name.label("category_name"),
                func.sum(Transaction.amount).label("total_amount"),
                func.count(Transaction.id).label("transaction_count")
            ).outerjoin(
                Category, Transaction.category_id == Category.id
            ).group_by(
                Transaction.category_id, Category.name
            ).order_by(
                Transaction.category_id
            ).all()

            return [
                ExpenseSummary(
                    category_id=row.category_id,
                    category_name=row.category_name or UNKNOWN_CATEGORY_NAME,
                    total_amount=_as_decimal(row.total_amount),
                    transaction_count=row.transaction_count,
                )
                for row in rows
            ]
