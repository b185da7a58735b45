from .category import Category
from .transaction import Transaction, TransactionStatus

__all__ = [
    "Category",
    "Transaction",
    "TransactionStatus",
]
