from .categories import CategoryRepository, SqlCategoryRepository
from .transactions import (
    ExpenseSummary,
    SqlTransactionRepository,
    TransactionQuery,
    TransactionRepository,
    TransactionWithCategory,
)

__all__ = [
    "CategoryRepository",
    "SqlCategoryRepository",
    "TransactionRepository",
    "SqlTransactionRepository",
    "TransactionQuery",
    "TransactionWithCategory",
    "ExpenseSummary",
]
