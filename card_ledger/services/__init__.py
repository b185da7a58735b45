"""Services container for dependency injection."""

from sqlalchemy.orm import sessionmaker

from ..repositories import SqlCategoryRepository, SqlTransactionRepository
from .categories import CategoryService
from .transactions import TransactionService


class Services:
    """Container for all application services.

    Built once when the application starts and handed to every transport
    handler, which makes it easy to swap in test repositories.

    Args:
        session_factory: SQLAlchemy session factory the repositories open sessions from.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

        category_repository = SqlCategoryRepository(session_factory)
        transaction_repository = SqlTransactionRepository(session_factory)

        self.categories = CategoryService(category_repository)
        self.transactions = TransactionService(transaction_repository, category_repository)


__all__ = ["Services", "CategoryService", "TransactionService"]
