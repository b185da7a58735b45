"""Category service: validation and uniqueness rules over a category repository."""

from typing import List

from ..errors import ConflictError, NotFoundError
from ..logger import get_logger
from ..models.category import Category
from ..repositories.categories import CategoryRepository
from ..validation import validate_category_name

logger = get_logger("services.categories")

DUPLICATE_NAME_MESSAGE = "Category with this name already exists"


class CategoryService:
    """Service for managing categories."""

    def __init__(self, repository: CategoryRepository):
        """Initialize the category service.

        Args:
            repository: Persistence implementation for categories.
        """
        self.repository = repository

    def get_all(self) -> List[Category]:
        """Get all categories, ordered by name."""
        return self.repository.find_all()

    def get_by_id(self, category_id: int) -> Category:
        """Get a single category by ID.

        Raises:
            NotFoundError: If no category has this ID.
        """
        category = self.repository.find_by_id(category_id)
        if category is None:
            raise NotFoundError("Category")
        return category

    def create(self, name: str) -> Category:
        """Create a new category.

        Args:
            name: Category name, 1 to 100 characters, unique.

        Returns:
            The created Category with id and timestamps populated.

        Raises:
            ValidationError: If the name length is out of range.
            ConflictError: If a category with exactly this name exists.
        """
        validate_category_name(name)

        if self.repository.exists_by_name(name):
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

        category = self.repository.create(name)
        logger.info("Created category %s (%r)", category.id, category.name)
        return category

    def update(self, category_id: int, name: str) -> Category:
        """Rename a category.

        Renaming a category to its current name is not a conflict.

        Raises:
            ValidationError: If the name length is out of range.
            NotFoundError: If no category has this ID.
            ConflictError: If another category already has this name.
        """
        validate_category_name(name)

        self.get_by_id(category_id)

        if self.repository.exists_excluding(category_id, name):
            raise ConflictError(DUPLICATE_NAME_MESSAGE)

        category = self.repository.update(category_id, name)
        if category is None:
            # Deleted between the existence check and the write
            raise NotFoundError("Category")
        logger.info("Renamed category %s to %r", category_id, name)
        return category

    def delete(self, category_id: int) -> None:
        """Delete a category.

        Transactions that reference the category are left untouched; they
        are reported under the "Unknown" category afterwards.

        Raises:
            NotFoundError: If no category has this ID.
        """
        self.get_by_id(category_id)
        if not self.repository.delete(category_id):
            raise NotFoundError("Category")
        logger.info("Deleted category %s", category_id)
