from typing import List, Optional, Protocol

from ..models.category import Category
from .base import BaseRepository


class CategoryRepository(Protocol):
    """Persistence contract the category service depends on."""

    def find_all(self) -> List[Category]:
        ...

    def find_by_id(self, category_id: int) -> Optional[Category]:
        ...

    def create(self, name: str) -> Category:
        ...

    def update(self, category_id: int, name: str) -> Optional[Category]:
        ...

    def delete(self, category_id: int) -> bool:
        ...

    def exists_by_name(self, name: str) -> bool:
        """True if any category has exactly this name"""
        ...

    def exists_excluding(self, category_id: int, name: str) -> bool:
        """True if a category other than ``category_id`` has exactly this name"""
        ...


class SqlCategoryRepository(BaseRepository[Category]):
    model = Category

    def find_all(self) -> List[Category]:
        return super().find_all(order_by=Category.name)

    def create(self, name: str) -> Category:
        return self.insert({"name": name})

    def update(self, category_id: int, name: str) -> Optional[Category]:
        return self.update_by_id(category_id, {"name": name})

    def delete(self, category_id: int) -> bool:
        return self.delete_by_id(category_id)

    def exists_by_name(self, name: str) -> bool:
        with self.session() as db:
            return db.query(Category.id).filter(Category.name == name).first() is not None

    def exists_excluding(self, category_id: int, name: str) -> bool:
        with self.session() as db:
            return db.query(Category.id).filter(
                Category.name == name,
                Category.id != category_id
            ).first() is not None
