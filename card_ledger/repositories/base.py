"""
Basic CRUD over a table keyed by an integer ``id`` column.

Each call opens its own session from the injected factory and closes it
before returning, so the objects handed back are detached but fully loaded.
"""
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Mapping, Optional, Type, TypeVar

from sqlalchemy.orm import Session, sessionmaker

ModelT = TypeVar("ModelT")


class BaseRepository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @contextmanager
    def session(self) -> Iterator[Session]:
        db = self.session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def find_all(self, *criteria, order_by=None) -> List[ModelT]:
        with self.session() as db:
            query = db.query(self.model)
            if criteria:
                query = query.filter(*criteria)
            if order_by is not None:
                query = query.order_by(order_by)
            return query.all()

    def find_by_id(self, record_id: int) -> Optional[ModelT]:
        with self.session() as db:
            return db.get(self.model, record_id)

    def exists(self, record_id: int) -> bool:
        return self.find_by_id(record_id) is not None

    def insert(self, values: Mapping[str, Any]) -> ModelT:
        with self.session() as db:
            record = self.model(**values)
            db.add(record)
            db.commit()
            db.refresh(record)
            return record

    def update_by_id(self, record_id: int, values: Mapping[str, Any]) -> Optional[ModelT]:
        """Apply the given column values; returns None if the row is gone"""
        with self.session() as db:
            record = db.get(self.model, record_id)
            if record is None:
                return None
            for field, value in values.items():
                setattr(record, field, value)
            db.commit()
            db.refresh(record)
            return record

    def delete_by_id(self, record_id: int) -> bool:
        with self.session() as db:
            record = db.get(self.model, record_id)
            if record is None:
                return False
            db.delete(record)
            db.commit()
            return True
