from typing import Any, Optional, Type

from sqlalchemy.orm import Session


class BaseRepository:
    def __init__(self, db: Session):
        self.db = db

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()

    def _upsert(self, row: Any) -> Any:
        """Insert or replace by primary key (records are saved whole)."""
        merged = self.db.merge(row)
        self.db.flush()
        return merged

    def _delete_by_id(self, model: Type[Any], row_id: Any) -> bool:
        row: Optional[Any] = self.db.get(model, row_id)
        if row is None:
            return False
        self.db.delete(row)
        self.db.flush()
        return True
