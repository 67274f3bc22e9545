"""
Shared plumbing for the resource services.

Each service owns one table. Subclasses declare which columns a partial
update may touch and which of those may never be cleared to NULL.
"""

from typing import Iterable

from pydantic import BaseModel

from internship_portal.core.errors import NotFoundError
from internship_portal.db.postgres import Database
from internship_portal.db.query import UpdateBuilder


class ResourceService:
    table: str = ""
    label: str = "Record"
    updatable: Iterable[str] = ()
    required: Iterable[str] = ()

    def __init__(self, db: Database):
        self.db = db

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    def changes(self, data: BaseModel) -> dict:
        """
        Fields the caller actually sent. An explicit null clears a nullable
        column but is ignored for required ones.
        """
        sent = data.model_dump(exclude_unset=True)
        return {
            column: value for column, value in sent.items()
            if value is not None or column not in self.required
        }

    def apply_update(self, key: int, fields: dict, returning: str = "*") -> dict:
        builder = UpdateBuilder(self.table, self.updatable).set_many(fields)
        sql, params = builder.build("id", key, returning=returning)
        row = self.db.fetch_one(sql, params)
        if row is None:
            raise self.not_found()
        return row

    def delete(self, key: int) -> int:
        """Hard delete; RETURNING confirms the row existed."""
        row = self.db.fetch_one(f"DELETE FROM {self.table} WHERE id = :id RETURNING id", {"id": key})
        if row is None:
            raise self.not_found()
        return row["id"]
