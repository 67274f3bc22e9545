"""
Dynamic SQL fragment assembly.

Column names never come from the request: each service declares the columns
it allows, and values are always bound parameters.
"""

from typing import Iterable, Optional, Tuple

from internship_portal.core.errors import ValidationError


class UpdateBuilder:
    """
    Collects the assignments of a partial update.

    Usage:
        builder = UpdateBuilder("startups", STARTUP_COLUMNS)
        builder.set_many(data.model_dump(exclude_unset=True))
        sql, params = builder.build("id", startup_id)
    """

    def __init__(self, table: str, columns: Iterable[str]):
        self.table = table
        self.columns = frozenset(columns)
        self._assignments = {}

    def set(self, column: str, value) -> "UpdateBuilder":
        if column not in self.columns:
            raise ValueError(f"{column!r} is not an updatable column of {self.table}")
        self._assignments[column] = value
        return self

    def set_many(self, values: dict) -> "UpdateBuilder":
        for column, value in values.items():
            self.set(column, value)
        return self

    def __bool__(self):
        return bool(self._assignments)

    def build(self, key_column: str, key_value, returning: str = "*") -> Tuple[str, dict]:
        if not self._assignments:
            raise ValidationError("Provide at least one field to update")
        clauses = ", ".join(f"{column} = :{column}" for column in self._assignments)
        params = dict(self._assignments)
        params["_key"] = key_value
        sql = f"UPDATE {self.table} SET {clauses} WHERE {key_column} = :_key RETURNING {returning}"
        return sql, params


class FilterBuilder:
    """AND-joined WHERE fragments with their bound parameters."""

    def __init__(self):
        self.clauses = []
        self.params = {}

    def add(self, clause: str, **params) -> "FilterBuilder":
        self.clauses.append(clause)
        self.params.update(params)
        return self

    def ilike(self, column: str, name: str, value: Optional[str]) -> "FilterBuilder":
        """Case-insensitive substring match; skipped when value is empty."""
        if value:
            self.add(f"{column} ILIKE :{name}", **{name: f"%{value}%"})
        return self

    def where(self) -> str:
        return f"WHERE {' AND '.join(self.clauses)}" if self.clauses else ""
