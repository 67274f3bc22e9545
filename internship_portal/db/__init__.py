"""
Database module - PostgreSQL connector and SQL fragment builders.
"""
from internship_portal.db.postgres import Database
from internship_portal.db.query import FilterBuilder, UpdateBuilder

__all__ = [
    "Database",
    "FilterBuilder",
    "UpdateBuilder"
]
