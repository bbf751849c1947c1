"""
Database module for Workforce API
"""

from .connection import (
    create_tables,
    dispose_database,
    get_async_session,
    init_database,
    session_scope,
)

__all__ = [
    "create_tables",
    "dispose_database",
    "get_async_session",
    "init_database",
    "session_scope",
]
