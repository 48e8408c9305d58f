"""Database configuration and utilities."""

from .session import SessionLocal, atomic, get_db, store_errors

__all__ = ["atomic", "get_db", "SessionLocal", "store_errors"]
