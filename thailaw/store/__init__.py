"""Statute and provision storage."""

from .base import LegalStore
from .builder import BuildStats, build_database
from .sql import SqlLegalStore

__all__ = ["LegalStore", "SqlLegalStore", "BuildStats", "build_database"]
