"""
Database module for Staffbook backend
"""

from .connection import Database

__all__ = ["Database"]
