"""
Database module for the School API
"""

from .connection import Database

__all__ = ["Database"]
