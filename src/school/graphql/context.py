"""
Request context shared by every resolver
"""

from typing import Any

import strawberry
from fastapi import Request

from ..database import Database
from .loaders import Loaders


def build_context(database: Database, request: Request | None = None) -> dict[str, Any]:
    """Build a fresh context; loaders are per request so their caches never leak."""
    return {
        "request": request,
        "db": database,
        "loaders": Loaders(database),
    }


def get_database(info: strawberry.Info) -> Database:
    return info.context["db"]


def get_loaders(info: strawberry.Info) -> Loaders:
    return info.context["loaders"]
