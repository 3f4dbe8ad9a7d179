"""
Top-level API router.

Aggregates the domain routers under a unified prefix.  The main
application mounts this router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
