"""
Top‑level API router.

Aggregates the JSON endpoints under a single router that ``create_app``
mounts at ``/api``.  The landing page router is included separately
because it lives at the site root.
"""

from fastapi import APIRouter

from .endpoints import users

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
