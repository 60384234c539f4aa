"""
Endpoint modules.

Each module defines an ``APIRouter``; they are aggregated in
``api/router.py`` and included by ``create_app``.
"""
