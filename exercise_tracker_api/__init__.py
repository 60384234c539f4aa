"""
Top‑level package for the Exercise Tracker API.

All functionality lives in submodules under ``app``; the ASGI
application is ``exercise_tracker_api.app.main:app``.
"""

__all__ = []
