"""
Application package initializer.

``main`` builds the FastAPI application; ``api`` holds the routes,
``services`` the per‑collection logic, ``schemas`` the response
models, ``models`` the Beanie documents and ``core`` configuration,
logging, dates and the MongoDB store.
"""

from .main import app, create_app  # noqa: F401
