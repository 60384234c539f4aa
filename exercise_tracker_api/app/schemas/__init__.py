"""
Pydantic schema definitions for API payloads.

Schemas are separated from the Beanie document models so the public
response shape (``_id`` keys, human‑readable dates) stays independent
of how records are stored.
"""
