"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the in‑memory directory so the HTTP
representation of a person stays independent from how it is stored.
"""
