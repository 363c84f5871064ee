"""
Application package initializer.

The project is split into a handful of small pieces: ``core`` holds
configuration, logging, error types and the in‑memory directory,
``schemas`` the Pydantic payloads, ``services`` the phonebook rules and
``api`` the HTTP routes.  ``main`` wires them together into a FastAPI
application.
"""

from .main import app  # noqa: F401
