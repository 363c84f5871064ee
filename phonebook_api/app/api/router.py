"""
Top‑level router of the Phonebook API.

The person routes live under ``/api/persons``; the greeting and the
info page sit at the root of the site.
"""

from fastapi import APIRouter

from .endpoints import info, persons

router = APIRouter()

router.include_router(persons.router, prefix="/api/persons", tags=["persons"])
router.include_router(info.router, tags=["info"])
