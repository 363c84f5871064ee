"""
Service layer abstraction.

Services hold the phonebook rules (validation, uniqueness, id
allocation) and operate on the in‑memory ``Directory`` handed to them,
which keeps the API handlers free of business logic.
"""
