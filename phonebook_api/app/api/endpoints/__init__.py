"""
Endpoint subpackage.

Each module defines an APIRouter for one part of the phonebook.  The
routers are aggregated in ``router.py`` at the package level.
"""
