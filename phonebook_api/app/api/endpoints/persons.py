"""
Person endpoints.

CRUD‑style routes over the phonebook: list everyone, fetch or delete a
single entry by id and add a new entry.  Entries cannot be updated.

The collection answers with and without a trailing slash.

Ids in the path are parsed leniently: anything that is not a whole
number simply matches no entry, so ``/api/persons/abc`` answers like
an unknown id instead of failing validation.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from phonebook_api.app.core.errors import ENTRY_NOT_FOUND, NotFoundError
from phonebook_api.app.schemas.person import Person, PersonCreate
from phonebook_api.app.services.person_service import PersonService, get_person_service

router = APIRouter()


def parse_person_id(raw: str) -> Optional[int]:
    """Return ``raw`` as an integer id, or ``None`` if it is not one.

    Digit separators (``1_000``) and non‑ASCII digits are not part of a
    numeric id.
    """
    if "_" in raw or not raw.isascii():
        return None
    try:
        return int(raw)
    except ValueError:
        pass
    try:
        value = float(raw)
    except ValueError:
        return None
    if value.is_integer():
        return int(value)
    return None


@router.get("", response_model=List[Person])
@router.get("/", response_model=List[Person], include_in_schema=False)
async def list_persons(service: PersonService = Depends(get_person_service)) -> List[Person]:
    """Return every phonebook entry in insertion order."""
    return await service.list_people()


@router.get(
    "/{person_id}",
    response_model=Person,
    responses={status.HTTP_404_NOT_FOUND: {"description": "No entry with this id (empty body)"}},
)
async def get_person(person_id: str, service: PersonService = Depends(get_person_service)):
    """Retrieve a single entry by id.

    An unknown id yields an empty 404 response.
    """
    parsed = parse_person_id(person_id)
    person = await service.get_person(parsed) if parsed is not None else None
    if person is None:
        return Response(status_code=status.HTTP_404_NOT_FOUND)
    return person


@router.post("", response_model=Person)
@router.post("/", response_model=Person, include_in_schema=False)
async def create_person(
    person_in: PersonCreate,
    service: PersonService = Depends(get_person_service),
) -> Person:
    """Add an entry and return it with its newly assigned id."""
    return await service.create_person(person_in)


@router.delete("/{person_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_person(
    person_id: str,
    service: PersonService = Depends(get_person_service),
) -> Response:
    """Delete an entry by id; 404 ``Entry not found`` if there is none."""
    parsed = parse_person_id(person_id)
    if parsed is None:
        raise NotFoundError(ENTRY_NOT_FOUND)
    await service.delete_person(parsed)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
