"""
Service layer for phonebook entries.

``PersonService`` implements listing, lookup, creation and deletion of
people together with the summary shown on the info page.  Validation
follows a fixed order: a payload missing its name or number is
rejected first, and only a complete payload is checked for a duplicate
name.

New ids are drawn uniformly at random from ``[id_min, id_max]``.  A
draw that collides with an existing id is retried, at most
``max_attempts`` times, after which ``IdSpaceExhaustedError`` is
raised.  The check for a duplicate name, the id draw and the append
all run under the directory lock.
"""

import logging
import random
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from fastapi import Depends, Request

from phonebook_api.app.core.config import settings
from phonebook_api.app.core.errors import (
    ENTRY_NOT_FOUND,
    NAME_MUST_BE_UNIQUE,
    NAME_OR_NUMBER_MISSING,
    BadRequestError,
    IdSpaceExhaustedError,
    NotFoundError,
)
from phonebook_api.app.core.store import Directory, get_directory
from phonebook_api.app.schemas.person import Person, PersonCreate

logger = logging.getLogger(__name__)


@dataclass
class PhonebookSummary:
    """Entry count and server time captured when the summary was built."""

    count: int
    generated_at: datetime


class PersonService:
    """Phonebook operations over a ``Directory``."""

    def __init__(
        self,
        directory: Directory,
        rng: Optional[random.Random] = None,
        id_min: int = settings.id_min,
        id_max: int = settings.id_max,
        max_attempts: int = settings.id_max_attempts,
    ) -> None:
        self.directory = directory
        self.rng = rng or random.Random()
        self.id_min = id_min
        self.id_max = id_max
        self.max_attempts = max_attempts

    async def list_people(self) -> List[Person]:
        return self.directory.all()

    async def get_person(self, person_id: int) -> Optional[Person]:
        """Return the entry with ``person_id`` or ``None``."""
        return self.directory.get(person_id)

    async def create_person(self, data: PersonCreate) -> Person:
        """Validate ``data`` and add it to the phonebook under a fresh id.

        Raises ``BadRequestError`` when the name or number is missing or
        the name is already taken.
        """
        if not data.name or not data.number:
            raise BadRequestError(NAME_OR_NUMBER_MISSING)
        with self.directory.lock:
            if self.directory.has_name(data.name):
                raise BadRequestError(NAME_MUST_BE_UNIQUE)
            person = Person(id=self._next_id(), name=data.name, number=data.number)
            self.directory.append(person)
        logger.info("Created person %s (%s)", person.id, person.name)
        return person

    async def delete_person(self, person_id: int) -> None:
        """Remove the entry with ``person_id``.

        Raises ``NotFoundError`` if the phonebook did not change.
        """
        if not self.directory.remove(person_id):
            raise NotFoundError(ENTRY_NOT_FOUND)
        logger.info("Deleted person %s", person_id)

    async def summary(self) -> PhonebookSummary:
        return PhonebookSummary(count=len(self.directory), generated_at=datetime.now().astimezone())

    def _next_id(self) -> int:
        for _ in range(self.max_attempts):
            candidate = self.rng.randint(self.id_min, self.id_max)
            if not self.directory.has_id(candidate):
                return candidate
            logger.debug("Id %s already taken, drawing again", candidate)
        raise IdSpaceExhaustedError(
            f"No free id found after {self.max_attempts} attempts"
        )


def get_person_service(
    request: Request, directory: Directory = Depends(get_directory)
) -> PersonService:
    """FastAPI dependency building a service bound to the app's directory."""
    return PersonService(directory, rng=request.app.state.id_rng)
