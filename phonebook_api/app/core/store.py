"""
In‑memory storage for phonebook entries.

The ``Directory`` keeps people in insertion order and guards every read
and write with a re‑entrant lock, so a caller can hold ``lock`` across
several calls (check a name, draw an id, append) and have them act as a
single step.  Nothing is persisted: a directory lives exactly as long
as the application that owns it.

``create_app`` builds one directory per application and stores it on
``app.state``; routes obtain it through the ``get_directory``
dependency.
"""

import threading
from typing import Iterable, List, Optional

from fastapi import Request

from phonebook_api.app.schemas.person import Person

SEED_PEOPLE = (
    Person(id=1, name="Arto Hellas", number="040-123456"),
    Person(id=2, name="Ada Lovelace", number="39-44-5323523"),
    Person(id=3, name="Dan Abramov", number="12-43-234345"),
    Person(id=4, name="Mary Poppendieck", number="39-23-6423122"),
)


class Directory:
    """Ordered, lock‑protected collection of ``Person`` records."""

    def __init__(self, people: Iterable[Person] = ()) -> None:
        self.lock = threading.RLock()
        self._people: List[Person] = list(people)

    @classmethod
    def seeded(cls) -> "Directory":
        """Return a directory holding the four demo entries."""
        return cls(SEED_PEOPLE)

    def __len__(self) -> int:
        with self.lock:
            return len(self._people)

    def all(self) -> List[Person]:
        """Return a snapshot of every entry in insertion order."""
        with self.lock:
            return list(self._people)

    def get(self, person_id: int) -> Optional[Person]:
        with self.lock:
            for person in self._people:
                if person.id == person_id:
                    return person
            return None

    def has_name(self, name: str) -> bool:
        with self.lock:
            return any(person.name == name for person in self._people)

    def has_id(self, person_id: int) -> bool:
        return self.get(person_id) is not None

    def append(self, person: Person) -> None:
        with self.lock:
            self._people.append(person)

    def remove(self, person_id: int) -> bool:
        """Drop every entry with ``person_id``.

        Returns ``True`` when the directory shrank.
        """
        with self.lock:
            before = len(self._people)
            self._people = [person for person in self._people if person.id != person_id]
            return len(self._people) != before


def get_directory(request: Request) -> Directory:
    """FastAPI dependency returning the directory of the running app."""
    return request.app.state.directory
