import asyncio
import random
import threading

import pytest

from phonebook_api.app.core.errors import (
    BadRequestError,
    IdSpaceExhaustedError,
    NotFoundError,
)
from phonebook_api.app.core.store import Directory
from phonebook_api.app.schemas.person import Person, PersonCreate
from phonebook_api.app.services.person_service import PersonService


class ScriptedRandom:
    """Stands in for ``random.Random`` and returns predetermined draws."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def randint(self, a, b):
        self.calls += 1
        return self.values.pop(0)


def run(coro):
    return asyncio.run(coro)


def test_directory_keeps_insertion_order():
    directory = Directory()
    for person_id in (5, 1, 3):
        directory.append(Person(id=person_id, name=f"n{person_id}", number="1"))
    assert [p.id for p in directory.all()] == [5, 1, 3]


def test_directory_remove_reports_change():
    directory = Directory.seeded()
    assert directory.remove(1) is True
    assert directory.remove(1) is False
    assert len(directory) == 3


def test_directory_snapshot_is_a_copy():
    directory = Directory.seeded()
    snapshot = directory.all()
    snapshot.clear()
    assert len(directory) == 4


def test_create_draws_id_in_range():
    service = PersonService(Directory.seeded(), rng=random.Random(7))
    person = run(service.create_person(PersonCreate(name="Grace", number="1")))
    assert 100000 <= person.id <= 999999
    assert service.directory.all()[-1] == person


def test_create_retries_on_id_collision():
    directory = Directory([Person(id=100001, name="Taken", number="1")])
    rng = ScriptedRandom([100001, 100001, 100002])
    service = PersonService(directory, rng=rng)
    person = run(service.create_person(PersonCreate(name="Fresh", number="2")))
    assert person.id == 100002
    assert rng.calls == 3


def test_create_gives_up_after_max_attempts():
    directory = Directory([Person(id=100001, name="Taken", number="1")])
    rng = ScriptedRandom([100001] * 5)
    service = PersonService(directory, rng=rng, max_attempts=3)
    with pytest.raises(IdSpaceExhaustedError):
        run(service.create_person(PersonCreate(name="Fresh", number="2")))
    assert rng.calls == 3
    assert len(directory) == 1


def test_create_validates_presence_before_uniqueness():
    service = PersonService(Directory.seeded())
    with pytest.raises(BadRequestError) as excinfo:
        run(service.create_person(PersonCreate(name="Arto Hellas")))
    assert excinfo.value.message == "Name or number missing"


def test_create_rejects_duplicate_name():
    service = PersonService(Directory.seeded())
    with pytest.raises(BadRequestError) as excinfo:
        run(service.create_person(PersonCreate(name="Arto Hellas", number="999")))
    assert excinfo.value.message == "Name must be unique"
    assert len(service.directory) == 4


def test_name_uniqueness_is_case_sensitive():
    service = PersonService(Directory.seeded())
    person = run(service.create_person(PersonCreate(name="arto hellas", number="999")))
    assert person.name == "arto hellas"


def test_delete_unknown_raises_not_found():
    service = PersonService(Directory.seeded())
    with pytest.raises(NotFoundError):
        run(service.delete_person(12345))


def test_summary_counts_entries():
    service = PersonService(Directory.seeded())
    summary = run(service.summary())
    assert summary.count == 4
    assert summary.generated_at.tzinfo is not None


def test_concurrent_creates_keep_names_unique():
    directory = Directory.seeded()
    workers = 8
    barrier = threading.Barrier(workers)
    created, rejected = [], []

    def worker(seed):
        service = PersonService(directory, rng=random.Random(seed))
        barrier.wait()
        try:
            created.append(run(service.create_person(PersonCreate(name="Grace", number=str(seed)))))
        except BadRequestError as exc:
            rejected.append(exc.message)

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(created) == 1
    assert rejected == ["Name must be unique"] * (workers - 1)
    people = directory.all()
    assert len(people) == 5
    assert len({p.name for p in people}) == len(people)
    assert len({p.id for p in people}) == len(people)


def test_concurrent_creates_of_distinct_names_get_distinct_ids():
    directory = Directory()
    workers = 8
    barrier = threading.Barrier(workers)

    def worker(seed):
        # Every service draws the same ids, so all but one must retry.
        service = PersonService(directory, rng=random.Random(0), id_min=1, id_max=20)
        barrier.wait()
        run(service.create_person(PersonCreate(name=f"Person {seed}", number="1")))

    threads = [threading.Thread(target=worker, args=(seed,)) for seed in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    people = directory.all()
    assert len(people) == workers
    assert len({p.id for p in people}) == workers
