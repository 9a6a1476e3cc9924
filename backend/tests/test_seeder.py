# test_seeder.py - Pruebas para la siembra de arranque

import io

import pytest

from inventory.repositories.items import InMemoryItemRepository, ItemRepository
from inventory.services.seeder import SEED_ITEMS, build_seed_items, seed_items

EXPECTED = {("Adam", 9.99, 5.0), ("Eve", 14.99, 3.0), ("John", 7.49, 10.0)}


class FailingRepository(ItemRepository):
    def __init__(self):
        self.find_all_called = False

    def save_all(self, items):
        raise ConnectionError("store unreachable")

    def find_all(self):
        self.find_all_called = True
        return []


class RecordingRepository(InMemoryItemRepository):
    def __init__(self):
        super().__init__()
        self.batches = []

    def save_all(self, items):
        items = list(items)
        self.batches.append(items)
        return super().save_all(items)


@pytest.fixture
def repository():
    return InMemoryItemRepository()


def test_build_seed_items_matches_literals():
    items = build_seed_items()
    assert [(i.name, i.price, i.quantity) for i in items] == SEED_ITEMS


def test_seed_stores_three_items(repository):
    seed_items(repository, out=io.StringIO())
    items = repository.find_all()
    assert len(items) == 3
    assert {(i.name, i.price, i.quantity) for i in items} == EXPECTED


def test_seeded_items_have_unique_ids(repository):
    seed_items(repository, out=io.StringIO())
    ids = [i.id for i in repository.find_all()]
    assert all(ids)
    assert len(set(ids)) == len(ids)


def test_seed_saves_in_a_single_batch():
    repo = RecordingRepository()
    seed_items(repo, out=io.StringIO())
    assert len(repo.batches) == 1
    assert len(repo.batches[0]) == 3


def test_seed_twice_is_not_idempotent(repository):
    seed_items(repository, out=io.StringIO())
    seed_items(repository, out=io.StringIO())
    assert len(repository.find_all()) == 6


def test_output_has_one_line_per_item_in_repository_order(repository):
    out = io.StringIO()
    seed_items(repository, out=out)
    lines = out.getvalue().splitlines()
    assert lines == [str(i) for i in repository.find_all()]
    assert len(lines) == 3


def test_output_defaults_to_stdout(repository, capsys):
    seed_items(repository)
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 3
    assert lines[0].startswith("Item(id=1, name=Adam")


def test_save_failure_propagates():
    repo = FailingRepository()
    out = io.StringIO()
    with pytest.raises(ConnectionError):
        seed_items(repo, out=out)
    assert not repo.find_all_called
    assert out.getvalue() == ""
