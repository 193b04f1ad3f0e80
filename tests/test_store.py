from __future__ import annotations

from feedback_api.db.store import FeedbackStore, next_id_for
from feedback_api.schemas.feedback import FeedbackDraft, FeedbackRecord


class InMemoryRepository:
    def __init__(self, records=None):
        self.records = list(records or [])
        self.saves = 0

    def load(self):
        return list(self.records)

    def save(self, records):
        self.records = list(records)
        self.saves += 1


def _record(record_id: int, comment: str = "ok") -> FeedbackRecord:
    return FeedbackRecord(
        id=record_id, rating=3, comment=comment, timestamp="2026-01-01T00:00:00.000Z"
    )


def _draft(comment: str = "ok") -> FeedbackDraft:
    return FeedbackDraft(rating=4, comment=comment, timestamp="2026-01-01T00:00:00.000Z")


def test_next_id_for_empty_collection_is_one():
    assert next_id_for([]) == 1


def test_next_id_for_ignores_order():
    records = [_record(7), _record(2), _record(11), _record(5)]
    assert next_id_for(records) == 12
    assert next_id_for(reversed(records)) == 12


def test_initialize_hydrates_and_sets_counter():
    store = FeedbackStore(InMemoryRepository([_record(3), _record(9)]))
    store.initialize()
    assert [r.id for r in store.all()] == [3, 9]
    assert store.next_id == 10


def test_append_assigns_increasing_ids():
    store = FeedbackStore(InMemoryRepository())
    store.initialize()
    first = store.append(_draft("a"))
    second = store.append(_draft("b"))
    assert (first.id, second.id) == (1, 2)
    assert first.client_info == "Unknown"


def test_remove_preserves_order_of_the_rest():
    store = FeedbackStore(InMemoryRepository([_record(1, "a"), _record(2, "b"), _record(3, "c")]))
    store.initialize()
    removed = store.remove_by_id(2)
    assert removed is not None and removed.comment == "b"
    assert [r.comment for r in store.all()] == ["a", "c"]
    assert store.remove_by_id(2) is None


def test_find_by_id():
    store = FeedbackStore(InMemoryRepository([_record(4)]))
    store.initialize()
    assert store.find_by_id(4).id == 4
    assert store.find_by_id(5) is None


def test_all_returns_a_snapshot():
    store = FeedbackStore(InMemoryRepository([_record(1)]))
    store.initialize()
    snapshot = store.all()
    store.append(_draft())
    assert len(snapshot) == 1
    assert len(store) == 2


def test_add_and_delete_write_back():
    repo = InMemoryRepository()
    store = FeedbackStore(repo)
    store.initialize()

    record = store.add(_draft())
    assert repo.saves == 1
    assert [r.id for r in repo.records] == [record.id]

    assert store.delete(record.id) is not None
    assert repo.saves == 2
    assert repo.records == []

    # Nothing removed, nothing written.
    assert store.delete(record.id) is None
    assert repo.saves == 2


def test_counter_does_not_go_back_after_delete():
    store = FeedbackStore(InMemoryRepository())
    store.initialize()
    record = store.add(_draft())
    store.delete(record.id)
    assert store.add(_draft()).id == record.id + 1
