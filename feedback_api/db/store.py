"""In-memory feedback store backed by a repository."""

from __future__ import annotations

import threading
from typing import Iterable, Optional

from ..core.logging import get_logger
from ..schemas.feedback import FeedbackDraft, FeedbackRecord
from .repository import FeedbackRepository

logger = get_logger(__name__)


def next_id_for(records: Iterable[FeedbackRecord]) -> int:
    """Return max(existing ids) + 1, or 1 for an empty collection."""
    return max((r.id for r in records), default=0) + 1


class FeedbackStore:
    """Ordered feedback records plus the id counter.

    One instance is owned by the app. Ids are never reused within the
    lifetime of an instance, even after deletes.
    """

    def __init__(self, repository: FeedbackRepository):
        self.repository = repository
        self._records: list[FeedbackRecord] = []
        self._next_id = 1
        self._lock = threading.RLock()

    @property
    def next_id(self) -> int:
        return self._next_id

    def initialize(self) -> None:
        with self._lock:
            self._records = list(self.repository.load())
            self._next_id = next_id_for(self._records)
        logger.info(
            "Store hydrated with %d record(s); next id %d", len(self._records), self._next_id
        )

    def append(self, draft: FeedbackDraft) -> FeedbackRecord:
        with self._lock:
            record = FeedbackRecord(id=self._next_id, **draft.model_dump())
            self._next_id += 1
            self._records.append(record)
            return record

    def find_by_id(self, feedback_id: int) -> Optional[FeedbackRecord]:
        with self._lock:
            for record in self._records:
                if record.id == feedback_id:
                    return record
        return None

    def remove_by_id(self, feedback_id: int) -> Optional[FeedbackRecord]:
        with self._lock:
            for index, record in enumerate(self._records):
                if record.id == feedback_id:
                    return self._records.pop(index)
        return None

    def all(self) -> list[FeedbackRecord]:
        with self._lock:
            return list(self._records)

    def persist(self) -> None:
        with self._lock:
            self.repository.save(self._records)

    def add(self, draft: FeedbackDraft) -> FeedbackRecord:
        """Append and write the collection back in one step."""
        with self._lock:
            record = self.append(draft)
            self.persist()
            return record

    def delete(self, feedback_id: int) -> Optional[FeedbackRecord]:
        """Remove and, if something was removed, write the collection back."""
        with self._lock:
            removed = self.remove_by_id(feedback_id)
            if removed is not None:
                self.persist()
            return removed

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
