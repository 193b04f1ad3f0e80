"""JSON file persistence for feedback records.

The whole collection lives in one pretty-printed JSON array. Every save
rewrites the file in full; nothing is appended or indexed. Failures are
logged and absorbed here: callers never see an exception from `load` or
`save`, and the API keeps serving from memory.
"""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Iterable, Protocol

from pydantic import TypeAdapter, ValidationError

from ..core.logging import get_logger
from ..schemas.feedback import FeedbackRecord

logger = get_logger(__name__)

_records_adapter = TypeAdapter(list[FeedbackRecord])


class FeedbackRepository(Protocol):
    def load(self) -> list[FeedbackRecord]: ...

    def save(self, records: Iterable[FeedbackRecord]) -> None: ...


def _serialize(records: Iterable[FeedbackRecord]) -> str:
    return json.dumps([r.to_json() for r in records], indent=2, ensure_ascii=False)


class JsonFileRepository:
    """Whole-file read/overwrite of a JSON array."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def load(self) -> list[FeedbackRecord]:
        if not self.path.exists():
            logger.info("No feedback file at %s; starting empty.", self.path)
            return []

        try:
            raw = self.path.read_text(encoding="utf-8")
            records = _records_adapter.validate_python(json.loads(raw))
        except (OSError, ValueError, ValidationError) as exc:
            logger.error("Error loading feedback data from %s: %s", self.path, exc, exc_info=True)
            return []

        logger.info("Loaded %d feedback record(s) from %s", len(records), self.path)
        return records

    def save(self, records: Iterable[FeedbackRecord]) -> None:
        try:
            self._write(_serialize(records))
        except OSError as exc:
            logger.error("Error saving feedback data to %s: %s", self.path, exc, exc_info=True)

    def _write(self, text: str) -> None:
        self.path.write_text(text, encoding="utf-8")


class AtomicJsonFileRepository(JsonFileRepository):
    """Same file format, written to a temp file and renamed into place.

    A crash mid-write leaves the previous file intact instead of a
    truncated one.
    """

    def _write(self, text: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except OSError:
            Path(tmp_name).unlink(missing_ok=True)
            raise


def build_repository(path: Path | str, *, atomic: bool = False) -> JsonFileRepository:
    cls = AtomicJsonFileRepository if atomic else JsonFileRepository
    return cls(path)
