"""Feedback use cases: validate input, apply it to the store, shape results.

Every check runs before the store is touched, so a rejected request never
leaves a partial write behind.
"""

from __future__ import annotations

import json
import re
from datetime import datetime, timezone
from typing import Any, Optional

from ..core.errors import InvalidRating, MalformedBody, MissingField, MissingId, NotFound
from ..core.logging import get_logger
from ..db.store import FeedbackStore
from ..schemas.feedback import UNKNOWN_CLIENT, FeedbackDraft, FeedbackRecord

logger = get_logger(__name__)

MIN_RATING = 1
MAX_RATING = 5

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC with millisecond precision, e.g. 2026-01-01T12:00:00.000Z."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Unexpected token {name} in JSON")


def parse_body(raw: bytes) -> Any:
    try:
        return json.loads(raw or b"", parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedBody(str(exc)) from exc


def validate_submission(data: Any) -> tuple[int | float, str]:
    """Return (rating, comment) or raise MissingField / InvalidRating / MalformedBody."""
    fields = data if isinstance(data, dict) else {}
    rating = fields.get("rating")
    comment = fields.get("comment")

    # 0, "", null and false all count as missing.
    if not rating or not comment or not isinstance(comment, str):
        raise MissingField()

    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        raise InvalidRating()
    if rating < MIN_RATING or rating > MAX_RATING:
        raise InvalidRating()

    # JSON allows lone surrogates ("\ud800"); they cannot be stored as UTF-8.
    try:
        comment.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise MalformedBody("comment is not valid Unicode text") from exc

    return rating, comment


def parse_id(raw: Optional[str]) -> Optional[int]:
    """Read the leading integer of an id parameter ("12abc" -> 12)."""
    if raw is None:
        return None
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    try:
        return int(match.group(1))
    except ValueError:
        # Past the interpreter's int-string digit limit; no such id exists.
        return None


def create_feedback(
    store: FeedbackStore,
    raw_body: bytes,
    client_info: Optional[str] = None,
    now: Optional[datetime] = None,
) -> FeedbackRecord:
    data = parse_body(raw_body)
    rating, comment = validate_submission(data)

    draft = FeedbackDraft(
        rating=rating,
        comment=comment,
        timestamp=utc_timestamp(now),
        client_info=client_info or UNKNOWN_CLIENT,
    )
    record = store.add(draft)
    logger.info("Feedback %d created (rating=%s)", record.id, record.rating)
    return record


def get_feedback(store: FeedbackStore, raw_id: str) -> FeedbackRecord:
    feedback_id = parse_id(raw_id)
    record = store.find_by_id(feedback_id) if feedback_id is not None else None
    if record is None:
        raise NotFound(feedback_id if feedback_id is not None else raw_id)
    return record


def list_feedback(store: FeedbackStore) -> list[FeedbackRecord]:
    return store.all()


def delete_feedback(store: FeedbackStore, raw_id: Optional[str]) -> FeedbackRecord:
    if not raw_id:
        raise MissingId()

    feedback_id = parse_id(raw_id)
    removed = store.delete(feedback_id) if feedback_id is not None else None
    if removed is None:
        raise NotFound(feedback_id if feedback_id is not None else raw_id)

    logger.info("Feedback %d deleted", removed.id)
    return removed
