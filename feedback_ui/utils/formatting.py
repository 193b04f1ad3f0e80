"""Display formatting for feedback records.

Pure functions - no Streamlit dependencies.
"""

from datetime import datetime
from typing import Any, Dict


def format_rating(rating: Any, max_rating: int = 5) -> str:
    """Render a rating as filled/empty stars, e.g. 4 -> "★★★★☆".

    Fractional ratings are rounded to the nearest star. Values outside
    1..max_rating are clamped.
    """
    try:
        value = float(rating)
    except (TypeError, ValueError):
        return "?"
    filled = max(0, min(max_rating, int(round(value))))
    return "★" * filled + "☆" * (max_rating - filled)


def format_timestamp(timestamp: str) -> str:
    """Turn the API's ISO-8601 UTC string into "YYYY-MM-DD HH:MM UTC".

    Unparseable input is returned unchanged.
    """
    if not timestamp:
        return ""
    try:
        parsed = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return timestamp
    return parsed.strftime("%Y-%m-%d %H:%M UTC")


def truncate(text: str, limit: int = 120) -> str:
    if not text or len(text) <= limit:
        return text or ""
    return text[: limit - 1].rstrip() + "…"


def format_feedback_label(record: Dict[str, Any]) -> str:
    # "#3 ★★★★☆ 2026-01-01 12:00 UTC"
    parts = [
        f"#{record.get('id', '?')}",
        format_rating(record.get("rating")),
        format_timestamp(record.get("timestamp", "")),
    ]
    return " ".join(p for p in parts if p)
