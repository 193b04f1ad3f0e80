from __future__ import annotations

from feedback_ui.utils.formatting import (
    format_feedback_label,
    format_rating,
    format_timestamp,
    truncate,
)


def test_format_rating():
    assert format_rating(4) == "★★★★☆"
    assert format_rating(4.6) == "★★★★★"
    assert format_rating(9) == "★★★★★"
    assert format_rating("bad") == "?"


def test_format_timestamp():
    assert format_timestamp("2026-01-02T03:04:05.678Z") == "2026-01-02 03:04 UTC"
    assert format_timestamp("yesterday") == "yesterday"
    assert format_timestamp("") == ""


def test_truncate():
    assert truncate("short") == "short"
    assert truncate("x" * 10, limit=5) == "xxxx…"


def test_feedback_label():
    record = {"id": 3, "rating": 2, "timestamp": "2026-01-02T03:04:05.000Z"}
    assert format_feedback_label(record) == "#3 ★★☆☆☆ 2026-01-02 03:04 UTC"
