"""Path helpers for locating files that live next to the service."""

from __future__ import annotations

from pathlib import Path


def get_repo_root() -> Path:
    """Directory that holds the `feedback_api` package.

    The default `feedback.json` is created here, alongside the program.
    """
    return Path(__file__).resolve().parent.parent.parent
