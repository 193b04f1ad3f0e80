"""HTTP client for the feedback API.

Handles requests, error handling, and response parsing.
"""

from typing import Any, Dict, Optional

import requests

from feedback_ui.config.settings import (
    API_FEEDBACK_ENDPOINT,
    BACKEND_BASE_URL,
    REQUEST_TIMEOUT,
)


class APIError(Exception):
    """Base exception for API client errors."""
    pass


class APIConnectionError(APIError):
    """Raised when unable to connect to the backend."""
    pass


class APITimeoutError(APIError):
    """Raised when the request exceeds the timeout."""
    pass


class APIHTTPError(APIError):
    """Raised when the backend answers with an error status code."""

    def __init__(self, message: str, status_code: int, response_body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


def _error_message(response: requests.Response) -> str:
    """Pull the API's `error` field out of a failed response, if there is one."""
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason or ""
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return response.text


def _request(
    method: str,
    params: Optional[Dict[str, Any]] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Send one request to the feedback endpoint and return the decoded body.

    Raises:
        APIConnectionError: If unable to connect to the backend.
        APITimeoutError: If the request exceeds the timeout.
        APIHTTPError: If the backend returns a 4xx/5xx status code.
    """
    url = f"{BACKEND_BASE_URL}{API_FEEDBACK_ENDPOINT}"

    try:
        response = requests.request(
            method,
            url,
            params=params,
            json=payload,
            timeout=REQUEST_TIMEOUT,
        )
        response.raise_for_status()
        return response.json()

    except requests.exceptions.ConnectionError as e:
        raise APIConnectionError(
            f"Unable to connect to backend at {BACKEND_BASE_URL}. "
            "Please ensure the feedback API is running."
        ) from e

    except requests.exceptions.Timeout as e:
        raise APITimeoutError(
            f"Request to backend exceeded timeout of {REQUEST_TIMEOUT} seconds."
        ) from e

    except requests.exceptions.HTTPError as e:
        response = e.response
        status_code = response.status_code if response is not None else 0
        detail = _error_message(response) if response is not None else str(e)

        raise APIHTTPError(
            f"Backend returned error status {status_code}: {detail}",
            status_code=status_code,
            response_body=response.text if response is not None else None,
        ) from e


def create_feedback(rating: int, comment: str) -> Dict[str, Any]:
    """Submit a rating (1-5) and comment; returns the created record."""
    body = _request("POST", payload={"rating": rating, "comment": comment})
    return body["feedback"]


def list_feedback() -> Dict[str, Any]:
    """Return the whole collection as {"count": n, "feedback": [...]}."""
    body = _request("GET")
    return {"count": body.get("count", 0), "feedback": body.get("feedback") or []}


def get_feedback(feedback_id: int) -> Dict[str, Any]:
    body = _request("GET", params={"id": feedback_id})
    return body["feedback"]


def delete_feedback(feedback_id: int) -> Dict[str, Any]:
    """Delete one record by id; returns the removed record."""
    body = _request("DELETE", params={"id": feedback_id})
    return body["deletedFeedback"]
