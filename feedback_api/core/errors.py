"""API error taxonomy.

Each error knows its HTTP status and the JSON body sent to the client.
Services raise these; `main.py` registers one handler that renders them.
"""

from __future__ import annotations

from typing import Any, Optional

AVAILABLE_ROUTES = [
    "POST /feedback",
    "GET /feedback",
    "GET /feedback?id=123",
    "DELETE /feedback?id=123",
]


class FeedbackAPIError(Exception):
    """Base class for errors that map to a client-visible response."""

    status_code: int = 400

    def __init__(self, message: str, **extra: Any):
        super().__init__(message)
        self.message = message
        self.extra = extra

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}


class MalformedBody(FeedbackAPIError):
    status_code = 400

    def __init__(self, details: Optional[str] = None):
        super().__init__("Invalid JSON in request body", details=details)


class MissingField(FeedbackAPIError):
    status_code = 400

    def __init__(self):
        super().__init__("Missing required fields: rating and comment are required")


class InvalidRating(FeedbackAPIError):
    status_code = 400

    def __init__(self):
        super().__init__("Rating must be a number between 1 and 5")


class MissingId(FeedbackAPIError):
    status_code = 400

    def __init__(self):
        super().__init__("ID parameter is required for DELETE operation")


class NotFound(FeedbackAPIError):
    status_code = 404

    def __init__(self, feedback_id: Any):
        super().__init__(f"Feedback with ID {feedback_id} not found")
        self.feedback_id = feedback_id


class MethodNotAllowed(FeedbackAPIError):
    status_code = 405

    def __init__(self, method: str, path: str = "/feedback"):
        super().__init__(f"Method {method} not allowed on {path}")


class RouteNotFound(FeedbackAPIError):
    status_code = 404

    def __init__(self):
        super().__init__("Route not found", availableRoutes=list(AVAILABLE_ROUTES))
