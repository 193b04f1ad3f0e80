"""Feedback endpoints.

  POST   /feedback            create
  GET    /feedback[?id=123]   list all, or fetch one
  DELETE /feedback?id=123     delete one

Handlers are `async` and read the body before touching the store; the
store mutation and file write then run without yielding to other requests.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from ...core.logging import get_logger
from ...db.store import FeedbackStore
from ...schemas.feedback import DeletedFeedbackResponse, FeedbackListResponse, FeedbackResponse
from ...services import feedback_service

logger = get_logger(__name__)
router = APIRouter()


def get_store(request: Request) -> FeedbackStore:
    return request.app.state.store


@router.post("/feedback", status_code=201, response_model=FeedbackResponse)
async def create_feedback(
    request: Request,
    store: FeedbackStore = Depends(get_store),
) -> FeedbackResponse:
    raw_body = await request.body()
    record = feedback_service.create_feedback(
        store,
        raw_body,
        client_info=request.headers.get("user-agent"),
    )
    return FeedbackResponse(message="Feedback created successfully", feedback=record)


@router.get("/feedback", response_model=FeedbackResponse | FeedbackListResponse)
async def read_feedback(
    feedback_id: Optional[str] = Query(default=None, alias="id"),
    store: FeedbackStore = Depends(get_store),
) -> FeedbackResponse | FeedbackListResponse:
    if feedback_id:
        record = feedback_service.get_feedback(store, feedback_id)
        return FeedbackResponse(message="Feedback retrieved successfully", feedback=record)

    records = feedback_service.list_feedback(store)
    return FeedbackListResponse(
        message="All feedback retrieved successfully",
        count=len(records),
        feedback=records,
    )


@router.delete("/feedback", response_model=DeletedFeedbackResponse)
async def delete_feedback(
    feedback_id: Optional[str] = Query(default=None, alias="id"),
    store: FeedbackStore = Depends(get_store),
) -> DeletedFeedbackResponse:
    removed = feedback_service.delete_feedback(store, feedback_id)
    return DeletedFeedbackResponse(message="Feedback deleted successfully", deletedFeedback=removed)
