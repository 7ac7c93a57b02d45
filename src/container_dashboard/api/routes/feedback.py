"""Customer feedback endpoints."""

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..deps import get_controller
from ...schemas.feedback import FeedbackCreate, FeedbackModel, FeedbackReply, FeedbackUpdate
from ...services.filtering import filter_feedbacks
from ...store.controller import StoreController
from ...store.operations import find_record

router = APIRouter(prefix="/feedback", tags=["feedback"])


def _feedback_or_404(controller: StoreController, feedback_id: str) -> FeedbackModel:
    feedback = find_record(controller.state.feedbacks, feedback_id)
    if feedback is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Feedback '{feedback_id}' not found.")
    return FeedbackModel.model_validate(feedback)


@router.get("", response_model=List[FeedbackModel])
def list_feedback(
    status_filter: Literal["all", "pending", "reviewed", "resolved"] | None = Query(
        default=None, alias="status", description="Filter by status"
    ),
    type_filter: Literal["all", "general", "complaint", "suggestion"] | None = Query(
        default=None, alias="type", description="Filter by feedback type"
    ),
    controller: StoreController = Depends(get_controller),
) -> List[FeedbackModel]:
    feedbacks = filter_feedbacks(controller.state.feedbacks, status=status_filter, feedback_type=type_filter)
    return [FeedbackModel.model_validate(feedback) for feedback in feedbacks]


@router.post("", response_model=FeedbackModel, status_code=status.HTTP_201_CREATED)
def create_feedback(payload: FeedbackCreate, controller: StoreController = Depends(get_controller)) -> FeedbackModel:
    state = controller.create_feedback(payload.model_dump())
    return FeedbackModel.model_validate(state.feedbacks[-1])


@router.get("/{feedback_id}", response_model=FeedbackModel)
def get_feedback(feedback_id: str, controller: StoreController = Depends(get_controller)) -> FeedbackModel:
    return _feedback_or_404(controller, feedback_id)


@router.patch("/{feedback_id}", response_model=FeedbackModel)
def update_feedback(
    feedback_id: str,
    payload: FeedbackUpdate,
    controller: StoreController = Depends(get_controller),
) -> FeedbackModel:
    controller.update_feedback(feedback_id, payload.to_patch())
    return _feedback_or_404(controller, feedback_id)


@router.post("/{feedback_id}/review", response_model=FeedbackModel)
def mark_reviewed(feedback_id: str, controller: StoreController = Depends(get_controller)) -> FeedbackModel:
    controller.mark_feedback_reviewed(feedback_id)
    return _feedback_or_404(controller, feedback_id)


@router.post("/{feedback_id}/respond", response_model=FeedbackModel)
def respond(
    feedback_id: str,
    payload: FeedbackReply,
    controller: StoreController = Depends(get_controller),
) -> FeedbackModel:
    controller.respond_to_feedback(feedback_id, payload.response)
    return _feedback_or_404(controller, feedback_id)
