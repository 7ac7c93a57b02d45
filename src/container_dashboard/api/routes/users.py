"""User account endpoints."""

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..deps import get_controller
from ...schemas.users import UserCreate, UserModel, UserUpdate
from ...services.filtering import filter_users
from ...store.controller import StoreController
from ...store.operations import find_record

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[UserModel])
def list_users(
    search: str | None = Query(default=None, description="Case-insensitive search across name/username/email"),
    role: Literal["all", "admin", "staff", "user"] | None = Query(default=None, description="Filter by role"),
    controller: StoreController = Depends(get_controller),
) -> List[UserModel]:
    users = filter_users(controller.state.users, search=search, role=role)
    return [UserModel.model_validate(user) for user in users]


@router.post("", response_model=UserModel, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreate, controller: StoreController = Depends(get_controller)) -> UserModel:
    state = controller.create_user(payload.model_dump())
    return UserModel.model_validate(state.users[-1])


@router.get("/{user_id}", response_model=UserModel)
def get_user(user_id: str, controller: StoreController = Depends(get_controller)) -> UserModel:
    user = find_record(controller.state.users, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User '{user_id}' not found.")
    return UserModel.model_validate(user)


@router.patch("/{user_id}", response_model=UserModel)
def update_user(
    user_id: str,
    payload: UserUpdate,
    controller: StoreController = Depends(get_controller),
) -> UserModel:
    state = controller.update_user(user_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    user = find_record(state.users, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"User '{user_id}' not found.")
    return UserModel.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: str, controller: StoreController = Depends(get_controller)) -> Response:
    controller.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
