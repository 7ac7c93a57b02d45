"""Login, logout, navigation and theme endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_controller, require_current_user
from ...errors import AuthenticationError
from ...models.domain import User
from ...schemas.session import LoginRequest, LogoutResponse, NavigationModel, SessionModel, ThemeModel
from ...schemas.users import UserModel
from ...services.dashboard import DEFAULT_TAB, available_tabs, ui_permissions
from ...store.controller import StoreController

router = APIRouter(tags=["session"])


def _navigation(user: User) -> NavigationModel:
    return NavigationModel(tabs=available_tabs(user.role), permissions=ui_permissions(user.role))


def _session(controller: StoreController, user: User) -> SessionModel:
    return SessionModel(
        user=UserModel.model_validate(user),
        theme=controller.state.theme,
        navigation=_navigation(user),
    )


@router.post("/session/login", response_model=SessionModel, status_code=status.HTTP_200_OK)
def login(payload: LoginRequest, controller: StoreController = Depends(get_controller)) -> SessionModel:
    try:
        user = controller.login(payload.username, payload.password)
    except AuthenticationError as exc:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(exc)) from exc
    return _session(controller, user)


@router.post("/session/logout", response_model=LogoutResponse, status_code=status.HTTP_200_OK)
def logout(controller: StoreController = Depends(get_controller)) -> LogoutResponse:
    controller.logout()
    return LogoutResponse(default_tab=DEFAULT_TAB)


@router.get("/session", response_model=SessionModel)
def current_session(
    user: User = Depends(require_current_user),
    controller: StoreController = Depends(get_controller),
) -> SessionModel:
    return _session(controller, user)


@router.get("/session/navigation", response_model=NavigationModel)
def navigation(user: User = Depends(require_current_user)) -> NavigationModel:
    return _navigation(user)


@router.get("/preferences/theme", response_model=ThemeModel)
def get_theme(controller: StoreController = Depends(get_controller)) -> ThemeModel:
    return ThemeModel(theme=controller.state.theme)


@router.post("/preferences/theme/toggle", response_model=ThemeModel)
def toggle_theme(controller: StoreController = Depends(get_controller)) -> ThemeModel:
    state = controller.toggle_theme()
    return ThemeModel(theme=state.theme)
