"""Container tracking endpoints."""

from __future__ import annotations

from typing import List, Literal

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from ..deps import get_controller
from ...schemas.containers import ContainerCreate, ContainerModel, ContainerStatusUpdate, ContainerUpdate
from ...services.filtering import filter_containers
from ...store.controller import StoreController
from ...store.operations import find_record

router = APIRouter(prefix="/containers", tags=["containers"])

StatusFilter = Literal["all", "in_transit", "arrived", "incident", "returning"]


def _container_or_404(controller: StoreController, container_id: str) -> ContainerModel:
    container = find_record(controller.state.containers, container_id)
    if container is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Container '{container_id}' not found.")
    return ContainerModel.model_validate(container)


@router.get("", response_model=List[ContainerModel])
def list_containers(
    search: str | None = Query(default=None, description="Case-insensitive search across code/type/location"),
    status_filter: StatusFilter | None = Query(default=None, alias="status", description="Filter by status"),
    controller: StoreController = Depends(get_controller),
) -> List[ContainerModel]:
    containers = filter_containers(controller.state.containers, search=search, status=status_filter)
    return [ContainerModel.model_validate(container) for container in containers]


@router.post("", response_model=ContainerModel, status_code=status.HTTP_201_CREATED)
def create_container(
    payload: ContainerCreate,
    controller: StoreController = Depends(get_controller),
) -> ContainerModel:
    state = controller.create_container(payload.model_dump())
    return ContainerModel.model_validate(state.containers[-1])


@router.get("/{container_id}", response_model=ContainerModel)
def get_container(container_id: str, controller: StoreController = Depends(get_controller)) -> ContainerModel:
    return _container_or_404(controller, container_id)


@router.patch("/{container_id}", response_model=ContainerModel)
def update_container(
    container_id: str,
    payload: ContainerUpdate,
    controller: StoreController = Depends(get_controller),
) -> ContainerModel:
    controller.update_container(container_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    return _container_or_404(controller, container_id)


@router.post("/{container_id}/status", response_model=ContainerModel)
def update_container_status(
    container_id: str,
    payload: ContainerStatusUpdate,
    controller: StoreController = Depends(get_controller),
) -> ContainerModel:
    """Quick status change, as offered by the status menu on each container card."""
    controller.update_container(container_id, {"status": payload.status})
    return _container_or_404(controller, container_id)


@router.delete("/{container_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_container(container_id: str, controller: StoreController = Depends(get_controller)) -> Response:
    controller.delete_container(container_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
