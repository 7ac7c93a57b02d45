"""Warehouse status endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from ..deps import get_controller
from ...schemas.warehouses import WarehouseModel, WarehouseSummaryModel
from ...services.warehouses import describe_warehouse, list_warehouses, summarize_warehouses
from ...store.controller import StoreController
from ...store.operations import find_record

router = APIRouter(prefix="/warehouses", tags=["warehouses"])


@router.get("", response_model=List[WarehouseModel])
def get_warehouses(controller: StoreController = Depends(get_controller)) -> List[WarehouseModel]:
    return [WarehouseModel(**entry) for entry in list_warehouses(controller.state.warehouses)]


@router.get("/summary", response_model=WarehouseSummaryModel)
def get_warehouse_summary(controller: StoreController = Depends(get_controller)) -> WarehouseSummaryModel:
    return WarehouseSummaryModel(**summarize_warehouses(controller.state.warehouses))


@router.get("/{warehouse_id}", response_model=WarehouseModel)
def get_warehouse(warehouse_id: str, controller: StoreController = Depends(get_controller)) -> WarehouseModel:
    warehouse = find_record(controller.state.warehouses, warehouse_id)
    if warehouse is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Warehouse '{warehouse_id}' not found.")
    return WarehouseModel(**describe_warehouse(warehouse))
