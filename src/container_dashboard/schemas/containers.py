"""Pydantic request/response models for container endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

ContainerStatusLiteral = Literal["in_transit", "arrived", "incident", "returning"]


class DimensionsModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    length: float = Field(..., gt=0)
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)


class ContainerModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    code: str
    type: str
    status: ContainerStatusLiteral
    warehouse_id: str
    notes: str
    location: str
    weight: float
    dimensions: DimensionsModel
    created_at: datetime
    updated_at: datetime
    last_updated_by: str


class ContainerCreate(BaseModel):
    code: str = Field(..., min_length=1)
    type: str = "20ft Standard"
    status: ContainerStatusLiteral = "in_transit"
    warehouse_id: str = "1"
    notes: str = ""
    location: str = ""
    weight: float = Field(default=0, ge=0)
    dimensions: DimensionsModel = Field(default_factory=lambda: DimensionsModel(length=6, width=2.4, height=2.6))


class ContainerUpdate(BaseModel):
    code: Optional[str] = Field(default=None, min_length=1)
    type: Optional[str] = None
    status: Optional[ContainerStatusLiteral] = None
    warehouse_id: Optional[str] = None
    notes: Optional[str] = None
    location: Optional[str] = None
    weight: Optional[float] = Field(default=None, ge=0)
    dimensions: Optional[DimensionsModel] = None


class ContainerStatusUpdate(BaseModel):
    status: ContainerStatusLiteral
