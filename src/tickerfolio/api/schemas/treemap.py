"""Pydantic schemas for treemap endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from tickerfolio.api.schemas.snapshot import SnapshotRequest


class TreemapItemIn(BaseModel):
    id: str
    value: float = Field(..., ge=0)


class TreemapRequest(BaseModel):
    """Items plus the container to lay them out in."""

    items: list[TreemapItemIn] = Field(default_factory=list)
    width: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)


class PortfolioTreemapRequest(SnapshotRequest):
    width: Optional[float] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)


class TreemapRectResponse(BaseModel):
    model_config = {"from_attributes": True}

    id: str
    x: float
    y: float
    width: float
    height: float
    value: float


class TreemapResponse(BaseModel):
    width: float
    height: float
    rects: list[TreemapRectResponse]
