"""
Pydantic response schemas for the API.
"""
from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    rows: int
    event_types: int
    source_files: int


class EventTypesResponse(BaseModel):
    event_types: list[str]
    count: int


class RankingEntry(BaseModel):
    rank: int
    event_type: str
    value: Union[int, float]


class RankingResponse(BaseModel):
    field: str
    label: str
    unit: str
    entries: list[RankingEntry]


class ReportResponse(BaseModel):
    """Full two-question report."""
    data: dict[str, Any]
