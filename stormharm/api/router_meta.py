"""
Meta endpoints: health, event types.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends

from stormharm.data.store import DataStore
from stormharm.api.dependencies import get_store
from stormharm.api.response_models import HealthResponse, EventTypesResponse

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("/health", response_model=HealthResponse)
def health(store: DataStore = Depends(get_store)):
    summary = store.summary()
    return HealthResponse(
        status="ok",
        rows=summary["rows"],
        event_types=summary["event_types"],
        source_files=len(summary["source_files"]),
    )


@router.get("/event-types", response_model=EventTypesResponse)
def list_event_types(store: DataStore = Depends(get_store)):
    event_types = store.event_types()
    return EventTypesResponse(event_types=event_types, count=len(event_types))
