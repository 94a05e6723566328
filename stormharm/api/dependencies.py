"""
FastAPI dependencies — DataStore singleton, field parsing.
"""
from __future__ import annotations

from fastapi import HTTPException, Path

from stormharm.data.schemas import HarmField
from stormharm.data.store import DataStore

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: DataStore | None = None


def set_store(store: DataStore | None) -> None:
    global _store
    _store = store


def get_store() -> DataStore:
    if _store is None or not _store.is_loaded:
        raise HTTPException(503, "Data not loaded yet")
    return _store


def parse_field(field: str = Path(..., description="fatalities|injuries|property_cost|crop_cost")) -> HarmField:
    try:
        return HarmField(field)
    except ValueError:
        valid = [f.value for f in HarmField]
        raise HTTPException(400, f"Invalid field: {field}. Valid: {valid}")
