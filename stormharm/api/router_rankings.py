"""
Ranking endpoints: one field, or the full two-question report.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from stormharm.analytics.common import sanitize_for_json
from stormharm.analytics.ranking import rank_field
from stormharm.api.dependencies import get_store, parse_field
from stormharm.api.response_models import RankingResponse, ReportResponse
from stormharm.config import TOP_N
from stormharm.data.schemas import HarmField
from stormharm.data.store import DataStore
from stormharm.reports import harm_report

router = APIRouter(prefix="/api", tags=["rankings"])


@router.get("/rankings/{field}", response_model=RankingResponse)
def get_ranking(
    field: HarmField = Depends(parse_field),
    top: int = Query(TOP_N, ge=1, le=1000),
    store: DataStore = Depends(get_store),
):
    ranking = rank_field(store.df, field, top)
    return sanitize_for_json(ranking.to_dict())


@router.get("/report", response_model=ReportResponse)
def get_report(
    top: int = Query(TOP_N, ge=1, le=1000),
    store: DataStore = Depends(get_store),
):
    return ReportResponse(data=harm_report.generate_json(store, top))
