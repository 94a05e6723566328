"""
Top-N ranking of aggregated harm.
"""
from __future__ import annotations

import heapq
from typing import Iterable, Mapping, Union

import pandas as pd

from stormharm.analytics.aggregate import aggregate
from stormharm.config import TOP_N
from stormharm.data.schemas import HarmField, Number, RankingTable, StormRecord, TopNReport


def _rank_key(item: tuple[str, Number]) -> tuple:
    category, value = item
    return (-value, category)


def top_n(result: Mapping[str, Number], n: int = TOP_N) -> TopNReport:
    """The ``n`` largest categories, descending by value.

    Equal values are ordered alphabetically by category. Fewer than ``n``
    categories are returned as-is.
    """
    if n <= 0:
        raise ValueError(f"n must be positive, got {n}")
    return heapq.nsmallest(n, result.items(), key=_rank_key)


def rank_field(
    data: Union[pd.DataFrame, Iterable[StormRecord]],
    field: HarmField | str,
    n: int = TOP_N,
) -> RankingTable:
    field = HarmField(field)
    return RankingTable(field=field, entries=top_n(aggregate(data, field), n))
