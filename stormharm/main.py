"""
Storm Harm Analytics — FastAPI app factory with startup data loading.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from stormharm.data.store import DataStore
from stormharm.api.dependencies import set_store
from stormharm.api.router_meta import router as meta_router
from stormharm.api.router_rankings import router as rankings_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load all storm data at startup."""
    from stormharm.config import INBOX_FOLDER
    INBOX_FOLDER.mkdir(parents=True, exist_ok=True)
    print(f"  INBOX_FOLDER = {INBOX_FOLDER}")

    store = DataStore().load(INBOX_FOLDER)
    set_store(store)

    if store.row_count() > 0:
        print(f"\nStorm Harm Analytics ready — {store.row_count():,} events, "
              f"{len(store.event_types()):,} event types\n")
    else:
        print("\nStorm Harm Analytics ready — no data yet. Drop storm-data CSVs into the inbox.\n")
    yield
    set_store(None)


def create_app(store: DataStore | None = None) -> FastAPI:
    """Build the app. A pre-loaded ``store`` skips startup loading."""
    app = FastAPI(
        title="Storm Harm Analytics API",
        description="Storm event types ranked by human and economic harm",
        version="1.0.0",
        lifespan=None if store is not None else lifespan,
    )
    if store is not None:
        set_store(store)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(meta_router)
    app.include_router(rankings_router)
    return app


app = create_app()
