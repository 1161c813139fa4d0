# moroccan_kitchen/main.py
# FastAPI app setup and routers
# each router declares its own prefix

from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from moroccan_kitchen.api.routes_profile import router as profile_router
from moroccan_kitchen.api.routes_recipes import router as recipes_router
from moroccan_kitchen.api.routes_user_data import favorites_router, shopping_router
from moroccan_kitchen.core.config import settings
from moroccan_kitchen.db.store import close_store, init_store
from moroccan_kitchen.services.catalog import get_catalog

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
log = logging.getLogger(__name__)

app = FastAPI(title="Moroccan Kitchen - API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup() -> None:
    # a broken catalog must stop the app here (CatalogError propagates)
    catalog = get_catalog()
    init_store()
    log.info("startup ready recipes=%d", len(catalog))

@app.on_event("shutdown")
async def on_shutdown() -> None:
    close_store()

@app.get("/")
async def root():
    return {"status": "ok"}

@app.get("/health")
async def health():
    return {"status": "ok", "recipes": len(get_catalog())}

app.include_router(recipes_router)
app.include_router(profile_router)
app.include_router(shopping_router)
app.include_router(favorites_router)
