# Shared dependencies (anonymous session cookie, catalog, store)
from __future__ import annotations

import uuid
from typing import Optional, Tuple

from fastapi import Depends, Request, Response

from moroccan_kitchen.db.store import SessionStore, get_store
from moroccan_kitchen.models.health import HealthProfile
from moroccan_kitchen.models.recipe import Recipe
from moroccan_kitchen.services.catalog import get_catalog

COOKIE = "anon_id"
MAX_AGE = 60 * 60 * 24 * 365 * 2  # 2 years

def get_or_set_anon_id(request: Request, response: Response) -> str:
    # issue a cookie if missing, otherwise reuse it
    v = request.cookies.get(COOKIE)
    if not v:
        v = uuid.uuid4().hex
        response.set_cookie(COOKIE, v, max_age=MAX_AGE, httponly=True, samesite="lax")
    return v

def catalog_dep() -> Tuple[Recipe, ...]:
    return get_catalog()

def store_dep() -> SessionStore:
    return get_store()

def profile_snapshot(
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
) -> Optional[HealthProfile]:
    """Profile as it is at request time; the whole request works on this one value."""
    return store.get_profile(anon_id)
