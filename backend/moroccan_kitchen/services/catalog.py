# moroccan_kitchen/services/catalog.py
# Static recipe catalog: load once, validate, read-only afterwards

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List, Optional, Tuple

from pydantic import ValidationError

from moroccan_kitchen.core.config import settings
from moroccan_kitchen.models.recipe import Recipe

log = logging.getLogger(__name__)

class CatalogError(ValueError):
    """Catalog data is malformed. Carries every problem found, not just the first."""

    def __init__(self, problems: List[str]):
        self.problems = problems
        super().__init__(f"invalid recipe catalog ({len(problems)} problems): " + "; ".join(problems[:5]))

def _problems(raw: List[Any]) -> Tuple[List[Recipe], List[str]]:
    recipes: List[Recipe] = []
    probs: List[str] = []
    seen: set = set()
    for i, item in enumerate(raw):
        rid = item.get("id") if isinstance(item, dict) else None
        where = f"#{i}({rid})" if rid else f"#{i}"
        try:
            r = Recipe.model_validate(item)
        except ValidationError as e:
            for err in e.errors():
                loc = ".".join(str(x) for x in err["loc"]) or "record"
                probs.append(f"{where} {loc}: {err['msg']}")
            continue
        if r.id in seen:
            probs.append(f"{where} duplicate-id")
            continue
        seen.add(r.id)
        recipes.append(r)
    return recipes, probs

def parse_catalog(raw: Any) -> Tuple[Recipe, ...]:
    """Validate a decoded catalog (JSON array of recipe records)."""
    if not isinstance(raw, list):
        raise CatalogError(["catalog must be a JSON array of recipes"])
    recipes, probs = _problems(raw)
    if probs:
        raise CatalogError(probs)
    return tuple(recipes)

def load_catalog(path: Path) -> Tuple[Recipe, ...]:
    with open(path, encoding="utf-8") as f:
        raw = json.load(f)
    recipes = parse_catalog(raw)
    log.info("catalog loaded path=%s recipes=%d", path, len(recipes))
    return recipes

@lru_cache(maxsize=1)
def get_catalog() -> Tuple[Recipe, ...]:
    return load_catalog(settings.catalog_path())

def find_recipe(catalog: Tuple[Recipe, ...], recipe_id: str) -> Optional[Recipe]:
    for r in catalog:
        if r.id == recipe_id:
            return r
    return None
