# moroccan_kitchen/api/routes_user_data.py
# Shopping list / favorites for the current session

from __future__ import annotations

import logging
from typing import List, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from moroccan_kitchen.core.deps import catalog_dep, get_or_set_anon_id, store_dep
from moroccan_kitchen.db.store import SessionStore
from moroccan_kitchen.models.recipe import Recipe
from moroccan_kitchen.models.schemas import (
    FavoriteToggleOut,
    FavoritesOut,
    RecipeCard,
    ShoppingItemsIn,
    ShoppingListOut,
    clean_tokens,
)
from moroccan_kitchen.services.catalog import find_recipe
from moroccan_kitchen.services.matcher import match_recipe

log = logging.getLogger(__name__)

shopping_router = APIRouter(prefix="/shopping", tags=["shopping"])
favorites_router = APIRouter(prefix="/favorites", tags=["favorites"])

def _recipe_or_404(catalog: Tuple[Recipe, ...], recipe_id: str) -> Recipe:
    recipe = find_recipe(catalog, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"recipe not found: {recipe_id}")
    return recipe

# ------------------------------
# Shopping list
# ------------------------------

@shopping_router.get("", response_model=ShoppingListOut)
async def get_shopping_list(
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    return ShoppingListOut(items=store.shopping_list(anon_id))

@shopping_router.post("", response_model=ShoppingListOut)
async def add_items(
    payload: ShoppingItemsIn,
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    added = store.add_to_shopping_list(anon_id, payload.items)
    return ShoppingListOut(items=store.shopping_list(anon_id), added=added)

@shopping_router.post("/missing/{recipe_id}", response_model=ShoppingListOut)
async def add_missing(
    recipe_id: str,
    ingredients: List[str] = Query([]),
    catalog: Tuple[Recipe, ...] = Depends(catalog_dep),
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    """Add every ingredient of the recipe not covered by ``ingredients``."""
    recipe = _recipe_or_404(catalog, recipe_id)
    missing = match_recipe(recipe, clean_tokens(ingredients)).missingIngredients
    added = store.add_to_shopping_list(anon_id, missing)
    log.info("shopping add-missing recipe=%s added=%d", recipe_id, len(added))
    return ShoppingListOut(items=store.shopping_list(anon_id), added=added)

@shopping_router.delete("/items/{item}", response_model=ShoppingListOut)
async def remove_item(
    item: str,
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    if not store.remove_from_shopping_list(anon_id, item):
        raise HTTPException(status_code=404, detail=f"not in shopping list: {item}")
    return ShoppingListOut(items=store.shopping_list(anon_id))

@shopping_router.delete("", response_model=ShoppingListOut)
async def clear_items(
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    store.clear_shopping_list(anon_id)
    return ShoppingListOut(items=[])

# ------------------------------
# Favorites
# ------------------------------

@favorites_router.get("", response_model=FavoritesOut)
async def list_favorites(
    catalog: Tuple[Recipe, ...] = Depends(catalog_dep),
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    ids = store.favorites(anon_id)
    recipes = [RecipeCard.from_recipe(r) for r in (find_recipe(catalog, i) for i in ids) if r is not None]
    return FavoritesOut(ids=ids, recipes=recipes)

@favorites_router.post("/{recipe_id}", response_model=FavoriteToggleOut)
async def toggle_favorite(
    recipe_id: str,
    catalog: Tuple[Recipe, ...] = Depends(catalog_dep),
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
):
    _recipe_or_404(catalog, recipe_id)
    return FavoriteToggleOut(recipeId=recipe_id, isFavorite=store.toggle_favorite(anon_id, recipe_id))
