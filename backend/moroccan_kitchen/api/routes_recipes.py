# moroccan_kitchen/api/routes_recipes.py
# ingredients -> match against the catalog -> tiers (+ health score when a profile exists)

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from fastapi import APIRouter, Depends, HTTPException, Query

from moroccan_kitchen.core.config import settings
from moroccan_kitchen.core.deps import catalog_dep, get_or_set_anon_id, profile_snapshot, store_dep
from moroccan_kitchen.db.store import SessionStore
from moroccan_kitchen.models.health import HealthProfile
from moroccan_kitchen.models.recipe import Recipe
from moroccan_kitchen.models.schemas import (
    Assessment,
    MatchCard,
    MatchRequest,
    MatchResponse,
    RecipeCard,
    RecipeDetailOut,
    Verdict,
    clean_tokens,
)
from moroccan_kitchen.services.catalog import find_recipe
from moroccan_kitchen.services.health import daily_calories, health_score, health_warnings, score_verdict
from moroccan_kitchen.services.matcher import (
    TierPolicy,
    bucket_tiers,
    filter_sweets,
    match_recipe,
    match_recipes,
    sort_by_match,
)
from moroccan_kitchen.services.nutrition import (
    age_explanation,
    age_group,
    calorie_label,
    daily_share,
    estimate_macros,
    meal_budget,
)

log = logging.getLogger(__name__)

router = APIRouter(prefix="/recipes", tags=["recipes"])

def _tier_policy() -> TierPolicy:
    return TierPolicy(
        perfect=settings.TIER_PERFECT,
        near=settings.TIER_NEAR,
        partial=settings.TIER_PARTIAL,
    )

def build_assessment(profile: Optional[HealthProfile], recipe: Recipe) -> Assessment:
    """Everything the detail view shows about calories and health for one recipe."""
    score = health_score(profile, recipe.calories, recipe.ingredients)
    budget = meal_budget(profile, recipe.calories)
    return Assessment(
        dailyCalories=daily_calories(profile),
        mealCalories=budget["mealCalories"],
        calorieDifference=budget["difference"],
        dailyShare=daily_share(profile, recipe.calories),
        totalCalories=recipe.total_calories,
        calorieLabel=Verdict(**calorie_label(recipe.calories)),
        macros=estimate_macros(recipe.calories),
        healthScore=score,
        verdict=Verdict(**score_verdict(score)),
        warnings=health_warnings(profile, recipe.calories, recipe.ingredients),
        ageGroup=age_group(profile),
        ageExplanation=age_explanation(profile, recipe.calories),
        hasProfile=profile is not None,
    )

@router.get("", response_model=List[RecipeCard])
async def list_recipes(
    category: Optional[str] = None,
    catalog: Tuple[Recipe, ...] = Depends(catalog_dep),
):
    """Catalog listing (optionally one category)."""
    return [RecipeCard.from_recipe(r) for r in catalog if category is None or r.category == category]

@router.post("/match", response_model=MatchResponse)
async def match(
    payload: MatchRequest,
    catalog: Tuple[Recipe, ...] = Depends(catalog_dep),
    profile: Optional[HealthProfile] = Depends(profile_snapshot),
):
    results = match_recipes(catalog, payload.ingredients, min_percentage=settings.MATCH_MIN_PERCENTAGE)
    if payload.mode == "sweets":
        results = filter_sweets(results)
    if payload.sortByMatch:
        results = sort_by_match(results)

    tiers = bucket_tiers(results, _tier_policy())
    out = {
        name: [
            MatchCard.from_result(
                r,
                health_score(profile, r.recipe.calories, r.recipe.ingredients) if profile else None,
            )
            for r in rs
        ]
        for name, rs in tiers.items()
    }
    total = sum(len(v) for v in out.values())
    log.info(
        "match tokens=%d mode=%s matched=%d displayed=%d",
        len(payload.ingredients), payload.mode, len(results), total,
    )
    log.debug("match tokens=%s", payload.ingredients)
    return MatchResponse(ingredients=payload.ingredients, mode=payload.mode, total=total, tiers=out)

@router.get("/{recipe_id}", response_model=RecipeDetailOut)
async def recipe_detail(
    recipe_id: str,
    ingredients: List[str] = Query([]),
    catalog: Tuple[Recipe, ...] = Depends(catalog_dep),
    anon_id: str = Depends(get_or_set_anon_id),
    store: SessionStore = Depends(store_dep),
    profile: Optional[HealthProfile] = Depends(profile_snapshot),
):
    recipe = find_recipe(catalog, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail=f"recipe not found: {recipe_id}")

    m = match_recipe(recipe, clean_tokens(ingredients))
    shopping = store.shopping_list(anon_id)
    return RecipeDetailOut(
        recipe=recipe,
        matchPercentage=m.matchPercentage,
        matchedIngredients=m.matchedIngredients,
        missingIngredients=m.missingIngredients,
        missingNotInShoppingList=[i for i in m.missingIngredients if i not in shopping],
        isFavorite=store.is_favorite(anon_id, recipe.id),
        assessment=build_assessment(profile, recipe),
    )
