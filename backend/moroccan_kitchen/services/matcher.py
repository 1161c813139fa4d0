# moroccan_kitchen/services/matcher.py
# -----------------------------------------------------------------------------
# Ingredient matcher (pure, synchronous)
# - for every recipe ingredient: "have" if any available token passes the predicate
# - matchPercentage = half-up round(100 * matched / total)
# - keeps recipes strictly above the threshold; catalog order is preserved
# - tier bucketing (perfect / near / partial) is display policy, kept separate
# -----------------------------------------------------------------------------

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict

from moroccan_kitchen.models.recipe import Recipe

# (available token, recipe ingredient) -> bool
IngredientPredicate = Callable[[str, str], bool]

def contains_either_way(available: str, ingredient: str) -> bool:
    """Case-normalised substring test in both directions ("بصل" ~ "بصل أحمر").

    Short tokens over-match; pass a stricter predicate where that matters.
    """
    a = available.lower()
    b = ingredient.lower()
    return a in b or b in a

def exact_token(available: str, ingredient: str) -> bool:
    """Strict alternative: whole-string equality after case folding."""
    return available.strip().lower() == ingredient.strip().lower()

def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))

class MatchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    recipe: Recipe
    matchPercentage: int
    matchedIngredients: List[str]
    missingIngredients: List[str]

def match_recipe(
    recipe: Recipe,
    available: Sequence[str],
    predicate: IngredientPredicate = contains_either_way,
) -> MatchResult:
    matched: List[str] = []
    missing: List[str] = []
    for ing in recipe.ingredients:
        if any(predicate(a, ing) for a in available):
            matched.append(ing)
        else:
            missing.append(ing)
    # zero-ingredient recipes are rejected at catalog load
    pct = round_half_up(100 * len(matched) / len(recipe.ingredients))
    return MatchResult(
        recipe=recipe,
        matchPercentage=pct,
        matchedIngredients=matched,
        missingIngredients=missing,
    )

def match_recipes(
    catalog: Iterable[Recipe],
    available: Sequence[str],
    *,
    min_percentage: int = 0,
    predicate: IngredientPredicate = contains_either_way,
) -> List[MatchResult]:
    """Match every recipe against the available ingredients.

    Returns only recipes with at least one matched ingredient whose percentage is
    strictly greater than ``min_percentage``, in catalog order.
    """
    out: List[MatchResult] = []
    for recipe in catalog:
        r = match_recipe(recipe, available, predicate)
        if r.matchedIngredients and r.matchPercentage > min_percentage:
            out.append(r)
    return out

def sort_by_match(results: Iterable[MatchResult]) -> List[MatchResult]:
    """Highest percentage first; ties keep their incoming order."""
    return sorted(results, key=lambda r: r.matchPercentage, reverse=True)

def filter_sweets(results: Iterable[MatchResult]) -> List[MatchResult]:
    return [r for r in results if r.recipe.is_sweet]

# === Tiers ====================================================================

TIER_NAMES = ("perfect", "near", "partial")

@dataclass(frozen=True)
class TierPolicy:
    perfect: int = 100
    near: int = 70
    partial: int = 25

    def tier_of(self, pct: int) -> Optional[str]:
        if pct >= self.perfect:
            return "perfect"
        if pct >= self.near:
            return "near"
        if pct >= self.partial:
            return "partial"
        return None

def bucket_tiers(
    results: Iterable[MatchResult],
    policy: TierPolicy = TierPolicy(),
) -> Dict[str, List[MatchResult]]:
    """Split results into perfect / near / partial; anything below partial is dropped."""
    tiers: Dict[str, List[MatchResult]] = {name: [] for name in TIER_NAMES}
    for r in results:
        name = policy.tier_of(r.matchPercentage)
        if name is not None:
            tiers[name].append(r)
    return tiers
