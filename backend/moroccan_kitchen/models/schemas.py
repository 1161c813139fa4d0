# moroccan_kitchen/models/schemas.py
# API payloads (camelCase, same field names as the front-end)
from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from moroccan_kitchen.models.health import HealthProfile, HealthWarning
from moroccan_kitchen.models.recipe import Recipe
from moroccan_kitchen.services.matcher import MatchResult

def clean_tokens(v: Optional[List[str]]) -> List[str]:
    # strip, drop blanks and repeats (order kept)
    out: List[str] = []
    for s in v or []:
        t = str(s).strip()
        if t and t not in out:
            out.append(t)
    return out

# --- recipes / matching -------------------------------------------------------

class MatchRequest(BaseModel):
    ingredients: List[str] = Field(default_factory=list)
    mode: Literal["general", "sweets"] = "general"
    sortByMatch: bool = False

    @field_validator("ingredients", mode="before")
    @classmethod
    def _v_ingredients(cls, v):
        return clean_tokens(v)

class RecipeCard(BaseModel):
    id: str
    name: str
    description: str = ""
    category: str
    calories: int
    servings: int
    cookTime: str = ""
    difficulty: str = ""

    @classmethod
    def from_recipe(cls, r: Recipe) -> "RecipeCard":
        return cls(
            id=r.id,
            name=r.name,
            description=r.description,
            category=r.category,
            calories=r.calories,
            servings=r.servings,
            cookTime=r.cookTime,
            difficulty=r.difficulty,
        )

class MatchCard(BaseModel):
    recipe: RecipeCard
    matchPercentage: int
    matchedIngredients: List[str]
    missingIngredients: List[str]
    healthScore: Optional[int] = None      # only when a profile exists

    @classmethod
    def from_result(cls, r: MatchResult, health_score: Optional[int] = None) -> "MatchCard":
        return cls(
            recipe=RecipeCard.from_recipe(r.recipe),
            matchPercentage=r.matchPercentage,
            matchedIngredients=r.matchedIngredients,
            missingIngredients=r.missingIngredients,
            healthScore=health_score,
        )

class MatchResponse(BaseModel):
    ingredients: List[str]
    mode: str
    total: int                             # displayed (tiered) recipes
    tiers: Dict[str, List[MatchCard]]

class Verdict(BaseModel):
    key: str
    label: str

class Assessment(BaseModel):
    dailyCalories: int
    mealCalories: int
    calorieDifference: int
    dailyShare: int
    totalCalories: int
    calorieLabel: Verdict
    macros: Dict[str, int]
    healthScore: int
    verdict: Verdict
    warnings: List[HealthWarning] = Field(default_factory=list)
    ageGroup: str = ""
    ageExplanation: str = ""
    hasProfile: bool = False

class RecipeDetailOut(BaseModel):
    recipe: Recipe
    matchPercentage: int
    matchedIngredients: List[str]
    missingIngredients: List[str]
    missingNotInShoppingList: List[str]
    isFavorite: bool = False
    assessment: Assessment

# --- profile ------------------------------------------------------------------

class ProfileResponse(BaseModel):
    ok: bool = True
    anonId: str
    profile: Optional[HealthProfile] = None

class CaloriesOut(BaseModel):
    hasProfile: bool
    dailyCalories: int
    mealCalories: int
    ageGroup: str = ""

# --- shopping list / favorites ------------------------------------------------

class ShoppingItemsIn(BaseModel):
    items: List[str] = Field(default_factory=list)

    @field_validator("items", mode="before")
    @classmethod
    def _v_items(cls, v):
        return clean_tokens(v)

class ShoppingListOut(BaseModel):
    items: List[str]
    added: List[str] = Field(default_factory=list)

class FavoritesOut(BaseModel):
    ids: List[str]
    recipes: List[RecipeCard] = Field(default_factory=list)

class FavoriteToggleOut(BaseModel):
    recipeId: str
    isFavorite: bool
