# Recipe catalog record (static, read-only)
from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator

# categories as they appear in the catalog
CATEGORY_MAIN = "أطباق رئيسية"
CATEGORY_SOUP = "شوربات"
CATEGORY_SALAD = "سلطات"
CATEGORY_BREAD = "مخبوزات"
CATEGORY_DESSERT = "حلويات"
CATEGORY_BEVERAGE = "مشروبات"

CATEGORIES = (
    CATEGORY_MAIN,
    CATEGORY_SOUP,
    CATEGORY_SALAD,
    CATEGORY_BREAD,
    CATEGORY_DESSERT,
    CATEGORY_BEVERAGE,
)
SWEETS_CATEGORIES = frozenset({CATEGORY_DESSERT, CATEGORY_BEVERAGE})

class Recipe(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str = ""
    category: str
    ingredients: List[str]
    calories: int = Field(..., gt=0)       # per serving
    servings: int = Field(..., gt=0)
    cookTime: str = ""
    difficulty: str = ""
    instructions: List[str] = Field(default_factory=list)
    tips: List[str] = Field(default_factory=list)

    @field_validator("ingredients")
    @classmethod
    def _v_ingredients(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("recipe has no ingredients")
        dup = sorted({x for x in v if v.count(x) > 1})
        if dup:
            raise ValueError(f"duplicated ingredients: {', '.join(dup)}")
        return v

    @property
    def total_calories(self) -> int:
        return self.calories * self.servings

    @property
    def is_sweet(self) -> bool:
        return self.category in SWEETS_CATEGORIES
