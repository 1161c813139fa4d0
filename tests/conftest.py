from __future__ import annotations

from typing import List

import pytest
from fastapi.testclient import TestClient

from moroccan_kitchen.main import app
from moroccan_kitchen.models.health import HealthProfile
from moroccan_kitchen.models.recipe import (
    CATEGORY_BEVERAGE,
    CATEGORY_DESSERT,
    CATEGORY_MAIN,
    CATEGORY_SALAD,
    Recipe,
)

def make_recipe(rid: str, ingredients: List[str], calories: int = 300, category: str = CATEGORY_MAIN) -> Recipe:
    return Recipe(
        id=rid,
        name=rid,
        category=category,
        ingredients=ingredients,
        calories=calories,
        servings=2,
    )

def make_profile(**overrides) -> HealthProfile:
    data = dict(
        age=30,
        gender="male",
        weight=70,
        height=170,
        activityLevel="moderate",
        goal="maintain",
        conditions=[],
        allergies=[],
    )
    data.update(overrides)
    return HealthProfile(**data)

@pytest.fixture
def profile() -> HealthProfile:
    return make_profile()

@pytest.fixture
def catalog() -> List[Recipe]:
    return [
        make_recipe("abcd", ["A", "B", "C", "D"]),
        make_recipe("salad", ["طماطم", "خيار", "بصل أحمر", "قزبر"], calories=120, category=CATEGORY_SALAD),
        make_recipe("tea", ["شاي أخضر", "نعناع", "سكر", "ماء"], calories=80, category=CATEGORY_BEVERAGE),
        make_recipe("cake", ["دقيق", "بيض", "سكر", "زبدة", "حليب"], calories=420, category=CATEGORY_DESSERT),
    ]

@pytest.fixture
def client():
    # startup/shutdown run inside the context manager, giving each test a fresh store
    with TestClient(app) as c:
        yield c
