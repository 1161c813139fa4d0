from __future__ import annotations

from conftest import make_profile

from moroccan_kitchen.services.nutrition import (
    age_explanation,
    age_group,
    calorie_label,
    daily_share,
    estimate_macros,
    meal_budget,
)

def test_estimate_macros():
    # 400 * .30 / 4, 400 * .45 / 4, 400 * .25 / 9 = 11.1
    assert estimate_macros(400) == {"protein": 30, "carbs": 45, "fat": 11}

def test_calorie_label_boundaries():
    assert calorie_label(249)["key"] == "light"
    assert calorie_label(250)["key"] == "moderate"
    assert calorie_label(399)["key"] == "moderate"
    assert calorie_label(400)["key"] == "medium"
    assert calorie_label(599)["key"] == "medium"
    assert calorie_label(600)["key"] == "rich"

def test_shares_use_default_target_without_profile():
    assert daily_share(None, 500) == 25
    assert meal_budget(None, 500) == {"mealCalories": 667, "difference": -167}

def test_meal_budget_with_profile(profile):
    # 2507 / 3 = 835.67
    assert meal_budget(profile, 900) == {"mealCalories": 836, "difference": 64}

def test_age_group():
    assert age_group(None) == ""
    assert [age_group(make_profile(age=a)) for a in (8, 15, 25, 40, 60, 70)] == [
        "طفل", "مراهق", "شاب", "بالغ", "كبير", "مسن",
    ]

def test_age_explanation_mentions_target_and_share(profile):
    text = age_explanation(profile, 500)
    assert "2507" in text
    assert "20%" in text         # 500 / 2507
    assert age_explanation(None, 500) == ""
