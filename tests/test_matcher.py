from __future__ import annotations

from conftest import make_recipe

from moroccan_kitchen.services.matcher import (
    TierPolicy,
    bucket_tiers,
    contains_either_way,
    exact_token,
    filter_sweets,
    match_recipe,
    match_recipes,
    round_half_up,
    sort_by_match,
)

def test_contains_either_way_is_bidirectional():
    assert contains_either_way("بصل", "بصل أحمر")
    assert contains_either_way("بصل أحمر", "بصل")
    assert contains_either_way("Onion", "red onion")
    assert not contains_either_way("ثوم", "بصل")

def test_three_of_four_is_near(catalog):
    r = match_recipe(catalog[0], ["A", "B", "C"])
    assert r.matchPercentage == 75
    assert r.matchedIngredients == ["A", "B", "C"]
    assert r.missingIngredients == ["D"]
    assert TierPolicy().tier_of(r.matchPercentage) == "near"

def test_percentage_rounds_half_up():
    recipe = make_recipe("eight", list("ABCDEFGH"))
    assert match_recipe(recipe, list("ABCDE")).matchPercentage == 63   # 62.5
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2

def test_missing_keeps_recipe_order(catalog):
    r = match_recipe(catalog[3], ["زبدة", "دقيق"])
    assert r.matchedIngredients == ["دقيق", "زبدة"]
    assert r.missingIngredients == ["بيض", "سكر", "حليب"]

def test_invariants_hold_for_every_result(catalog):
    results = match_recipes(catalog, ["A", "سكر", "طماطم", "نعناع"])
    assert results
    for r in results:
        assert 0 <= r.matchPercentage <= 100
        assert len(r.matchedIngredients) + len(r.missingIngredients) == len(r.recipe.ingredients)

def test_catalog_order_and_determinism(catalog):
    available = ["سكر", "A", "طماطم"]
    first = match_recipes(catalog, available)
    second = match_recipes(catalog, available)
    assert first == second
    assert [r.recipe.id for r in first] == ["abcd", "salad", "tea", "cake"]

def test_empty_inputs_give_empty_result(catalog):
    assert match_recipes(catalog, []) == []
    assert match_recipes([], ["A"]) == []

def test_zero_match_recipes_are_excluded(catalog):
    ids = [r.recipe.id for r in match_recipes(catalog, ["طماطم"])]
    assert ids == ["salad"]

def test_min_percentage_is_strict(catalog):
    # abcd: 1/4 = 25%
    assert [r.recipe.id for r in match_recipes(catalog, ["A"], min_percentage=24)] == ["abcd"]
    assert match_recipes(catalog, ["A"], min_percentage=25) == []

def test_predicate_can_be_replaced():
    recipe = make_recipe("onion", ["بصل أحمر", "ملح"])
    assert match_recipe(recipe, ["بصل"]).matchPercentage == 50
    assert match_recipe(recipe, ["بصل"], predicate=exact_token).matchPercentage == 0
    assert match_recipes([recipe], ["بصل"], predicate=exact_token) == []

def test_bucket_tiers_boundaries():
    recipes = [make_recipe(str(n), [f"x{k}x" for k in range(n)]) for n in (1, 4, 10, 15)]
    # 100%, 3/4=75%, 3/10=30%, 3/15=20%
    available = ["x0x", "x1x", "x2x"]
    tiers = bucket_tiers(match_recipes(recipes, available))
    assert [r.recipe.id for r in tiers["perfect"]] == ["1"]
    assert [r.recipe.id for r in tiers["near"]] == ["4"]
    assert [r.recipe.id for r in tiers["partial"]] == ["10"]

def test_bucket_tiers_policy_is_overridable():
    recipes = [make_recipe("five", list("ABCDE"))]
    results = match_recipes(recipes, ["A"])          # 20%
    assert bucket_tiers(results)["partial"] == []
    loose = bucket_tiers(results, TierPolicy(partial=10))
    assert [r.recipe.id for r in loose["partial"]] == ["five"]

def test_sort_by_match_is_stable(catalog):
    # abcd 25%, tea 25%, cake 20%
    results = match_recipes(catalog, ["A", "سكر"])
    ordered = sort_by_match(results)
    assert [r.recipe.id for r in ordered] == ["abcd", "tea", "cake"]

def test_filter_sweets(catalog):
    results = match_recipes(catalog, ["سكر", "طماطم"])
    assert [r.recipe.id for r in filter_sweets(results)] == ["tea", "cake"]
