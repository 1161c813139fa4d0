from __future__ import annotations

import json

import pytest

from moroccan_kitchen.core.config import DEFAULT_CATALOG
from moroccan_kitchen.models.recipe import CATEGORIES, CATEGORY_SALAD
from moroccan_kitchen.services.catalog import CatalogError, find_recipe, load_catalog, parse_catalog

def _record(rid, ingredients, **extra):
    data = {"id": rid, "name": rid, "category": CATEGORY_SALAD, "ingredients": ingredients, "calories": 100, "servings": 2}
    data.update(extra)
    return data

def test_bundled_catalog_is_valid():
    catalog = load_catalog(DEFAULT_CATALOG)
    assert len(catalog) >= 10
    assert len({r.id for r in catalog}) == len(catalog)
    assert all(r.ingredients for r in catalog)
    assert find_recipe(catalog, "harira").name == "الحريرة"
    assert find_recipe(catalog, "nope") is None
    assert {r.category for r in catalog} == set(CATEGORIES)

def test_zero_ingredient_recipe_is_rejected():
    with pytest.raises(CatalogError) as exc:
        parse_catalog([_record("empty", [])])
    assert any("empty" in p and "ingredients" in p for p in exc.value.problems)

def test_every_problem_is_reported():
    raw = [
        _record("ok", ["ملح"]),
        _record("ok", ["سكر"]),
        _record("neg", ["ماء"], calories=0),
        _record("dup-ing", ["ملح", "ملح"]),
    ]
    with pytest.raises(CatalogError) as exc:
        parse_catalog(raw)
    probs = exc.value.problems
    assert len(probs) == 3
    assert any("duplicate-id" in p for p in probs)
    assert any("calories" in p for p in probs)
    assert any("duplicated ingredients" in p for p in probs)

def test_catalog_must_be_a_list():
    with pytest.raises(CatalogError):
        parse_catalog({"recipes": []})

def test_empty_catalog_is_allowed():
    assert parse_catalog([]) == ()

def test_load_catalog_from_file(tmp_path):
    path = tmp_path / "recipes.json"
    path.write_text(json.dumps([_record("a", ["طماطم", "بصل"])], ensure_ascii=False), encoding="utf-8")
    catalog = load_catalog(path)
    assert [r.id for r in catalog] == ["a"]
    assert catalog[0].total_calories == 200
