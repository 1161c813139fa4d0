from __future__ import annotations

from conftest import make_profile

from moroccan_kitchen.db.store import SessionStore

def test_reads_do_not_create_sessions():
    store = SessionStore()
    assert store.get_profile("u1") is None
    assert store.shopping_list("u1") == []
    assert store.favorites("u1") == []
    assert store.is_favorite("u1", "harira") is False
    assert store.remove_from_shopping_list("u1", "ملح") is False
    store.clear_profile("u1")
    store.clear_shopping_list("u1")
    assert store.add_to_shopping_list("u1", []) == []
    assert len(store) == 0

def test_emptied_session_is_dropped():
    store = SessionStore()
    store.save_profile("u1", make_profile())
    store.add_to_shopping_list("u1", ["ملح"])
    store.toggle_favorite("u1", "harira")
    assert len(store) == 1

    store.clear_profile("u1")
    assert len(store) == 1
    store.clear_shopping_list("u1")
    assert len(store) == 1
    assert store.toggle_favorite("u1", "harira") is False
    assert len(store) == 0

def test_sessions_are_isolated():
    store = SessionStore()
    store.add_to_shopping_list("u1", ["ملح", "ثوم", "ملح"])
    assert store.shopping_list("u1") == ["ملح", "ثوم"]
    assert store.shopping_list("u2") == []
    assert store.remove_from_shopping_list("u1", "ملح") is True
    assert store.shopping_list("u1") == ["ثوم"]
