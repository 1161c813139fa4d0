# moroccan_kitchen/db/store.py
# In-process session store (anon_id -> profile / shopping list / favorites)
# Persistence and sync are handled elsewhere; this only holds the live session.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from moroccan_kitchen.models.health import HealthProfile

log = logging.getLogger(__name__)

@dataclass
class UserState:
    profile: Optional[HealthProfile] = None
    shopping_list: List[str] = field(default_factory=list)
    favorites: List[str] = field(default_factory=list)

class SessionStore:
    def __init__(self) -> None:
        self._users: Dict[str, UserState] = {}

    def __len__(self) -> int:
        return len(self._users)

    def _state(self, anon_id: str) -> UserState:
        # writers only
        st = self._users.get(anon_id)
        if st is None:
            st = self._users[anon_id] = UserState()
        return st

    def _peek(self, anon_id: str) -> Optional[UserState]:
        return self._users.get(anon_id)

    def _prune(self, anon_id: str) -> None:
        st = self._users.get(anon_id)
        if st is not None and st.profile is None and not st.shopping_list and not st.favorites:
            del self._users[anon_id]

    # --- profile ----------------------------------------------------------
    def get_profile(self, anon_id: str) -> Optional[HealthProfile]:
        # profiles are frozen models, so handing out the stored object is a snapshot
        st = self._peek(anon_id)
        return st.profile if st else None

    def save_profile(self, anon_id: str, profile: HealthProfile) -> HealthProfile:
        self._state(anon_id).profile = profile
        log.info("profile saved anon_id=%s conditions=%s", anon_id, [c.value for c in profile.conditions])
        return profile

    def clear_profile(self, anon_id: str) -> None:
        st = self._peek(anon_id)
        if st is not None:
            st.profile = None
            self._prune(anon_id)
        log.info("profile cleared anon_id=%s", anon_id)

    # --- shopping list ----------------------------------------------------
    def shopping_list(self, anon_id: str) -> List[str]:
        st = self._peek(anon_id)
        return list(st.shopping_list) if st else []

    def add_to_shopping_list(self, anon_id: str, items: List[str]) -> List[str]:
        """Append items not already listed; returns the ones actually added."""
        current = self.shopping_list(anon_id)
        added: List[str] = []
        for item in items:
            if item not in current and item not in added:
                added.append(item)
        if added:
            self._state(anon_id).shopping_list.extend(added)
        return added

    def remove_from_shopping_list(self, anon_id: str, item: str) -> bool:
        st = self._peek(anon_id)
        if st is None or item not in st.shopping_list:
            return False
        st.shopping_list.remove(item)
        self._prune(anon_id)
        return True

    def clear_shopping_list(self, anon_id: str) -> None:
        st = self._peek(anon_id)
        if st is not None:
            st.shopping_list.clear()
            self._prune(anon_id)

    # --- favorites --------------------------------------------------------
    def favorites(self, anon_id: str) -> List[str]:
        st = self._peek(anon_id)
        return list(st.favorites) if st else []

    def toggle_favorite(self, anon_id: str, recipe_id: str) -> bool:
        """Returns True if the recipe is a favorite after the toggle."""
        st = self._peek(anon_id)
        if st is not None and recipe_id in st.favorites:
            st.favorites.remove(recipe_id)
            self._prune(anon_id)
            return False
        self._state(anon_id).favorites.append(recipe_id)
        return True

    def is_favorite(self, anon_id: str, recipe_id: str) -> bool:
        st = self._peek(anon_id)
        return st is not None and recipe_id in st.favorites

_store: SessionStore | None = None

def init_store() -> SessionStore:
    # called once at startup
    global _store
    if _store is None:
        _store = SessionStore()
    return _store

def get_store() -> SessionStore:
    if _store is None:
        raise RuntimeError("session store is not initialized yet.")
    return _store

def close_store() -> None:
    global _store
    _store = None
