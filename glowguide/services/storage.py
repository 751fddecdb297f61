"""Local key-value persistence for profile, looks, favorites, history and counters."""

import logging
from pathlib import Path
from typing import Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models import MakeupLook, UserProfile


logger = logging.getLogger(__name__)

T = TypeVar("T")


PROFILE_KEY = "GlowGuide.UserProfile"
SAVED_LOOKS_KEY = "GlowGuide.SavedLooks"
FAVORITES_KEY = "GlowGuide.FavoriteLooks"
HISTORY_KEY = "GlowGuide.RecentlyViewed"
LOOKS_GENERATED_KEY = "GlowGuide.LooksGenerated"
SAVED_LOOKS_COUNT_KEY = "GlowGuide.SavedLooksCount"


class KeyValueStore(Protocol):
    """Minimal string slot storage, one value per key."""
    
    def get(self, key: str) -> str | None: ...
    
    def set(self, key: str, value: str) -> None: ...
    
    def delete(self, key: str) -> None: ...


class InMemoryStore:
    """Dict backed store, used in tests and for ephemeral sessions."""
    
    def __init__(self, initial: dict[str, str] | None = None):
        self.data: dict[str, str] = dict(initial or {})
    
    def get(self, key: str) -> str | None:
        return self.data.get(key)
    
    def set(self, key: str, value: str) -> None:
        self.data[key] = value
    
    def delete(self, key: str) -> None:
        self.data.pop(key, None)


class FileStore:
    """One file per key under ``directory``; each write overwrites the slot."""
    
    def __init__(self, directory: Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)
    
    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"
    
    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return None
    
    def set(self, key: str, value: str) -> None:
        self._path(key).write_text(value, encoding="utf-8")
    
    def delete(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)


_profile_adapter = TypeAdapter(UserProfile)
_looks_adapter = TypeAdapter(list[MakeupLook])
_ids_adapter = TypeAdapter(set[str])


class LocalStore:
    """Typed access to the persisted records.
    
    Records are independent: there is no transaction spanning two keys.
    A missing or unreadable record reads as absent and is never an error.
    """
    
    def __init__(self, kv: KeyValueStore):
        self.kv = kv
    
    def _load(self, key: str, adapter: TypeAdapter[T]) -> T | None:
        raw = self.kv.get(key)
        if raw is None:
            return None
        try:
            return adapter.validate_json(raw)
        except ValidationError as e:
            logger.warning("Discarding corrupt record %s (%d errors)", key, e.error_count())
            return None
    
    def _save(self, key: str, adapter: TypeAdapter[T], value: T) -> None:
        self.kv.set(key, adapter.dump_json(value).decode("utf-8"))
    
    # Profile
    
    def load_profile(self) -> UserProfile | None:
        return self._load(PROFILE_KEY, _profile_adapter)
    
    def save_profile(self, profile: UserProfile) -> None:
        self._save(PROFILE_KEY, _profile_adapter, profile)
    
    # Saved looks
    
    def load_saved_looks(self) -> list[MakeupLook]:
        return self._load(SAVED_LOOKS_KEY, _looks_adapter) or []
    
    def save_saved_looks(self, looks: list[MakeupLook]) -> None:
        self._save(SAVED_LOOKS_KEY, _looks_adapter, looks)
    
    # Favorites
    
    def load_favorites(self) -> set[str]:
        return self._load(FAVORITES_KEY, _ids_adapter) or set()
    
    def save_favorites(self, ids: set[str]) -> None:
        self._save(FAVORITES_KEY, _ids_adapter, ids)
    
    # History
    
    def load_history(self) -> list[MakeupLook]:
        return self._load(HISTORY_KEY, _looks_adapter) or []
    
    def save_history(self, looks: list[MakeupLook]) -> None:
        self._save(HISTORY_KEY, _looks_adapter, looks)
    
    # Counters
    
    def load_counter(self, key: str) -> int:
        """Read a non-negative counter; anything unreadable counts as 0."""
        raw = self.kv.get(key)
        if raw is None:
            return 0
        try:
            return max(0, int(raw.strip()))
        except ValueError:
            logger.warning("Discarding corrupt counter %s=%r", key, raw)
            return 0
    
    def save_counter(self, key: str, value: int) -> None:
        self.kv.set(key, str(value))
