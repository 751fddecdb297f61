"""Tests for the local key-value persistence."""

from glowguide.models import SkinTone, UserProfile
from glowguide.services import FileStore, InMemoryStore, LocalStore
from glowguide.services.storage import (
    FAVORITES_KEY,
    HISTORY_KEY,
    LOOKS_GENERATED_KEY,
    PROFILE_KEY,
    SAVED_LOOKS_KEY,
)
from conftest import make_look


class TestLocalStore:
    
    def test_missing_records_read_as_absent(self, store):
        assert store.load_profile() is None
        assert store.load_saved_looks() == []
        assert store.load_favorites() == set()
        assert store.load_history() == []
        assert store.load_counter(LOOKS_GENERATED_KEY) == 0
    
    def test_profile_round_trip(self, store):
        profile = UserProfile(skin_tone=SkinTone.RICH, saved_look_ids=["x"])
        
        store.save_profile(profile)
        
        assert store.load_profile() == profile
    
    def test_looks_round_trip(self, store):
        looks = [make_look("One"), make_look("Two").with_image("https://example.com/2.png")]
        
        store.save_saved_looks(looks)
        store.save_history(looks[:1])
        
        restored = store.load_saved_looks()
        assert [l.model_dump() for l in restored] == [l.model_dump() for l in looks]
        assert store.load_history()[0].look_name == "One"
    
    def test_favorites_round_trip(self, store):
        store.save_favorites({"a", "b"})
        
        assert store.load_favorites() == {"a", "b"}
    
    def test_corrupt_records_read_as_absent(self):
        kv = InMemoryStore({
            PROFILE_KEY: "{not json",
            SAVED_LOOKS_KEY: '[{"look_name": "missing everything"}]',
            FAVORITES_KEY: "42",
            HISTORY_KEY: "",
            LOOKS_GENERATED_KEY: "many",
        })
        store = LocalStore(kv)
        
        assert store.load_profile() is None
        assert store.load_saved_looks() == []
        assert store.load_favorites() == set()
        assert store.load_history() == []
        assert store.load_counter(LOOKS_GENERATED_KEY) == 0
    
    def test_negative_counter_clamped(self):
        store = LocalStore(InMemoryStore({LOOKS_GENERATED_KEY: "-4"}))
        
        assert store.load_counter(LOOKS_GENERATED_KEY) == 0
    
    def test_records_are_independent_slots(self, kv, store):
        store.save_profile(UserProfile())
        store.save_counter(LOOKS_GENERATED_KEY, 3)
        
        assert set(kv.data) == {PROFILE_KEY, LOOKS_GENERATED_KEY}
        assert kv.data[LOOKS_GENERATED_KEY] == "3"


class TestFileStore:
    
    def test_one_file_per_key(self, tmp_path):
        kv = FileStore(tmp_path / "state")
        
        kv.set("GlowGuide.UserProfile", "{}")
        
        assert (tmp_path / "state" / "GlowGuide.UserProfile.json").read_text() == "{}"
        assert kv.get("GlowGuide.UserProfile") == "{}"
        assert kv.get("GlowGuide.SavedLooks") is None
    
    def test_overwrite_and_delete(self, tmp_path):
        kv = FileStore(tmp_path)
        kv.set("k", "one")
        kv.set("k", "two")
        
        assert kv.get("k") == "two"
        
        kv.delete("k")
        kv.delete("k")
        assert kv.get("k") is None
    
    def test_persists_across_instances(self, tmp_path):
        LocalStore(FileStore(tmp_path)).save_counter(LOOKS_GENERATED_KEY, 2)
        
        assert LocalStore(FileStore(tmp_path)).load_counter(LOOKS_GENERATED_KEY) == 2
