"""
Profile Store Tests

Tests the in-memory and JSON-file profile stores used to persist profiles
between build_profile / record_interaction calls.

Run:
----
    pytest tests/test_profile_store.py -v
"""

import json

import pytest

from preference_engine import record_interaction, record_search
from preference_engine.services import InMemoryProfileStore, JsonProfileStore

from .conftest import FIXED_NOW


@pytest.fixture
def learned_profile(gin_profile, make_event):
    profile = record_interaction(gin_profile, make_event("completed", complexity=0.9), now=FIXED_NOW)
    return record_search(profile, "Negroni", now=FIXED_NOW)


class TestInMemoryProfileStore:
    def test_missing_user(self):
        assert InMemoryProfileStore().get("nobody") is None

    def test_save_and_get(self, gin_profile):
        store = InMemoryProfileStore()
        store.save("u1", gin_profile)
        assert store.get("u1") == gin_profile
        assert len(store) == 1

    def test_save_replaces(self, gin_profile, learned_profile):
        store = InMemoryProfileStore()
        store.save("u1", gin_profile)
        store.save("u1", learned_profile)
        assert store.get("u1") == learned_profile

    def test_delete(self, gin_profile):
        store = InMemoryProfileStore()
        store.save("u1", gin_profile)
        assert store.delete("u1") is True
        assert store.delete("u1") is False
        assert store.get("u1") is None


class TestJsonProfileStore:
    def test_persists_across_instances(self, tmp_path, learned_profile):
        path = tmp_path / "profiles.json"
        JsonProfileStore(path).save("u1", learned_profile)

        reloaded = JsonProfileStore(path).get("u1")
        assert reloaded == learned_profile
        assert reloaded.behavioral_scores.flavor("citrus") == 15
        assert reloaded.interactions.records[0].timestamp == FIXED_NOW
        assert reloaded.interactions.searched_terms == ["negroni"]

    def test_file_layout(self, tmp_path, gin_profile):
        path = tmp_path / "profiles.json"
        JsonProfileStore(path).save("u1", gin_profile)
        data = json.loads(path.read_text())
        assert list(data["profiles"]) == ["u1"]
        assert data["profiles"]["u1"]["favorite_spirit"] == "gin"

    def test_creates_parent_directory(self, tmp_path, gin_profile):
        path = tmp_path / "nested" / "dir" / "profiles.json"
        JsonProfileStore(path).save("u1", gin_profile)
        assert path.exists()

    def test_delete_rewrites_file(self, tmp_path, gin_profile):
        path = tmp_path / "profiles.json"
        store = JsonProfileStore(path)
        store.save("u1", gin_profile)
        store.save("u2", gin_profile)
        assert store.delete("u1") is True
        assert store.delete("missing") is False
        assert JsonProfileStore(path).get("u1") is None
        assert JsonProfileStore(path).get("u2") == gin_profile

    def test_corrupt_file_backed_up(self, tmp_path, gin_profile):
        path = tmp_path / "profiles.json"
        path.write_text("{not json")
        store = JsonProfileStore(path)
        assert store.get("u1") is None
        assert store.backup_path.read_text() == "{not json"

        store.save("u1", gin_profile)
        assert store.backup_path.read_text() == "{not json"
        assert JsonProfileStore(path).get("u1") == gin_profile

    def test_non_mapping_file_backed_up(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps({"profiles": ["u1"]}))
        store = JsonProfileStore(path)
        assert not path.exists()
        assert json.loads(store.backup_path.read_text()) == {"profiles": ["u1"]}

    def test_invalid_profile_does_not_drop_others(self, tmp_path, gin_profile, learned_profile):
        path = tmp_path / "profiles.json"
        store = JsonProfileStore(path)
        store.save("alice", learned_profile)
        store.save("bob", gin_profile)
        data = json.loads(path.read_text())
        data["profiles"]["bob"]["skill_level"] = "wizard"
        path.write_text(json.dumps(data))

        reopened = JsonProfileStore(path)
        assert reopened.get("bob") is None
        assert reopened.get("alice") == learned_profile
        reopened.save("carol", gin_profile)

        saved = json.loads(path.read_text())["profiles"]
        assert sorted(saved) == ["alice", "bob", "carol"]
        assert saved["bob"]["skill_level"] == "wizard"
        assert JsonProfileStore(path).get("alice") == learned_profile

    def test_unknown_score_tag_skipped_on_load(self, tmp_path, gin_profile):
        path = tmp_path / "profiles.json"
        JsonProfileStore(path).save("u1", gin_profile)
        data = json.loads(path.read_text())
        data["profiles"]["u1"]["behavioral_scores"]["spirit_scores"] = {"mezcal": 40.0}
        path.write_text(json.dumps(data))
        assert JsonProfileStore(path).get("u1") is None

    def test_invalid_profile_replaced_by_save(self, tmp_path, gin_profile):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps({"profiles": {"u1": {"skill_level": "wizard"}}}))
        store = JsonProfileStore(path)
        store.save("u1", gin_profile)
        assert JsonProfileStore(path).get("u1") == gin_profile

    def test_invalid_profile_deletable(self, tmp_path):
        path = tmp_path / "profiles.json"
        path.write_text(json.dumps({"profiles": {"u1": {"skill_level": "wizard"}}}))
        assert JsonProfileStore(path).delete("u1") is True
        assert json.loads(path.read_text()) == {"profiles": {}}

    def test_empty_user_id_rejected(self, tmp_path, gin_profile):
        with pytest.raises(ValueError):
            JsonProfileStore(tmp_path / "profiles.json").save("  ", gin_profile)
