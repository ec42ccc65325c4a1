import random

import pytest

from excuse_engine.alerts import create_alert
from excuse_engine.apology import generate_apology
from excuse_engine.errors import InvalidInputError
from excuse_engine.schema import ExcuseContext, UserPreferences
from excuse_engine.store import AppStore

from conftest import make_excuse


def test_add_excuse_prepends():
    store = AppStore()
    store.add_excuse(make_excuse("a"))
    store.add_excuse(make_excuse("b"))
    assert [e.id for e in store.state.excuses] == ["b", "a"]


def test_save_excuse_is_idempotent():
    store = AppStore()
    excuse = make_excuse("a")
    assert store.save_excuse(excuse) is True
    assert store.save_excuse(excuse) is False
    assert [e.id for e in store.state.saved_excuses] == ["a"]


def test_remove_excuse_and_unknown_id():
    store = AppStore()
    store.save_excuse(make_excuse("a"))
    store.save_excuse(make_excuse("b"))
    store.remove_excuse("missing")
    assert len(store.state.saved_excuses) == 2
    store.remove_excuse("a")
    assert [e.id for e in store.state.saved_excuses] == ["b"]


def test_alerts_and_apologies_newest_first():
    store = AppStore()
    store.add_emergency_alert(create_alert("call", "A", "first"))
    store.add_emergency_alert(create_alert("text", "B", "second"))
    store.add_apology(generate_apology("sincere", "short"))
    assert [a.content for a in store.state.emergency_alerts] == ["second", "first"]
    assert len(store.state.apologies) == 1


def test_update_preferences():
    store = AppStore()
    prefs = store.update_preferences(default_language="fr", theme="light", preferred_categories=["weather"])
    assert prefs.default_language == "fr"
    assert prefs.theme == "light"
    assert prefs.preferred_categories == ["weather"]
    assert prefs.auto_proof_generation is True


def test_update_preferences_rejects_bad_values():
    store = AppStore()
    with pytest.raises(InvalidInputError):
        store.update_preferences(colour="blue")
    with pytest.raises(InvalidInputError):
        store.update_preferences(default_language="xx")
    with pytest.raises(InvalidInputError):
        store.update_preferences(theme="neon")
    with pytest.raises(InvalidInputError):
        store.update_preferences(preferred_categories=["work", "space"])
    assert store.preferences == UserPreferences()


def test_update_preferences_requires_real_booleans():
    store = AppStore()
    store.update_preferences(auto_proof_generation=False)
    with pytest.raises(InvalidInputError, match="auto_proof_generation"):
        store.update_preferences(auto_proof_generation="true")
    with pytest.raises(InvalidInputError):
        store.update_preferences(voice_enabled=1)
    assert store.preferences.auto_proof_generation is False
    assert store.preferences.voice_enabled is False


def test_clear_all_keeps_preferences():
    store = AppStore()
    store.update_preferences(theme="light")
    store.add_excuse(make_excuse("a"))
    store.save_excuse(make_excuse("a"))
    store.add_emergency_alert(create_alert("email", "HR", "Meeting"))
    store.clear_all()
    assert store.state.excuses == []
    assert store.state.saved_excuses == []
    assert store.state.emergency_alerts == []
    assert store.state.apologies == []
    assert store.preferences.theme == "light"


def test_search_saved_filters_and_sorts():
    store = AppStore()
    store.save_excuse(make_excuse("a", score=60, category="work", minutes=1, content="Laptop crashed"))
    store.save_excuse(make_excuse("b", score=90, category="medical", minutes=2, title="Health Emergency",
                                  content="Migraine"))
    store.save_excuse(make_excuse("c", score=75, category="family", minutes=3, title="Family Crisis",
                                  content="My LAPTOP fell"))

    assert [e.id for e in store.search_saved()] == ["c", "b", "a"]
    assert [e.id for e in store.search_saved(sort_by="believability")] == ["b", "c", "a"]
    assert [e.id for e in store.search_saved(sort_by="category")] == ["c", "b", "a"]
    assert [e.id for e in store.search_saved(term="laptop")] == ["c", "a"]
    assert [e.id for e in store.search_saved(term="emergency")] == ["b", "a"]
    assert [e.id for e in store.search_saved(term="laptop", category="work")] == ["a"]


def test_search_saved_rejects_unknown_sort():
    with pytest.raises(InvalidInputError):
        AppStore().search_saved(sort_by="random")


def test_generate_uses_preferences(now):
    store = AppStore(UserPreferences(default_language="es", auto_proof_generation=True))
    excuse, proof = store.generate(ExcuseContext("emergency"), rng=random.Random(0), now=now)
    assert excuse.language == "es"
    assert excuse.title == "Situación de Emergencia"
    assert proof is not None and proof.type == "document"
    assert store.state.excuses == [excuse]

    store.update_preferences(auto_proof_generation=False)
    excuse, proof = store.generate(ExcuseContext("work"), language="en", rng=random.Random(0), now=now)
    assert proof is None
    assert excuse.language == "en"
    assert len(store.state.excuses) == 2
