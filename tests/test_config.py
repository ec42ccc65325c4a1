import pytest

from excuse_engine.config import load_config

_ENV_KEYS = (
    "EXCUSE_ENGINE_LANGUAGE",
    "EXCUSE_ENGINE_PREFERRED_CATEGORIES",
    "EXCUSE_ENGINE_AUTO_PROOF",
    "EXCUSE_ENGINE_VOICE",
    "EXCUSE_ENGINE_EMERGENCY_CONTACTS",
    "EXCUSE_ENGINE_THEME",
    "EXCUSE_ENGINE_SEED",
    "EXCUSE_ENGINE_LOG_LEVEL",
    "EXCUSE_ENGINE_LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_when_file_missing(tmp_path):
    config = load_config(tmp_path / "missing.yaml")
    assert config.default_language == "en"
    assert config.preferred_categories == ["work", "transport", "medical"]
    assert config.auto_proof_generation is True
    assert config.voice_enabled is False
    assert config.theme == "dark"
    assert config.seed is None
    assert config.log_level == "INFO"
    assert config.log_format == "console"


def test_yaml_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "preferences:\n"
        "  language: fr\n"
        "  preferred_categories: [weather, emergency]\n"
        "  auto_proof_generation: false\n"
        "  theme: light\n"
        "seed: 11\n"
        "logging:\n"
        "  level: debug\n"
        "  format: json\n",
        encoding="utf-8",
    )
    config = load_config(path)
    assert config.default_language == "fr"
    assert config.preferred_categories == ["weather", "emergency"]
    assert config.auto_proof_generation is False
    assert config.theme == "light"
    assert config.seed == 11
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"

    prefs = config.preferences()
    assert prefs.default_language == "fr"
    assert prefs.auto_proof_generation is False


def test_env_overrides_yaml(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("preferences:\n  language: fr\n", encoding="utf-8")
    monkeypatch.setenv("EXCUSE_ENGINE_LANGUAGE", "hi")
    monkeypatch.setenv("EXCUSE_ENGINE_PREFERRED_CATEGORIES", "family, space ,personal")
    monkeypatch.setenv("EXCUSE_ENGINE_VOICE", "yes")
    config = load_config(path)
    assert config.default_language == "hi"
    assert config.preferred_categories == ["family", "personal"]
    assert config.voice_enabled is True


def test_invalid_values_fall_back(tmp_path, monkeypatch):
    monkeypatch.setenv("EXCUSE_ENGINE_LANGUAGE", "klingon")
    monkeypatch.setenv("EXCUSE_ENGINE_THEME", "neon")
    monkeypatch.setenv("EXCUSE_ENGINE_LOG_FORMAT", "xml")
    config = load_config(tmp_path / "missing.yaml")
    assert config.default_language == "en"
    assert config.theme == "dark"
    assert config.log_format == "console"


def test_malformed_yaml_is_ignored(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("preferences: [unclosed\n", encoding="utf-8")
    assert load_config(path).default_language == "en"


def test_bad_seed_and_log_level_raise(tmp_path, monkeypatch):
    monkeypatch.setenv("EXCUSE_ENGINE_SEED", "abc")
    with pytest.raises(ValueError):
        load_config(tmp_path / "missing.yaml")

    monkeypatch.delenv("EXCUSE_ENGINE_SEED")
    monkeypatch.setenv("EXCUSE_ENGINE_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping_sections_fall_back(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("preferences: [fr]\nlogging: verbose\nseed: 3\n", encoding="utf-8")
    config = load_config(path)
    assert config.default_language == "en"
    assert config.preferred_categories == ["work", "transport", "medical"]
    assert config.log_level == "INFO"
    assert config.seed == 3
