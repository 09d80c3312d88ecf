import json

import pytest

from i18nsmith.core.exceptions import ConfigError
from i18nsmith.utils.config import ApiProvider, ConfigManager


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    monkeypatch.delenv("DEEPL_API_KEY", raising=False)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return tmp_path / "i18nsmith.json"


def test_defaults_when_file_missing(config_path):
    cm = ConfigManager(str(config_path))
    assert cm.extraction_settings.output_dir == "./i18n"
    assert cm.extraction_settings.base_language == "fr"
    assert cm.replace_settings.strategy == "react-i18n"
    assert cm.translation_settings.provider == "deepl"
    assert "node_modules" in cm.extraction_settings.skip_dirs


def test_save_and_reload(config_path):
    cm = ConfigManager(str(config_path))
    cm.set_setting("replace.strategy", "vue-i18n")
    cm.set_api_key(ApiProvider.OPENAI, "sk-test")
    assert cm.save_config()

    # Second save keeps a backup of the first
    assert cm.save_config()
    assert config_path.with_suffix(".json.bak").exists()

    reloaded = ConfigManager(str(config_path))
    assert reloaded.get_setting("replace.strategy") == "vue-i18n"
    assert reloaded.get_api_key(ApiProvider.OPENAI) == "sk-test"


def test_invalid_file_raises(config_path):
    config_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager(str(config_path))


def test_unknown_section_field_raises(config_path):
    config_path.write_text(json.dumps({"replace_settings": {"colour": "blue"}}), encoding="utf-8")
    with pytest.raises(ConfigError):
        ConfigManager(str(config_path))


def test_get_and_set_setting(config_path):
    cm = ConfigManager(str(config_path))
    assert cm.get_setting("translation.request_delay") == 0.1
    assert cm.get_setting("nope.value", "fallback") == "fallback"
    assert cm.get_setting("flat", 1) == 1
    with pytest.raises(ConfigError):
        cm.set_setting("replace.unknown", True)
    cm.reset_to_defaults()
    assert cm.replace_settings.in_place is False


def test_api_key_priority(config_path, monkeypatch):
    cm = ConfigManager(str(config_path))
    cm.set_api_key(ApiProvider.DEEPL, "from-config")
    assert cm.resolve_api_key(ApiProvider.DEEPL) == "from-config"

    monkeypatch.setenv("DEEPL_API_KEY", "from-env")
    assert cm.resolve_api_key(ApiProvider.DEEPL) == "from-env"
    assert cm.resolve_api_key(ApiProvider.DEEPL, "from-cli") == "from-cli"


def test_api_key_errors(config_path, monkeypatch):
    cm = ConfigManager(str(config_path))
    with pytest.raises(ConfigError):
        cm.resolve_api_key(ApiProvider.OPENAI)
    with pytest.raises(ConfigError):
        cm.resolve_api_key(ApiProvider.OPENAI, "")
    monkeypatch.setenv("OPENAI_API_KEY", "")
    with pytest.raises(ConfigError):
        cm.resolve_api_key(ApiProvider.OPENAI)


def test_pseudo_needs_no_key(config_path):
    assert ConfigManager(str(config_path)).resolve_api_key(ApiProvider.PSEUDO) == ""


def test_provider_from_string():
    assert ApiProvider.from_string("DeepL") is ApiProvider.DEEPL
    assert ApiProvider.OPENAI.env_var_name == "OPENAI_API_KEY"
    assert not ApiProvider.PSEUDO.requires_key
    with pytest.raises(ConfigError):
        ApiProvider.from_string("google")
