import copy
import json

from websurf.config.loader import _migrate_config, load_config, save_config
from websurf.config.schema import Config


def test_migrate_legacy_upstream_engine_map() -> None:
    raw = {
        "upstreamSearchEngines": {
            "DuckDuckGo": True,
            "Brave": True,
            "Startpage": False,
            "Mojeek": True,
        }
    }

    migrated = _migrate_config(copy.deepcopy(raw))
    assert "upstreamSearchEngines" not in migrated
    assert migrated["engines"]["brave"] is True
    assert migrated["engines"]["startpage"] is False

    config = Config.model_validate(migrated)
    assert config.engines.enabled() == ["brave", "duckduckgo"]


def test_migrate_does_not_override_explicit_engines() -> None:
    raw = {
        "upstreamSearchEngines": {"Bing": True},
        "engines": {"bing": False},
    }

    migrated = _migrate_config(copy.deepcopy(raw))
    assert migrated["engines"]["bing"] is False


def test_migrate_clamps_legacy_safe_search() -> None:
    assert _migrate_config({"safeSearch": 9})["safeSearch"] == 4
    assert _migrate_config({"safeSearch": -1})["safeSearch"] == 0


def test_default_config_enables_duckduckgo_only() -> None:
    config = Config()
    assert config.engines.enabled() == ["duckduckgo"]
    assert config.safe_search == 1


def test_save_then_load_uses_camel_case(tmp_path) -> None:
    path = tmp_path / "config.json"
    config = Config(request_timeout=5, accept_language="de-DE")
    config.engines.bing = True

    save_config(config, path)
    data = json.loads(path.read_text())
    assert data["requestTimeout"] == 5
    assert data["acceptLanguage"] == "de-DE"
    assert data["engines"]["bing"] is True

    loaded = load_config(path)
    assert loaded == config


def test_load_invalid_config_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text("{not json")
    assert load_config(path) == Config()

    path.write_text(json.dumps({"requestTimeout": -1}))
    assert load_config(path) == Config()


def test_load_missing_config_returns_defaults(tmp_path) -> None:
    assert load_config(tmp_path / "missing.json") == Config()


def test_load_non_object_config_falls_back_to_defaults(tmp_path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps(["duckduckgo"]))
    assert load_config(path) == Config()


def test_save_config_returns_written_path(tmp_path) -> None:
    path = tmp_path / "nested" / "config.json"
    assert save_config(Config(), path) == path
    assert path.is_file()
