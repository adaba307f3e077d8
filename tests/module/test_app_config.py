import json
import os
from pathlib import Path

import pytest

from module.AppConfig import AppConfig


class TestAppConfigPaths:
    def test_get_config_path_prefers_data_dir_in_portable_mode(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANGSWITCH_DATA_DIR", "/tmp/data")
        monkeypatch.setenv("LANGSWITCH_APP_DIR", "/tmp/app")

        assert AppConfig.get_config_path() == os.path.join("/tmp/data", "app_config.json")

    def test_get_config_path_uses_app_resource_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LANGSWITCH_DATA_DIR", raising=False)
        monkeypatch.setenv("LANGSWITCH_APP_DIR", "/tmp/app")

        assert AppConfig.get_config_path() == os.path.join("/tmp/app", "resource", "app_config.json")

    def test_get_i18n_path_is_relative_to_app_dir(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LANGSWITCH_APP_DIR", "/tmp/app")

        assert AppConfig().get_i18n_path() == os.path.join("/tmp/app", "resource/i18n")
        assert AppConfig(i18n_dir="/srv/i18n").get_i18n_path() == "/srv/i18n"


class TestAppConfigBehavior:
    def test_load_returns_defaults_when_file_missing(self, fs) -> None:
        del fs
        config = AppConfig().load("/workspace/config/missing.json")

        assert config.app_language == ""
        assert config.theme == AppConfig.Theme.LIGHT
        assert config.expert_mode is False

    def test_load_applies_known_fields_only(self, fs) -> None:
        del fs
        path = Path("/workspace/config/app_config.json")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"app_language": "fr", "unknown_field": "ignored"}), encoding="utf-8")

        config = AppConfig().load(str(path))

        assert config.app_language == "fr"
        assert not hasattr(config, "unknown_field")

    def test_load_repairs_slightly_corrupted_file(self, fs) -> None:
        del fs
        path = Path("/workspace/config/app_config.json")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text('{"app_language": "es", "expert_mode": true,}', encoding="utf-8")

        config = AppConfig().load(str(path))

        assert config.app_language == "es"
        assert config.expert_mode is True

    def test_load_ignores_non_dict_payload(self, fs) -> None:
        del fs
        path = Path("/workspace/config/app_config.json")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")

        config = AppConfig().load(str(path))

        assert config.app_language == ""

    def test_load_logs_error_when_read_fails(self, fs, monkeypatch: pytest.MonkeyPatch, dummy_logger) -> None:
        del fs
        path = Path("/workspace/config/app_config.json")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("{}", encoding="utf-8")

        def raise_os_error(path: str, *, repair: bool = False) -> dict:
            del path, repair
            raise OSError("permission denied")

        monkeypatch.setattr("module.AppConfig.JSONTool.load_file", raise_os_error)

        config = AppConfig().load(str(path))

        assert config.app_language == ""
        assert [level for level, _ in dummy_logger.records] == ["error"]

    def test_save_and_load_round_trip(self, fs) -> None:
        del fs
        path = "/workspace/config/app_config.json"

        AppConfig(app_language="es", theme=AppConfig.Theme.DARK).save(path)
        config = AppConfig().load(path)

        assert config.app_language == "es"
        assert config.theme == AppConfig.Theme.DARK
