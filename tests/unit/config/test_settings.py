"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from tablesift.config.settings import Settings


class TestSettings:
    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.elasticsearch.client == {"hosts": ["http://localhost:9200"]}
        assert settings.elasticsearch.index == "*"
        assert settings.table.page_length == 10
        assert settings.observability.log_format == "json"

    def test_adapter_options(self, settings: Settings) -> None:
        assert settings.adapter_options() == {
            "client": {"hosts": ["http://localhost:9200"]},
            "index": "products",
        }

    def test_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLESIFT_TABLE__PAGE_LENGTH", "25")
        monkeypatch.setenv("TABLESIFT_ELASTICSEARCH__INDEX", "logs-*")
        monkeypatch.setenv("TABLESIFT_OBSERVABILITY__LOG_LEVEL", "debug")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.table.page_length == 25
        assert settings.elasticsearch.index == "logs-*"
        assert settings.observability.log_level == "debug"

    def test_env_index_list(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TABLESIFT_ELASTICSEARCH__INDEX", '["logs", "events"]')
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.elasticsearch.index == ["logs", "events"]


class TestSettingsFromYaml:
    def test_load(self, tmp_path: Path) -> None:
        config = tmp_path / "tablesift.yaml"
        config.write_text(
            "elasticsearch:\n"
            "  client:\n"
            "    hosts: ['http://es:9200']\n"
            "    request_timeout: 5\n"
            "  index: [products, archive]\n"
            "table:\n"
            "  page_length: 50\n"
        )
        settings = Settings.from_yaml(config)
        assert settings.elasticsearch.client == {"hosts": ["http://es:9200"], "request_timeout": 5}
        assert settings.elasticsearch.index == ["products", "archive"]
        assert settings.table.page_length == 50

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        config = tmp_path / "empty.yaml"
        config.write_text("")
        assert Settings.from_yaml(config).table.page_length == 10

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "nope.yaml")
