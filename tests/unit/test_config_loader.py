"""
Unit Tests for ConfigLoader.

Test Aspects Covered:
    ✅ Business Logic: Config loading, profile merging
    ✅ Error Handling: Invalid values, missing files
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from prospect_screener.config.loader import (
    CONFIG_ENV_VAR,
    ConfigLoader,
    load_config,
    merge_configs,
)
from prospect_screener.config.models import EngineConfig
from prospect_screener.domain.enums import (
    ContactType,
    GuestPostFilter,
    SortDirection,
    SortKey,
)


class TestConfigLoader:
    """Test cases for ConfigLoader."""

    def test_loads_sample_yaml(self, sample_config_path: Path) -> None:
        """
        SCENARIO: Sample YAML configuration file
        EXPECTED: EngineConfig with the file's values
        """
        config = load_config(sample_config_path)

        assert isinstance(config, EngineConfig)
        assert config.default_criteria.min_da == 10
        assert config.default_sort.key is SortKey.DOMAIN_AUTHORITY
        assert config.default_sort.direction is SortDirection.DESC
        assert config.audit.verbose is False

    def test_applies_defaults(self) -> None:
        """
        SCENARIO: Minimal config
        EXPECTED: DA 0-80, all selectors, DA descending
        """
        config = ConfigLoader().load_from_dict({"version": "1.0"})

        assert config.default_criteria.min_da == 0
        assert config.default_criteria.max_da == 80
        assert config.default_criteria.accepts_guest_posts is GuestPostFilter.ALL
        assert config.default_sort.direction is SortDirection.DESC
        assert config.stats.scope == "filtered"
        assert config.export.delimiter == ","

    def test_no_path_returns_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

        assert ConfigLoader().load() == EngineConfig()

    def test_env_var_path(
        self, monkeypatch: pytest.MonkeyPatch, sample_config_path: Path
    ) -> None:
        monkeypatch.setenv(CONFIG_ENV_VAR, str(sample_config_path))

        config = ConfigLoader().load()

        assert config.default_criteria.min_da == 10

    def test_profile_overlay(self, fixtures_path: Path) -> None:
        """
        SCENARIO: Base file plus high_authority profile
        EXPECTED: Profile values win, untouched base values survive
        """
        loader = ConfigLoader(base_path=fixtures_path)

        config = loader.load("sample_config.yaml", profile="high_authority")

        assert config.default_criteria.min_da == 50
        assert config.default_criteria.max_da == 80
        assert config.default_criteria.accepts_guest_posts is GuestPostFilter.YES
        assert config.stats.scope == "pool"

    def test_yaml_boolean_selector(self, tmp_path: Path) -> None:
        """
        SCENARIO: Unquoted yes in YAML parses as a boolean
        EXPECTED: Still understood as the "yes" selector
        """
        path = tmp_path / "config.yaml"
        path.write_text("default_criteria:\n  accepts_guest_posts: yes\n  contact_type: email\n")

        config = ConfigLoader().load(path)

        assert config.default_criteria.accepts_guest_posts is GuestPostFilter.YES
        assert config.default_criteria.contact_type is ContactType.EMAIL

    def test_loads_json(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"default_sort": {"key": "organic_traffic", "direction": "asc"}}))

        config = ConfigLoader(base_path=tmp_path).load("config.json")

        assert config.default_sort.key is SortKey.ORGANIC_TRAFFIC
        assert config.default_sort.direction is SortDirection.ASC

    def test_validates_invalid_config(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("stats:\n  scope: everything\n")

        with pytest.raises(ValidationError):
            ConfigLoader().load(path)

    def test_rejects_multi_character_delimiter(self) -> None:
        with pytest.raises(ValidationError):
            ConfigLoader().load_from_dict({"export": {"delimiter": ";;"}})

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=tmp_path).load("nope.yaml")

    def test_missing_profile_raises(self, fixtures_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            ConfigLoader(base_path=fixtures_path).load("sample_config.yaml", profile="nope")


class TestMergeConfigs:
    """Test cases for merge_configs."""

    def test_deep_merge(self) -> None:
        base = {"stats": {"scope": "filtered"}, "export": {"delimiter": ",", "include_header": True}}
        overlay = {"export": {"delimiter": ";"}}

        merged = merge_configs(base, overlay)

        assert merged == {
            "stats": {"scope": "filtered"},
            "export": {"delimiter": ";", "include_header": True},
        }
        assert base["export"]["delimiter"] == ","
