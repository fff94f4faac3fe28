"""Tests for flickrcred.config -- merging, required keys, validation."""

from __future__ import annotations

from typing import Any

import pytest

from flickrcred.config import (
    REQUIRED_KEYS,
    find_missing_key,
    load_config,
    merge_config,
)
from flickrcred.exceptions import ConfigError
from flickrcred.exit_codes import EXIT_CONFIG_ERROR
from flickrcred.models import CredentialConfig


# ---------------------------------------------------------------------------
# merge_config
# ---------------------------------------------------------------------------


class TestMergeConfig:
    def test_realm_overrides_plugin(self) -> None:
        merged = merge_config({"perms": "read", "key": "k"}, {"perms": "write"})
        assert merged == {"perms": "write", "key": "k"}

    def test_plugin_only(self) -> None:
        assert merge_config({"key": "k"}) == {"key": "k"}

    def test_none_inputs(self) -> None:
        assert merge_config(None, None) == {}

    def test_inputs_not_mutated(self) -> None:
        plugin = {"key": "k"}
        realm = {"secret": "s"}
        merge_config(plugin, realm)
        assert plugin == {"key": "k"}
        assert realm == {"secret": "s"}


# ---------------------------------------------------------------------------
# find_missing_key
# ---------------------------------------------------------------------------


class TestFindMissingKey:
    def test_complete(self, settings: dict[str, Any]) -> None:
        assert find_missing_key(settings) is None

    @pytest.mark.parametrize("name", REQUIRED_KEYS)
    def test_reports_missing_key(self, settings: dict[str, Any], name: str) -> None:
        del settings[name]
        assert find_missing_key(settings) == name

    @pytest.mark.parametrize("name", REQUIRED_KEYS)
    def test_empty_value_counts_as_missing(
        self, settings: dict[str, Any], name: str
    ) -> None:
        settings[name] = ""
        assert find_missing_key(settings) == name

    def test_first_missing_wins(self) -> None:
        assert find_missing_key({"perms": "read"}) == "key"
        assert find_missing_key({"key": "k"}) == "secret"


# ---------------------------------------------------------------------------
# load_config
# ---------------------------------------------------------------------------


class TestLoadConfig:
    def test_valid(self, settings: dict[str, Any]) -> None:
        config = load_config(settings)
        assert isinstance(config, CredentialConfig)
        assert config.key == "test-key"
        assert config.secret == "test-secret"
        assert config.perms == "read"

    @pytest.mark.parametrize("name", REQUIRED_KEYS)
    def test_missing_key_raises(self, settings: dict[str, Any], name: str) -> None:
        settings.pop(name)
        with pytest.raises(ConfigError, match=f"^{name} not defined$") as exc_info:
            load_config(settings)
        assert exc_info.value.exit_code == EXIT_CONFIG_ERROR

    def test_realm_supplies_missing_key(self) -> None:
        config = load_config({"key": "k", "perms": "read"}, {"secret": "s"})
        assert config.secret == "s"

    def test_realm_perms_overrides_plugin(self, settings: dict[str, Any]) -> None:
        config = load_config(settings, {"perms": "delete"})
        assert config.perms == "delete"

    @pytest.mark.parametrize("perms", ["READ", "admin", "Permission.WRITE"])
    def test_any_perms_string_accepted(self, settings: dict[str, Any], perms: str) -> None:
        settings["perms"] = perms
        assert load_config(settings).perms == perms

    def test_numeric_values_become_strings(self) -> None:
        config = load_config({"key": 98765, "secret": 1234567890123456, "perms": "read"})
        assert config.key == "98765"
        assert config.secret == "1234567890123456"

    def test_non_scalar_value_raises(self, settings: dict[str, Any]) -> None:
        settings["secret"] = ["s"]
        with pytest.raises(ConfigError, match="Invalid Flickr credential config"):
            load_config(settings)

    def test_host_keys_are_ignored(self, settings: dict[str, Any]) -> None:
        config = load_config(settings, {"credential": {"class": "Flickr"}})
        assert config.model_dump() == {
            "key": "test-key",
            "secret": "test-secret",
            "perms": "read",
        }

    def test_config_is_frozen(self, settings: dict[str, Any]) -> None:
        config = load_config(settings)
        with pytest.raises(Exception):
            config.key = "other"  # type: ignore[misc]
