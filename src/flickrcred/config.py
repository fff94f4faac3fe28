"""Configuration merging and validation for the Flickr credential.

The host framework hands the credential two mappings: plugin-level
defaults and the realm's own settings. This module merges them (realm
wins), checks that every required key is present, and produces a
validated :class:`~flickrcred.models.CredentialConfig`.

* :func:`merge_config` -- pure key-by-key merge.
* :func:`find_missing_key` -- first required key that is missing or empty.
* :func:`load_config` -- merge + validate, raising
  :class:`~flickrcred.exceptions.ConfigError` on failure.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from pydantic import ValidationError

from flickrcred.exceptions import ConfigError
from flickrcred.models import CredentialConfig

REQUIRED_KEYS: tuple[str, ...] = ("key", "secret", "perms")
"""Settings every credential needs, in the order they are checked."""


def merge_config(
    plugin_config: Optional[Mapping[str, Any]],
    realm_config: Optional[Mapping[str, Any]] = None,
) -> dict[str, Any]:
    """Merge plugin defaults with realm settings.

    Precedence (high to low):
        1. Realm configuration
        2. Plugin configuration

    Neither input is modified.

    Args:
        plugin_config: Plugin-level defaults, or ``None``.
        realm_config: Realm-specific overrides, or ``None``.

    Returns:
        A new dict holding the merged settings.
    """
    merged: dict[str, Any] = dict(plugin_config or {})
    merged.update(realm_config or {})
    return merged


def find_missing_key(config: Mapping[str, Any]) -> Optional[str]:
    """Return the first required key that is missing or empty in *config*.

    Args:
        config: A merged configuration mapping.

    Returns:
        The name of the first required key (in :data:`REQUIRED_KEYS`
        order) whose value is absent or falsy, or ``None`` when all are
        present.
    """
    for name in REQUIRED_KEYS:
        if not config.get(name):
            return name
    return None


def load_config(
    plugin_config: Optional[Mapping[str, Any]],
    realm_config: Optional[Mapping[str, Any]] = None,
) -> CredentialConfig:
    """Merge, check and validate the credential configuration.

    Args:
        plugin_config: Plugin-level defaults.
        realm_config: Realm-specific overrides.

    Returns:
        The validated :class:`~flickrcred.models.CredentialConfig`.

    Raises:
        ConfigError: If a required key is missing (the message names it)
            or a value is not a string or number.
    """
    merged = merge_config(plugin_config, realm_config)

    missing = find_missing_key(merged)
    if missing is not None:
        raise ConfigError(f"{missing} not defined")

    try:
        return CredentialConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigError(f"Invalid Flickr credential config: {exc}") from exc
