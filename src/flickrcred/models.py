"""Pydantic models for the Flickr credential configuration.

:class:`CredentialConfig` is the validated, immutable form of the three
settings the credential needs. It is built by
:func:`flickrcred.config.load_config` from the merged plugin and realm
mappings; keys that belong to the host framework (``class``, ``store``,
etc.) are ignored.
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field


class Permission(str, enum.Enum):
    """Permission levels Flickr grants to an application.

    Each level implies the ones before it: ``write`` includes ``read``,
    ``delete`` includes both.
    """

    READ = "read"
    WRITE = "write"
    DELETE = "delete"


class CredentialConfig(BaseModel):
    """Settings for a :class:`~flickrcred.credential.FlickrCredential`.

    Example::

        CredentialConfig(key="abc123", secret="s3cr3t", perms="read")
    """

    model_config = ConfigDict(frozen=True, extra="ignore", coerce_numbers_to_str=True)

    key: str = Field(
        min_length=1, description="API key registered with Flickr"
    )
    secret: str = Field(
        min_length=1, description="Shared secret used to sign API calls"
    )
    perms: str = Field(
        min_length=1,
        description="Permission level requested, normally one of the Permission values",
    )
