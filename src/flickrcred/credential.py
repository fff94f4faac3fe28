"""Flickr credential: log users in through Flickr's frob exchange.

This module provides :class:`FlickrCredential`, which implements the
``flickr`` credential type. The flow has two legs:

1. :meth:`~FlickrCredential.request_auth_url` builds the Flickr page the
   user is redirected to. After approving the application, Flickr sends
   the user back to the application's callback URL with a ``frob``.
2. :meth:`~FlickrCredential.authenticate` exchanges that frob through
   ``flickr.auth.getToken``, flattens the ``<auth>`` element into a single
   mapping with :func:`flatten_auth`, and lets the host's ``find_user``
   callback turn it into a user.

The credential holds only its configuration and a client, so one instance
can serve concurrent requests.

See Also:
    :class:`flickrcred.base.CredentialPlugin` for the base interface.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Optional

from flickrcred.base import CredentialPlugin, FindUser
from flickrcred.client import FlickrClient
from flickrcred.config import REQUIRED_KEYS, load_config
from flickrcred.exceptions import ResponseError
from flickrcred.models import CredentialConfig
from flickrcred.parser import parse_response

logger = logging.getLogger(__name__)

GET_TOKEN_METHOD = "flickr.auth.getToken"
FROB_PARAM = "frob"

_SCALAR_TYPES = (str, bytes, int, float, bool)


def flatten_auth(auth: Mapping[str, Any]) -> dict[str, Any]:
    """Hoist the fields of ``auth["user"]`` up to the ``auth`` level.

    Example::

        >>> flatten_auth({"token": "T", "perms": "read",
        ...               "user": {"nsid": "123", "username": "alice"}})
        {'token': 'T', 'perms': 'read', 'nsid': '123', 'username': 'alice'}

    A user field with the same name as an auth field replaces it. The
    input is not modified.

    Args:
        auth: The parsed ``<auth>`` element.

    Returns:
        A new flat dict without a ``user`` key.
    """
    flat = {name: value for name, value in auth.items() if name != "user"}
    user = auth.get("user")
    if isinstance(user, Mapping):
        flat.update(user)
    return flat


def _is_user_object(value: Any) -> bool:
    return value is not None and not isinstance(value, _SCALAR_TYPES)


class FlickrCredential(CredentialPlugin):
    """Authenticate users against Flickr's frob-based auth API.

    Args:
        config: Plugin-level settings. Must provide ``key``, ``secret``
            and ``perms`` unless *realm_config* does.
        realm_config: Realm-level settings, overriding *config* key by key.
        client: Flickr client to use. Defaults to a
            :class:`~flickrcred.client.FlickrClient` built from the
            configured key and secret.

    Raises:
        ConfigError: If ``key``, ``secret`` or ``perms`` is missing
            (reported in that order).
    """

    def __init__(
        self,
        config: Optional[Mapping[str, Any]] = None,
        realm_config: Optional[Mapping[str, Any]] = None,
        client: Optional[FlickrClient] = None,
    ) -> None:
        self._config: CredentialConfig = load_config(config, realm_config)
        self._client = client or FlickrClient(self._config.key, self._config.secret)

    @property
    def credential_type(self) -> str:
        return "flickr"

    @property
    def config(self) -> CredentialConfig:
        return self._config

    @property
    def key(self) -> str:
        return self._config.key

    @property
    def secret(self) -> str:
        return self._config.secret

    @property
    def perms(self) -> str:
        return self._config.perms

    @property
    def client(self) -> FlickrClient:
        return self._client

    def request_auth_url(self, context: Any = None) -> str:
        """Return the Flickr URL to send the user to.

        Args:
            context: The host's request object. Unused; accepted so hosts
                can call both URL methods with the same arguments.

        Returns:
            The signed authorization URL for the configured permission level.
        """
        return self._client.request_auth_url(self.perms)

    def authenticate_flickr_url(self, context: Any = None) -> str:
        """Alias for :meth:`request_auth_url`, kept for older callers."""
        return self.request_auth_url(context)

    def authenticate(
        self,
        params: Mapping[str, Any],
        find_user: FindUser,
        context: Any = None,
    ) -> Optional[Any]:
        """Exchange the request's frob and resolve the Flickr user.

        Args:
            params: The request's query or form parameters. Only ``frob``
                is read; a list of values (as from ``parse_qs``) uses the
                first one.
            find_user: Host callback receiving the flattened identity
                (``token``, ``perms``, ``nsid``, ``username``,
                ``fullname``) and *context*.
            context: The host's request object.

        Returns:
            The object returned by *find_user*, or ``None`` if there is no
            frob on the request or *find_user* returned no user object.

        Raises:
            ResponseError: If the response cannot be parsed or lacks an
                ``<auth>`` element.
            FlickrAPIError: If Flickr rejects the frob.
            httpx.HTTPError: On transport failures, unchanged.
        """
        frob = params.get(FROB_PARAM)
        # parse_qs-style mappings hold a list of values per name.
        if isinstance(frob, (list, tuple)):
            frob = frob[0] if frob else None
        if not frob:
            logger.debug("No frob on request, nothing to authenticate")
            return None

        response = self._client.execute_method(GET_TOKEN_METHOD, {FROB_PARAM: frob})
        data = parse_response(response.content)

        auth = data.get("auth")
        if not isinstance(auth, Mapping):
            raise ResponseError(f"{GET_TOKEN_METHOD} response has no <auth> element")

        identity = flatten_auth(auth)
        logger.info(
            "Exchanged frob for Flickr user %s (perms=%s)",
            identity.get("nsid"),
            identity.get("perms"),
        )

        user = find_user(identity, context)
        if not _is_user_object(user):
            logger.debug("No user resolved for Flickr user %s", identity.get("nsid"))
            return None
        return user

    def validate_config(self, config: Mapping[str, Any]) -> list[str]:
        """Report every required key missing from *config*.

        Args:
            config: A configuration mapping (plugin and realm already merged).

        Returns:
            One ``"<key> not defined"`` message per missing key.
        """
        return [f"{name} not defined" for name in REQUIRED_KEYS if not config.get(name)]
