"""Signed Flickr REST client.

:class:`FlickrClient` covers the two calls the credential needs from
Flickr's legacy authentication API: building the authorization URL a
user is sent to, and executing a signed REST method (``flickr.auth.getToken``).
It is not a general-purpose Flickr library.

Every request carries an ``api_sig`` computed by :meth:`FlickrClient.sign`:
the MD5 hex digest of the shared secret followed by each argument name and
value, concatenated in sorted name order.

No timeout, retry, or error translation is configured here. Transport
errors and non-2xx statuses surface as :mod:`httpx` exceptions.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Mapping
from typing import Any, Optional
from urllib.parse import urlencode

import httpx

logger = logging.getLogger(__name__)

REST_URL = "https://api.flickr.com/services/rest/"
AUTH_URL = "https://api.flickr.com/services/auth/"


class FlickrClient:
    """Minimal client for Flickr's signed REST and auth endpoints.

    Args:
        key: The application's API key.
        secret: The application's shared secret.
        rest_url: REST endpoint that :meth:`execute_method` posts to.
        auth_url: Authorization page :meth:`request_auth_url` points at.

    Example::

        client = FlickrClient("key", "secret")
        url = client.request_auth_url("read")
        response = client.execute_method("flickr.auth.getToken", {"frob": frob})
    """

    def __init__(
        self,
        key: str,
        secret: str,
        rest_url: str = REST_URL,
        auth_url: str = AUTH_URL,
    ) -> None:
        self.key = key
        self.secret = secret
        self.rest_url = rest_url
        self.auth_url = auth_url

    def sign(self, args: Mapping[str, Any]) -> str:
        """Compute the ``api_sig`` for a set of request arguments.

        Args:
            args: Request arguments, excluding ``api_sig`` itself.

        Returns:
            The lowercase hex MD5 digest.
        """
        payload = self.secret + "".join(
            f"{name}{args[name]}" for name in sorted(args)
        )
        return hashlib.md5(payload.encode("utf-8")).hexdigest()

    def _signed(self, args: Mapping[str, Any]) -> dict[str, str]:
        signed = {name: str(value) for name, value in args.items()}
        signed["api_sig"] = self.sign(signed)
        return signed

    def request_auth_url(self, perms: str, frob: Optional[str] = None) -> str:
        """Build the URL of Flickr's authorization page.

        Args:
            perms: Permission level to request (``read``, ``write``, ``delete``).
            frob: Optional frob, for desktop-style flows that obtain one
                up front. Web flows leave it out and receive the frob on
                the callback instead.

        Returns:
            The signed authorization URL.
        """
        args: dict[str, str] = {"api_key": self.key, "perms": str(perms)}
        if frob:
            args["frob"] = frob
        url = f"{self.auth_url}?{urlencode(self._signed(args))}"
        logger.debug("Built Flickr auth URL for perms=%s", perms)
        return url

    def execute_method(
        self, method: str, params: Optional[Mapping[str, Any]] = None
    ) -> httpx.Response:
        """Call a Flickr REST method and return the raw response.

        Args:
            method: The Flickr method name, e.g. ``"flickr.auth.getToken"``.
            params: Method arguments.

        Returns:
            The :class:`httpx.Response`. The body is Flickr's XML ``<rsp>``
            document.

        Raises:
            httpx.HTTPStatusError: On a non-2xx status.
            httpx.HTTPError: On network-level failures.
        """
        args: dict[str, Any] = {"method": method, "api_key": self.key}
        args.update(params or {})

        logger.debug("Calling Flickr method %s", method)
        response = httpx.post(self.rest_url, data=self._signed(args))
        response.raise_for_status()
        return response
