"""Realms -- bind a credential to the host's user lookup.

A *realm* pairs a :class:`~flickrcred.base.CredentialPlugin` with the
``find_user`` callback that turns a verified identity into one of the
host application's users. :class:`RealmManager` keeps realms by name so
several login strategies can coexist, with one marked as the default.

Hosts that already have their own realm concept only need
:class:`~flickrcred.credential.FlickrCredential`; this module is for
applications that don't.

Example::

    manager = RealmManager()
    manager.register(
        Realm("flickr", FlickrCredential(settings), find_user=users.find_or_create)
    )
    redirect_to(manager.get_realm().request_auth_url())
    ...
    user = manager.authenticate(request.args, request)
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional

from flickrcred.base import CredentialPlugin, FindUser
from flickrcred.exceptions import AuthError


class Realm:
    """A named credential plus the callback that resolves its users.

    Args:
        name: Realm name, unique within a :class:`RealmManager`.
        credential: The credential that verifies requests.
        find_user: Host callback ``(identity, context) -> user or None``.
    """

    def __init__(
        self, name: str, credential: CredentialPlugin, find_user: FindUser
    ) -> None:
        self.name = name
        self.credential = credential
        self.find_user = find_user

    def authenticate(
        self, params: Mapping[str, Any], context: Any = None
    ) -> Optional[Any]:
        """Authenticate the request through this realm's credential."""
        return self.credential.authenticate(params, self.find_user, context)

    def request_auth_url(self, context: Any = None) -> str:
        """Return the credential's login URL.

        Raises:
            AuthError: If the credential has no redirect step.
        """
        build_url = getattr(self.credential, "request_auth_url", None)
        if build_url is None:
            raise AuthError(
                f"Credential '{self.credential.credential_type}' of realm "
                f"'{self.name}' has no login URL"
            )
        return build_url(context)


class RealmManager:
    """Registry and dispatcher for realms.

    The first registered realm becomes the default unless another one is
    registered with ``default=True``.
    """

    def __init__(self) -> None:
        self._realms: dict[str, Realm] = {}
        self._default: Optional[str] = None

    @property
    def default_realm(self) -> Optional[str]:
        return self._default

    def register(self, realm: Realm, default: bool = False) -> None:
        """Register a realm, replacing any realm with the same name.

        Args:
            realm: The realm to register.
            default: Make this the default realm.
        """
        self._realms[realm.name] = realm
        if default or self._default is None:
            self._default = realm.name

    def get_realm(self, name: Optional[str] = None) -> Realm:
        """Retrieve a realm by name, or the default realm.

        Args:
            name: Realm name. ``None`` selects the default realm.

        Returns:
            The matching :class:`Realm`.

        Raises:
            AuthError: If no realm with that name is registered.
        """
        if name is None:
            name = self._default
        realm = self._realms.get(name) if name is not None else None
        if realm is None:
            available = ", ".join(sorted(self._realms)) or "(none)"
            raise AuthError(
                f"No realm named '{name}'. Available realms: {available}"
            )
        return realm

    def authenticate(
        self,
        params: Mapping[str, Any],
        context: Any = None,
        realm: Optional[str] = None,
    ) -> Optional[Any]:
        """Authenticate a request through the named (or default) realm.

        Returns:
            The resolved user, or ``None``.

        Raises:
            AuthError: If the realm is unknown.
        """
        return self.get_realm(realm).authenticate(params, context)

    def list_realms(self) -> list[str]:
        """Return the names of all registered realms, sorted."""
        return sorted(self._realms)
