"""Abstract base class for credential plugins.

A credential plugin verifies whatever the user presented on a request and
hands the resulting identity to the host framework's user lookup. The
host supplies that lookup as a :data:`FindUser` callable; the plugin never
stores users itself.

To implement a new credential, subclass :class:`CredentialPlugin`, set
:attr:`~CredentialPlugin.credential_type`, and implement
:meth:`~CredentialPlugin.authenticate`.

See Also:
    :mod:`flickrcred.realm` for binding a plugin to a user lookup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable, Optional

FindUser = Callable[[dict[str, Any], Any], Optional[Any]]
"""Host callback ``(identity, context) -> user or None``.

*identity* is the flat mapping produced by the credential, *context* is
whatever request object the host passed to ``authenticate``.
"""


class CredentialPlugin(ABC):
    """Base class for credential plugins."""

    @property
    @abstractmethod
    def credential_type(self) -> str:
        """Return the unique identifier of this credential (e.g. ``"flickr"``)."""
        ...

    @abstractmethod
    def authenticate(
        self,
        params: Mapping[str, Any],
        find_user: FindUser,
        context: Any = None,
    ) -> Optional[Any]:
        """Verify the request and resolve it to a user.

        Args:
            params: The current request's query or form parameters.
            find_user: Host callback that maps an identity to a user.
            context: The host's request object, passed through to
                *find_user*.

        Returns:
            The user object, or ``None`` when no authentication was
            attempted or no user matched.
        """
        ...

    def validate_config(self, config: Mapping[str, Any]) -> list[str]:
        """Validate a configuration mapping before use.

        Args:
            config: The merged configuration to check.

        Returns:
            A list of error message strings. Empty means valid.
        """
        return []
