"""Exception hierarchy for flickrcred.

All exceptions inherit from :class:`FlickrCredError`, which carries an
``exit_code`` attribute mapped to a constant from
:mod:`flickrcred.exit_codes`. The developer CLI catches
``FlickrCredError`` and exits with the appropriate code.

Transport failures are deliberately absent from this hierarchy: errors
raised by :mod:`httpx` during the token exchange reach the host framework
unchanged.

Subclass hierarchy::

    FlickrCredError (exit 1)
    +-- ConfigError         (exit 78)
    +-- AuthError           (exit 3)
    +-- ResponseError       (exit 5)
        +-- FlickrAPIError  (exit 5)
"""

from __future__ import annotations

from flickrcred.exit_codes import (
    EXIT_AUTH_FAILURE,
    EXIT_CONFIG_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_REMOTE_ERROR,
)


class FlickrCredError(Exception):
    """Base exception for all flickrcred errors.

    Args:
        message: Human-readable error description.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class ConfigError(FlickrCredError):
    """Raised when a required setting (``key``, ``secret``, ``perms``) is missing or invalid."""

    exit_code = EXIT_CONFIG_ERROR


class AuthError(FlickrCredError):
    """Raised when authentication cannot be dispatched (e.g. an unknown realm)."""

    exit_code = EXIT_AUTH_FAILURE


class ResponseError(FlickrCredError):
    """Raised when a Flickr response body cannot be parsed."""

    exit_code = EXIT_REMOTE_ERROR


class FlickrAPIError(ResponseError):
    """Raised when Flickr answers with ``stat="fail"``.

    Args:
        code: Flickr's numeric error code, as sent.
        message: Flickr's error message.
    """

    def __init__(self, code: str, message: str):
        super().__init__(f"Flickr API error {code}: {message}")
        self.code = code
        self.api_message = message
