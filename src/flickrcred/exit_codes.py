"""Numeric process exit codes used by the ``flickrcred`` developer CLI.

Each constant maps to a specific error category and is referenced by the
corresponding :class:`~flickrcred.exceptions.FlickrCredError` subclass.
Library callers never see these; they only matter when an error reaches
:func:`flickrcred.cli.main`.
"""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_AUTH_FAILURE = 3
"""Authentication could not be dispatched or was refused."""

EXIT_REMOTE_ERROR = 5
"""Flickr returned an error or a response that could not be parsed."""

EXIT_CONFIG_ERROR = 78
"""Required configuration is missing or invalid (``EX_CONFIG`` from sysexits.h)."""
