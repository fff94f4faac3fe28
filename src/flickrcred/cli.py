"""Developer CLI for checking a Flickr API key.

Registering a Flickr application means configuring a callback URL, which
makes the web login flow awkward to try out. This CLI walks through the
same two legs by hand:

    $ flickrcred login-url --key KEY --secret SECRET --perms read
    https://api.flickr.com/services/auth/?api_key=KEY&perms=read&api_sig=...

    # approve in the browser, copy the frob from the callback URL
    $ flickrcred get-token 72157-abcdef --key KEY --secret SECRET

``--key``, ``--secret`` and ``--perms`` fall back to ``FLICKR_KEY``,
``FLICKR_SECRET`` and ``FLICKR_PERMS``. The :func:`main` function is the
``flickrcred`` console-script entry point.
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from flickrcred import __version__
from flickrcred.credential import FlickrCredential
from flickrcred.exceptions import FlickrCredError
from flickrcred.exit_codes import (
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_REMOTE_ERROR,
)
from flickrcred.models import Permission

app = typer.Typer(
    name="flickrcred",
    help="Try out Flickr web authentication for an API key.",
    no_args_is_help=True,
    add_completion=False,
)

_stdout = Console()
_stderr = Console(stderr=True)

_KEY_OPTION = typer.Option(None, "--key", envvar="FLICKR_KEY", help="Flickr API key.")
_SECRET_OPTION = typer.Option(
    None, "--secret", envvar="FLICKR_SECRET", help="Flickr shared secret."
)
_PERMS_OPTION = typer.Option(
    Permission.READ, "--perms", envvar="FLICKR_PERMS", help="Permission level to request."
)


def _error(message: str) -> None:
    _stderr.print(f"[bold red]Error:[/bold red] {message}")


def _version_callback(value: bool) -> None:
    """Print version and exit when --version is passed."""
    if value:
        typer.echo(f"flickrcred {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
) -> None:
    """Configure logging before every sub-command."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_credential(
    key: Optional[str], secret: Optional[str], perms: Permission
) -> FlickrCredential:
    try:
        return FlickrCredential({"key": key, "secret": secret, "perms": perms.value})
    except FlickrCredError as exc:
        _error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None


@app.command("login-url")
def login_url(
    key: Optional[str] = _KEY_OPTION,
    secret: Optional[str] = _SECRET_OPTION,
    perms: Permission = _PERMS_OPTION,
) -> None:
    """Print the Flickr authorization URL for the API key."""
    credential = _build_credential(key, secret, perms)
    typer.echo(credential.request_auth_url())


@app.command("get-token")
def get_token(
    frob: str = typer.Argument(help="Frob from the Flickr callback URL."),
    key: Optional[str] = _KEY_OPTION,
    secret: Optional[str] = _SECRET_OPTION,
    perms: Permission = _PERMS_OPTION,
    json_output: bool = typer.Option(False, "--json", help="Print JSON."),
) -> None:
    """Exchange a frob and print the Flickr identity it belongs to."""
    credential = _build_credential(key, secret, perms)

    def _identity(identity: dict[str, Any], context: Any) -> dict[str, Any]:
        return identity

    try:
        identity = credential.authenticate({"frob": frob}, _identity)
    except FlickrCredError as exc:
        _error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    except httpx.HTTPError as exc:
        _error(f"Request to Flickr failed: {exc}")
        raise typer.Exit(code=EXIT_REMOTE_ERROR) from None

    if identity is None:
        _error("No frob given")
        raise typer.Exit(code=EXIT_INVALID_USAGE)

    if json_output:
        typer.echo(json.dumps(identity, indent=2, ensure_ascii=False))
        return

    table = Table(title="Flickr identity", show_header=True, header_style="bold cyan")
    table.add_column("Field")
    table.add_column("Value")
    for name, value in identity.items():
        table.add_row(name, str(value))
    _stdout.print(table)


def main() -> None:
    """CLI entry point invoked by the ``flickrcred`` console script.

    Commands turn flickrcred errors into their ``exit_code`` themselves;
    anything else escaping them is reported as a generic failure.
    """
    try:
        app()
    except SystemExit:
        raise
    except KeyboardInterrupt:
        sys.stderr.write("\nCancelled.\n")
        sys.exit(130)
    except Exception as exc:
        _error(f"Unexpected error: {exc}")
        sys.exit(EXIT_GENERIC_FAILURE)
