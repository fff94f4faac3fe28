"""flickrcred -- Flickr authentication credential for web applications.

This package lets a web application delegate user login to Flickr's
frob-based token exchange. The host framework constructs a
:class:`~flickrcred.credential.FlickrCredential` from its configuration,
redirects users to the URL it builds, and calls
:meth:`~flickrcred.credential.FlickrCredential.authenticate` when Flickr
redirects back with a ``frob``.

Typical usage::

    from flickrcred import FlickrCredential

    credential = FlickrCredential(
        {"key": "app-key", "secret": "app-secret", "perms": "read"}
    )
    redirect_to(credential.request_auth_url())

    # ... in the callback handler:
    user = credential.authenticate(request.args, find_user, request)

Modules:
    credential: The credential adapter and response flattening.
    realm: Minimal realm binding for hosts without one of their own.
    client: Signed Flickr REST client built on httpx.
    parser: Lenient XML-to-mapping conversion for Flickr responses.
    config: Configuration merging and required-key validation.
    models: Pydantic models for the credential configuration.
    exceptions: Exception hierarchy with exit-code mapping.
    cli: Developer CLI for checking an API key.
"""

from flickrcred.credential import FlickrCredential, flatten_auth
from flickrcred.realm import Realm, RealmManager

__version__ = "0.1.0"

__all__ = [
    "FlickrCredential",
    "Realm",
    "RealmManager",
    "flatten_auth",
]
