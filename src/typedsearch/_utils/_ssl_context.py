import os
import ssl
from typing import TYPE_CHECKING, Any, Optional, Union

if TYPE_CHECKING:
    from .._config import Config

# Checked in order when no CA bundle is configured explicitly.
_CA_FILE_VARIABLES = ("SSL_CERT_FILE", "REQUESTS_CA_BUNDLE")


def _expanded(path: Optional[str]) -> Optional[str]:
    if not path:
        return None
    return os.path.expanduser(os.path.expandvars(path))


def create_ssl_context(ca_certs: Optional[str] = None) -> ssl.SSLContext:
    """Build the context used to verify cluster certificates.

    An explicit ``ca_certs`` bundle wins. Otherwise the system trust store is
    used through truststore, falling back to certifi plus the usual
    ``SSL_CERT_*`` / ``REQUESTS_CA_BUNDLE`` variables.
    """
    if ca_certs:
        return ssl.create_default_context(cafile=_expanded(ca_certs))

    try:
        import truststore

        return truststore.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
    except ImportError:
        import certifi

        cafile = next(
            (
                _expanded(os.environ.get(name))
                for name in _CA_FILE_VARIABLES
                if os.environ.get(name)
            ),
            None,
        )
        return ssl.create_default_context(
            cafile=cafile or certifi.where(),
            capath=_expanded(os.environ.get("SSL_CERT_DIR")),
        )


def get_httpx_client_kwargs(config: "Config") -> dict[str, Any]:
    """Keyword arguments shared by the sync and async httpx clients."""
    verify: Union[bool, ssl.SSLContext] = (
        create_ssl_context(config.ca_certs) if config.verify_certs else False
    )
    return {
        "verify": verify,
        "timeout": config.timeout,
        "follow_redirects": True,
    }
