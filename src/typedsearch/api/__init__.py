"""Endpoint catalogue.

Each module describes one API namespace as data. ``REGISTRY`` maps namespace
name to its endpoints, keyed by operation name.
"""

from types import MappingProxyType

from . import ccr, core, indices, ingest, ml

REGISTRY = MappingProxyType(
    {
        "core": core.ENDPOINTS,
        "ingest": ingest.ENDPOINTS,
        "indices": indices.ENDPOINTS,
        "ccr": ccr.ENDPOINTS,
        "ml": ml.ENDPOINTS,
    }
)


def all_endpoints():
    """Yield every descriptor in the catalogue."""
    for endpoints in REGISTRY.values():
        yield from endpoints.values()


__all__ = ["REGISTRY", "all_endpoints", "ccr", "core", "indices", "ingest", "ml"]
