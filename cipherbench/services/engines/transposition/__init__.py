"""Transposition cipher engines."""

from cipherbench.services.engines.transposition.table_route import TableRouteEngine

__all__ = [
    "TableRouteEngine",
]
