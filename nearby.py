# nearby.py
"""Fixed nearby-district lookup used when a district has no advocates.

Each district maps to a single neighbour; the relation is directed and
only one hop is ever taken.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

logger = logging.getLogger(__name__)

NEARBY_DISTRICTS: dict[str, str] = {
    "Pune": "Mumbai",
    "Mumbai": "Thane",
    "Delhi": "Gurgaon",
    "Bangalore": "Mysore",
    "Chennai": "Coimbatore",
    "Hyderabad": "Secunderabad",
    "Kolkata": "Howrah",
    "Ahmedabad": "Gandhinagar",
    "Jaipur": "Ajmer",
    "Lucknow": "Kanpur",
}

# Anything with this shape can stand in for the table lookup
NearbyLookup = Callable[[str], Optional[str]]


class NearbyDistrictResolver:
    """Look up a district's configured neighbour in a fixed table."""

    def __init__(self, table: Mapping[str, str] | None = None) -> None:
        self._table = dict(NEARBY_DISTRICTS if table is None else table)

    def resolve(self, district: str) -> Optional[str]:
        nearby = self._table.get(district)
        logger.debug("Nearby district for %r: %r", district, nearby)
        return nearby

    __call__ = resolve
