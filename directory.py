# directory.py
"""Read-only advocate roster with district and practice-area queries.

The roster is loaded once from a JSON file (a list of advocate objects
with camelCase keys) and kept as an immutable snapshot.  ``reload()``
replaces the snapshot wholesale; there is no incremental update path.

Usage:
    directory = AdvocateDirectory.from_file("data/advocates.json")
    advocates = directory.by_district_and_practice("Mumbai", "Family Law")
"""

from __future__ import annotations

import json
import logging
from typing import Iterable, Optional

import config
from errors import CollaboratorUnavailable, DuplicateRegistrationError
from models import AdvocateRecord
from ranking import enrich_rating

logger = logging.getLogger(__name__)


def load_advocates(path: str) -> list[AdvocateRecord]:
    """Load and parse the advocate roster at *path*.

    Raises:
        CollaboratorUnavailable: If the file cannot be read or an entry is
            malformed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw_records = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise CollaboratorUnavailable("advocate roster", f"{path}: {exc}") from exc

    if not isinstance(raw_records, list):
        raise CollaboratorUnavailable(
            "advocate roster", f"{path}: expected a list of advocates"
        )

    advocates = []
    for i, data in enumerate(raw_records):
        try:
            advocates.append(AdvocateRecord.from_dict(data))
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise CollaboratorUnavailable(
                "advocate roster", f"{path}: entry {i} is malformed ({exc!r})"
            ) from exc

    logger.info("Loaded %d advocates from %s", len(advocates), path)
    return advocates


class AdvocateDirectory:
    """Immutable snapshot of the advocate roster.

    Every query returns a new list preserving roster order.  District
    comparison is a case-insensitive exact match; practice-area comparison
    is a case-insensitive substring match against ``area_of_practice``.
    """

    def __init__(
        self, advocates: Iterable[AdvocateRecord], source: str | None = None
    ) -> None:
        self._source = source
        self._set_snapshot(advocates)

    @classmethod
    def from_file(cls, path: str | None = None) -> AdvocateDirectory:
        path = path or config.ADVOCATES_PATH
        return cls(load_advocates(path), source=path)

    def _set_snapshot(self, advocates: Iterable[AdvocateRecord]) -> None:
        snapshot = tuple(advocates)
        by_reg_no: dict[str, AdvocateRecord] = {}
        for advocate in snapshot:
            if advocate.reg_no in by_reg_no:
                raise DuplicateRegistrationError(advocate.reg_no)
            by_reg_no[advocate.reg_no] = advocate
        self._advocates = snapshot
        self._by_reg_no = by_reg_no

    def reload(self) -> None:
        """Re-read the roster file and swap in the new snapshot."""
        if self._source is None:
            raise ValueError("directory was not loaded from a file")
        self._set_snapshot(load_advocates(self._source))

    @property
    def source(self) -> Optional[str]:
        return self._source

    def __len__(self) -> int:
        return len(self._advocates)

    def __contains__(self, reg_no: object) -> bool:
        return reg_no in self._by_reg_no

    def all(self) -> list[AdvocateRecord]:
        return list(self._advocates)

    def get_by_reg_no(self, reg_no: str) -> Optional[AdvocateRecord]:
        return self._by_reg_no.get(reg_no)

    def by_district(self, district: str) -> list[AdvocateRecord]:
        wanted = district.lower()
        return [a for a in self._advocates if a.district.lower() == wanted]

    def by_practice_area(self, practice_area: str) -> list[AdvocateRecord]:
        wanted = practice_area.lower()
        return [a for a in self._advocates if wanted in a.area_of_practice.lower()]

    def by_district_and_practice(
        self, district: str, practice_area: str
    ) -> list[AdvocateRecord]:
        wanted_district = district.lower()
        wanted_area = practice_area.lower()
        return [
            a for a in self._advocates
            if a.district.lower() == wanted_district
            and wanted_area in a.area_of_practice.lower()
        ]

    def districts(self) -> list[str]:
        return sorted({a.district for a in self._advocates})

    def top_rated(self, limit: int | None = None) -> list[AdvocateRecord]:
        """Return the highest-rated advocates, filling in missing ratings first."""
        if limit is None:
            limit = config.TOP_RATED_LIMIT
        enriched = [enrich_rating(a) for a in self._advocates]
        ranked = sorted(enriched, key=lambda a: a.rating or 0, reverse=True)
        return ranked[:limit]
