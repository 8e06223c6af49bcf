# recommender.py
"""Advocate recommendations for a district and a free-text legal issue.

Flow for one ``recommend()`` call:

    1. Look up advocates in the district.  None -> return an empty result
       carrying the nearby-district suggestion (if any); no classification
       or ranking happens.
    2. Classify the issue text into a practice area.
    3. Narrow the district's advocates to that practice area, falling back
       to the whole district when nothing matches.
    4. Rank: drop expired certificates, most senior first, fill in
       missing ratings, keep the top N.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

import config
from directory import AdvocateDirectory
from errors import CollaboratorUnavailable, InputValidationError
from models import RecommendationResult
from nearby import NearbyDistrictResolver, NearbyLookup
from parsers.issue_classifier import matched_keyword
from ranking import rank

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Recommender:
    """Recommend advocates from a directory snapshot.

    All collaborators are passed in so the engine can run against an
    in-memory roster and a fixed clock.
    """

    def __init__(
        self,
        directory: AdvocateDirectory,
        nearby: Optional[NearbyLookup] = None,
        clock: Callable[[], datetime] = _utc_now,
        limit: int | None = None,
    ) -> None:
        self._directory = directory
        self._nearby = nearby if nearby is not None else NearbyDistrictResolver()
        self._clock = clock
        self._limit = limit if limit is not None else config.MAX_RECOMMENDATIONS

    def recommend(
        self, district: str, issue_text: str, now: datetime | None = None
    ) -> RecommendationResult:
        """Return up to ``limit`` ranked advocates for *district* and *issue_text*.

        Raises:
            InputValidationError: If district or issue text is blank.
            CollaboratorUnavailable: If the directory cannot be queried.
        """
        if not district or not district.strip():
            raise InputValidationError("district", "a district is required")
        if not issue_text or not issue_text.strip():
            raise InputValidationError("issue", "an issue description is required")

        if now is None:
            now = self._clock()

        try:
            in_district = self._directory.by_district(district)
        except OSError as exc:
            raise CollaboratorUnavailable("advocate roster", str(exc)) from exc

        if not in_district:
            nearby = self._nearby(district)
            logger.info(
                "No advocates in %s; nearby suggestion: %s", district, nearby
            )
            return RecommendationResult(advocates=(), nearby_district=nearby)

        practice_area, keyword = matched_keyword(issue_text)
        logger.debug(
            "Classified issue as %s (keyword: %r)", practice_area, keyword
        )

        try:
            candidates = self._directory.by_district_and_practice(
                district, practice_area
            )
        except OSError as exc:
            raise CollaboratorUnavailable("advocate roster", str(exc)) from exc

        if not candidates:
            logger.info(
                "No %s advocates in %s; using all %d district advocates",
                practice_area,
                district,
                len(in_district),
            )
            candidates = in_district

        ranked = rank(candidates, now, limit=self._limit)
        logger.info(
            "Recommending %d of %d candidates in %s for %s",
            len(ranked),
            len(candidates),
            district,
            practice_area,
        )
        return RecommendationResult(
            advocates=tuple(ranked),
            nearby_district=None,
            practice_area=practice_area,
        )


def recommend(
    district: str,
    issue_text: str,
    directory: AdvocateDirectory | None = None,
) -> RecommendationResult:
    """Recommend advocates using the configured roster file."""
    if directory is None:
        directory = AdvocateDirectory.from_file()
    return Recommender(directory).recommend(district, issue_text)
