# ranking.py
"""Eligibility filtering, seniority ordering and rating enrichment.

``rank()`` applies the steps in a fixed order: drop advocates whose
certificate is not valid after *now*, sort by appointment date (earliest
first, stable for same-day appointees), fill in missing ratings, then
truncate.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import date, datetime
from typing import Iterable

import config
from models import AdvocateRecord

logger = logging.getLogger(__name__)


def filter_eligible(
    advocates: Iterable[AdvocateRecord], now: date | datetime
) -> list[AdvocateRecord]:
    """Keep advocates whose certificate expires strictly after *now*."""
    eligible = []
    for advocate in advocates:
        if advocate.is_certificate_valid(now):
            eligible.append(advocate)
        else:
            logger.debug(
                "Skipping %s: certificate expired %s",
                advocate.reg_no,
                advocate.certificate_valid_upto,
            )
    return eligible


def sort_by_seniority(advocates: Iterable[AdvocateRecord]) -> list[AdvocateRecord]:
    return sorted(advocates, key=lambda a: a.date_of_appointment)


def synthesize_rating(reg_no: str) -> tuple[int, int]:
    """Derive a stable filler ``(rating, review_count)`` from a registration number."""
    digest = hashlib.sha256(reg_no.encode("utf-8")).digest()
    rating_span = config.SYNTH_RATING_MAX - config.SYNTH_RATING_MIN + 1
    reviews_span = config.SYNTH_REVIEWS_MAX - config.SYNTH_REVIEWS_MIN + 1
    rating = config.SYNTH_RATING_MIN + digest[0] % rating_span
    review_count = config.SYNTH_REVIEWS_MIN + digest[1] % reviews_span
    return rating, review_count


def enrich_rating(advocate: AdvocateRecord) -> AdvocateRecord:
    """Return *advocate* with any missing rating or review count filled in."""
    if advocate.has_rating():
        return advocate
    rating, review_count = synthesize_rating(advocate.reg_no)
    return advocate.with_rating(
        advocate.rating if advocate.rating is not None else rating,
        advocate.review_count if advocate.review_count is not None else review_count,
    )


def rank(
    candidates: Iterable[AdvocateRecord],
    now: date | datetime,
    limit: int | None = None,
) -> list[AdvocateRecord]:
    """Filter, order, enrich and truncate *candidates*.

    Args:
        candidates: Advocates to rank, in roster order.
        now: The query time, read once by the caller.
        limit: Maximum number returned (defaults to config.MAX_RECOMMENDATIONS).

    Returns:
        At most *limit* enriched advocates, most senior first.
    """
    if limit is None:
        limit = config.MAX_RECOMMENDATIONS

    eligible = filter_eligible(candidates, now)
    ordered = sort_by_seniority(eligible)
    enriched = [enrich_rating(a) for a in ordered]
    return enriched[:limit]
