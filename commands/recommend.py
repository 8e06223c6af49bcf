# commands/recommend.py
"""Recommend advocates for a district and a legal issue.

Usage:
    python cli.py recommend Mumbai "dispute over ancestral property"
    python cli.py recommend Pune "divorce" --json
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

from rich.console import Console
from rich.table import Table

from directory import AdvocateDirectory
from models import RecommendationResult
from recommender import Recommender

log = logging.getLogger(__name__)


def render_result(
    result: RecommendationResult,
    district: str,
    console: Console,
    now: datetime | None = None,
) -> None:
    """Print *result* as a table, or the nearby-district suggestion when empty."""
    if now is None:
        now = datetime.now(timezone.utc)

    if result.is_empty:
        console.print(f"No advocates found in {district}.")
        if result.nearby_district:
            console.print(
                f"The closest match is in {result.nearby_district} district. "
                f"Try: recommend {result.nearby_district} \"...\""
            )
        else:
            console.print("No nearby district has advocates for this issue either.")
        return

    table = Table(title=f"Advocates in {district} ({result.practice_area})")
    table.add_column("Name")
    table.add_column("Reg. No.")
    table.add_column("Practice area")
    table.add_column("Experience", justify="right")
    table.add_column("Rating", justify="right")
    for advocate in result.advocates:
        years = advocate.years_of_experience(now)
        table.add_row(
            advocate.name,
            advocate.reg_no,
            advocate.area_of_practice,
            "1 year" if years == 1 else f"{years} years",
            f"{advocate.rating:.1f} ({advocate.review_count} reviews)",
        )
    console.print(table)


def run(
    district: str,
    issue: str,
    advocates_path: str | None = None,
    as_json: bool = False,
    console: Console | None = None,
) -> RecommendationResult:
    """Load the roster, recommend advocates and print them.

    Args:
        district: District to search in (exact match, case-insensitive).
        issue: Free-text description of the legal issue.
        advocates_path: Roster JSON file (defaults to config.ADVOCATES_PATH).
        as_json: Print the result as JSON instead of a table.
        console: Rich console to print to (defaults to stdout).

    Returns:
        The recommendation result.
    """
    console = console or Console()
    directory = AdvocateDirectory.from_file(advocates_path)
    result = Recommender(directory).recommend(district, issue)

    if as_json:
        console.print_json(json.dumps(result.to_dict()))
    else:
        render_result(result, district, console)

    log.info("Recommended %d advocates for %s", len(result.advocates), district)
    return result
