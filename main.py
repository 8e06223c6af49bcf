#!/usr/bin/env python3
"""Search for an advocate the way the web app's search page does.

Recommends advocates for a district and issue, optionally follows the
nearby-district suggestion once, then asks the legal assistant about the
issue.

Usage:
    python main.py Mumbai "my landlord refuses to return the deposit"
    python main.py -v Pune "divorce and child custody" --follow-nearby
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from rich.console import Console

from directory import AdvocateDirectory
from errors import AdvocateDirectoryError
from http_client import LegalAssistantClient
from log_setup import setup_logging
from models import RecommendationResult
from recommender import Recommender

logger = logging.getLogger(__name__)


async def run_search(
    district: str,
    issue: str,
    advocates_path: str | None = None,
    follow_nearby: bool = False,
    assistant: LegalAssistantClient | None = None,
) -> tuple[str, RecommendationResult, str]:
    """Recommend advocates and fetch an assistant answer for one search.

    Args:
        district: District the user searched in.
        issue: Free-text description of the legal issue.
        advocates_path: Roster JSON file (defaults to config.ADVOCATES_PATH).
        follow_nearby: If the district has no advocates, search its
            nearby district once instead.
        assistant: Client to use; a new one is opened when omitted.

    Returns:
        ``(district searched, recommendation result, assistant answer)``.
    """
    recommender = Recommender(AdvocateDirectory.from_file(advocates_path))

    logger.info("=== Recommend: %s ===", district)
    result = recommender.recommend(district, issue)

    if result.is_empty and follow_nearby and result.nearby_district:
        district = result.nearby_district
        logger.info("=== Recommend (nearby): %s ===", district)
        result = recommender.recommend(district, issue)

    logger.info("=== Ask assistant ===")
    if assistant is not None:
        answer = await assistant.generate(issue)
    else:
        async with LegalAssistantClient() as client:
            answer = await client.generate(issue)

    return district, result, answer


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Find advocates for a legal issue and get general guidance",
    )
    parser.add_argument("district", help='District name (e.g. "Mumbai")')
    parser.add_argument("issue", help="Free-text description of the legal issue")
    parser.add_argument(
        "--advocates",
        default=None,
        help="Path to the advocate roster JSON (defaults to config.ADVOCATES_PATH)",
    )
    parser.add_argument(
        "--follow-nearby",
        action="store_true",
        default=False,
        help="Search the nearby district when the district has no advocates",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Enable verbose (DEBUG) logging",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose, command_name="search")

    from commands.recommend import render_result

    try:
        district, result, answer = asyncio.run(
            run_search(
                args.district,
                args.issue,
                advocates_path=args.advocates,
                follow_nearby=args.follow_nearby,
            )
        )
    except AdvocateDirectoryError as exc:
        print(f"Error: {exc}")
        raise SystemExit(1)

    console = Console()
    render_result(result, district, console)
    console.print()
    console.print(answer, markup=False)


if __name__ == "__main__":
    main()
