# commands/reviews.py
"""Submit and list advocate feedback.

Usage:
    python cli.py feedback add MAH/1234/2010 --user u42 --rating 5 "Very helpful"
    python cli.py feedback list MAH/1234/2010
"""

from __future__ import annotations

import logging

from rich.console import Console

from directory import AdvocateDirectory
from feedback import FeedbackStore
from models import FeedbackRecord

log = logging.getLogger(__name__)


def add(
    reg_no: str,
    user_id: str,
    rating: int,
    comment: str,
    advocates_path: str | None = None,
    feedback_dir: str | None = None,
) -> str:
    """Store one review for an advocate in the roster and return its id."""
    directory = AdvocateDirectory.from_file(advocates_path)
    store = FeedbackStore(feedback_dir, directory=directory)
    feedback_id = store.submit(
        FeedbackRecord(
            user_id=user_id,
            advocate_reg_no=reg_no,
            rating=rating,
            comment=comment,
        )
    )
    return feedback_id


def list_feedback(
    reg_no: str,
    feedback_dir: str | None = None,
    console: Console | None = None,
) -> list[FeedbackRecord]:
    """Print feedback for *reg_no*, newest first (sample reviews if none).

    The header shows the mean of stored reviews only; sample reviews are
    never averaged.
    """
    console = console or Console()
    store = FeedbackStore(feedback_dir)
    mean, count = store.average_rating(reg_no)
    if count:
        console.print(f"{reg_no}: {mean:.1f}/5 from {count} review(s)", markup=False)
    else:
        console.print(f"{reg_no}: no reviews yet", markup=False)

    records = store.get_for_advocate(reg_no)
    for record in records:
        stars = "*" * record.rating
        console.print(
            f"{stars:<5} {record.timestamp:%Y-%m-%d} {record.user_id}: {record.comment}",
            markup=False,
        )
    return records
