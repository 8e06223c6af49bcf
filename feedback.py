# feedback.py
"""Append-only store of user ratings and comments per advocate.

Each advocate's feedback lives in ``{feedback_dir}/{slug}.jsonl``, one
JSON object per line, where ``slug`` is the slugified registration
number (registration numbers contain ``/``).
"""

from __future__ import annotations

import json
import logging
import os
import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from typing import Optional

from slugify import slugify

import config
from directory import AdvocateDirectory
from errors import CollaboratorUnavailable, InputValidationError
from models import FeedbackRecord

log = logging.getLogger(__name__)


def sample_feedback(
    advocate_reg_no: str, now: datetime | None = None
) -> list[FeedbackRecord]:
    """Canned reviews shown for advocates nobody has reviewed yet."""
    if now is None:
        now = datetime.now(timezone.utc)
    return [
        FeedbackRecord(
            user_id="user1",
            advocate_reg_no=advocate_reg_no,
            rating=5,
            comment="Excellent advocate! Very knowledgeable and helped me win my case.",
            timestamp=now - timedelta(days=7),
        ),
        FeedbackRecord(
            user_id="user2",
            advocate_reg_no=advocate_reg_no,
            rating=4,
            comment="Good communication and reasonable fees. Would recommend.",
            timestamp=now - timedelta(days=30),
        ),
    ]


def validate_feedback(
    feedback: FeedbackRecord, directory: AdvocateDirectory | None = None
) -> None:
    """Raise InputValidationError if *feedback* cannot be stored."""
    if not feedback.user_id or not feedback.user_id.strip():
        raise InputValidationError("userId", "a user id is required")
    if not feedback.advocate_reg_no or not feedback.advocate_reg_no.strip():
        raise InputValidationError("advocateRegNo", "an advocate is required")
    if isinstance(feedback.rating, bool) or not isinstance(feedback.rating, int):
        raise InputValidationError("rating", "rating must be a whole number")
    if not 1 <= feedback.rating <= 5:
        raise InputValidationError("rating", "rating must be between 1 and 5")
    if not feedback.comment or not feedback.comment.strip():
        raise InputValidationError("comment", "a comment is required")
    if directory is not None and feedback.advocate_reg_no not in directory:
        raise InputValidationError(
            "advocateRegNo", f"unknown advocate {feedback.advocate_reg_no}"
        )


class FeedbackStore:
    """File-backed feedback store; reads and writes raise CollaboratorUnavailable."""

    def __init__(
        self,
        feedback_dir: str | None = None,
        directory: AdvocateDirectory | None = None,
    ) -> None:
        self._feedback_dir = feedback_dir or config.FEEDBACK_DIR
        self._directory = directory

    def _path_for(self, reg_no: str) -> str:
        return os.path.join(self._feedback_dir, f"{slugify(reg_no)}.jsonl")

    def submit(self, feedback: FeedbackRecord) -> str:
        """Validate and append *feedback*; return its new id."""
        validate_feedback(feedback, self._directory)
        stored = replace(
            feedback, id=uuid.uuid4().hex, timestamp=datetime.now(timezone.utc)
        )

        path = self._path_for(stored.advocate_reg_no)
        try:
            os.makedirs(self._feedback_dir, exist_ok=True)
            with open(path, "a", encoding="utf-8") as f:
                f.write(json.dumps(stored.to_dict(), ensure_ascii=False) + "\n")
        except OSError as exc:
            raise CollaboratorUnavailable("feedback store", str(exc)) from exc

        log.info("Stored feedback %s for %s", stored.id, stored.advocate_reg_no)
        return stored.id

    def stored_feedback(self, reg_no: str) -> list[FeedbackRecord]:
        """Return stored feedback for *reg_no*, newest first (no sample fallback)."""
        path = self._path_for(reg_no)
        if not os.path.exists(path):
            return []

        records = []
        try:
            with open(path, encoding="utf-8") as f:
                for line in f:
                    line = line.strip()
                    if line:
                        records.append(FeedbackRecord.from_dict(json.loads(line)))
        except OSError as exc:
            raise CollaboratorUnavailable("feedback store", str(exc)) from exc
        except (
            json.JSONDecodeError,
            KeyError,
            ValueError,
            TypeError,
            AttributeError,
        ) as exc:
            raise CollaboratorUnavailable(
                "feedback store", f"{path} is corrupt ({exc!r})"
            ) from exc

        # Distinct reg nos can slugify to the same file name
        records = [r for r in records if r.advocate_reg_no == reg_no]

        # Newest appended first when timestamps tie
        records.reverse()
        records.sort(key=lambda r: r.timestamp, reverse=True)
        return records

    def get_for_advocate(self, reg_no: str) -> list[FeedbackRecord]:
        """Return feedback for *reg_no*, or sample reviews if there is none."""
        records = self.stored_feedback(reg_no)
        if not records:
            log.debug("No feedback for %s, returning sample reviews", reg_no)
            return sample_feedback(reg_no)
        return records

    def average_rating(self, reg_no: str) -> tuple[Optional[float], int]:
        """Return ``(mean rating, count)`` over stored feedback only."""
        records = self.stored_feedback(reg_no)
        if not records:
            return None, 0
        mean = sum(r.rating for r in records) / len(records)
        return round(mean, 1), len(records)
