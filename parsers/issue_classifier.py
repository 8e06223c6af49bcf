"""Map a free-text legal issue description to one practice area.

Keyword groups are tested in order and the first group with any keyword
present in the lower-cased text wins.  There is no scoring: "property
dispute and divorce" resolves to Real Estate Law because that group is
tested before Family Law.
"""

from __future__ import annotations

from models import DEFAULT_PRACTICE_AREA

ISSUE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Real Estate Law", ("property", "land", "real estate")),
    ("Family Law", ("divorce", "custody", "marriage")),
    ("Criminal Law", ("crime", "theft", "assault")),
    ("Corporate Law", ("company", "business", "contract")),
    ("Personal Injury", ("injury", "accident", "damage")),
    ("Tax Law", ("tax", "income", "revenue")),
    ("Labor Law", ("job", "work", "employment")),
)


def matched_keyword(text: str) -> tuple[str, str | None]:
    """Return ``(practice_area, keyword)`` for the first matching group.

    ``keyword`` is None when nothing matched and the default applies.
    """
    lowered = (text or "").lower()
    for practice_area, keywords in ISSUE_KEYWORDS:
        for keyword in keywords:
            if keyword in lowered:
                return practice_area, keyword
    return DEFAULT_PRACTICE_AREA, None


def classify_issue(text: str) -> str:
    """Return the practice area for *text*; "Civil Law" when nothing matches."""
    return matched_keyword(text)[0]
