# models.py
"""Advocate, feedback and recommendation dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, timezone
from typing import Optional

from parsers.date_parser import parse_date

PRACTICE_AREAS = (
    "Real Estate Law",
    "Family Law",
    "Criminal Law",
    "Corporate Law",
    "Personal Injury",
    "Tax Law",
    "Labor Law",
    "Civil Law",
)
DEFAULT_PRACTICE_AREA = "Civil Law"

# Roster JSON uses camelCase keys
_ROSTER_KEYS = {
    "regNo": "reg_no",
    "name": "name",
    "address": "address",
    "areaOfPractice": "area_of_practice",
    "dateOfAppointment": "date_of_appointment",
    "certificateValidUpto": "certificate_valid_upto",
    "district": "district",
    "rating": "rating",
    "reviewCount": "review_count",
}


def _as_date(moment: date | datetime) -> date:
    return moment.date() if isinstance(moment, datetime) else moment


@dataclass(frozen=True)
class AdvocateRecord:
    """One advocate in the directory, keyed by registration number."""

    reg_no: str
    name: str
    address: str
    area_of_practice: str
    date_of_appointment: date
    certificate_valid_upto: date
    district: str
    rating: Optional[float] = None
    review_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: dict) -> AdvocateRecord:
        """Build a record from a roster entry (camelCase or snake_case keys).

        Raises:
            KeyError: If a required field is missing.
            ValueError: If a date or number cannot be parsed.
        """
        values = {}
        valid_fields = {f.name for f in fields(cls)}
        for key, value in data.items():
            name = _ROSTER_KEYS.get(key, key)
            if name in valid_fields:
                values[name] = value

        rating = values.get("rating")
        review_count = values.get("review_count")
        return cls(
            reg_no=str(values["reg_no"]),
            name=values["name"],
            address=values.get("address", ""),
            area_of_practice=values["area_of_practice"],
            date_of_appointment=parse_date(values["date_of_appointment"]),
            certificate_valid_upto=parse_date(values["certificate_valid_upto"]),
            district=values["district"],
            rating=float(rating) if rating is not None else None,
            review_count=int(review_count) if review_count is not None else None,
        )

    def to_dict(self) -> dict:
        data = {
            "regNo": self.reg_no,
            "name": self.name,
            "address": self.address,
            "areaOfPractice": self.area_of_practice,
            "dateOfAppointment": self.date_of_appointment.isoformat(),
            "certificateValidUpto": self.certificate_valid_upto.isoformat(),
            "district": self.district,
        }
        if self.rating is not None:
            data["rating"] = self.rating
        if self.review_count is not None:
            data["reviewCount"] = self.review_count
        return data

    @classmethod
    def csv_headers(cls) -> list[str]:
        return list(_ROSTER_KEYS)

    def to_csv_row(self) -> list[str]:
        data = self.to_dict()
        return [str(data.get(key, "")) for key in _ROSTER_KEYS]

    def is_certificate_valid(self, now: date | datetime) -> bool:
        """True if the certificate expires strictly after *now*'s calendar date."""
        return self.certificate_valid_upto > _as_date(now)

    def years_of_experience(self, now: date | datetime) -> int:
        return _as_date(now).year - self.date_of_appointment.year

    def has_rating(self) -> bool:
        return self.rating is not None and self.review_count is not None

    def with_rating(self, rating: float, review_count: int) -> AdvocateRecord:
        return replace(self, rating=rating, review_count=review_count)


@dataclass
class FeedbackRecord:
    """One user's rating and comment for one advocate."""

    user_id: str
    advocate_reg_no: str
    rating: int
    comment: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    id: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict) -> FeedbackRecord:
        timestamp = datetime.fromisoformat(data["timestamp"].replace("Z", "+00:00"))
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=timezone.utc)
        return cls(
            user_id=data["userId"],
            advocate_reg_no=data["advocateRegNo"],
            rating=int(data["rating"]),
            comment=data["comment"],
            timestamp=timestamp,
            id=data.get("id"),
        )

    def to_dict(self) -> dict:
        data = {
            "userId": self.user_id,
            "advocateRegNo": self.advocate_reg_no,
            "rating": self.rating,
            "comment": self.comment,
            "timestamp": self.timestamp.isoformat(),
        }
        if self.id is not None:
            data["id"] = self.id
        return data


@dataclass(frozen=True)
class RecommendationResult:
    """Ranked advocates for one search, or a nearby-district suggestion."""

    advocates: tuple[AdvocateRecord, ...] = ()
    nearby_district: Optional[str] = None
    practice_area: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.advocates

    def reg_nos(self) -> list[str]:
        return [a.reg_no for a in self.advocates]

    def to_dict(self) -> dict:
        return {
            "advocates": [a.to_dict() for a in self.advocates],
            "nearbyDistrict": self.nearby_district,
        }
