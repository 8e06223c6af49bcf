"""Tests for the recommendation flow."""

from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest

from directory import AdvocateDirectory
from errors import CollaboratorUnavailable, InputValidationError
from models import AdvocateRecord
from nearby import NearbyDistrictResolver
from recommender import Recommender, recommend

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def _make_advocate(reg_no, district="Mumbai", area="Family Law", appointed=date(2010, 1, 1),
                   valid_upto=date(2030, 1, 1), rating=None, review_count=None):
    return AdvocateRecord(
        reg_no=reg_no,
        name=f"Advocate {reg_no}",
        address="1 Court Road",
        area_of_practice=area,
        date_of_appointment=appointed,
        certificate_valid_upto=valid_upto,
        district=district,
        rating=rating,
        review_count=review_count,
    )


def _recommender(advocates, **kwargs):
    return Recommender(AdvocateDirectory(advocates), clock=lambda: NOW, **kwargs)


class TestEmptyDistrict:
    def test_suggests_nearby_district(self):
        recommender = _recommender([_make_advocate("A", district="Mumbai")])
        result = recommender.recommend("Pune", "property dispute")
        assert result.advocates == ()
        assert result.nearby_district == "Mumbai"
        assert result.practice_area is None

    def test_no_neighbour(self):
        recommender = _recommender([_make_advocate("A")])
        result = recommender.recommend("Nagpur", "property dispute")
        assert result.to_dict() == {"advocates": [], "nearbyDistrict": None}

    def test_empty_roster(self):
        result = _recommender([]).recommend("Delhi", "theft")
        assert result.nearby_district == "Gurgaon"

    def test_skips_classification_and_ranking(self, monkeypatch):
        import recommender as recommender_module

        classify = MagicMock()
        ranker = MagicMock()
        monkeypatch.setattr(recommender_module, "matched_keyword", classify)
        monkeypatch.setattr(recommender_module, "rank", ranker)
        _recommender([]).recommend("Pune", "property")
        classify.assert_not_called()
        ranker.assert_not_called()

    def test_custom_nearby_lookup(self):
        recommender = _recommender([], nearby=NearbyDistrictResolver({"Nagpur": "Wardha"}))
        assert recommender.recommend("Nagpur", "x").nearby_district == "Wardha"

    def test_plain_callable_lookup(self):
        recommender = _recommender([], nearby=lambda district: district.upper())
        assert recommender.recommend("Nagpur", "x").nearby_district == "NAGPUR"


class TestMatching:
    def test_prefers_classified_practice_area(self):
        recommender = _recommender([
            _make_advocate("FAM", area="Family Law", appointed=date(2015, 1, 1)),
            _make_advocate("RE", area="Real Estate Law", appointed=date(2016, 1, 1)),
            _make_advocate("CRIM", area="Criminal Law", appointed=date(2000, 1, 1)),
        ])
        result = recommender.recommend("Mumbai", "land boundary dispute")
        assert result.reg_nos() == ["RE"]
        assert result.practice_area == "Real Estate Law"

    def test_falls_back_to_whole_district(self):
        recommender = _recommender([
            _make_advocate("A", area="Tax Law", appointed=date(2012, 1, 1)),
            _make_advocate("B", area="Criminal Law", appointed=date(2011, 1, 1)),
            _make_advocate("OTHER", district="Delhi", area="Family Law"),
        ])
        result = recommender.recommend("Mumbai", "divorce")
        assert result.reg_nos() == ["B", "A"]
        assert result.nearby_district is None

    def test_district_match_case_insensitive(self):
        recommender = _recommender([_make_advocate("A")])
        assert recommender.recommend("mumbai", "divorce").reg_nos() == ["A"]

    def test_seniority_order(self):
        recommender = _recommender([
            _make_advocate("Y2015", appointed=date(2015, 1, 1)),
            _make_advocate("Y2010", appointed=date(2010, 1, 1)),
        ])
        assert recommender.recommend("Mumbai", "custody").reg_nos() == ["Y2010", "Y2015"]

    def test_returns_exactly_three(self):
        advocates = [_make_advocate(f"A{i}", appointed=date(2000 + i, 1, 1)) for i in range(6)]
        result = _recommender(advocates).recommend("Mumbai", "divorce")
        assert result.reg_nos() == ["A0", "A1", "A2"]

    def test_returns_fewer_than_three_when_short(self):
        advocates = [_make_advocate("A"), _make_advocate("B")]
        assert len(_recommender(advocates).recommend("Mumbai", "divorce").advocates) == 2

    def test_expired_never_returned(self):
        recommender = _recommender([
            _make_advocate("EXPIRED", appointed=date(1990, 1, 1), valid_upto=date(2020, 1, 1)),
            _make_advocate("OK", appointed=date(2015, 1, 1)),
        ])
        assert recommender.recommend("Mumbai", "divorce").reg_nos() == ["OK"]

    def test_all_expired_gives_empty_without_suggestion(self):
        recommender = _recommender([_make_advocate("E", valid_upto=date(2020, 1, 1))])
        result = recommender.recommend("Mumbai", "divorce")
        assert result.advocates == ()
        assert result.nearby_district is None

    def test_practice_match_all_expired_does_not_fall_back(self):
        recommender = _recommender([
            _make_advocate("FAM", area="Family Law", valid_upto=date(2020, 1, 1)),
            _make_advocate("TAX", area="Tax Law"),
        ])
        assert recommender.recommend("Mumbai", "divorce").reg_nos() == []

    def test_results_are_enriched(self):
        result = _recommender([_make_advocate("A")]).recommend("Mumbai", "divorce")
        assert result.advocates[0].has_rating()

    def test_custom_limit(self):
        advocates = [_make_advocate(f"A{i}") for i in range(5)]
        result = _recommender(advocates, limit=5).recommend("Mumbai", "divorce")
        assert len(result.advocates) == 5

    def test_explicit_now_overrides_clock(self):
        recommender = _recommender([_make_advocate("A", valid_upto=date(2027, 1, 1))])
        later = datetime(2028, 1, 1, tzinfo=timezone.utc)
        assert recommender.recommend("Mumbai", "divorce", now=later).advocates == ()

    def test_clock_read_once_per_call(self):
        clock = MagicMock(return_value=NOW)
        advocates = [_make_advocate(f"A{i}") for i in range(5)]
        Recommender(AdvocateDirectory(advocates), clock=clock).recommend("Mumbai", "divorce")
        assert clock.call_count == 1

    def test_idempotent(self):
        advocates = [_make_advocate(f"A{i}", appointed=date(2010, 1, 1)) for i in range(5)]
        recommender = _recommender(advocates)
        first = recommender.recommend("Mumbai", "divorce")
        second = recommender.recommend("Mumbai", "divorce")
        assert first == second


class TestErrors:
    @pytest.mark.parametrize("district", ["", "   ", None])
    def test_blank_district(self, district):
        with pytest.raises(InputValidationError) as exc_info:
            _recommender([]).recommend(district, "divorce")
        assert exc_info.value.field == "district"

    @pytest.mark.parametrize("issue", ["", "  ", None])
    def test_blank_issue(self, issue):
        with pytest.raises(InputValidationError) as exc_info:
            _recommender([]).recommend("Mumbai", issue)
        assert exc_info.value.field == "issue"

    def test_directory_failure_propagates(self):
        directory = MagicMock()
        directory.by_district.side_effect = CollaboratorUnavailable("advocate roster", "down")
        with pytest.raises(CollaboratorUnavailable):
            Recommender(directory, clock=lambda: NOW).recommend("Mumbai", "divorce")

    def test_os_error_becomes_unavailable(self):
        directory = MagicMock()
        directory.by_district.side_effect = OSError("disk gone")
        with pytest.raises(CollaboratorUnavailable):
            Recommender(directory, clock=lambda: NOW).recommend("Mumbai", "divorce")


def test_module_recommend_uses_given_directory():
    directory = AdvocateDirectory([_make_advocate("A", valid_upto=date(2099, 1, 1))])
    assert recommend("Mumbai", "divorce", directory=directory).reg_nos() == ["A"]
