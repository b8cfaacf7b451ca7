"""Tests for core contribution logic."""

import pytest

from gitpulse.core.contributions import (
    ContributionDay,
    FetchResult,
    InvalidResponseError,
    flatten_calendar,
    group_into_weeks,
    intensity_level,
    total_contributions,
)


def make_payload(weeks):
    return {
        "data": {
            "user": {
                "contributionsCollection": {
                    "contributionCalendar": {"weeks": weeks},
                }
            }
        }
    }


class TestFlattenCalendar:
    def test_concatenates_weeks_in_order(self):
        payload = make_payload(
            [
                {
                    "contributionDays": [
                        {"date": "2025-01-05", "contributionCount": 1},
                        {"date": "2025-01-06", "contributionCount": 0},
                    ]
                },
                {"contributionDays": [{"date": "2025-01-12", "contributionCount": 7}]},
            ]
        )

        days = flatten_calendar(payload)

        assert days == [
            ContributionDay("2025-01-05", 1),
            ContributionDay("2025-01-06", 0),
            ContributionDay("2025-01-12", 7),
        ]

    def test_missing_count_defaults_to_zero(self):
        payload = make_payload([{"contributionDays": [{"date": "2025-01-05"}]}])

        days = flatten_calendar(payload)

        assert days == [ContributionDay("2025-01-05", 0)]

    def test_malformed_fields_are_defaulted_not_dropped(self):
        payload = make_payload(
            [
                {
                    "contributionDays": [
                        {"contributionCount": 3},
                        {"date": 20250106, "contributionCount": "4"},
                        {"date": "2025-01-07", "contributionCount": True},
                        {"date": "2025-01-08", "contributionCount": 2.5},
                        {"date": "2025-01-09", "contributionCount": -1},
                        "not a day",
                    ]
                }
            ]
        )

        days = flatten_calendar(payload)

        assert days == [
            ContributionDay("", 3),
            ContributionDay("", 0),
            ContributionDay("2025-01-07", 0),
            ContributionDay("2025-01-08", 0),
            ContributionDay("2025-01-09", 0),
            ContributionDay("", 0),
        ]

    def test_week_without_days_contributes_nothing(self):
        payload = make_payload(
            [
                {"contributionDays": None},
                {},
                {"contributionDays": [{"date": "2025-01-12", "contributionCount": 2}]},
            ]
        )

        assert flatten_calendar(payload) == [ContributionDay("2025-01-12", 2)]

    def test_empty_weeks_is_valid(self):
        assert flatten_calendar(make_payload([])) == []

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"data": None},
            {"data": {"user": None}},
            {"data": {"user": {"contributionsCollection": {"contributionCalendar": {}}}}},
            make_payload("not a list"),
        ],
    )
    def test_missing_weeks_raises(self, payload):
        with pytest.raises(InvalidResponseError, match="Invalid response structure"):
            flatten_calendar(payload)


class TestContributionDay:
    def test_to_dict_uses_api_key(self):
        assert ContributionDay("2025-01-05", 4).to_dict() == {
            "date": "2025-01-05",
            "contributionCount": 4,
        }

    def test_from_dict_rejects_missing_count(self):
        with pytest.raises(ValueError):
            ContributionDay.from_dict({"date": "2025-01-05"})

    def test_from_dict_rejects_non_object(self):
        with pytest.raises(ValueError):
            ContributionDay.from_dict(["2025-01-05", 4])

    def test_is_immutable(self):
        day = ContributionDay("2025-01-05", 4)
        with pytest.raises(AttributeError):
            day.contribution_count = 5


class TestFetchResult:
    def test_success_sets_only_data(self):
        result = FetchResult.success([ContributionDay("2025-01-05", 1)])
        assert result.ok is True
        assert result.error is None
        assert result.to_dict() == {
            "ok": True,
            "data": [{"date": "2025-01-05", "contributionCount": 1}],
            "error": None,
        }

    def test_failure_sets_only_error(self):
        result = FetchResult.failure("Network error: boom")
        assert result.ok is False
        assert result.data is None
        assert result.to_dict() == {"ok": False, "data": None, "error": "Network error: boom"}


class TestSummaries:
    def test_total_contributions(self):
        days = [ContributionDay("a", 1), ContributionDay("b", 0), ContributionDay("c", 5)]
        assert total_contributions(days) == 6

    def test_total_of_nothing_is_zero(self):
        assert total_contributions([]) == 0

    @pytest.mark.parametrize(
        "count,level",
        [(0, 0), (1, 1), (2, 1), (3, 2), (5, 2), (6, 3), (8, 3), (9, 4), (40, 4)],
    )
    def test_intensity_level_thresholds(self, count, level):
        assert intensity_level(count) == level

    def test_group_into_weeks(self):
        days = [ContributionDay(str(i), i) for i in range(10)]
        weeks = group_into_weeks(days)
        assert [len(w) for w in weeks] == [7, 3]
        assert weeks[1][0].date == "7"

    def test_group_into_weeks_rejects_zero_size(self):
        with pytest.raises(ValueError):
            group_into_weeks([], size=0)
