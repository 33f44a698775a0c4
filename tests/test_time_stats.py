from datetime import date

import pytest

from steamgallery.services.time_stats import generate_time_stats, round_half_up

TODAY = date(2024, 3, 2)


@pytest.mark.parametrize("value,expected", [(0.5, 1), (1.49, 1), (2.5, 3), (3.5, 4), (0, 0)])
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


def test_bucket_counts():
    stats = generate_time_stats(3000, 840, today=TODAY)

    assert len(stats["daily"]) == 7
    assert len(stats["weekly"]) == 4
    assert len(stats["monthly"]) == 6


def test_no_playtime_gives_all_zero_buckets():
    stats = generate_time_stats(0, 0, today=TODAY)

    assert all(day["value"] == 0 for day in stats["daily"])
    assert all(week["value"] == 0 and week["percentage"] == 0 for week in stats["weekly"])
    assert all(month["value"] == 0 and month["average"] == 0 for month in stats["monthly"])
    assert stats["summary"] == {
        "total_hours": 0,
        "recent_hours": 0,
        "daily_average": 0,
        "weekly_average": 0,
    }


def test_without_recent_playtime_uses_lifetime_average():
    # 3000 minutes span ceil(3000 / 1440) = 3 days -> 1000 per day
    stats = generate_time_stats(3000, 0, today=TODAY)

    assert [d["value"] for d in stats["daily"]] == [0] * 7
    assert [w["value"] for w in stats["weekly"]] == [7000] * 4
    assert [w["percentage"] for w in stats["weekly"]] == [100] * 4
    assert [m["value"] for m in stats["monthly"]] == [30000] * 6
    assert stats["summary"] == {
        "total_hours": 50,
        "recent_hours": 0,
        "daily_average": 1000,
        "weekly_average": 7000,
    }


def test_recent_playtime_fills_most_recent_periods():
    stats = generate_time_stats(3000, 840, today=TODAY)

    assert [d["value"] for d in stats["daily"]] == [60] * 7
    assert [w["value"] for w in stats["weekly"]] == [7000, 7000, 420, 420]
    assert [w["percentage"] for w in stats["weekly"]] == [100, 100, 6, 6]
    assert [m["value"] for m in stats["monthly"]] == [30000] * 5 + [1800]
    assert all(m["average"] == 30000 for m in stats["monthly"])
    assert stats["summary"]["recent_hours"] == 14


def test_labels_are_oldest_first():
    stats = generate_time_stats(3000, 840, today=TODAY)

    assert [d["label"] for d in stats["daily"]] == [
        "2/25", "2/26", "2/27", "2/28", "2/29", "3/1", "3/2"
    ]
    assert [w["label"] for w in stats["weekly"]] == [
        "3 weeks ago", "2 weeks ago", "Last week", "This week"
    ]
    assert [m["label"] for m in stats["monthly"]] == ["Oct", "Nov", "Dec", "Jan", "Feb", "Mar"]


def test_small_totals_count_as_one_day():
    stats = generate_time_stats(90, 0, today=TODAY)

    assert stats["summary"]["daily_average"] == 90
    assert stats["summary"]["weekly_average"] == 630
    assert stats["summary"]["total_hours"] == 2


def test_half_hours_round_up():
    # 150 minutes = 2.5 hours
    assert generate_time_stats(150, 0, today=TODAY)["summary"]["total_hours"] == 3


def test_missing_or_negative_inputs_are_zero():
    assert generate_time_stats(None, None, today=TODAY) == generate_time_stats(0, 0, today=TODAY)
    assert generate_time_stats(-10, -5, today=TODAY) == generate_time_stats(0, 0, today=TODAY)
