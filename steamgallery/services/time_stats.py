# time_stats.py
# Synthesizes daily/weekly/monthly play-time approximations for a game

import calendar
import math
from datetime import date, timedelta

MINUTES_PER_DAY = 60 * 24
RECENT_WINDOW_DAYS = 14

DAILY_BUCKETS = 7
WEEKLY_BUCKETS = 4
MONTHLY_BUCKETS = 6

WEEK_LABELS = ["This week", "Last week"]


def round_half_up(value):
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def _month_before(reference, months):
    """Month number `months` calendar months before `reference`."""
    return (reference.month - 1 - months) % 12 + 1


def _week_label(weeks_ago):
    if weeks_ago < len(WEEK_LABELS):
        return WEEK_LABELS[weeks_ago]
    return f"{weeks_ago} weeks ago"


def generate_time_stats(total_minutes, recent_minutes=0, today=None):
    """
    Build the time statistics for one game.

    Only two inputs are known from Steam: lifetime minutes and minutes in the
    last two weeks. Recent periods are spread evenly from the two-week figure,
    older periods use the lifetime average. Buckets are ordered oldest first.
    """
    total_minutes = max(0, total_minutes or 0)
    recent_minutes = max(0, recent_minutes or 0)
    today = today or date.today()

    total_days = max(1, math.ceil(total_minutes / MINUTES_PER_DAY))
    daily_average = total_minutes / total_days
    weekly_average = daily_average * 7
    recent_daily = recent_minutes / RECENT_WINDOW_DAYS

    daily = []
    for days_ago in range(DAILY_BUCKETS):
        day = today - timedelta(days=days_ago)
        value = recent_daily if recent_minutes > 0 else 0
        daily.append({
            "label": f"{day.month}/{day.day}",
            "value": round_half_up(value),
        })
    daily.reverse()

    weekly = []
    for weeks_ago in range(WEEKLY_BUCKETS):
        if weeks_ago < 2 and recent_minutes > 0:
            value = recent_minutes / 2
        else:
            value = weekly_average
        percentage = value / weekly_average * 100 if weekly_average else 0
        weekly.append({
            "label": _week_label(weeks_ago),
            "value": round_half_up(value),
            "percentage": round_half_up(percentage),
        })
    weekly.reverse()

    monthly = []
    monthly_average = daily_average * 30
    for months_ago in range(MONTHLY_BUCKETS):
        month = _month_before(today, months_ago)
        if months_ago == 0 and recent_minutes > 0:
            value = recent_daily * 30
        else:
            value = monthly_average
        monthly.append({
            "label": calendar.month_abbr[month],
            "value": round_half_up(value),
            "average": round_half_up(monthly_average),
        })
    monthly.reverse()

    summary = {
        "total_hours": round_half_up(total_minutes / 60),
        "recent_hours": round_half_up(recent_minutes / 60),
        "daily_average": round_half_up(daily_average),
        "weekly_average": round_half_up(weekly_average),
    }

    return {
        "daily": daily,
        "weekly": weekly,
        "monthly": monthly,
        "summary": summary,
    }
