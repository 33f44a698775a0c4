# models.py
# Pydantic models for the JSON API

from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class Genre(BaseModel):
    id: str
    description: str


class DailyPoint(BaseModel):
    label: str
    value: int


class WeeklyPoint(BaseModel):
    label: str
    value: int
    percentage: int


class MonthlyPoint(BaseModel):
    label: str
    value: int
    average: int


class TimeSummary(BaseModel):
    total_hours: int
    recent_hours: int
    daily_average: int
    weekly_average: int


class TimeStats(BaseModel):
    daily: List[DailyPoint]
    weekly: List[WeeklyPoint]
    monthly: List[MonthlyPoint]
    summary: TimeSummary


class Game(BaseModel):
    # Steam adds fields over time (rtime_last_played, playtime_windows_forever, ...)
    model_config = ConfigDict(extra="allow")

    appid: int
    name: str = ""
    playtime_forever: int = 0
    playtime_2weeks: int = 0
    store_url: Optional[str] = None
    genres: List[Genre] = []
    header_image: str = ""
    description: str = ""
    release_date: Optional[str] = None
    developers: List[str] = []
    publishers: List[str] = []
    metacritic_score: Optional[int] = None
    review_score: int = 0
    total_reviews: int = 0
    review_score_desc: str = ""
    time_stats: Optional[TimeStats] = None


class UserProfile(BaseModel):
    steamid: str
    personaname: Optional[str] = None
    avatarfull: Optional[str] = None
    profileurl: Optional[str] = None


class LibraryStats(BaseModel):
    total_games: int
    total_hours: float
    average_hours: float
    recent_hours: float
    most_played: Optional[str] = None


class LibraryResponse(BaseModel):
    userProfile: UserProfile
    games: List[Game]
    stats: LibraryStats


class ErrorResponse(BaseModel):
    error: str
