# srcomp_client/__init__.py
"""
Client for the SRComp competition API.
"""
from .config import ClientConfig
from .models import (
    Arena,
    Corner,
    Current,
    KnockoutScores,
    LeagueScores,
    Location,
    Match,
    MatchTimes,
    MatchType,
    Period,
    PeriodMatches,
    Shepherd,
    StagingTimes,
    Team,
    TeamLocation,
    TeamScores,
    TimeWindow,
)
from .services import CompetitionService
from .srcomp import SRComp
from .timestamps import normalize_current, normalize_match, normalize_period, parse_timestamp

__all__ = [
    "Arena",
    "ClientConfig",
    "CompetitionService",
    "Corner",
    "Current",
    "KnockoutScores",
    "LeagueScores",
    "Location",
    "Match",
    "MatchTimes",
    "MatchType",
    "Period",
    "PeriodMatches",
    "SRComp",
    "Shepherd",
    "StagingTimes",
    "Team",
    "TeamLocation",
    "TeamScores",
    "TimeWindow",
    "normalize_current",
    "normalize_match",
    "normalize_period",
    "parse_timestamp",
]
