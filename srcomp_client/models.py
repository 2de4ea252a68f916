# srcomp_client/models.py
"""
Domain models for competition data.

Every record is built fresh from an API payload via from_dict, which reads the
known fields explicitly. Time fields accept either a datetime (already
normalized) or the raw wire string; missing or unparseable times become None.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple, Union

from .timestamps import map_values, parse_timestamp


Number = Union[int, float]


class MatchType(str, Enum):
    """The kind of a match (and of the period it is played in)."""
    LEAGUE = "league"
    KNOCKOUT = "knockout"
    TIEBREAKER = "tiebreaker"


def _score_map(raw: Mapping[str, Any]) -> Dict[str, Number]:
    # Values are kept as sent; game points need not be whole numbers.
    return dict(raw)


@dataclass(frozen=True)
class Arena:
    """An arena in which matches are played."""
    name: str
    display_name: str
    colour: str     # CSS compatible colour
    get: str        # URL path of this resource

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Arena":
        return cls(
            name=raw["name"],
            display_name=raw["display_name"],
            colour=raw["colour"],
            get=raw["get"],
        )


@dataclass(frozen=True)
class Corner:
    """A starting zone; the number is only unique within an arena."""
    number: int
    colour: str
    get: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Corner":
        return cls(number=int(raw["number"]), colour=raw["colour"], get=raw["get"])


@dataclass(frozen=True)
class Shepherd:
    """The shepherd responsible for a location (usually a role, not a person)."""
    name: str
    colour: str


@dataclass(frozen=True)
class Location:
    """An area of the venue and the teams based there."""
    name: str
    display_name: str
    teams: Sequence[str]
    shepherds: Shepherd
    get: str

    @classmethod
    def from_dict(cls, name: str, raw: Mapping[str, Any]) -> "Location":
        shepherds = raw["shepherds"]
        return cls(
            name=name,
            display_name=raw["display_name"],
            teams=tuple(raw["teams"]),
            shepherds=Shepherd(name=shepherds["name"], colour=shepherds["colour"]),
            get=raw["get"],
        )


@dataclass(frozen=True)
class TeamLocation:
    """Reference from a team to its location."""
    name: str
    get: str


@dataclass(frozen=True)
class TeamScores:
    """League totals for a team."""
    game: int       # game points from league matches
    league: int     # league points, non-negative


@dataclass(frozen=True)
class Team:
    """A team of competitors, keyed by its TLA."""
    name: str
    tla: str
    league_pos: int     # tied teams share a position
    location: TeamLocation
    scores: TeamScores
    get: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Team":
        location = raw["location"]
        scores = raw["scores"]
        return cls(
            name=raw["name"],
            tla=raw["tla"],
            league_pos=int(raw["league_pos"]),
            location=TeamLocation(name=location["name"], get=location["get"]),
            scores=TeamScores(game=int(scores["game"]), league=int(scores["league"])),
            get=raw["get"],
        )


@dataclass(frozen=True)
class TimeWindow:
    start: Optional[datetime]
    end: Optional[datetime]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "TimeWindow":
        return cls(start=parse_timestamp(raw.get("start")), end=parse_timestamp(raw.get("end")))


@dataclass(frozen=True)
class StagingTimes:
    """When teams are called to, and must be in, the staging area."""
    opens: Optional[datetime]
    closes: Optional[datetime]
    signal_teams: Optional[datetime]
    signal_shepherds: Mapping[str, Optional[datetime]]  # shepherd name -> time

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "StagingTimes":
        return cls(
            opens=parse_timestamp(raw.get("opens")),
            closes=parse_timestamp(raw.get("closes")),
            signal_teams=parse_timestamp(raw.get("signal_teams")),
            signal_shepherds=map_values(raw.get("signal_shepherds") or {}, parse_timestamp),
        )


@dataclass(frozen=True)
class MatchTimes:
    """
    Timing of a match, delays already applied.

    slot is when the match occupies the arena; game is when play is underway
    and always falls within the slot.
    """
    game: TimeWindow
    slot: TimeWindow
    staging: StagingTimes

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "MatchTimes":
        return cls(
            game=TimeWindow.from_dict(raw["game"]),
            slot=TimeWindow.from_dict(raw["slot"]),
            staging=StagingTimes.from_dict(raw["staging"]),
        )


@dataclass(frozen=True)
class LeagueScores:
    """Scores of a league match. Each mapping has the same TLA keys."""
    game: Mapping[str, Number]
    league: Mapping[str, Number]
    ranking: Mapping[str, Number]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "LeagueScores":
        return cls(
            game=_score_map(raw["game"]),
            league=_score_map(raw["league"]),
            ranking=_score_map(raw["ranking"]),
        )


@dataclass(frozen=True)
class KnockoutScores:
    """Scores of a knockout or tiebreaker match. Each mapping has the same TLA keys."""
    game: Mapping[str, Number]
    normalised: Mapping[str, Number]
    ranking: Mapping[str, Number]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "KnockoutScores":
        return cls(
            game=_score_map(raw["game"]),
            normalised=_score_map(raw["normalised"]),
            ranking=_score_map(raw["ranking"]),
        )


Scores = Union[LeagueScores, KnockoutScores]


@dataclass(frozen=True)
class Match:
    """
    A match between teams. (arena, num) is the canonical identity.

    teams has one entry per corner; None marks an empty corner. scores is only
    present once the match has been scored.
    """
    arena: str
    num: int
    display_name: str
    teams: Sequence[Optional[str]]
    type: MatchType
    times: MatchTimes
    scores: Optional[Scores] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Match":
        match_type = MatchType(raw["type"])
        raw_scores = raw.get("scores")
        scores: Optional[Scores] = None
        if raw_scores is not None:
            if match_type is MatchType.LEAGUE:
                scores = LeagueScores.from_dict(raw_scores)
            else:
                scores = KnockoutScores.from_dict(raw_scores)

        return cls(
            arena=raw["arena"],
            num=int(raw["num"]),
            display_name=raw["display_name"],
            teams=tuple(t or None for t in raw["teams"]),
            type=match_type,
            times=MatchTimes.from_dict(raw["times"]),
            scores=scores,
        )

    @property
    def key(self) -> Tuple[str, int]:
        return (self.arena, self.num)

    @property
    def is_scored(self) -> bool:
        return self.scores is not None


@dataclass(frozen=True)
class PeriodMatches:
    """Bounds of the match numbers within a period."""
    first_num: int
    last_num: int


@dataclass(frozen=True)
class Period:
    """A session of matches. start_time <= end_time <= max_end_time."""
    type: MatchType
    description: str
    start_time: Optional[datetime]
    end_time: Optional[datetime]        # latest scheduled slot start, before delays
    max_end_time: Optional[datetime]    # latest slot start once delays are applied
    matches: PeriodMatches

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Period":
        matches = raw["matches"]
        return cls(
            type=MatchType(raw["type"]),
            description=raw["description"],
            start_time=parse_timestamp(raw.get("start_time")),
            end_time=parse_timestamp(raw.get("end_time")),
            max_end_time=parse_timestamp(raw.get("max_end_time")),
            matches=PeriodMatches(
                first_num=int(matches["first_num"]),
                last_num=int(matches["last_num"]),
            ),
        )


@dataclass(frozen=True)
class Current:
    """
    The live state of the competition.

    delay is informational only and should not be used for computation.
    """
    delay: int
    matches: Sequence[Match]                # slot contains the current time
    staging_matches: Sequence[Match]        # between staging opens and closes
    shepherding_matches: Sequence[Match]    # first shepherd signal until staging closes
    time: Optional[datetime]

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Current":
        return cls(
            delay=raw["delay"],
            matches=tuple(Match.from_dict(m) for m in raw["matches"]),
            staging_matches=tuple(Match.from_dict(m) for m in raw["staging_matches"]),
            shepherding_matches=tuple(Match.from_dict(m) for m in raw["shepherding_matches"]),
            time=parse_timestamp(raw.get("time")),
        )
