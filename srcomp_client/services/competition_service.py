# srcomp_client/services/competition_service.py
"""
Typed competition data.

Responsibilities:
  - fetch (already timestamp-normalized) payloads through SRComp
  - convert them into the immutable records from models
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

from ..models import Arena, Corner, Current, Location, Match, Period, Team
from ..srcomp import SRComp


@dataclass
class CompetitionService:
    """Service returning typed records for each API resource."""

    client: SRComp

    def arenas(self) -> Dict[str, Arena]:
        """Arenas keyed by name."""
        return {name: Arena.from_dict(a) for name, a in self.client.get_arenas().items()}

    def corners(self) -> Dict[int, Corner]:
        """Corners keyed by number; JSON object keys are converted back to int."""
        return {int(num): Corner.from_dict(c) for num, c in self.client.get_corners().items()}

    def locations(self) -> Dict[str, Location]:
        return {
            name: Location.from_dict(name, loc)
            for name, loc in self.client.get_locations().items()
        }

    def teams(self) -> Dict[str, Team]:
        return {tla: Team.from_dict(t) for tla, t in self.client.get_teams().items()}

    def matches(self, query: Optional[Mapping[str, Any]] = None) -> List[Match]:
        return [Match.from_dict(m) for m in self.client.get_matches(query)]

    def knockouts(self) -> List[List[Match]]:
        """Knockout rounds in order, each a list of matches."""
        return [[Match.from_dict(m) for m in rnd] for rnd in self.client.get_knockouts()]

    def tiebreaker(self) -> Match:
        return Match.from_dict(self.client.get_tiebreaker())

    def periods(self) -> List[Period]:
        return [Period.from_dict(p) for p in self.client.get_periods()]

    def current(self) -> Current:
        return Current.from_dict(self.client.get_current())

    def state(self) -> str:
        return self.client.get_state()

    def last_scored_match(self) -> Optional[int]:
        return self.client.get_last_scored_match()
