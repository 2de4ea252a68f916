# srcomp_client/srcomp.py
"""
Thin HTTP client for the SRComp competition API.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional
from urllib.parse import urlencode

import requests

from .config import ClientConfig
from .timestamps import normalize_current, normalize_match, normalize_period

logger = logging.getLogger(__name__)


class SRComp:
    """
    One method per API resource.

    Each accessor performs a single GET, unwraps the top-level envelope key and,
    for resources which carry times, converts timestamp strings to datetimes.
    Nothing is cached; every call hits the API.
    """

    def __init__(self, api_root: str, timeout: int = 10, user_agent: str = "srcomp-client/1.0") -> None:
        """Store the API root (used verbatim, no trailing slash) and request settings."""
        self.api_root = api_root
        self.timeout = timeout
        self._headers = {"User-Agent": user_agent}

    @classmethod
    def from_config(cls, cfg: ClientConfig) -> "SRComp":
        """Build a client from a ClientConfig (root, timeout and User-Agent)."""
        return cls(cfg.api_root, timeout=cfg.timeout_seconds, user_agent=cfg.user_agent)

    def build_url(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> str:
        """Return api_root + endpoint, with '?' + query string when a query is given."""
        query_string = "?" + urlencode(query, doseq=True) if query is not None else ""
        return f"{self.api_root}{endpoint}{query_string}"

    def get_json(self, endpoint: str, query: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """
        Execute a GET request for an endpoint and return the parsed JSON body.

        Raises:
            requests.RequestException on transport failures and non-2xx responses.
            ValueError (requests' JSONDecodeError) when the body is not JSON.
        """
        url = self.build_url(endpoint, query)
        logger.debug("GET %s", url)
        r = requests.get(url, timeout=self.timeout, headers=self._headers)
        r.raise_for_status()
        return r.json()

    def _unwrap(self, endpoint: str, key: str, query: Optional[Mapping[str, Any]] = None) -> Any:
        # A missing key is a server contract violation; it surfaces as None.
        return self.get_json(endpoint, query).get(key)

    def get_arenas(self) -> Optional[Dict[str, Any]]:
        """Arenas keyed by arena name."""
        return self._unwrap("/arenas", "arenas")

    def get_corners(self) -> Optional[Dict[str, Any]]:
        """Corners keyed by corner number (as a JSON string key)."""
        return self._unwrap("/corners", "corners")

    def get_current(self) -> Optional[Dict[str, Any]]:
        """The live state of the competition, with every time converted."""
        current = self._unwrap("/current", "current")
        return normalize_current(current) if current is not None else None

    def get_locations(self) -> Optional[Dict[str, Any]]:
        """Venue locations keyed by location name."""
        return self._unwrap("/locations", "locations")

    def get_knockouts(self) -> Optional[List[List[Dict[str, Any]]]]:
        """Knockout rounds, each a list of matches."""
        rounds = self._unwrap("/knockout", "rounds")
        if rounds is None:
            return None
        return [[normalize_match(m) for m in matches] for matches in rounds]

    def get_last_scored_match(self) -> Optional[int]:
        """Number of the most recently scored match."""
        return self._unwrap("/matches/last_scored_match", "last_scored_match")

    def get_matches(self, query: Optional[Mapping[str, Any]] = None) -> Optional[List[Dict[str, Any]]]:
        """
        All matches, with every time converted.

        query, when given, is forwarded to the API as the query string (e.g.
        {"arena": "A"}). No filtering happens client side.
        """
        matches = self._unwrap("/matches", "matches", query)
        if matches is None:
            return None
        return [normalize_match(m) for m in matches]

    def get_periods(self) -> Optional[List[Dict[str, Any]]]:
        """Match periods (sessions), with start/end times converted."""
        periods = self._unwrap("/periods", "periods")
        if periods is None:
            return None
        return [normalize_period(p) for p in periods]

    def get_state(self) -> Optional[str]:
        """Opaque identifier of the current compstate revision."""
        return self._unwrap("/state", "state")

    def get_teams(self) -> Optional[Dict[str, Any]]:
        """Teams keyed by TLA."""
        return self._unwrap("/teams", "teams")

    def get_tiebreaker(self) -> Optional[Dict[str, Any]]:
        """The tiebreaker match, with every time converted."""
        tiebreaker = self._unwrap("/tiebreaker", "tiebreaker")
        return normalize_match(tiebreaker) if tiebreaker is not None else None
