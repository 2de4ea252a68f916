"""Shared fixtures for the SRComp client tests."""

import copy
from unittest.mock import MagicMock, patch

import pytest

from srcomp_client import SRComp

API_ROOT = "https://studentrobotics.org/comp-api"


def make_match(num=160, arena="Simulator", match_type="knockout", scores=True):
    match = {
        "arena": arena,
        "display_name": f"Final (#{num})",
        "num": num,
        "teams": ["SPA", "HRS3"],
        "times": {
            "game": {
                "end": "2021-05-01T13:33:00+01:00",
                "start": "2021-05-01T13:31:00+01:00",
            },
            "slot": {
                "end": "2021-05-01T13:33:30+01:00",
                "start": "2021-05-01T13:30:00+01:00",
            },
            "staging": {
                "closes": "2021-05-01T13:29:00+01:00",
                "opens": "2021-05-01T13:26:00+01:00",
                "signal_shepherds": {"Shepherd": "2021-05-01T13:28:00+01:00"},
                "signal_teams": "2021-05-01T13:28:00+01:00",
            },
        },
        "type": match_type,
    }
    if scores:
        match["scores"] = {
            "game": {"HRS3": 8, "SPA": 36},
            "normalised": {"HRS3": 2, "SPA": 4},
            "ranking": {"HRS3": 2, "SPA": 1},
        }
    return match


@pytest.fixture
def raw_match():
    return make_match()


@pytest.fixture
def raw_period():
    return {
        "type": "league",
        "description": "Saturday league matches",
        "start_time": "2021-05-01T10:00:00+01:00",
        "end_time": "2021-05-01T12:00:00+01:00",
        "max_end_time": "2021-05-01T12:10:00+01:00",
        "matches": {"first_num": 0, "last_num": 40},
    }


@pytest.fixture
def raw_current():
    return {
        "delay": 30,
        "matches": [make_match(num=10)],
        "staging_matches": [make_match(num=11)],
        "shepherding_matches": [make_match(num=11), make_match(num=12, scores=False)],
        "time": "2021-05-01T13:30:10+01:00",
    }


@pytest.fixture
def raw_team():
    return {
        "name": "SR House Robot",
        "tla": "SRZ",
        "league_pos": 13,
        "location": {"name": "the-venue", "get": "/comp-api/locations/the-venue"},
        "scores": {"game": 6, "league": 7},
        "get": "/comp-api/teams/SRZ",
    }


@pytest.fixture
def client():
    return SRComp(API_ROOT)


@pytest.fixture
def mock_get():
    """
    Patch requests.get inside the client.

    Call the returned helper with the JSON body the API should answer with; it
    returns the patched requests.get so calls can be inspected.
    """
    with patch("srcomp_client.srcomp.requests.get") as get:
        def respond(body):
            response = MagicMock()
            response.json.return_value = copy.deepcopy(body)
            response.raise_for_status.return_value = None
            get.return_value = response
            return get

        yield respond
