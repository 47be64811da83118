"""Pytest fixtures for Brawl Stars client tests."""

import os
from typing import Any

import pytest

# Set environment variables for testing
os.environ.setdefault("BRAWL_STARS_API_KEY", "test-api-key")


@pytest.fixture
def player_payload() -> dict[str, Any]:
    """A player body as returned by /players/{tag}."""
    return {
        "club": {"tag": "#2V0G8P", "name": "Test Club"},
        "3vs3Victories": 5120,
        "isQualifiedFromChampionshipChallenge": False,
        "icon": {"id": 28000000},
        "tag": "#ABC123",
        "name": "TestPlayer",
        "trophies": 31250,
        "expLevel": 210,
        "expPoints": 245000,
        "highestTrophies": 32000,
        "soloVictories": 900,
        "duoVictories": 640,
        "bestRoboRumbleTime": 7,
        "bestTimeAsBigBrawler": 0,
        "brawlers": [
            {
                "gadgets": [{"name": "FAST FORWARD", "id": 23000255}],
                "starPowers": [{"name": "SHELL SHOCK", "id": 23000076}],
                "id": 16000000,
                "rank": 25,
                "trophies": 750,
                "highestTrophies": 800,
                "power": 11,
                "gears": [{"name": "SPEED", "id": 62000000, "level": 3}],
                "name": "SHELLY",
            },
            {
                "gadgets": [],
                "starPowers": [],
                "id": 16000001,
                "rank": 20,
                "trophies": 500,
                "highestTrophies": 520,
                "power": 9,
                "gears": [],
                "name": "COLT",
            },
        ],
        "nameColor": "0xffffffff",
    }


@pytest.fixture
def club_payload() -> dict[str, Any]:
    """A club body as returned by /clubs/{tag}."""
    return {
        "tag": "#2V0G8P",
        "name": "Test Club",
        "description": "We play every day",
        "trophies": 850000,
        "requiredTrophies": 25000,
        "members": [
            {
                "icon": {"id": 28000000},
                "tag": "#ABC123",
                "name": "TestPlayer",
                "trophies": 31250,
                "role": "president",
                "nameColor": "0xffffffff",
            },
            {
                "icon": {"id": 28000001},
                "tag": "#DEF456",
                "name": "Second",
                "trophies": 28000,
                "role": "vicePresident",
                "nameColor": "0xff1ba5f5",
            },
        ],
        "type": "inviteOnly",
        "badgeId": 8000000,
    }


@pytest.fixture
def brawler_payload() -> dict[str, Any]:
    """A brawler definition as returned by /brawlers/{id}."""
    return {
        "gadgets": [{"name": "FAST FORWARD", "id": 23000255}],
        "name": "SHELLY",
        "id": 16000000,
        "starPowers": [{"name": "SHELL SHOCK", "id": 23000076}],
    }


@pytest.fixture
def player_ranking_list_payload() -> dict[str, Any]:
    """A page of /rankings/{cc}/players."""
    return {
        "items": [
            {
                "club": {"name": "Top Club"},
                "trophies": 90000,
                "icon": {"id": 28000010},
                "tag": "#TOP1",
                "name": "First",
                "rank": 1,
                "nameColor": "0xffffffff",
            },
            {
                "club": {},
                "trophies": 89000,
                "icon": {"id": 28000011},
                "tag": "#TOP2",
                "name": "Second",
                "rank": 2,
                "nameColor": "0xffffffff",
            },
            {
                "club": {"name": "Other Club"},
                "trophies": 88500,
                "icon": {"id": 28000012},
                "tag": "#TOP3",
                "name": "Third",
                "rank": 3,
                "nameColor": "0xff1ba5f5",
            },
        ],
        "paging": {"before": "eyJwb3MiOjB9", "after": "eyJwb3MiOjN9"},
    }


@pytest.fixture
def rotation_payload() -> list[dict[str, Any]]:
    """The /events/rotation body (a bare list)."""
    return [
        {
            "event": {"mode": "gemGrab", "modifiers": ["energyDrink"], "id": 15000007, "map": "Hard Rock Mine"},
            "slotId": 1,
            "startTime": "20240101T080000.000Z",
            "endTime": "20240102T080000.000Z",
        },
        {
            "event": {"mode": "brawlBall", "id": 15000026, "map": None},
            "slotId": 2,
            "startTime": "20240101T080000.000Z",
            "endTime": "20240102T080000.000Z",
        },
    ]


@pytest.fixture
def not_found_body() -> dict[str, Any]:
    """Error envelope for an unknown club."""
    return {
        "reason": "notFound",
        "message": "Club not found",
        "type": "notFound",
        "detail": {},
    }
