"""
Shared fixtures for leaderboard tests.
"""

import pytest


@pytest.fixture
def sample_payload():
    """Leaderboard JSON in the shape the API returns."""
    return {
        "owner_id": "111",
        "event": "2018",
        "members": {
            "111": {
                "id": "111",
                "name": "Alice",
                "stars": 4,
                "local_score": 38,
                "global_score": 0,
                "last_star_ts": "2018-12-02T06:20:01+0100",
                "completion_day_level": {
                    "1": {
                        "1": {"get_star_ts": "2018-12-01T06:05:10+0100"},
                        "2": {"get_star_ts": "2018-12-01T06:12:44+0100"},
                    },
                    "2": {
                        "1": {"get_star_ts": "2018-12-02T06:10:00+0100"},
                        "2": {"get_star_ts": "2018-12-02T06:20:01+0100"},
                    },
                },
            },
            "222": {
                "id": "222",
                "name": None,
                "stars": 2,
                "local_score": 20,
                "global_score": 87,
                "last_star_ts": "2018-12-01T07:00:00+0100",
                "completion_day_level": {
                    "1": {
                        "1": {"get_star_ts": "2018-12-01T06:30:00+0100"},
                        "2": {"get_star_ts": "2018-12-01T07:00:00+0100"},
                    },
                },
            },
            "333": {
                "id": "333",
                "name": "Idle",
                "stars": 0,
                "local_score": 0,
                "global_score": 0,
                "last_star_ts": "null",
                "completion_day_level": {},
            },
        },
    }
