"""
Tests for the leaderboard fetcher (HTTP mocked).
"""

from unittest.mock import MagicMock, patch

import pytest
import requests

from adventleader.ingestion.fetch import FetchError, fetch_leaderboard

URL = "https://adventofcode.com/2018/leaderboard/private/view/123.json"


def fake_response(status=200, payload=None, json_error=None):
    response = MagicMock()
    response.status_code = status
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class TestFetchLeaderboard:
    """Tests for fetch_leaderboard."""

    def test_returns_leaderboard(self, sample_payload):
        with patch("adventleader.ingestion.fetch.requests.get", return_value=fake_response(payload=sample_payload)):
            board = fetch_leaderboard(URL, "cookie-value")
        assert board.event == "2018"
        assert len(board.members) == 3

    def test_sends_session_cookie_and_timeout(self, sample_payload):
        with patch("adventleader.ingestion.fetch.requests.get", return_value=fake_response(payload=sample_payload)) as get:
            fetch_leaderboard(URL, "cookie-value", timeout=5, user_agent="test-agent")
        args, kwargs = get.call_args
        assert args == (URL,)
        assert kwargs["cookies"] == {"session": "cookie-value"}
        assert kwargs["timeout"] == 5
        assert kwargs["headers"]["User-Agent"] == "test-agent"

    def test_network_error(self):
        with patch("adventleader.ingestion.fetch.requests.get", side_effect=requests.ConnectionError("down")):
            with pytest.raises(FetchError, match="Network error"):
                fetch_leaderboard(URL, "c")

    def test_timeout(self):
        with patch("adventleader.ingestion.fetch.requests.get", side_effect=requests.Timeout("slow")):
            with pytest.raises(FetchError, match="Timed out"):
                fetch_leaderboard(URL, "c")

    @pytest.mark.parametrize("status", [302, 400, 404, 500])
    def test_non_2xx_status(self, status):
        with patch("adventleader.ingestion.fetch.requests.get", return_value=fake_response(status=status)):
            with pytest.raises(FetchError, match=f"HTTP {status}"):
                fetch_leaderboard(URL, "c")

    def test_invalid_json(self):
        response = fake_response(json_error=ValueError("Expecting value"))
        with patch("adventleader.ingestion.fetch.requests.get", return_value=response):
            with pytest.raises(FetchError, match="not valid JSON"):
                fetch_leaderboard(URL, "c")

    @pytest.mark.parametrize("days", [[1], "day one", 7])
    def test_completion_days_not_an_object(self, days):
        payload = {"members": {"1": {"id": "1", "stars": 1, "completion_day_level": days}}}
        with patch("adventleader.ingestion.fetch.requests.get", return_value=fake_response(payload=payload)):
            with pytest.raises(FetchError, match="completion_day_level"):
                fetch_leaderboard(URL, "c")

    def test_unicode_digit_timestamp_is_recovered(self, sample_payload):
        sample_payload["members"]["111"]["last_star_ts"] = "²"
        with patch("adventleader.ingestion.fetch.requests.get", return_value=fake_response(payload=sample_payload)):
            board = fetch_leaderboard(URL, "c")
        assert board.members["111"].last_star_ts.year == 1

    def test_wrong_shape(self):
        with patch("adventleader.ingestion.fetch.requests.get", return_value=fake_response(payload={"error": "login"})):
            with pytest.raises(FetchError, match="Unexpected leaderboard payload"):
                fetch_leaderboard(URL, "c")
