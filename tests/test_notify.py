"""
Tests for the chat room notifier (HTTP mocked).
"""

import logging
from unittest.mock import MagicMock, patch

import pytest
import requests

from adventleader.config import MESSAGE_API_URL
from adventleader.notify.webex import NotifyError, post_message


def fake_response(status):
    response = MagicMock()
    response.status_code = status
    response.text = "" if status < 300 else '{"message": "denied"}'
    return response


class TestPostMessage:
    """Tests for post_message."""

    def test_posts_room_and_markdown(self):
        with patch("adventleader.notify.webex.requests.post", return_value=fake_response(200)) as post:
            status = post_message("room-1", "token-1", "### hi", timeout=7)
        assert status == 200
        args, kwargs = post.call_args
        assert args == (MESSAGE_API_URL,)
        assert kwargs["json"] == {"roomId": "room-1", "markdown": "### hi"}
        assert kwargs["headers"]["Authorization"] == "Bearer token-1"
        assert kwargs["timeout"] == 7

    def test_non_success_is_logged_and_returned(self, caplog):
        with patch("adventleader.notify.webex.requests.post", return_value=fake_response(401)):
            with caplog.at_level(logging.ERROR):
                status = post_message("room-1", "bad-token", "### hi")
        assert status == 401
        assert "room-1" in caplog.text
        assert "401" in caplog.text

    def test_transport_failure_raises(self):
        with patch("adventleader.notify.webex.requests.post", side_effect=requests.ConnectionError("down")):
            with pytest.raises(NotifyError, match="room-1"):
                post_message("room-1", "token-1", "### hi")
