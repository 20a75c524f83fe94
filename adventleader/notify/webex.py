"""
Chat room notifier.

Posts a Markdown message to the room through the messaging API using the
bot's bearer token. A non-2xx answer is logged with enough context to find
lost deliveries and returned to the caller; only transport failures raise.
"""

import requests

from adventleader.config import DEFAULT_TIMEOUT_SECONDS, MESSAGE_API_URL
from adventleader.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class NotifyError(Exception):
    """Raised when the message could not be delivered to the messaging API"""
    pass


def post_message(
    room_id: str,
    bot_token: str,
    markdown: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    api_url: str = MESSAGE_API_URL,
) -> int:
    """
    Post a Markdown message to a room.

    Args:
        room_id: Target room
        bot_token: Bearer token of the bot account
        markdown: Message body
        timeout: Seconds to wait for the API
        api_url: Messages endpoint

    Returns:
        HTTP status code of the API response

    Raises:
        NotifyError: If the request could not be sent or timed out
    """
    try:
        response = requests.post(
            api_url,
            json={"roomId": room_id, "markdown": markdown},
            headers={
                "Authorization": f"Bearer {bot_token}",
                "Content-Type": "application/json; charset=utf-8",
            },
            timeout=timeout,
        )
    except requests.RequestException as e:
        raise NotifyError(f"Could not post to room {room_id}: {e}") from e

    status = response.status_code
    if 200 <= status < 300:
        logger.info(f"Posted leaderboard to room {room_id} (HTTP {status})")
    else:
        logger.error(
            f"Messaging API rejected post to room {room_id}: HTTP {status} {response.text[:200]}"
        )
    return status
