"""
Leaderboard Fetcher

Retrieves the leaderboard JSON with the session cookie and turns it into a
Leaderboard. Every failure mode (network, HTTP status, JSON decode, payload
shape) surfaces as FetchError; deciding whether that ends the process is up
to the caller.
"""

import requests

from adventleader.config import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    SESSION_COOKIE_NAME,
)
from adventleader.ingestion.models import Leaderboard, SchemaError
from adventleader.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class FetchError(Exception):
    """Raised when the leaderboard cannot be retrieved or decoded"""
    pass


def fetch_leaderboard(
    url: str,
    cookie: str,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    user_agent: str = DEFAULT_USER_AGENT,
) -> Leaderboard:
    """
    Fetch and decode the leaderboard.

    Args:
        url: JSON endpoint of the private leaderboard
        cookie: Value of the `session` cookie
        timeout: Seconds to wait for the server before giving up
        user_agent: User-Agent header sent with the request

    Returns:
        Parsed Leaderboard

    Raises:
        FetchError: On network failure, timeout, non-2xx status or bad payload
    """
    logger.debug(f"Fetching leaderboard from {url}")
    try:
        response = requests.get(
            url,
            cookies={SESSION_COOKIE_NAME: cookie},
            headers={"User-Agent": user_agent},
            timeout=timeout,
        )
    except requests.Timeout as e:
        raise FetchError(f"Timed out after {timeout}s fetching {url}: {e}") from e
    except requests.RequestException as e:
        raise FetchError(f"Network error fetching {url}: {e}") from e

    if not 200 <= response.status_code < 300:
        raise FetchError(f"HTTP {response.status_code} fetching {url}")

    try:
        payload = response.json()
    except ValueError as e:
        raise FetchError(f"Response from {url} is not valid JSON: {e}") from e

    try:
        leaderboard = Leaderboard.from_dict(payload)
    except SchemaError as e:
        raise FetchError(f"Unexpected leaderboard payload from {url}: {e}") from e

    logger.debug(f"Fetched {len(leaderboard.members)} members for event {leaderboard.event}")
    return leaderboard
