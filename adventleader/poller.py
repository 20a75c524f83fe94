"""
Leaderboard Poller

Runs the fetch -> rank -> gate -> notify -> sleep cycle forever. A post is
only sent when some member earned a star after the previous post (or every
cycle in debug mode).

Usage:
    python -m adventleader.poller --config config.json
    OR
    python adventleader/poller.py --once --debug
"""

import sys
from pathlib import Path

# Enable both `python adventleader/poller.py` and `python -m adventleader.poller` execution modes.
# This ensures adventleader.config imports work regardless of how the script is invoked.
_project_root = str(Path(__file__).parent.parent)
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

import argparse
import time
from dataclasses import dataclass, replace
from datetime import datetime, timezone

from adventleader import __version__
from adventleader.config import (
    DEFAULT_CONFIG_PATH,
    POLL_INTERVAL_SECONDS,
    Config,
    ConfigLoadError,
    load_config,
)
from adventleader.ingestion.fetch import FetchError, fetch_leaderboard
from adventleader.ingestion.timecodec import format_timestamp
from adventleader.notify.gate import should_notify
from adventleader.notify.webex import NotifyError, post_message
from adventleader.ranking.ranker import rank, report_frame
from adventleader.ranking.render import POLICIES, render
from adventleader.utils import set_log_level, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


@dataclass(frozen=True)
class PollState:
    last_notified_at: datetime


def utc_now() -> datetime:
    return datetime.now(tz=timezone.utc)


def run_cycle(
    config: Config,
    state: PollState,
    fetcher=fetch_leaderboard,
    notifier=post_message,
    now=utc_now,
) -> PollState:
    """
    Run one poll cycle and return the state for the next one.

    `last_notified_at` moves to the wall-clock time of the post, not to the
    newest star that was reported, and never moves backward.

    Raises:
        FetchError: If the leaderboard could not be retrieved
    """
    leaderboard = fetcher(config.url, config.cookie, config.timeout, config.user_agent)
    report = rank(leaderboard)
    logger.info(
        f"Fetched {len(report.members)} members, newest star at "
        f"{format_timestamp(report.max_last_star)}"
    )

    message = render(report, config.url, POLICIES[config.style])

    if config.debug:
        logger.debug("\n" + report_frame(report).to_string(index=False))
        print(message)

    if not should_notify(report.max_last_star, state.last_notified_at, config.debug):
        logger.info("No new stars since the last post")
        return state

    try:
        notifier(config.room_id, config.bot_token, message, config.timeout)
    except NotifyError as e:
        logger.error(f"{e}; will try again next cycle")
        return state

    posted_at = max(now(), state.last_notified_at)
    return replace(state, last_notified_at=posted_at)


def run_forever(
    config: Config,
    sleep=time.sleep,
    now=utc_now,
    fetcher=fetch_leaderboard,
    notifier=post_message,
    interval: float = POLL_INTERVAL_SECONDS,
    max_cycles: int | None = None,
) -> PollState:
    """
    Poll until the process is stopped (or `max_cycles` cycles have run).

    A FetchError ends the loop when `config.exit_on_fetch_error` is set;
    otherwise the cycle is skipped and the loop goes back to sleep.

    Returns:
        The final PollState (only reachable with max_cycles)

    Raises:
        FetchError: If fetching fails and exit_on_fetch_error is set
    """
    state = PollState(last_notified_at=now())
    cycles = 0

    while True:
        try:
            state = run_cycle(config, state, fetcher=fetcher, notifier=notifier, now=now)
        except FetchError as e:
            if config.exit_on_fetch_error:
                raise
            logger.error(f"{e}; skipping this cycle")

        cycles += 1
        if max_cycles is not None and cycles >= max_cycles:
            return state

        logger.debug(f"Sleeping {interval}s")
        sleep(interval)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Post a private leaderboard to a chat room whenever someone earns a star."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=DEFAULT_CONFIG_PATH,
        help=f"Path to the JSON config file (default: {DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument("--once", action="store_true", help="Run a single cycle and exit")
    parser.add_argument("--debug", action="store_true", help="Force debug mode on")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """CLI entry point."""
    args = parse_args(argv)
    set_log_level(args.log_level)

    logger.info(f"adventleader {__version__}")

    try:
        config = load_config(args.config)
    except ConfigLoadError as e:
        logger.error(f"CONFIG ERROR: {e}")
        return 1

    if args.debug:
        config = replace(config, debug=True)

    try:
        run_forever(config, max_cycles=1 if args.once else None)
    except FetchError as e:
        logger.error(f"FETCH ERROR: {e}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")

    return 0


if __name__ == "__main__":
    sys.exit(main())
