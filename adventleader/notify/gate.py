"""Change gate: does this cycle have anything new to report?"""

from datetime import datetime


def should_notify(max_last_star: datetime, last_notified_at: datetime, debug: bool = False) -> bool:
    """
    Decide whether the current snapshot warrants a post.

    True when the newest star is strictly later than the last notification,
    or unconditionally in debug mode.
    """
    if debug:
        return True
    return max_last_star > last_notified_at
