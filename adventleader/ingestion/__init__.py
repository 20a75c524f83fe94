"""
Leaderboard Ingestion

Modules:
- timecodec: Fixed-offset timestamp parsing and formatting
- models: Typed leaderboard snapshot
- fetch: HTTP retrieval of the leaderboard JSON
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "fetch_leaderboard":
        from adventleader.ingestion.fetch import fetch_leaderboard
        return fetch_leaderboard
    if name == "Leaderboard":
        from adventleader.ingestion.models import Leaderboard
        return Leaderboard
    if name == "parse_timestamp":
        from adventleader.ingestion.timecodec import parse_timestamp
        return parse_timestamp
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
