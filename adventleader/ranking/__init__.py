"""
Leaderboard Ranking

Modules:
- ranker: Orders members and finds the newest star
- render: Markdown report for the chat room
"""


def __getattr__(name):
    """Lazy imports to avoid RuntimeWarning when running modules directly."""
    if name == "rank":
        from adventleader.ranking.ranker import rank
        return rank
    if name == "render":
        from adventleader.ranking.render import render
        return render
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
