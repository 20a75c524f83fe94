"""
adventleader - Leaderboard Notifier

This package contains the modules for:
- Leaderboard ingestion (adventleader.ingestion)
- Ranking and report rendering (adventleader.ranking)
- Change gate and chat notification (adventleader.notify)
- The poll loop (adventleader.poller)
"""

__version__ = "1.0.0"
