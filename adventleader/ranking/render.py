"""
Markdown rendering of a ranked leaderboard.

Two layouts exist, "detailed" (score and stars first, global score shown)
and "compact" (name first, no global score). Both share the same rules:
members without a star are left out, local score is padded to 3 digits and
stars to 2.
"""

from __future__ import annotations

from dataclasses import dataclass

from adventleader.config import STYLE_DETAILED, STYLE_COMPACT
from adventleader.ingestion.models import Member
from adventleader.ranking.ranker import RankedReport
from adventleader.utils import display_url


@dataclass(frozen=True)
class RenderPolicy:
    header: str
    line: str
    global_suffix: str = ""

    def render_line(self, position: int, member: Member) -> str:
        line = self.line.format(
            position=position,
            score=member.local_score,
            stars=member.stars,
            name=member.display_name,
        )
        if self.global_suffix and member.global_score > 0:
            line += self.global_suffix.format(global_score=member.global_score)
        return line


DETAILED = RenderPolicy(
    header="### [Leaderboard 🎄]({url})\n\n---\n",
    line=" {position}. 📈 `{score:03d}` ⭐ `{stars:02d}` – **{name}**",
    global_suffix=" (🌍 _{global_score}_!)",
)

COMPACT = RenderPolicy(
    header="### [Leaderboard 🎄]({url})\n\n",
    line=" {position}. **{name}** 📈 _{score:03d}_ ⭐ _{stars:02d}_",
)

POLICIES = {
    STYLE_DETAILED: DETAILED,
    STYLE_COMPACT: COMPACT,
}


def render(report: RankedReport, source_url: str, policy: RenderPolicy = DETAILED) -> str:
    """
    Render a ranked report as a Markdown message.

    Args:
        report: Output of rank()
        source_url: Leaderboard JSON URL; the header links to it minus `.json`
        policy: Layout to use

    Returns:
        Header followed by one line per member with at least one star
    """
    lines = [policy.header.format(url=display_url(source_url))]
    shown = [m for m in report.members if m.stars > 0]
    for position, member in enumerate(shown, start=1):
        lines.append(policy.render_line(position, member) + "\n")
    return "".join(lines)
