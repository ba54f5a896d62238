"""Display helpers for job cards and the detail view."""
from __future__ import annotations

import html
import math
from datetime import datetime, timezone

from joblist.models import Job

MATCH_BADGE_THRESHOLD = 70
SKILL_CHIP_LIMIT = 6


def match_badge(job: Job) -> str | None:
    """``"NN% Match"`` for strong matches, None otherwise."""
    if job.score is None or not math.isfinite(job.score.total_score):
        return None
    if job.score.total_score < MATCH_BADGE_THRESHOLD:
        return None
    return f"{math.floor(job.score.total_score + 0.5)}% Match"


def _money(value: float) -> str:
    if value < 1000:
        return f"${value:,.0f}"
    thousands = f"{value / 1000:.1f}".rstrip("0").rstrip(".")
    return f"${thousands}k"


def format_salary_range(salary_min: float | None, salary_max: float | None) -> str | None:
    if salary_min and salary_max:
        return f"{_money(salary_min)} - {_money(salary_max)}"
    if salary_min:
        return f"{_money(salary_min)}+"
    if salary_max:
        return f"Up to {_money(salary_max)}"
    return None


def _plural(n: int, unit: str) -> str:
    return f"{n} {unit}{'' if n == 1 else 's'} ago"


def format_relative_time(ts: datetime | str | None, now: datetime | None = None) -> str:
    if isinstance(ts, str):
        try:
            ts = datetime.fromisoformat(ts.replace("Z", "+00:00"))
        except ValueError:
            return ""
    if ts is None:
        return ""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)

    seconds = (now - ts).total_seconds()
    if seconds < 60:
        return "just now"
    minutes = int(seconds // 60)
    if minutes < 60:
        return _plural(minutes, "minute")
    hours = minutes // 60
    if hours < 24:
        return _plural(hours, "hour")
    days = hours // 24
    if days == 1:
        return "yesterday"
    if days < 7:
        return _plural(days, "day")
    if days < 30:
        return _plural(days // 7, "week")
    return ts.strftime("%b %d, %Y")


def skill_chips(skills: tuple[str, ...] | list[str], limit: int = SKILL_CHIP_LIMIT) -> list[str]:
    chips = list(skills[:limit])
    if len(skills) > limit:
        chips.append(f"+{len(skills) - limit}")
    return chips


def title_html(job: Job) -> str:
    """Card heading markup; endpoint text is escaped before it meets HTML."""
    badge = match_badge(job)
    badge_html = f'<span class="match-badge">{html.escape(badge)}</span>' if badge else ""
    return f"**{html.escape(job.title)}**{badge_html}"


def chips_html(skills: tuple[str, ...] | list[str]) -> str:
    return "".join(f'<span class="skill-chip">{html.escape(s)}</span>' for s in skills)
