"""
Renderers for weekly insight responses.
"""

from __future__ import annotations

from typing import List, Optional

from . import templates
from .models import WeekSummary
from .rules import closing_reflection, insight_bullets, recommendation_bullets, summary_paragraph


def render_greeting(user_name: Optional[str]) -> str:
    return templates.GREETING_TEMPLATE.format(user_name=user_name or "")


def _render_section(header: str, lines: List[str]) -> str:
    return "\n".join([header, *lines])


def _bullets(items: List[str]) -> List[str]:
    return [f"{templates.BULLET}{item}" for item in items]


def render_personalized_analysis(summary: WeekSummary) -> str:
    """Produce the full analysis for a week that carries journal data."""
    sections: List[str] = [
        render_greeting(summary.user_name),
        _render_section(templates.WEEKLY_SUMMARY_HEADER, [summary_paragraph(summary)]),
        _render_section(templates.INSIGHTS_HEADER, _bullets(insight_bullets(summary))),
        _render_section(templates.RECOMMENDATIONS_HEADER, _bullets(recommendation_bullets(summary))),
        _render_section(templates.CLOSING_HEADER, [closing_reflection(summary)]),
    ]
    return "\n\n".join(sections)


def render_empty_week(user_name: Optional[str]) -> str:
    return templates.EMPTY_WEEK_TEMPLATE.format(user_name=user_name or "")


def render_fallback() -> str:
    return templates.FALLBACK_RESPONSE
