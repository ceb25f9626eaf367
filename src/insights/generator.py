"""Deterministic insight generator used in place of an on-device model."""

from __future__ import annotations

import logging

from .markers import parse_week_summary
from .renderers import render_empty_week, render_fallback, render_personalized_analysis

LOGGER = logging.getLogger(__name__)


class InsightGenerator:
    """Turns a weekly journal prompt into a templated analysis."""

    def generate(self, prompt: str) -> str:
        """Return the analysis text; faults fall back to a fixed message."""
        try:
            summary = parse_week_summary(prompt)
            if summary.has_data():
                return render_personalized_analysis(summary)
            LOGGER.info("No journal activity found in prompt; using empty-week response.")
            return render_empty_week(summary.user_name)
        except Exception as exc:
            LOGGER.error("Insight generation failed (%s); using fallback template.", exc)
            return render_fallback()


def generate_insight(prompt: str) -> str:
    return InsightGenerator().generate(prompt)
