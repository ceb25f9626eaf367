"""Rule-based weekly journal insights."""

from .generator import InsightGenerator, generate_insight
from .markers import parse_week_summary
from .models import WeekSummary

__all__ = ["InsightGenerator", "WeekSummary", "generate_insight", "parse_week_summary"]
