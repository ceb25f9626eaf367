"""Marker table and extraction of weekly values from a journal prompt."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Pattern

from .models import WeekSummary

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MarkerRule:
    """Label text in the prompt, the field it fills and how its value is parsed."""

    field: str
    pattern: Pattern[str]
    parse: Callable[[str], Any]


def parse_int(raw: str) -> int:
    return int(raw.strip())


def parse_float(raw: str) -> float:
    return float(raw.strip())


def parse_name(raw: str) -> Optional[str]:
    name = raw.strip()
    return name or None


# First occurrence of each marker wins; values never span lines.
MARKER_RULES: Dict[str, MarkerRule] = {
    "user_name": MarkerRule(
        field="user_name",
        pattern=re.compile(r"\bde ([^\n]+?) de esta semana"),
        parse=parse_name,
    ),
    "reflection_count": MarkerRule(
        field="reflection_count",
        pattern=re.compile(r"Total de días con reflexiones: ([^\n]*)"),
        parse=parse_int,
    ),
    "avg_mood": MarkerRule(
        field="avg_mood",
        pattern=re.compile(r"Estado de ánimo promedio: ([^\n]*?)/10"),
        parse=parse_float,
    ),
    "avg_energy": MarkerRule(
        field="avg_energy",
        pattern=re.compile(r"Nivel de energía promedio: ([^\n]*?)/10"),
        parse=parse_float,
    ),
    "avg_stress": MarkerRule(
        field="avg_stress",
        pattern=re.compile(r"Nivel de estrés promedio: ([^\n]*?)/10"),
        parse=parse_float,
    ),
    "moment_count": MarkerRule(
        field="moment_count",
        pattern=re.compile(r"Total de momentos registrados: ([^\n]*)"),
        parse=parse_int,
    ),
}

HIGHLIGHTS_SECTION_PATTERN = re.compile(r"REFLEXIONES DESTACADAS:(.*?)(?:\n\nMOMENTOS|\Z)", re.DOTALL)
HIGHLIGHT_LINE_PATTERN = re.compile(r"^\s*\d+\.\s*[\"“](.*)[\"”]\s*$")


def extract_field(rule: MarkerRule, prompt: str) -> Any:
    """Return the parsed value for ``rule`` or None when absent or malformed."""
    match = rule.pattern.search(prompt)
    if match is None:
        return None
    try:
        return rule.parse(match.group(1))
    except ValueError as exc:
        LOGGER.debug("Ignoring malformed value for %s: %s", rule.field, exc)
        return None


def extract_highlights(prompt: str) -> List[str]:
    """Collect numbered, quoted lines from the highlighted reflections section."""
    section = HIGHLIGHTS_SECTION_PATTERN.search(prompt)
    if section is None:
        return []
    highlights: List[str] = []
    for line in section.group(1).splitlines():
        match = HIGHLIGHT_LINE_PATTERN.match(line)
        if match:
            highlights.append(match.group(1))
    return highlights


def parse_week_summary(prompt: str) -> WeekSummary:
    """
    Build a WeekSummary from a weekly journal prompt.

    Markers that are missing or carry unparsable values leave the
    corresponding field at its default.
    """
    summary = WeekSummary()
    for rule in MARKER_RULES.values():
        value = extract_field(rule, prompt)
        if value is not None:
            setattr(summary, rule.field, value)
    summary.highlights = extract_highlights(prompt)
    LOGGER.debug(
        "Parsed week summary: reflections=%s moments=%s highlights=%s",
        summary.reflection_count,
        summary.moment_count,
        len(summary.highlights),
    )
    return summary
