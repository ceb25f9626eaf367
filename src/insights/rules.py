"""Banding and clause selection for the personalized weekly analysis."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from typing import List

from . import templates
from .models import WeekSummary

HIGH_THRESHOLD = 7.0
BALANCED_THRESHOLD = 5.0
LOW_ENERGY_CEILING = 4.0
LOW_STRESS_CEILING = 4.0
HIGH_STRESS_FLOOR = 6.0
POSITIVE_MOOD_FLOOR = 6.0

# Wide enough to quantize any finite float to one decimal.
_SCORE_CONTEXT = Context(prec=400, rounding=ROUND_HALF_UP)

EXCEPTIONAL_REFLECTIONS = 5
REGULAR_REFLECTIONS = 3
FREQUENT_REFLECTIONS = 4


def score_band(value: float) -> str:
    """Map a 0-10 score to ``high``, ``balanced`` or ``low``."""
    if value >= HIGH_THRESHOLD:
        return "high"
    if value >= BALANCED_THRESHOLD:
        return "balanced"
    return "low"


def format_score(value: float) -> str:
    """One decimal place, rounding halves up as they are written."""
    if not math.isfinite(value):
        return f"{value:.1f}"
    return str(Decimal(repr(value)).quantize(Decimal("0.1"), context=_SCORE_CONTEXT))


def summary_paragraph(summary: WeekSummary) -> str:
    mood_phrase = templates.MOOD_PHRASES[score_band(summary.avg_mood)].format(
        mood=format_score(summary.avg_mood)
    )
    sentences = [
        templates.SUMMARY_OPENING.format(count=summary.reflection_count, mood_phrase=mood_phrase)
    ]
    if summary.avg_energy > 0:
        sentences.append(
            templates.ENERGY_OPENING.format(
                energy=format_score(summary.avg_energy),
                energy_phrase=templates.ENERGY_PHRASES[score_band(summary.avg_energy)],
            )
        )
    return " ".join(sentences)


def insight_bullets(summary: WeekSummary) -> List[str]:
    bullets: List[str] = []

    if summary.reflection_count >= EXCEPTIONAL_REFLECTIONS:
        bullets.append(templates.CONSISTENCY_EXCEPTIONAL.format(count=summary.reflection_count))
    elif summary.reflection_count >= REGULAR_REFLECTIONS:
        bullets.append(templates.CONSISTENCY_REGULAR)
    else:
        bullets.append(templates.CONSISTENCY_OPPORTUNITY)

    if summary.avg_mood >= HIGH_THRESHOLD and summary.avg_stress <= LOW_STRESS_CEILING:
        bullets.append(templates.EMOTION_BALANCED)
    elif summary.avg_mood >= POSITIVE_MOOD_FLOOR:
        bullets.append(templates.EMOTION_POSITIVE)
    else:
        bullets.append(templates.EMOTION_HONEST)

    # Energy between the low ceiling and the high threshold adds nothing.
    if summary.avg_energy > 0:
        if summary.avg_energy >= HIGH_THRESHOLD:
            bullets.append(templates.ENERGY_HIGH)
        elif summary.avg_energy <= LOW_ENERGY_CEILING:
            bullets.append(templates.ENERGY_LOW)

    if summary.highlights:
        bullets.append(templates.HIGHLIGHTS_DEPTH)

    return bullets


def recommendation_bullets(summary: WeekSummary) -> List[str]:
    bullets: List[str] = []

    if summary.reflection_count < FREQUENT_REFLECTIONS:
        bullets.append(templates.RECOMMEND_FREQUENCY)

    if summary.avg_mood < BALANCED_THRESHOLD:
        bullets.extend(templates.RECOMMEND_LOW_MOOD)
    elif summary.avg_mood >= HIGH_THRESHOLD:
        bullets.extend(templates.RECOMMEND_HIGH_MOOD)

    if 0 < summary.avg_energy <= LOW_ENERGY_CEILING:
        bullets.extend(templates.RECOMMEND_LOW_ENERGY)

    if summary.avg_stress > HIGH_STRESS_FLOOR:
        bullets.extend(templates.RECOMMEND_HIGH_STRESS)

    return bullets


def closing_reflection(summary: WeekSummary) -> str:
    if summary.avg_mood >= POSITIVE_MOOD_FLOOR and summary.reflection_count >= FREQUENT_REFLECTIONS:
        return templates.CLOSING_CELEBRATORY
    if summary.avg_mood < BALANCED_THRESHOLD:
        return templates.CLOSING_RESILIENCE
    return templates.CLOSING_ENCOURAGEMENT
