"""Dataclasses for the weekly insight generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(slots=True)
class WeekSummary:
    """Values extracted from a single weekly journal prompt."""

    user_name: Optional[str] = None
    reflection_count: int = 0
    avg_mood: float = 0.0
    avg_energy: float = 0.0
    avg_stress: float = 0.0
    moment_count: int = 0
    highlights: List[str] = field(default_factory=list)

    def has_data(self) -> bool:
        """True when the week carries any reflection, moment or highlight."""
        return self.reflection_count > 0 or self.moment_count > 0 or bool(self.highlights)
