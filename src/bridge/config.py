"""Configuration helpers for the GenAI bridge."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

LOGGER = logging.getLogger(__name__)


def _env_or_default(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return float(value)
    except ValueError:
        LOGGER.warning("Ignoring non-numeric %s=%r; using %s.", name, value, default)
        return default


@dataclass(slots=True)
class GenAIConfig:
    """Runtime configuration for the simulated on-device model."""

    channel_name: str = field(default_factory=lambda: _env_or_default("GENAI_CHANNEL_NAME", "com.yourapp.genai"))
    worker_name: str = field(default_factory=lambda: _env_or_default("GENAI_WORKER_NAME", "genai-worker"))

    # Simulated model latency, in seconds
    init_delay_seconds: float = field(default_factory=lambda: _env_float("GENAI_INIT_DELAY_SECONDS", 2.0))
    generate_delay_seconds: float = field(default_factory=lambda: _env_float("GENAI_GENERATE_DELAY_SECONDS", 3.0))

    def __post_init__(self) -> None:
        if self.init_delay_seconds < 0 or self.generate_delay_seconds < 0:
            raise ValueError("Simulated delays must be non-negative.")
