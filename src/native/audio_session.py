"""Audio session setup for voice journaling."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

LOGGER = logging.getLogger(__name__)


def _env_or_default(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_list(name: str, default: Sequence[str]) -> List[str]:
    value = os.getenv(name)
    if value is None or not value.strip():
        return list(default)
    return [item.strip() for item in value.split(",") if item.strip()]


class AudioSession(Protocol):
    """Platform audio session handle (AVAudioSession, AudioManager, ...)."""

    def set_category(self, category: str, mode: str, options: Sequence[str]) -> None: ...

    def set_active(self, active: bool) -> None: ...


@dataclass(slots=True)
class AudioSessionConfig:
    """Audio routing used while recording voice notes."""

    category: str = field(default_factory=lambda: _env_or_default("AUDIO_SESSION_CATEGORY", "playAndRecord"))
    mode: str = field(default_factory=lambda: _env_or_default("AUDIO_SESSION_MODE", "default"))
    options: List[str] = field(
        default_factory=lambda: _env_list("AUDIO_SESSION_OPTIONS", ["defaultToSpeaker", "allowBluetooth"])
    )


class AudioSessionConfigurator:
    """Applies an AudioSessionConfig to the platform session."""

    def __init__(self, config: AudioSessionConfig | None = None) -> None:
        self.config = config or AudioSessionConfig()

    def configure(self, session: AudioSession) -> bool:
        """Return True when the session accepted the configuration."""
        try:
            session.set_category(self.config.category, self.config.mode, tuple(self.config.options))
            session.set_active(True)
        except Exception as exc:
            LOGGER.error("Failed to configure audio session: %s", exc)
            return False
        LOGGER.info(
            "Audio session configured (category=%s, mode=%s, options=%s)",
            self.config.category,
            self.config.mode,
            ",".join(self.config.options),
        )
        return True
