"""Platform services configured at application launch."""

from .audio_session import AudioSessionConfig, AudioSessionConfigurator

__all__ = ["AudioSessionConfig", "AudioSessionConfigurator"]
