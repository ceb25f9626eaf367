"""Application bootstrap: plugin registration and audio setup at launch."""

from __future__ import annotations

import logging
import os
from typing import List, Optional, Protocol

from .bridge.channel import BinaryMessenger
from .bridge.plugin import GenAIPlugin
from .native.audio_session import AudioSession, AudioSessionConfigurator

LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=getattr(logging, level_name, logging.INFO), format=LOG_FORMAT)


class Plugin(Protocol):
    def on_attached(self, messenger: BinaryMessenger) -> None: ...

    def on_detached(self) -> None: ...


class PluginRegistry:
    """Attaches plugins to a messenger and detaches them at teardown."""

    def __init__(self, messenger: BinaryMessenger) -> None:
        self.messenger = messenger
        self._plugins: List[Plugin] = []

    @property
    def plugins(self) -> List[Plugin]:
        return list(self._plugins)

    def add(self, plugin: Plugin) -> None:
        if plugin in self._plugins:
            LOGGER.warning("Plugin %s already registered; skipping.", type(plugin).__name__)
            return
        plugin.on_attached(self.messenger)
        self._plugins.append(plugin)
        LOGGER.debug("Registered plugin %s", type(plugin).__name__)

    def remove_all(self) -> None:
        while self._plugins:
            plugin = self._plugins.pop()
            plugin.on_detached()


class JournalApplication:
    """Native entry point of the journaling app."""

    def __init__(
        self,
        messenger: BinaryMessenger | None = None,
        audio_session: AudioSession | None = None,
        genai_plugin: GenAIPlugin | None = None,
        audio_configurator: AudioSessionConfigurator | None = None,
    ) -> None:
        self.messenger = messenger or BinaryMessenger()
        self.registry = PluginRegistry(self.messenger)
        self.audio_session = audio_session
        self.genai_plugin = genai_plugin or GenAIPlugin()
        self.audio_configurator = audio_configurator or AudioSessionConfigurator()
        self.audio_ready: Optional[bool] = None

    def launch(self) -> bool:
        self.registry.add(self.genai_plugin)
        if self.audio_session is None:
            LOGGER.info("No audio session available; voice recording disabled.")
            self.audio_ready = False
        else:
            self.audio_ready = self.audio_configurator.configure(self.audio_session)
        LOGGER.info("Application launched with %s plugin(s).", len(self.registry.plugins))
        return True

    def shutdown(self) -> None:
        self.registry.remove_all()
        LOGGER.info("Application shut down.")
