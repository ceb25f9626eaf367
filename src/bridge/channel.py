"""
In-process method-call bridge between the UI layer and native plugins.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from .errors import MethodNotImplementedError, MissingPluginError, PluginError

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class MethodCall:
    """A named invocation with its keyword arguments."""

    method: str
    arguments: Dict[str, Any] = field(default_factory=dict)

    def argument(self, key: str, default: Any = None) -> Any:
        return self.arguments.get(key, default)


class MethodResult(Protocol):
    """Reply sink handed to a handler together with each call."""

    def success(self, value: Any = None) -> None: ...

    def error(self, code: str, message: str = "", details: Any = None) -> None: ...

    def not_implemented(self) -> None: ...


class MethodCallHandler(Protocol):
    def on_method_call(self, call: MethodCall, result: MethodResult) -> None: ...


class FutureResult:
    """MethodResult that completes a Future; each call accepts exactly one reply."""

    def __init__(self, call: MethodCall) -> None:
        self.call = call
        self.future: Future = Future()
        self._lock = threading.Lock()
        self._replied = False

    def success(self, value: Any = None) -> None:
        self._claim()
        self.future.set_result(value)

    def error(self, code: str, message: str = "", details: Any = None) -> None:
        self._claim()
        self.future.set_exception(PluginError(code, message, details))

    def not_implemented(self) -> None:
        self._claim()
        self.future.set_exception(MethodNotImplementedError(self.call.method))

    def _claim(self) -> None:
        with self._lock:
            if self._replied:
                raise RuntimeError(f"Reply already submitted for {self.call.method!r}")
            self._replied = True


class BinaryMessenger:
    """Routes calls to the handler registered for a channel name."""

    def __init__(self) -> None:
        self._handlers: Dict[str, MethodCallHandler] = {}
        self._lock = threading.Lock()

    def set_handler(self, channel: str, handler: Optional[MethodCallHandler]) -> None:
        with self._lock:
            if handler is None:
                self._handlers.pop(channel, None)
                LOGGER.debug("Cleared handler for channel %s", channel)
            else:
                self._handlers[channel] = handler
                LOGGER.debug("Registered handler for channel %s", channel)

    def has_handler(self, channel: str) -> bool:
        with self._lock:
            return channel in self._handlers

    def send(self, channel: str, call: MethodCall) -> Future:
        result = FutureResult(call)
        with self._lock:
            handler = self._handlers.get(channel)
        if handler is None:
            LOGGER.warning("No handler for %s on channel %s", call.method, channel)
            result.future.set_exception(MissingPluginError(channel, call.method))
            return result.future
        handler.on_method_call(call, result)
        return result.future


class MethodChannel:
    """Named channel over a BinaryMessenger."""

    def __init__(self, messenger: BinaryMessenger, name: str) -> None:
        self.messenger = messenger
        self.name = name

    def set_method_call_handler(self, handler: Optional[MethodCallHandler]) -> None:
        self.messenger.set_handler(self.name, handler)

    def invoke_method(self, method: str, arguments: Optional[Dict[str, Any]] = None) -> Future:
        return self.messenger.send(self.name, MethodCall(method=method, arguments=dict(arguments or {})))
