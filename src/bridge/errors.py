"""Error types reported across the method-call bridge."""

from __future__ import annotations

from typing import Any

INVALID_ARGUMENTS = "INVALID_ARGUMENTS"
MODEL_NOT_LOADED = "MODEL_NOT_LOADED"
INIT_ERROR = "INIT_ERROR"
GENERATION_ERROR = "GENERATION_ERROR"
DISPOSE_ERROR = "DISPOSE_ERROR"
NOT_IMPLEMENTED = "NOT_IMPLEMENTED"
MISSING_PLUGIN = "MISSING_PLUGIN"


class PluginError(Exception):
    """Error reply from a plugin.

    Attributes:
        code: Stable error code understood by the UI layer.
        message: Human readable description.
        details: Optional extra payload.
    """

    def __init__(self, code: str, message: str = "", details: Any = None) -> None:
        self.code = code
        self.message = message
        self.details = details
        super().__init__(f"{code}: {message}" if message else code)


class InvalidArgumentsError(PluginError):
    def __init__(self, message: str = "Invalid arguments", details: Any = None) -> None:
        super().__init__(INVALID_ARGUMENTS, message, details)


class ModelNotLoadedError(PluginError):
    def __init__(self, message: str = "Model not initialized") -> None:
        super().__init__(MODEL_NOT_LOADED, message)


class MethodNotImplementedError(PluginError):
    def __init__(self, method: str) -> None:
        super().__init__(NOT_IMPLEMENTED, f"Method {method!r} is not implemented")


class MissingPluginError(PluginError):
    def __init__(self, channel: str, method: str) -> None:
        super().__init__(MISSING_PLUGIN, f"No handler for method {method!r} on channel {channel!r}")


class WorkerClosedError(RuntimeError):
    """Raised when work is submitted to a worker that has been shut down."""
