"""Method-call bridge and the GenAI plugin served over it."""

from .channel import BinaryMessenger, MethodCall, MethodChannel
from .config import GenAIConfig
from .plugin import GenAIPlugin

__all__ = ["BinaryMessenger", "GenAIConfig", "GenAIPlugin", "MethodCall", "MethodChannel"]
