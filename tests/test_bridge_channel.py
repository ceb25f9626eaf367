from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from src.bridge.arguments import GenerateTextArguments, InitializeModelArguments, parse_arguments
from src.bridge.channel import BinaryMessenger, FutureResult, MethodCall, MethodChannel
from src.bridge.config import GenAIConfig
from src.bridge.errors import (
    INVALID_ARGUMENTS,
    MISSING_PLUGIN,
    InvalidArgumentsError,
    MissingPluginError,
    PluginError,
)


class EchoHandler:
    def __init__(self):
        self.calls = []

    def on_method_call(self, call, result):
        self.calls.append(call)
        if call.method == "fail":
            result.error("ECHO_ERROR", "failed on purpose", {"hint": 1})
        else:
            result.success(call.arguments)


def test_channel_routes_to_handler():
    messenger = BinaryMessenger()
    channel = MethodChannel(messenger, "test.echo")
    handler = EchoHandler()
    channel.set_method_call_handler(handler)

    assert channel.invoke_method("echo", {"a": 1}).result(timeout=1) == {"a": 1}
    assert handler.calls == [MethodCall(method="echo", arguments={"a": 1})]


def test_error_reply_surfaces_as_plugin_error():
    messenger = BinaryMessenger()
    channel = MethodChannel(messenger, "test.echo")
    channel.set_method_call_handler(EchoHandler())

    with pytest.raises(PluginError) as excinfo:
        channel.invoke_method("fail").result(timeout=1)
    assert excinfo.value.code == "ECHO_ERROR"
    assert excinfo.value.details == {"hint": 1}


def test_missing_handler():
    messenger = BinaryMessenger()
    channel = MethodChannel(messenger, "test.echo")
    channel.set_method_call_handler(EchoHandler())
    channel.set_method_call_handler(None)

    assert not messenger.has_handler("test.echo")
    with pytest.raises(MissingPluginError) as excinfo:
        channel.invoke_method("echo").result(timeout=1)
    assert excinfo.value.code == MISSING_PLUGIN


def test_future_result_accepts_one_reply():
    result = FutureResult(MethodCall(method="x"))
    result.success(1)
    with pytest.raises(RuntimeError):
        result.error("LATE", "too late")
    assert result.future.result(timeout=1) == 1


def test_generate_arguments_from_camel_case():
    args = parse_arguments(
        GenerateTextArguments,
        {"prompt": "hola", "maxTokens": 256, "temperature": 0.7, "topP": 0.9},
    )
    assert args.prompt == "hola"
    assert args.max_tokens == 256
    assert args.top_p == pytest.approx(0.9)


def test_missing_prompt_is_invalid():
    with pytest.raises(InvalidArgumentsError) as excinfo:
        parse_arguments(GenerateTextArguments, {"maxTokens": 256, "temperature": 0.7, "topP": 0.9})
    assert excinfo.value.code == INVALID_ARGUMENTS
    assert "prompt" in excinfo.value.details


def test_unusual_tuning_values_are_accepted():
    args = parse_arguments(GenerateTextArguments, {"prompt": "x", "maxTokens": 0, "temperature": 2.0, "topP": 1.5})
    assert args.max_tokens == 0
    assert args.temperature == pytest.approx(2.0)
    assert args.top_p == pytest.approx(1.5)


def test_ill_typed_tuning_value_is_invalid():
    with pytest.raises(InvalidArgumentsError) as excinfo:
        parse_arguments(GenerateTextArguments, {"prompt": "x", "maxTokens": "many", "temperature": 0.7, "topP": 0.9})
    assert "maxTokens" in excinfo.value.details


def test_model_path_required_and_trimmed():
    assert parse_arguments(InitializeModelArguments, {"modelPath": " /models/gemma.bin "}).model_path == "/models/gemma.bin"
    with pytest.raises(InvalidArgumentsError):
        parse_arguments(InitializeModelArguments, {"modelPath": "   "})
    with pytest.raises(InvalidArgumentsError):
        parse_arguments(InitializeModelArguments, None)


def test_genai_config_from_env(monkeypatch):
    monkeypatch.setenv("GENAI_CHANNEL_NAME", "com.example.journal/genai")
    monkeypatch.setenv("GENAI_INIT_DELAY_SECONDS", "0.5")
    monkeypatch.setenv("GENAI_GENERATE_DELAY_SECONDS", "soon")

    config = GenAIConfig()

    assert config.channel_name == "com.example.journal/genai"
    assert config.init_delay_seconds == pytest.approx(0.5)
    assert config.generate_delay_seconds == pytest.approx(3.0)


def test_genai_config_rejects_negative_delay():
    with pytest.raises(ValueError):
        GenAIConfig(init_delay_seconds=-1.0)
