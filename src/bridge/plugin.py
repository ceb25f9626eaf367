"""GenAI plugin: answers UI method calls with a simulated on-device model."""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, Optional

from ..insights.generator import InsightGenerator
from .arguments import GenerateTextArguments, InitializeModelArguments, parse_arguments
from .channel import BinaryMessenger, MethodCall, MethodChannel, MethodResult
from .config import GenAIConfig
from .errors import DISPOSE_ERROR, GENERATION_ERROR, INIT_ERROR, InvalidArgumentsError, ModelNotLoadedError
from .worker import SerialWorker

LOGGER = logging.getLogger(__name__)

IS_AVAILABLE = "isGenAIAvailable"
INITIALIZE_MODEL = "initializeModel"
GENERATE_TEXT = "generateText"
DISPOSE_MODEL = "disposeModel"


class GenAIPlugin:
    """Owns the ready flag and the background worker for one attached engine."""

    def __init__(
        self,
        config: GenAIConfig | None = None,
        generator: InsightGenerator | None = None,
        sleep: Callable[[float], None] = time.sleep,
        worker_factory: Callable[[str], SerialWorker] = SerialWorker,
    ) -> None:
        self.config = config or GenAIConfig()
        self.generator = generator or InsightGenerator()
        self._sleep = sleep
        self._worker_factory = worker_factory
        self._channel: Optional[MethodChannel] = None
        self._worker: Optional[SerialWorker] = None
        self._retiring: Optional[SerialWorker] = None
        self._worker_lock = threading.Lock()
        self._model_loaded = threading.Event()
        self._model_path: Optional[str] = None

    @property
    def is_model_loaded(self) -> bool:
        return self._model_loaded.is_set()

    @property
    def model_path(self) -> Optional[str]:
        return self._model_path

    @property
    def has_worker(self) -> bool:
        return self._worker is not None

    def is_available(self) -> bool:
        return True

    def on_attached(self, messenger: BinaryMessenger) -> None:
        self._channel = MethodChannel(messenger, self.config.channel_name)
        self._channel.set_method_call_handler(self)
        LOGGER.info("GenAI plugin attached on channel %s", self.config.channel_name)

    def on_detached(self) -> None:
        if self._channel is not None:
            self._channel.set_method_call_handler(None)
            self._channel = None
        self._model_loaded.clear()
        with self._worker_lock:
            worker, self._worker = self._worker, None
            self._retiring = None
        if worker is None:
            self._release_model()
        else:
            # Release after any queued initialize so it cannot reload the model.
            worker.submit(self._release_model)
            worker.shutdown()
        LOGGER.info("GenAI plugin detached")

    def on_method_call(self, call: MethodCall, result: MethodResult) -> None:
        if call.method == IS_AVAILABLE:
            result.success(self.is_available())
        elif call.method == INITIALIZE_MODEL:
            self._initialize_model(call, result)
        elif call.method == GENERATE_TEXT:
            self._generate_text(call, result)
        elif call.method == DISPOSE_MODEL:
            self._dispose_model(result)
        else:
            LOGGER.debug("Unknown GenAI method %s", call.method)
            result.not_implemented()

    def _initialize_model(self, call: MethodCall, result: MethodResult) -> None:
        try:
            args = parse_arguments(InitializeModelArguments, call.arguments)
        except InvalidArgumentsError as exc:
            result.error(exc.code, exc.message, exc.details)
            return

        def task() -> None:
            try:
                self._sleep(self.config.init_delay_seconds)
                self._model_path = args.model_path
                self._model_loaded.set()
            except Exception as exc:
                LOGGER.error("Model initialization failed: %s", exc)
                result.error(INIT_ERROR, f"Failed to initialize model: {exc}")
                return
            LOGGER.info("Simulated model loaded from %s", args.model_path)
            result.success(True)

        self._submit(task)

    def _generate_text(self, call: MethodCall, result: MethodResult) -> None:
        if not self._model_loaded.is_set():
            error = ModelNotLoadedError()
            result.error(error.code, error.message)
            return
        try:
            args = parse_arguments(GenerateTextArguments, call.arguments)
        except InvalidArgumentsError as exc:
            result.error(exc.code, exc.message, exc.details)
            return
        LOGGER.debug(
            "Generating text (max_tokens=%s, temperature=%s, top_p=%s)",
            args.max_tokens,
            args.temperature,
            args.top_p,
        )

        def task() -> None:
            try:
                self._sleep(self.config.generate_delay_seconds)
                text = self.generator.generate(args.prompt)
            except Exception as exc:
                LOGGER.error("Text generation failed: %s", exc)
                result.error(GENERATION_ERROR, f"Failed to generate text: {exc}")
                return
            result.success(text)

        self._submit(task)

    def _dispose_model(self, result: MethodResult) -> None:
        # Reject new generate calls right away; the queued clear also covers
        # an initialize that is still in flight.
        self._model_loaded.clear()
        with self._worker_lock:
            worker, self._worker = self._worker, None
            if worker is not None:
                self._retiring = worker

        if worker is None:
            LOGGER.debug("Dispose requested with no active worker")
            self._release_model()
            result.success(None)
            return

        def task() -> None:
            try:
                self._release_model()
            except Exception as exc:
                LOGGER.error("Model dispose failed: %s", exc)
                result.error(DISPOSE_ERROR, f"Failed to dispose model: {exc}")
                return
            LOGGER.info("Simulated model disposed")
            result.success(None)

        worker.submit(task)
        worker.shutdown()

    def _release_model(self) -> None:
        self._model_loaded.clear()
        self._model_path = None

    def _submit(self, task: Callable[[], None]) -> None:
        with self._worker_lock:
            if self._worker is None:
                self._worker = self._worker_factory(self.config.worker_name)
                retiring, self._retiring = self._retiring, None
                if retiring is not None:
                    # Keep FIFO order across a dispose: wait for the old queue to drain.
                    self._worker.submit(retiring.join)
            self._worker.submit(task)
