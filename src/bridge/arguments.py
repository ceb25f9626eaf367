"""Schema validation for method-call arguments coming from the UI layer."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import InvalidArgumentsError

LOGGER = logging.getLogger(__name__)

ArgumentsT = TypeVar("ArgumentsT", bound=BaseModel)


class InitializeModelArguments(BaseModel):
    """Arguments of ``initializeModel``."""

    model_config = ConfigDict(populate_by_name=True, protected_namespaces=())

    model_path: str = Field(alias="modelPath")

    @field_validator("model_path")
    @classmethod
    def _non_empty_path(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("modelPath cannot be empty")
        return value


class GenerateTextArguments(BaseModel):
    """Arguments of ``generateText``.

    The tuning values are accepted for interface compatibility; the simulated
    backend does not use them.
    """

    model_config = ConfigDict(populate_by_name=True)

    prompt: str
    max_tokens: int = Field(alias="maxTokens")
    temperature: float
    top_p: float = Field(alias="topP")


def parse_arguments(model: Type[ArgumentsT], arguments: Mapping[str, Any] | None) -> ArgumentsT:
    """
    Validate raw call arguments against ``model``.

    Raises:
        InvalidArgumentsError: when a required value is absent or ill-typed.
    """
    try:
        return model.model_validate(dict(arguments or {}))
    except ValidationError as exc:
        fields = sorted({".".join(str(part) for part in error["loc"]) for error in exc.errors()})
        LOGGER.warning("Rejecting %s: invalid %s", model.__name__, ", ".join(fields))
        raise InvalidArgumentsError(
            f"Invalid or missing arguments: {', '.join(fields)}",
            details=fields,
        ) from exc
