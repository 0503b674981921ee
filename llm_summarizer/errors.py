from __future__ import annotations

from pathlib import Path
from typing import Optional


class ProcessorError(RuntimeError):
    """Base class for every fatal condition that aborts a run."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path.name}: {self.message}"


class ConfigurationError(ProcessorError):
    pass


class DiscoveryError(ProcessorError):
    pass


class DocumentReadError(ProcessorError):
    pass


class DocumentValidationError(ProcessorError):
    pass


class GatewayError(ProcessorError):
    """Error reported by the LLM Governor itself."""

    BUDGET_EXCEEDED = "BUDGET_EXCEEDED"
    MODEL_NOT_ALLOWED = "MODEL_NOT_ALLOWED"

    def __init__(
        self,
        code: str,
        message: str,
        allowed_models: Optional[list[str]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.allowed_models = allowed_models or []

    @property
    def is_budget_exceeded(self) -> bool:
        return self.code == self.BUDGET_EXCEEDED

    @property
    def is_model_not_allowed(self) -> bool:
        return self.code == self.MODEL_NOT_ALLOWED


class GatewayTransportError(ProcessorError):
    """The governor could not be reached or returned an unreadable payload."""


class SummarizationError(ProcessorError):
    pass


class RenderError(ProcessorError):
    pass
