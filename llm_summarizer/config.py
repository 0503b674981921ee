import logging
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigurationError
from .models.event import LambdaEvent


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    input_dir: str = ""
    output_dir: str = ""
    execution_run_id: str = ""
    llm_governor_function: str = ""
    aws_region: Optional[str] = None
    log_level: str = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> str:
        level = str(value or "").strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            return "INFO"
        return level


class ProcessorConfig(BaseModel):
    """Everything one run needs, built once at startup."""

    model_config = ConfigDict(frozen=True)

    input_dir: Path
    output_dir: Path
    execution_run_id: str = ""
    governor_function: str = ""
    aws_region: Optional[str] = None

    @classmethod
    def build(
        cls,
        input_dir: str,
        output_dir: str,
        execution_run_id: str,
        settings: Settings,
    ) -> "ProcessorConfig":
        if not input_dir or not output_dir:
            raise ConfigurationError("inputDir and outputDir are required")
        return cls(
            input_dir=Path(input_dir),
            output_dir=Path(output_dir),
            execution_run_id=execution_run_id,
            governor_function=settings.llm_governor_function,
            aws_region=settings.aws_region,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ProcessorConfig":
        return cls.build(
            settings.input_dir,
            settings.output_dir,
            settings.execution_run_id,
            settings,
        )

    @classmethod
    def from_event(cls, event: LambdaEvent, settings: Settings) -> "ProcessorConfig":
        # Directories and run id travel with the event; the governor stays in the environment.
        return cls.build(
            event.input_dir,
            event.output_dir,
            event.execution_run_id,
            settings,
        )
