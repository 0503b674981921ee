import logging
import os
import sys
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import ValidationError

from .config import ProcessorConfig, Settings
from .errors import ConfigurationError, ProcessorError
from .models.event import LambdaEvent
from .processor import run_processor

logger = logging.getLogger(__name__)

# Set by AWS inside every Lambda execution environment.
LAMBDA_RUNTIME_MARKER = "AWS_LAMBDA_RUNTIME_API"
HANDLER_NAME = "llm_summarizer.main.handler"


class EntryMode(str, Enum):
    DIRECT = "direct"
    EVENT = "event"


def detect_mode(environ: Optional[Mapping[str, str]] = None) -> EntryMode:
    environ = os.environ if environ is None else environ
    if environ.get(LAMBDA_RUNTIME_MARKER):
        return EntryMode.EVENT
    return EntryMode.DIRECT


def _config_from_event(event: Mapping[str, Any], settings: Settings) -> ProcessorConfig:
    try:
        payload = LambdaEvent.model_validate(event)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid event payload: {exc}") from exc
    return ProcessorConfig.from_event(payload, settings)


def handler(event: Mapping[str, Any], context: Any = None) -> dict:
    """Lambda entry point for the Step Functions orchestrator."""
    settings = Settings()
    try:
        config = _config_from_event(event, settings)
        reports = run_processor(config)
    except ProcessorError as exc:
        logger.error("%s", exc)
        raise
    except Exception:
        logger.exception("LLM Summarizer Processor failed")
        raise

    return {"status": "complete", "reports": [str(p) for p in reports]}


def run_direct(settings: Settings) -> int:
    try:
        config = ProcessorConfig.from_settings(settings)
        run_processor(config)
    except ProcessorError as exc:
        logger.error("%s", exc)
        return 1
    except Exception:
        logger.exception("LLM Summarizer Processor failed")
        return 1
    return 0


def _start_lambda_runtime(environ: Mapping[str, str]) -> None:
    from awslambdaric import bootstrap

    bootstrap.run(os.getcwd(), HANDLER_NAME, environ[LAMBDA_RUNTIME_MARKER])


def main() -> None:
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    mode = detect_mode()
    if mode is EntryMode.EVENT:
        logger.info("Running as Lambda function")
        _start_lambda_runtime(os.environ)
        return

    logger.info("Running as ECS task")
    sys.exit(run_direct(settings))


if __name__ == "__main__":
    main()
