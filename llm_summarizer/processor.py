import logging
from pathlib import Path
from typing import Optional

from .config import ProcessorConfig
from .errors import ConfigurationError, ProcessorError, RenderError
from .services.document_service import find_json_files, load_document
from .services.governor_client import GovernorClient
from .services.pdf_service import report_path, write_report
from .services.summarizer_service import Gateway, summarize_document

logger = logging.getLogger(__name__)


def run_processor(config: ProcessorConfig, gateway: Optional[Gateway] = None) -> list[Path]:
    """Summarize every JSON file in the input directory into a PDF report.

    Files are handled one at a time; the first failure raises and stops the
    batch. Returns the written report paths in processing order.
    """
    logger.info("LLM Summarizer Processor starting")
    logger.info("Input directory: %s", config.input_dir)
    logger.info("Output directory: %s", config.output_dir)

    if gateway is None:
        client = GovernorClient.from_config(config)
        if not client.available:
            raise ConfigurationError("LLM Governor not available: LLM_GOVERNOR_FUNCTION is not set")
        gateway = client

    json_files = find_json_files(config.input_dir)

    try:
        config.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RenderError(f"Failed to create output directory {config.output_dir}: {exc}") from exc

    written: list[Path] = []
    for json_file in json_files:
        logger.info("Processing: %s", json_file.name)
        try:
            pdf_path = _process_file(gateway, json_file, config.output_dir)
        except ProcessorError:
            raise
        except Exception:
            logger.error("Unexpected failure while processing %s", json_file.name)
            raise
        logger.info("Written: %s", pdf_path)
        written.append(pdf_path)

    logger.info("LLM Summarizer Processor complete")
    return written


def _process_file(gateway: Gateway, json_file: Path, output_dir: Path) -> Path:
    document = load_document(json_file)

    logger.info("Sending to LLM for summarization...")
    response = summarize_document(gateway, document)
    summary = response.text()
    logger.info(
        "Received summary (%d chars, cost: $%.4f)",
        len(summary),
        response.usage.estimated_cost_usd,
    )

    return write_report(report_path(output_dir, json_file), document.name, summary)
