import json
import logging
from pathlib import Path

from ..errors import DiscoveryError, DocumentReadError, DocumentValidationError
from ..models.document import InputDocument

logger = logging.getLogger(__name__)

JSON_PATTERN = "*.json"


def find_json_files(input_dir: Path) -> list[Path]:
    """Return the ``*.json`` files directly inside ``input_dir``.

    Raises DiscoveryError when the directory cannot be listed or holds no
    matching files; an empty batch is a configuration mistake, not a no-op.
    """
    if not input_dir.is_dir():
        raise DiscoveryError(f"Failed to list JSON files: {input_dir} is not a directory")

    try:
        files = sorted(p for p in input_dir.glob(JSON_PATTERN) if p.is_file())
    except OSError as exc:
        raise DiscoveryError(f"Failed to list JSON files: {exc}") from exc

    if not files:
        raise DiscoveryError("No JSON files found in input directory")

    logger.info("Found %d JSON file(s)", len(files))
    return files


def _reject_constant(name: str) -> None:
    # NaN and Infinity are not valid JSON.
    raise ValueError(f"invalid constant {name!r}")


def load_document(path: Path) -> InputDocument:
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise DocumentReadError(f"Failed to read {path}: {exc}", path=path) from exc

    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as exc:
        raise DocumentValidationError(f"Invalid JSON in {path}: {exc}", path=path) from exc

    return InputDocument(path=path, raw=raw, parsed=parsed)
