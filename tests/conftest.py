"""Shared fixtures for llm-summarizer tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pymupdf
import pytest

from llm_summarizer.config import ProcessorConfig
from llm_summarizer.models.gateway import InvokeRequest, InvokeResponse

_SETTINGS_ENV = (
    "INPUT_DIR",
    "OUTPUT_DIR",
    "EXECUTION_RUN_ID",
    "LLM_GOVERNOR_FUNCTION",
    "AWS_REGION",
    "AWS_LAMBDA_RUNTIME_API",
    "LOG_LEVEL",
)


class StubGateway:
    """Records requests and replays canned responses (or raises)."""

    def __init__(self, *results: Any) -> None:
        self.results = list(results)
        self.requests: list[InvokeRequest] = []

    def invoke(self, request: InvokeRequest) -> InvokeResponse:
        self.requests.append(request)
        result = self.results.pop(0) if len(self.results) > 1 else self.results[0]
        if isinstance(result, Exception):
            raise result
        return result


def make_response(text: str, cost: float = 0.0012) -> InvokeResponse:
    return InvokeResponse.model_validate(
        {
            "model": "haiku",
            "content": [{"type": "text", "text": text}],
            "usage": {"inputTokens": 100, "outputTokens": 50, "estimatedCostUsd": cost},
        }
    )


def pdf_text(path: Path) -> str:
    with pymupdf.open(path) as doc:
        return "".join(page.get_text() for page in doc)


def write_json(directory: Path, name: str, payload: Any) -> Path:
    path = directory / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _isolate_environment(tmp_path, monkeypatch):
    """Keep the caller's environment and any local .env out of Settings."""
    for name in _SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)


@pytest.fixture
def input_dir(tmp_path) -> Path:
    path = tmp_path / "input"
    path.mkdir()
    return path


@pytest.fixture
def output_dir(tmp_path) -> Path:
    path = tmp_path / "output"
    path.mkdir()
    return path


@pytest.fixture
def config(input_dir, output_dir) -> ProcessorConfig:
    return ProcessorConfig(
        input_dir=input_dir,
        output_dir=output_dir,
        execution_run_id="run-123",
        governor_function="llm-governor",
    )

