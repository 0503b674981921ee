"""Tests for configuration loading from the environment and from event payloads."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from llm_summarizer.config import ProcessorConfig, Settings
from llm_summarizer.errors import ConfigurationError
from llm_summarizer.models.event import LambdaEvent


class TestFromSettings:
    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("INPUT_DIR", "/data/in")
        monkeypatch.setenv("OUTPUT_DIR", "/data/out")
        monkeypatch.setenv("EXECUTION_RUN_ID", "run-42")
        monkeypatch.setenv("LLM_GOVERNOR_FUNCTION", "governor")
        monkeypatch.setenv("AWS_REGION", "us-east-1")

        cfg = ProcessorConfig.from_settings(Settings())

        assert cfg.input_dir == Path("/data/in")
        assert cfg.output_dir == Path("/data/out")
        assert cfg.execution_run_id == "run-42"
        assert cfg.governor_function == "governor"
        assert cfg.aws_region == "us-east-1"

    def test_reads_dotenv_file(self):
        Path(".env").write_text("INPUT_DIR=/env/in\nOUTPUT_DIR=/env/out\n", encoding="utf-8")

        cfg = ProcessorConfig.from_settings(Settings())

        assert cfg.input_dir == Path("/env/in")
        assert cfg.output_dir == Path("/env/out")

    @pytest.mark.parametrize("present", ["INPUT_DIR", "OUTPUT_DIR"])
    def test_missing_directory_is_fatal(self, monkeypatch, present):
        monkeypatch.setenv(present, "/somewhere")

        with pytest.raises(ConfigurationError, match="inputDir and outputDir are required"):
            ProcessorConfig.from_settings(Settings())

    def test_config_is_frozen(self):
        cfg = ProcessorConfig(input_dir=Path("/a"), output_dir=Path("/b"))
        with pytest.raises(ValidationError):
            cfg.input_dir = Path("/c")


class TestFromEvent:
    def test_event_supplies_directories_and_run_id(self, monkeypatch):
        monkeypatch.setenv("LLM_GOVERNOR_FUNCTION", "governor")
        monkeypatch.setenv("INPUT_DIR", "/ignored/in")
        event = LambdaEvent.model_validate(
            {
                "inputDir": "/mnt/efs/in",
                "outputDir": "/mnt/efs/out",
                "executionRunId": "exec-1",
                "computeNodeId": "node-7",
                "sessionToken": "s",
                "refreshToken": "r",
            }
        )

        cfg = ProcessorConfig.from_event(event, Settings())

        assert cfg.input_dir == Path("/mnt/efs/in")
        assert cfg.output_dir == Path("/mnt/efs/out")
        assert cfg.execution_run_id == "exec-1"
        assert cfg.governor_function == "governor"
        assert event.compute_node_id == "node-7"

    def test_event_without_directories_is_fatal(self):
        with pytest.raises(ConfigurationError):
            ProcessorConfig.from_event(LambdaEvent(), Settings())


class TestLogLevel:
    @pytest.mark.parametrize("raw, expected", [("debug", "DEBUG"), (" warning ", "WARNING"), ("", "INFO")])
    def test_normalises_known_levels(self, monkeypatch, raw, expected):
        monkeypatch.setenv("LOG_LEVEL", raw)
        assert Settings().log_level == expected

    def test_unknown_level_falls_back_to_info(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "verbose")
        assert Settings().log_level == "INFO"
