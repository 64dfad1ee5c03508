# Copyright 2025 CrownOps Engineering
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Tests for cor_args logging configuration."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from pytest import CaptureFixture, MonkeyPatch

from cor_args import DefaultHandler, FileHandler, configure_logging
from cor_args._internal.logging_utils import LOG_FORMATS, LOG_LEVELS, structured_extra
from cor_args.core.model_types import LogComponent, LogFormat

pytestmark = pytest.mark.unit


def test_configure_logging_json_emits_structured_logs(capsys: CaptureFixture[str]) -> None:
    config = configure_logging("json", log_level="debug")
    assert config.format is LogFormat.JSON
    assert config.level == logging.DEBUG

    logger = logging.getLogger("cor_args")
    logger.info(
        "hello",
        extra=structured_extra(
            component=LogComponent.ENV,
            handler="EnvHandler",
            key="config",
            lookup="MYAPP_config",
            found=False,
        ),
    )
    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("broken")
    captured = capsys.readouterr()
    stream = captured.err or captured.out
    lines = [line for line in stream.strip().splitlines() if line]
    payload = json.loads(lines[-2])
    assert payload["message"] == "hello"
    assert payload["level"] == "info"
    assert payload["logger"] == "cor_args"
    assert payload["component"] == "env"
    assert payload["handler"] == "EnvHandler"
    assert payload["key"] == "config"
    assert payload["lookup"] == "MYAPP_config"
    assert payload["found"] is False

    exception_payload = json.loads(lines[-1])
    assert exception_payload["message"] == "broken"
    assert "exc_info" in exception_payload


def test_configure_logging_respects_level(capsys: CaptureFixture[str]) -> None:
    assert LOG_LEVELS == ("debug", "info", "warning", "error")
    assert LOG_FORMATS == ("text", "json")
    _ = configure_logging("text", log_level="warning")
    logger = logging.getLogger("cor_args")
    logger.info("ignored")
    logger.warning("recorded")
    captured = capsys.readouterr()
    combined = captured.out + captured.err
    assert "ignored" not in combined
    assert "[WARNING] recorded" in combined


def test_configure_logging_honors_env_overrides(
    capsys: CaptureFixture[str],
    monkeypatch: MonkeyPatch,
) -> None:
    monkeypatch.setenv("COR_ARGS_LOG_FORMAT", "json")
    monkeypatch.setenv("COR_ARGS_LOG_LEVEL", "error")
    config = configure_logging()
    assert config.level_name == "error"
    logger = logging.getLogger("cor_args")
    logger.warning("warned")
    logger.error("failed", extra=structured_extra(component=LogComponent.CHAIN))
    captured = capsys.readouterr()
    lines = [line for line in (captured.out + captured.err).splitlines() if line]
    assert json.loads(lines[-1])["message"] == "failed"
    assert all("warned" not in line for line in lines)


def test_configure_logging_rejects_unknown_format() -> None:
    with pytest.raises(ValueError, match="Unknown log format"):
        _ = configure_logging("xml")


def test_swallowed_source_failures_are_logged_at_debug(
    capsys: CaptureFixture[str],
    tmp_path: Path,
) -> None:
    _ = configure_logging("json", log_level="debug")
    missing = tmp_path / "missing.txt"

    value = FileHandler(missing).next(DefaultHandler("fallback")).handle_request("verbosity")

    assert value == "fallback"
    captured = capsys.readouterr()
    records = [json.loads(line) for line in (captured.out + captured.err).splitlines() if line]
    failure = next(record for record in records if record.get("component") == "file")
    assert failure["level"] == "debug"
    assert failure["path"] == str(missing)
    assert failure["found"] is False
    assert failure["error"] == "FileNotFoundError"


def test_structured_extra_renders_paths_and_skips_none(tmp_path: Path) -> None:
    extra = structured_extra(
        component=LogComponent.FILE,
        handler="FileHandler",
        path=tmp_path / "value.txt",
        found=False,
        error="OSError",
        key=None,  # type: ignore[arg-type]
    )
    assert extra["component"] is LogComponent.FILE
    assert "path" in extra and extra["path"] == str(tmp_path / "value.txt")
    assert "found" in extra and extra["found"] is False
    assert "error" in extra and extra["error"] == "OSError"
    assert "key" not in extra
