# *******************************************************************************
# Copyright (c) 2025 Contributors to the Eclipse Foundation
#
# See the NOTICE file(s) distributed with this work for additional
# information regarding copyright ownership.
#
# This program and the accompanying materials are made available under the
# terms of the Apache License Version 2.0 which is available at
# https://www.apache.org/licenses/LICENSE-2.0
#
# SPDX-License-Identifier: Apache-2.0
# *******************************************************************************
import json
from pathlib import Path
from typing import Any

import pytest

from src.suffixed_version import main as main_module
from src.suffixed_version import records
from src.suffixed_version.gh_logging import Logger
from src.suffixed_version.version import SuffixedVersion


class MockLogger(Logger):
    """Logger that captures messages for testing."""

    def __init__(self):
        super().__init__("test")
        self.debug_messages: list[str] = []
        self.info_messages: list[str] = []
        self.warning_messages: list[str] = []
        self.error_messages: list[str] = []

    def _print(self, prefix: str, msg: str, file: Path | None = None) -> None:
        if prefix == "debug":
            self.debug_messages.append(msg)
        elif prefix == "info":
            self.info_messages.append(msg)
        elif prefix == "warning":
            self.warning_messages.append(msg)
        elif prefix == "error":
            self.error_messages.append(msg)


@pytest.fixture
def mock_logger() -> MockLogger:
    """Create a mock logger for testing."""
    return MockLogger()


@pytest.fixture(autouse=True)
def fresh_loggers(monkeypatch: pytest.MonkeyPatch) -> None:
    """Module level loggers keep their warnings; start every test clean."""
    monkeypatch.delenv("GITHUB_ACTIONS", raising=False)
    monkeypatch.setattr(records.log, "warnings", [])
    monkeypatch.setattr(main_module.log, "warnings", [])


@pytest.fixture
def build_fake_filesystem(fs: Any):
    """Convenience helper to build a fake filesystem from a nested dict."""

    def _build(structure: dict[str, object], base_path: str = "") -> None:
        base = base_path or "/"
        for name, value in structure.items():
            path = f"{base.rstrip('/')}/{name}"
            if isinstance(value, dict):
                fs.makedirs(path, exist_ok=True)
                _build(value, path)
            else:
                fs.create_file(path, contents=value)

    return _build


@pytest.fixture
def write_versions(build_fake_filesystem):
    """Write a versions.json with the given records and return its path."""

    def _write(records: list[object], name: str = "versions.json") -> Path:
        build_fake_filesystem({name: json.dumps({"versions": records})})
        return Path("/") / name

    return _write


def make_version(
    major: int = 1,
    minor: int = 0,
    micro: int = 0,
    qualifier: str = "",
    suffix: str | None = None,
    suffix_version: int = 1,
    original: str | None = None,
) -> SuffixedVersion:
    """Factory for SuffixedVersion; the original text defaults to a plain one."""
    if suffix is None:
        return SuffixedVersion.unsuffixed(
            major, minor, micro, qualifier, original or f"{major}.{minor}.{micro}"
        )
    return SuffixedVersion.suffixed(
        major,
        minor,
        micro,
        qualifier,
        suffix,
        suffix_version,
        original or f"{major}.{minor}.{micro}-{suffix}-{suffix_version}",
    )
