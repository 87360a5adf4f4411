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

import os
from pathlib import Path
from typing import NoReturn

# level -> (local prefix, GitHub Actions workflow command)
LEVELS = {
    "debug": ("DEBUG", "debug"),
    "info": ("INFO", "notice"),
    "success": ("SUCCESS", "notice"),
    "warning": ("WARNING", "warning"),
    "error": ("ERROR", "error"),
}


def is_running_in_github_actions() -> bool:
    return "GITHUB_ACTIONS" in os.environ


class Logger:
    """Minimal logger that prints locally and emits annotations on GitHub Actions.

    Warnings are remembered so that a command can fail once all input was read.
    """

    def __init__(self, name: str):
        self.name = name
        self.warnings: list[str] = []

    def _loc(self, file: Path | None) -> str:
        if not file:
            return ""
        if file.is_absolute() and file.is_relative_to(Path.cwd()):
            file = file.relative_to(Path.cwd())

        if is_running_in_github_actions():
            return f" file={file}"
        return f" {file}"

    def _print(self, prefix: str, msg: str, file: Path | None = None) -> None:
        local, github = LEVELS.get(prefix, (prefix.upper(), prefix))
        location = self._loc(file)
        if is_running_in_github_actions():
            print(f"::{github}{location}::{self.name} {msg}")
        else:
            print(f"{local}:{location} {self.name} {msg}")

    def debug(self, msg: str) -> None:
        self._print("debug", msg)

    def info(self, msg: str) -> None:
        self._print("info", msg)

    def ok(self, msg: str) -> None:
        self._print("success", msg)

    def warning(self, msg: str, file: Path | None = None) -> None:
        self.warnings.append(msg)
        self._print("warning", msg, file)

    def fatal(self, msg: str, file: Path | None = None) -> NoReturn:
        self._print("error", msg, file)
        raise SystemExit(1)
