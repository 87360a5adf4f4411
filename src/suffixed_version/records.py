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

from .gh_logging import Logger
from .qualified_version import QualifiedVersion
from .version import SuffixedVersion

log = Logger(__name__)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_qualifiers(raw: object) -> dict[str, frozenset[str]]:
    if raw is None:
        return {}
    if not isinstance(raw, dict) or not all(
        isinstance(values, list) and all(isinstance(v, str) for v in values)
        for values in raw.values()
    ):
        raise ValueError("qualifiers must map names to lists of strings")
    return {kind: frozenset(values) for kind, values in raw.items()}


def parse_record(record: object) -> SuffixedVersion:
    """Build a SuffixedVersion from an already split version record.

    Raises ValueError describing the first problem found.
    """
    if not isinstance(record, dict):
        raise ValueError("record must be an object")

    for key in ("major", "minor", "micro"):
        if not _is_int(record.get(key)):
            raise ValueError(f"'{key}' must be an integer")

    original = record.get("original")
    if not isinstance(original, str):
        raise ValueError("'original' must be a string")

    qualifier = record.get("qualifier", "")
    if qualifier is not None and not isinstance(qualifier, str):
        raise ValueError("'qualifier' must be a string")

    holder = QualifiedVersion(original, _parse_qualifiers(record.get("qualifiers")))

    has_suffix = "suffix" in record
    if has_suffix != ("suffix_version" in record):
        raise ValueError("'suffix' and 'suffix_version' must be given together")

    if not has_suffix:
        return SuffixedVersion.unsuffixed(
            record["major"], record["minor"], record["micro"], qualifier, holder
        )

    if record["suffix"] is not None and not isinstance(record["suffix"], str):
        raise ValueError("'suffix' must be a string")
    if not _is_int(record["suffix_version"]):
        raise ValueError("'suffix_version' must be an integer")
    return SuffixedVersion.suffixed(
        record["major"],
        record["minor"],
        record["micro"],
        qualifier,
        record["suffix"],
        record["suffix_version"],
        holder,
    )


def read_versions(path: Path) -> list[SuffixedVersion]:
    """Load version records from a JSON file, highest version first.

    Invalid records are reported as warnings and skipped.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        log.fatal(f"{path} does not exist", file=path)
    except OSError as e:
        log.fatal(f"{path} could not be read: {e}", file=path)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        log.fatal(f"{path} is not valid UTF-8 JSON: {e}", file=path)

    raw_versions = data.get("versions") if isinstance(data, dict) else None
    if not isinstance(raw_versions, list):
        log.fatal(f"{path} has no 'versions' list", file=path)

    versions: list[SuffixedVersion] = []
    for index, record in enumerate(raw_versions):
        try:
            versions.append(parse_record(record))
        except ValueError as e:
            log.warning(f"Skipping version #{index}: {e}", file=path)

    return sorted(versions, reverse=True)
