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

import argparse
import json
import sys
from pathlib import Path

from .gh_logging import Logger
from . import records
from .version import SuffixedVersion

log = Logger(__name__)


def parse_args(args: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Sort and normalize versions from a JSON file of version records."
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=Path,
        default=Path("versions.json"),
        help="JSON file with a 'versions' list of records (default: versions.json).",
    )
    parser.add_argument(
        "--ascending",
        action="store_true",
        help="Print the lowest version first instead of the highest.",
    )
    parser.add_argument(
        "--unsuffixed",
        action="store_true",
        help="Print versions without their suffix.",
    )
    parser.add_argument(
        "--latest",
        action="store_true",
        help="Print only the highest version.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON list instead of one version per line.",
    )
    return parser.parse_args(args)


def describe(version: SuffixedVersion) -> dict[str, object]:
    return {
        "normalized": version.normalized_version(),
        "unsuffixed": version.unsuffixed_version(),
        "original": version.original_version,
        "suffixed": version.is_suffixed,
        "osgi": version.is_osgi_version,
        "semver": version.original_version_with_meta.semver is not None,
    }


def main(args: list[str]) -> None:
    """Main entry point: read version records, sort them and print them."""
    p = parse_args(args)
    versions = records.read_versions(p.file)

    if not versions:
        log.warning(f"No valid versions found in {p.file}", file=p.file)
    if p.latest:
        # read_versions returns highest first
        versions = versions[:1]
    if p.ascending:
        versions.reverse()

    if p.json:
        print(json.dumps([describe(v) for v in versions], indent=2))
    else:
        for v in versions:
            print(v.unsuffixed_version() if p.unsuffixed else v.normalized_version())

    warnings = log.warnings + records.log.warnings
    if warnings:
        # If any record was skipped, exit with non-zero code
        log.fatal(f"Completed with {len(warnings)} warnings.")


if __name__ == "__main__":
    main(args=sys.argv[1:])
