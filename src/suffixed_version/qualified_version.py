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

from collections.abc import Mapping
from dataclasses import dataclass, field

import semver


@dataclass(frozen=True)
class QualifiedVersion:
    """Original, unparsed version text together with its release metadata."""

    version: str
    # e.g. {"PRODUCT": frozenset({"EAP"})}
    qualifiers: Mapping[str, frozenset[str]] = field(default_factory=dict, hash=False)

    def get_version(self) -> str:
        return self.version

    @property
    def semver(self) -> semver.Version | None:
        """Returns None if the text is not a valid semantic version."""
        try:
            return semver.Version.parse(self.version)
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.version
