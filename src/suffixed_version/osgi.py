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

import re

# major[.minor[.micro[.qualifier]]], as defined by OSGi Core, section 3.2.5
OSGI_VERSION_REGEX = re.compile(
    r"^(?P<major>\d+)"
    r"(?:\.(?P<minor>\d+)"
    r"(?:\.(?P<micro>\d+)"
    r"(?:\.(?P<qualifier>[A-Za-z0-9_-]+))?)?)?$",
    re.ASCII,
)


def is_valid_osgi(version: str) -> bool:
    return OSGI_VERSION_REGEX.fullmatch(version) is not None
