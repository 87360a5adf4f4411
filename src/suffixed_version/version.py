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

from dataclasses import dataclass

from .osgi import is_valid_osgi
from .qualified_version import QualifiedVersion


def _compare(a: object, b: object) -> int:
    return (a > b) - (a < b)  # type: ignore[operator]


def _compare_ignore_case(a: str, b: str) -> int:
    return _compare(a.casefold(), b.casefold())


@dataclass(frozen=True)
class Suffix:
    name: str
    version: int

    def __post_init__(self) -> None:
        if not self.name or not isinstance(self.name, str):
            raise ValueError("Suffix must be a non-empty string")
        if not isinstance(self.version, int) or isinstance(self.version, bool):
            raise ValueError("Suffix version must be an integer")


class SuffixedVersion:
    """Version in the form major.minor.micro[.qualifier][-suffix-suffixVersion].

    Components are expected to be split already; the original text is kept
    in a QualifiedVersion and only used for the OSGi tie-break in ordering.
    """

    def __init__(
        self,
        major: int,
        minor: int,
        micro: int,
        qualifier: str,
        original: str | QualifiedVersion,
        suffix: Suffix | None = None,
    ) -> None:
        if qualifier is None:
            raise ValueError("Qualifier must not be None; use '' for no qualifier")
        if isinstance(original, str):
            original = QualifiedVersion(original)

        self._major = major
        self._minor = minor
        self._micro = micro
        self._qualifier = qualifier
        self._suffix = suffix
        self._original = original

    @classmethod
    def unsuffixed(
        cls,
        major: int,
        minor: int,
        micro: int,
        qualifier: str,
        original: str | QualifiedVersion,
    ) -> "SuffixedVersion":
        return cls(major, minor, micro, qualifier, original)

    @classmethod
    def suffixed(
        cls,
        major: int,
        minor: int,
        micro: int,
        qualifier: str,
        suffix: str,
        suffix_version: int,
        original: str | QualifiedVersion,
    ) -> "SuffixedVersion":
        if not suffix:
            raise ValueError("Suffix must be provided for a suffixed version")
        return cls(
            major, minor, micro, qualifier, original, Suffix(suffix, suffix_version)
        )

    @property
    def major(self) -> int:
        return self._major

    @property
    def minor(self) -> int:
        return self._minor

    @property
    def micro(self) -> int:
        return self._micro

    @property
    def qualifier(self) -> str:
        return self._qualifier

    @property
    def suffix(self) -> str | None:
        return self._suffix.name if self._suffix else None

    @property
    def suffix_version(self) -> int | None:
        return self._suffix.version if self._suffix else None

    @property
    def is_suffixed(self) -> bool:
        return self._suffix is not None

    @property
    def original_version_with_meta(self) -> QualifiedVersion:
        return self._original

    @property
    def original_version(self) -> str:
        return self._original.get_version()

    @property
    def is_osgi_version(self) -> bool:
        return is_valid_osgi(self.original_version)

    def compare_to(self, other: "SuffixedVersion") -> int:
        """Return a negative, zero or positive int, like Java's compareTo.

        Unsuffixed versions sort after suffixed ones with the same
        major.minor.micro.qualifier. When everything else is equal, a
        version whose original text is valid OSGi sorts last.
        """
        r = _compare(self._major, other._major)
        if r:
            return r
        r = _compare(self._minor, other._minor)
        if r:
            return r
        r = _compare(self._micro, other._micro)
        if r:
            return r
        r = _compare_ignore_case(self._qualifier, other._qualifier)
        if r:
            return r

        if self._suffix is None and other._suffix is not None:
            return 1
        if self._suffix is not None and other._suffix is None:
            return -1
        if self._suffix is not None and other._suffix is not None:
            r = _compare_ignore_case(self._suffix.name, other._suffix.name)
            if r:
                return r
            r = _compare(self._suffix.version, other._suffix.version)
            if r:
                return r

        # Both unsuffixed, or identical suffixes: only the original text is left.
        return _compare(self.is_osgi_version, other.is_osgi_version)

    # Ordering goes through compare_to only. __eq__ ignores the OSGi tie-break,
    # so deriving <= or >= from it would be inconsistent.
    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SuffixedVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SuffixedVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SuffixedVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SuffixedVersion):
            return NotImplemented
        return self.compare_to(other) >= 0

    def _key(self) -> tuple[int, int, int, str, Suffix | None]:
        return (self._major, self._minor, self._micro, self._qualifier, self._suffix)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SuffixedVersion):
            return NotImplemented
        # Note: the original text is not part of equality, so "1.0.0" and
        # "1.0" parsed into the same components are the same version.
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def normalized_version(self) -> str:
        version = self.unsuffixed_version()
        if self._suffix:
            separator = "." if self._qualifier else "-"
            version += f"{separator}{self._suffix.name}-{self._suffix.version}"
        return version

    def unsuffixed_version(self) -> str:
        version = f"{self._major}.{self._minor}.{self._micro}"
        if self._qualifier:
            version += f".{self._qualifier}"
        return version

    def __str__(self) -> str:
        return self.normalized_version()

    def __repr__(self) -> str:
        return (
            f"SuffixedVersion({self.normalized_version()!r}, "
            f"original={self.original_version!r})"
        )
