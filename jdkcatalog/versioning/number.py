# Copyright 2025 Roger Cibrian
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

"""Structured Java version numbers and their comparison semantics.

A VersionNumber holds six ordered optional components (feature, interim,
update, patch, fifth, sixth) plus an optional build number, release status
and early-access pre-build number. Absence of a component is distinct from
a present zero, and each comparison mode treats absence differently:

- compare(): strict total order, a present component beats an absent one
- compare_for_filter(): prefix match, a shorter number acts as a wildcard
- equals(): prefix equality, an absent component on the left side stops
  the descent successfully

Python's ``==`` stays structural (all fields equal) so that VersionNumber
remains hashable and usable as a dict key. The ordering operators (<, <=,
>, >=) follow compare(), so sorted() and max() give the strict order.

Example:
    ```python
    from jdkcatalog.versioning import VersionNumber, parse

    parse("11.0.2").compare(VersionNumber.of(11))            # 1
    parse("11").compare_for_filter(parse("11.0.2"))          # 0
    VersionNumber(1).equals(VersionNumber(1, 2))             # True
    str(parse("17-ea+8"))                                    # "17.0.0.0-ea.8"
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING

from jdkcatalog.exceptions import InvalidVersionError

if TYPE_CHECKING:
    from jdkcatalog.packages.enums import TermOfSupport

__all__ = [
    "COMPONENT_NAMES",
    "MajorVersion",
    "OutputFormat",
    "ReleaseStatus",
    "VersionNumber",
]

COMPONENT_NAMES = ("feature", "interim", "update", "patch", "fifth", "sixth")


class ReleaseStatus(Enum):
    """Release status of a version or package."""

    NONE = ""
    EA = "ea"
    GA = "ga"
    NOT_FOUND = "not_found"

    @property
    def api_string(self) -> str:
        return self.value

    @classmethod
    def from_text(cls, text: str | None) -> ReleaseStatus:
        """Maps free text such as "-ea", "EA" or "general_availability"."""
        if not text:
            return cls.NOT_FOUND
        key = text.strip().lower().lstrip("-_")
        if key in ("ea", "early_access", "early-access"):
            return cls.EA
        if key in ("ga", "general_availability", "general-availability"):
            return cls.GA
        return cls.NOT_FOUND


class OutputFormat(Enum):
    """Rendering mode for VersionNumber.to_string()."""

    FULL = "full"
    REDUCED = "reduced"


@dataclass(frozen=True)
class VersionNumber:
    """Canonical structured Java version number.

    Attributes:
        feature: Primary version number (e.g., 17 in "17.0.2"). None only
            for the empty sentinel returned when parsing fails.
        interim: Second component.
        update: Third component.
        patch: Fourth component.
        fifth: Fifth component.
        sixth: Sixth component.
        build: Vendor build counter, independent of the numeric components.
        release_status: EA, GA, ... or None when unknown.
        pre_build: Early-access drop number. Only meaningful with EA.

    Raises:
        InvalidVersionError: If a component is negative, feature is below 1,
            or sub-components are given without a feature.
    """

    feature: int | None = None
    interim: int | None = None
    update: int | None = None
    patch: int | None = None
    fifth: int | None = None
    sixth: int | None = None
    build: int | None = None
    release_status: ReleaseStatus | None = None
    pre_build: int | None = None

    def __post_init__(self) -> None:
        if self.feature is None:
            others = self.components()[1:] + (self.build, self.pre_build)
            if any(value is not None for value in others):
                raise InvalidVersionError("Version number must have a feature number")
        elif self.feature < 1:
            raise InvalidVersionError(
                f"Feature version must be positive, got {self.feature}"
            )
        for name in COMPONENT_NAMES[1:] + ("build", "pre_build"):
            value = getattr(self, name)
            if value is not None and value < 0:
                raise InvalidVersionError(f"{name} cannot be negative, got {value}")

    # -------------------------------
    # Construction helpers
    # -------------------------------

    @classmethod
    def of(
        cls,
        feature: int,
        interim: int = 0,
        update: int = 0,
        patch: int = 0,
        fifth: int = 0,
        sixth: int = 0,
        *,
        build: int | None = None,
        release_status: ReleaseStatus | None = None,
        pre_build: int | None = None,
    ) -> VersionNumber:
        """Builds a fully specified version, unspecified components are zero.

        This mirrors what the parser produces, so ``parse("8u262")`` and
        ``VersionNumber.of(8, 0, 262)`` compare equal.
        """
        if feature is None:
            raise InvalidVersionError("Version number must have a feature number")
        return cls(
            feature,
            interim,
            update,
            patch,
            fifth,
            sixth,
            build=build,
            release_status=release_status,
            pre_build=pre_build,
        )

    @classmethod
    def from_text(cls, text: str | None, which_match: int = 0) -> VersionNumber:
        """Parses free text, see jdkcatalog.versioning.parser.parse()."""
        from jdkcatalog.versioning.parser import parse

        return parse(text, which_match)

    def with_build(self, build: int | None) -> VersionNumber:
        return replace(self, build=build)

    def with_release_status(
        self, release_status: ReleaseStatus | None, pre_build: int | None = None
    ) -> VersionNumber:
        return replace(self, release_status=release_status, pre_build=pre_build)

    # -------------------------------
    # Inspection
    # -------------------------------

    def components(self) -> tuple[int | None, ...]:
        return (
            self.feature,
            self.interim,
            self.update,
            self.patch,
            self.fifth,
            self.sixth,
        )

    @property
    def is_empty(self) -> bool:
        """True for the sentinel returned when no version could be parsed."""
        return self.feature is None

    @property
    def is_early_access(self) -> bool:
        return self.release_status is ReleaseStatus.EA

    @property
    def major_version(self) -> MajorVersion:
        if self.feature is None:
            raise InvalidVersionError("Empty version number has no major version")
        return MajorVersion(self.feature)

    def numbers_available(self) -> int:
        """Counts the feature plus every present sub-component.

        The parser zero-fills unresolved components, so every parsed value
        reports 6. Lower counts only come from programmatic construction.
        Nothing orders versions by this count.
        """
        return 1 + sum(1 for value in self.components()[1:] if value is not None)

    def normalized(self) -> str:
        """Renders all six components, absent ones as zero."""
        if self.feature is None:
            raise InvalidVersionError("Cannot normalize an empty version number")
        return ".".join(str(value or 0) for value in self.components())

    # -------------------------------
    # Comparison
    # -------------------------------

    def compare(self, other: VersionNumber) -> int:
        """Strict total order, returns -1, 0 or 1.

        Components are compared from feature down to sixth. A present
        component beats an absent one. When all components tie and both
        sides are early access, a present pre_build beats an absent one and
        two present pre_builds compare numerically.
        """
        for mine, theirs in zip(self.components(), other.components()):
            if mine is not None and theirs is not None:
                if mine != theirs:
                    return 1 if mine > theirs else -1
            elif mine is not None:
                return 1
            elif theirs is not None:
                return -1

        if self.is_early_access and other.is_early_access:
            if self.pre_build is not None and other.pre_build is not None:
                if self.pre_build != other.pre_build:
                    return 1 if self.pre_build > other.pre_build else -1
            elif self.pre_build is not None:
                return 1
            elif other.pre_build is not None:
                return -1
        return 0

    def compare_for_filter(self, other: VersionNumber) -> int:
        """Prefix match used for catalog queries, returns -1, 0 or 1.

        Either side without a feature matches everything. Otherwise both
        sides are rendered in reduced form and only the components both
        renderings have are compared, so "11" matches any 11.x.y.
        """
        if self.feature is None or other.feature is None:
            return 0
        mine = self._filter_key()
        theirs = other._filter_key()
        for a, b in zip(mine, theirs):
            if a != b:
                return 1 if a > b else -1
        return 0

    def equals(self, other: VersionNumber) -> bool:
        """Prefix equality.

        Descends from feature. A component present here must be present
        and equal on the other side. The first absent component here ends
        the descent as a match. Early-access pre_builds must agree when
        both sides carry one.
        """
        for mine, theirs in zip(self.components(), other.components()):
            if mine is None:
                break
            if theirs is None or mine != theirs:
                return False
        if (
            self.is_early_access
            and other.is_early_access
            and self.pre_build is not None
            and other.pre_build is not None
        ):
            return self.pre_build == other.pre_build
        return True

    def _filter_key(self) -> list[int]:
        text = self.to_string(OutputFormat.REDUCED, java_format=False, include_suffix=False)
        return [int(part) for part in text.split(".")]

    def __lt__(self, other: VersionNumber) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other: VersionNumber) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other: VersionNumber) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other: VersionNumber) -> bool:
        if not isinstance(other, VersionNumber):
            return NotImplemented
        return self.compare(other) >= 0

    # -------------------------------
    # Rendering
    # -------------------------------

    def to_string(
        self,
        output_format: OutputFormat = OutputFormat.FULL,
        java_format: bool = True,
        include_suffix: bool = True,
    ) -> str:
        """Renders the version as dotted text.

        Args:
            output_format: FULL renders every present component. REDUCED
                drops trailing zero components, keeping at least feature.
            java_format: Limit output to the four components Java itself
                uses (fifth and sixth are omitted).
            include_suffix: Append "-ea", ".<pre_build>" and "+b<build>".

        Returns:
            The rendered version, or an empty string for the empty sentinel.

        Example:
            ```python
            v = VersionNumber.of(1, 2, 0, 0)
            v.to_string(OutputFormat.REDUCED, True, False)  # "1.2"
            v.to_string(OutputFormat.FULL, False, False)    # "1.2.0.0.0.0"
            ```
        """
        values: list[int] = []
        for value in self.components():
            if value is None:
                break
            values.append(value)
        if not values:
            return ""

        if output_format is OutputFormat.REDUCED:
            while len(values) > 1 and values[-1] == 0:
                values.pop()
        if java_format:
            values = values[:4]

        text = ".".join(str(value) for value in values)
        if include_suffix:
            text += self._suffix()
        return text

    def _suffix(self) -> str:
        suffix = ""
        if self.is_early_access:
            suffix += "-ea"
            if self.pre_build:
                suffix += f".{self.pre_build}"
        if self.build is not None:
            suffix += f"+b{self.build}"
        return suffix

    def __str__(self) -> str:
        return self.to_string(OutputFormat.FULL, java_format=True, include_suffix=True)


@dataclass(frozen=True, order=True)
class MajorVersion:
    """A feature version on its own, used to key per-feature queries."""

    feature: int

    def __post_init__(self) -> None:
        if self.feature < 1:
            raise InvalidVersionError(
                f"Feature version must be positive, got {self.feature}"
            )

    def as_version_number(self) -> VersionNumber:
        return VersionNumber(self.feature)

    @property
    def term_of_support(self) -> TermOfSupport:
        """Vendor-neutral support tier, MTS features report STS."""
        from jdkcatalog.support import classify_term_of_support

        return classify_term_of_support(self.feature)

    def __str__(self) -> str:
        return str(self.feature)
