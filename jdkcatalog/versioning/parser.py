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

"""Parse free-text Java version strings into VersionNumber values.

Vendors encode versions in filenames, tags and API payloads using their own
conventions ("1.8.0_262", "8u262", "11.0.9.1_1", "17-ea+5_linux-x64.tar.gz").
A single composite pattern finds candidate occurrences in the text. The
numeric layout of the selected occurrence is then resolved against a table
of shapes, each naming the capture groups it needs and the component each
group feeds. Among the shapes whose groups all matched, the one resolving
the most components wins, and declaration order breaks ties.

Early-access markers are read from the qualifier that follows the numeric
core. Build numbers come from a separate scan for "b<digits>" across the
whole text, falling back to a JEP 223 style "+<digits>" right after the
numeric core ("11+28", "11.0.2+13-LTS").

Parsing never raises for bad input. Text without any version yields the
empty VersionNumber (feature None) and a warning on the logger.

Example:
    ```python
    from jdkcatalog.versioning.parser import parse

    parse("1.8.0_262")                 # 8.0.262.0
    parse("8u272b09_ea.tar.gz").build  # 9
    parse("14-ea.36").pre_build        # 36
    parse("zulu-latest").is_empty      # True
    ```
"""

from __future__ import annotations

from dataclasses import dataclass
import re

from jdkcatalog.exceptions import InvalidVersionError
from jdkcatalog.logging import Logger, get_global_logger
from jdkcatalog.versioning.number import ReleaseStatus, VersionNumber

__all__ = ["VERSION_PATTERN", "parse"]

VERSION_PATTERN = re.compile(
    r"(?P<feature>[1-9]\d*)"
    r"(?:"
    r"(?P<legacy>u(?P<legacy_update>\d+))"
    r"|(?P<dotted>\.?(?P<d1>\d+)?\.?(?P<d2>\d+)?\.?(?P<d3>\d+)?\.?(?P<d4>\d+)?\.(?P<last>\d+))"
    r")?"
    r"(?P<trail>(?P<trail_sep>_|b)(?P<trail_num>\d+))?"
    r"(?P<qualifier>(?P<qualifier_sep>-|\+|\.)(?P<qualifier_text>[a-zA-Z0-9\-+]+)"
    r"(?P<qualifier_tail>\.[0-9]+)?)?"
)
EA_PATTERN = re.compile(r"(ea|EA)((\.|\+|-)([0-9]+))?")
EA_TAIL_PATTERN = re.compile(r"(\.?)([0-9]+)")
BUILD_PATTERN = re.compile(r"\+?(b|B)([0-9]+)")
PLUS_BUILD_PATTERN = re.compile(r"([0-9]+)")


@dataclass(frozen=True)
class _Shape:
    """One interpretation of the numeric groups of a match.

    Attributes:
        name: Identifier used in debug output.
        requires: Groups that must have participated in the match.
        fields: (component, group) pairs. A group of None assigns 0.
    """

    name: str
    requires: tuple[str, ...]
    fields: tuple[tuple[str, str | None], ...]

    def applies_to(self, match: re.Match[str]) -> bool:
        return all(match.group(group) is not None for group in self.requires)

    def specificity(self) -> int:
        return len(self.fields)

    def resolve(self, match: re.Match[str]) -> dict[str, int]:
        return {
            component: int(match.group(group)) if group else 0
            for component, group in self.fields
        }


# Order matters only between shapes of equal specificity.
_SHAPES: tuple[_Shape, ...] = (
    _Shape(
        "dotted_6",
        ("dotted", "d1", "d2", "d3", "d4", "last"),
        (
            ("interim", "d1"),
            ("update", "d2"),
            ("patch", "d3"),
            ("fifth", "d4"),
            ("sixth", "last"),
        ),
    ),
    _Shape(
        "dotted_5",
        ("dotted", "d1", "d2", "d3", "last"),
        (("interim", "d1"), ("update", "d2"), ("patch", "d3"), ("fifth", "last")),
    ),
    _Shape(
        "dotted_4",
        ("dotted", "d1", "d2", "last"),
        (("interim", "d1"), ("update", "d2"), ("patch", "last")),
    ),
    _Shape(
        "dotted_3",
        ("dotted", "d1", "last"),
        (("interim", "d1"), ("update", "last")),
    ),
    # "8.0_262": the underscore carries the update
    _Shape(
        "underscore_update",
        ("dotted", "last", "trail_num"),
        (("interim", "last"), ("update", "trail_num")),
    ),
    # "8u262"
    _Shape(
        "legacy_update",
        ("legacy", "legacy_update"),
        (("interim", None), ("update", "legacy_update")),
    ),
    _Shape("dotted_2", ("dotted", "last"), (("interim", "last"),)),
    _Shape("feature_only", (), ()),
)


def _select_shape(match: re.Match[str]) -> _Shape:
    candidates = [shape for shape in _SHAPES if shape.applies_to(match)]
    # max() keeps the first of equal keys, i.e. declaration order
    return max(candidates, key=_Shape.specificity)


def _early_access(match: re.Match[str]) -> tuple[ReleaseStatus | None, int | None]:
    qualifier = match.group("qualifier_text")
    if qualifier is None:
        return None, None
    ea = EA_PATTERN.search(qualifier)
    if ea is None:
        return None, None
    if ea.group(4) is not None:
        return ReleaseStatus.EA, int(ea.group(4))
    tail = match.group("qualifier_tail")
    if tail is not None:
        tail_match = EA_TAIL_PATTERN.search(tail)
        if tail_match is not None:
            return ReleaseStatus.EA, int(tail_match.group(2))
    return ReleaseStatus.EA, None


def _build_number(text: str, match: re.Match[str]) -> int | None:
    marker = BUILD_PATTERN.search(text)
    if marker is not None:
        return int(marker.group(2))
    # JEP 223: "$VNUM+$BUILD"
    if match.group("qualifier_sep") == "+":
        digits = PLUS_BUILD_PATTERN.match(match.group("qualifier_text"))
        if digits is not None:
            return int(digits.group(1))
    return None


def _resolve(text: str, match: re.Match[str], logger: Logger) -> VersionNumber:
    shape = _select_shape(match)
    components = {
        "interim": 0,
        "update": 0,
        "patch": 0,
        "fifth": 0,
        "sixth": 0,
    }
    components.update(shape.resolve(match))
    release_status, pre_build = _early_access(match)
    build = _build_number(text, match)
    logger.debug(
        "VERSION",
        f"Resolved {match.group(0)!r} with shape {shape.name!r} "
        f"(build={build}, release_status={release_status}, pre_build={pre_build})",
    )
    return VersionNumber(
        int(match.group("feature")),
        build=build,
        release_status=release_status,
        pre_build=pre_build,
        **components,
    )


def parse(
    text: str | None, which_match: int = 0, *, logger: Logger | None = None
) -> VersionNumber:
    """Parses the version number contained in free text.

    A leading "1." is stripped first, so legacy "1.8.0_262" reads as
    "8.0_262". Unresolved sub-components are filled with 0 once any
    occurrence was found.

    Args:
        text: Filename, tag or API field containing a version.
        which_match: Which occurrence of a version in the text to use
            (0-based). Values past the last occurrence select the last one.
        logger: Logger for diagnostics. Defaults to the global logger.

    Returns:
        The parsed VersionNumber, or the empty VersionNumber when the text
        holds no version at all.

    Raises:
        InvalidVersionError: If which_match is negative.

    Example:
        Selecting a later occurrence:
            ```python
            parse("upgrade 11.0.9 to 11.0.10", which_match=1)  # 11.0.10.0
            ```
    """
    if logger is None:
        logger = get_global_logger()
    if which_match < 0:
        raise InvalidVersionError(f"which_match cannot be negative, got {which_match}")
    if not text:
        logger.warning("VERSION", "No version number found in empty text")
        return VersionNumber()

    normalized = text[2:] if text.startswith("1.") else text
    matches = list(VERSION_PATTERN.finditer(normalized))
    if not matches:
        logger.warning("VERSION", f"No version number found in {text!r}")
        return VersionNumber()

    # Saturates at the last occurrence.
    selected = matches[min(which_match, len(matches) - 1)]
    logger.debug(
        "VERSION",
        f"Found {len(matches)} occurrence(s) in {text!r}, using {selected.group(0)!r}",
    )
    return _resolve(normalized, selected, logger)
