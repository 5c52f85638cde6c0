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

"""Package identity and build-equivalence rules.

A package id is the MD5 hex digest of its download location, so the same
artifact keeps its id across re-fetches no matter how its display metadata
changes. Two packages are the "same build" when they agree on every
dimension that describes the release (vendor, version, platform, format,
status) even if their filenames differ.

All functions here are pure. Functions taking a catalog only iterate it,
the caller is responsible for handing in a consistent snapshot.

Example:
    ```python
    from jdkcatalog.packages.identity import all_builds_of, max_version_for

    siblings = all_builds_of(catalog, package)
    newest = max_version_for(catalog, package)
    ```
"""

from __future__ import annotations

from dataclasses import replace
import hashlib
from typing import TYPE_CHECKING, Iterable

from jdkcatalog.exceptions import InvalidVersionError
from jdkcatalog.versioning import MajorVersion, VersionNumber

if TYPE_CHECKING:
    from jdkcatalog.packages.model import Package

__all__ = [
    "all_builds_of",
    "deduplicate",
    "is_different_build",
    "is_version_in_package",
    "known_major_versions",
    "mark_latest_builds",
    "max_version_for",
    "package_id",
]

# Dimensions shared by all artifacts of one release line
_RELEASE_LINE_FIELDS = (
    "distribution",
    "architecture",
    "archive_type",
    "operating_system",
    "libc_type",
    "term_of_support",
    "package_type",
    "release_status",
    "bitness",
    "javafx_bundled",
)


def package_id(package: Package) -> str:
    """Returns the content-addressed id of a package.

    Directly downloadable packages hash their download URI. Otherwise the
    URI points at a vendor page shared by many files, so the filename is
    appended before hashing.

    Args:
        package: Package to identify.

    Returns:
        32 character lowercase hex MD5 digest.
    """
    if package.directly_downloadable:
        source = package.direct_download_uri
    else:
        source = package.direct_download_uri + package.filename
    return hashlib.md5(source.encode("utf-8")).hexdigest()


def _same_release_line(a: Package, b: Package) -> bool:
    return all(getattr(a, name) == getattr(b, name) for name in _RELEASE_LINE_FIELDS)


def is_different_build(a: Package, b: Package) -> bool:
    """Checks whether two packages describe different logical builds.

    Filenames are not compared: two artifacts that differ only in their
    filename (checksum suffix, mirror naming) are the same build.
    """
    if not _same_release_line(a, b):
        return True
    return a.version_number.compare(b.version_number) != 0


def all_builds_of(catalog: Iterable[Package], package: Package) -> list[Package]:
    """Returns the sibling artifacts of a package's build.

    Args:
        catalog: Snapshot of packages to search.
        package: Reference package.

    Returns:
        Packages that are the same build as package but carry a different
        filename, in catalog order.
    """
    return [
        candidate
        for candidate in catalog
        if not is_different_build(candidate, package)
        and candidate.filename != package.filename
    ]


def max_version_for(catalog: Iterable[Package], package: Package) -> Package | None:
    """Returns the newest package of the same release line and feature.

    Args:
        catalog: Snapshot of packages to search.
        package: Reference package.

    Returns:
        The candidate with the greatest version_number under the strict
        order, or None when the catalog holds no candidate. The first of
        several equal maxima wins.
    """
    newest: Package | None = None
    for candidate in catalog:
        if not _same_release_line(candidate, package):
            continue
        if candidate.version_number.feature != package.version_number.feature:
            continue
        if newest is None or candidate.version_number.compare(newest.version_number) > 0:
            newest = candidate
    return newest


def is_version_in_package(query: VersionNumber, package: Package) -> bool:
    """Checks whether a (possibly truncated) query matches a package version.

    Feature must match. Interim, update and patch are only checked as far
    as the query specifies them, so VersionNumber(11) matches every 11.x.

    Raises:
        InvalidVersionError: If the query or the package version is empty.
    """
    version = package.version_number
    if query.feature is None or version.feature is None:
        raise InvalidVersionError("Version number must have feature number")
    for name in ("feature", "interim", "update", "patch"):
        wanted = getattr(query, name)
        if wanted is None:
            return True
        if getattr(version, name) != wanted:
            return False
    return True


def deduplicate(packages: Iterable[Package]) -> list[Package]:
    """Drops packages whose id was already seen, keeping the first."""
    seen: set[str] = set()
    unique: list[Package] = []
    for package in packages:
        key = package_id(package)
        if key in seen:
            continue
        seen.add(key)
        unique.append(package)
    return unique


def mark_latest_builds(catalog: Iterable[Package]) -> list[Package]:
    """Returns copies of the packages with latest_build_available set.

    A package is flagged when it is the max_version_for() its own release
    line and feature, or compares equal to it (sibling artifacts of the
    newest build are all flagged).
    """
    packages = list(catalog)
    marked: list[Package] = []
    for package in packages:
        newest = max_version_for(packages, package)
        latest = newest is not None and (
            package.version_number.compare(newest.version_number) == 0
        )
        if latest != package.latest_build_available:
            package = replace(package, latest_build_available=latest)
        marked.append(package)
    return marked


def known_major_versions(catalog: Iterable[Package]) -> list[MajorVersion]:
    """Returns the distinct feature versions in a catalog, newest first."""
    features = {
        package.version_number.feature
        for package in catalog
        if package.version_number.feature is not None
    }
    return [MajorVersion(feature) for feature in sorted(features, reverse=True)]
