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

"""Derive package attributes from vendor filenames and URLs.

Vendor feeds often only expose a download link. These helpers read the
operating system, architecture, package type, release status and archive
type out of such text with ordered substring tables: the first key found in
the text wins, so more specific keys ("linux-musl", "x86_64", "ppc64le")
are listed before the keys they contain.

Example:
    ```python
    from jdkcatalog.packages.lookup import architecture_from_text, filename_from_text

    url = "https://cdn.example.com/zulu/bin/zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz"
    filename_from_text(url)          # "zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz"
    architecture_from_text(url)      # Architecture.X64
    ```
"""

from __future__ import annotations

from typing import Any

from jdkcatalog.packages.enums import (
    Architecture,
    ArchiveType,
    OperatingSystem,
    PackageType,
)
from jdkcatalog.versioning import ReleaseStatus

OPERATING_SYSTEM_LOOKUP: tuple[tuple[str, OperatingSystem], ...] = (
    ("alpine-linux", OperatingSystem.ALPINE_LINUX),
    ("alpine", OperatingSystem.ALPINE_LINUX),
    ("linux-musl", OperatingSystem.LINUX_MUSL),
    ("linux_musl", OperatingSystem.LINUX_MUSL),
    ("musl", OperatingSystem.LINUX_MUSL),
    ("linux", OperatingSystem.LINUX),
    ("windows", OperatingSystem.WINDOWS),
    ("darwin", OperatingSystem.MACOS),
    ("macosx", OperatingSystem.MACOS),
    ("macos", OperatingSystem.MACOS),
    ("osx", OperatingSystem.MACOS),
    ("solaris", OperatingSystem.SOLARIS),
    ("aix", OperatingSystem.AIX),
    ("qnx", OperatingSystem.QNX),
    # short keys last, they occur inside longer words
    ("win", OperatingSystem.WINDOWS),
    ("mac", OperatingSystem.MACOS),
)

OPERATING_SYSTEM_BY_ARCHIVE_TYPE: dict[ArchiveType, OperatingSystem] = {
    ArchiveType.APK: OperatingSystem.ALPINE_LINUX,
    ArchiveType.CAB: OperatingSystem.WINDOWS,
    ArchiveType.DEB: OperatingSystem.LINUX,
    ArchiveType.DMG: OperatingSystem.MACOS,
    ArchiveType.EXE: OperatingSystem.WINDOWS,
    ArchiveType.MSI: OperatingSystem.WINDOWS,
    ArchiveType.PKG: OperatingSystem.MACOS,
    ArchiveType.RPM: OperatingSystem.LINUX,
}

ARCHITECTURE_LOOKUP: tuple[tuple[str, Architecture], ...] = (
    ("aarch64", Architecture.AARCH64),
    ("arm64", Architecture.ARM64),
    ("amd64", Architecture.AMD64),
    ("x86_64", Architecture.X64),
    ("x86-64", Architecture.X64),
    ("x64", Architecture.X64),
    ("ppc64le", Architecture.PPC64LE),
    ("ppc64", Architecture.PPC64),
    ("s390x", Architecture.S390X),
    ("sparcv9", Architecture.SPARCV9),
    ("riscv64", Architecture.RISCV64),
    ("i686", Architecture.I686),
    ("i586", Architecture.I586),
    ("i386", Architecture.I386),
    ("x86", Architecture.X86),
    ("x32", Architecture.X86),
    ("arm32", Architecture.ARM),
    ("aarch32", Architecture.ARM),
    ("armhf", Architecture.ARM),
    ("arm", Architecture.ARM),
)

PACKAGE_TYPE_LOOKUP: tuple[tuple[str, PackageType], ...] = (
    ("jdk", PackageType.JDK),
    ("jre", PackageType.JRE),
)

RELEASE_STATUS_LOOKUP: tuple[tuple[str, ReleaseStatus], ...] = (
    ("-ea", ReleaseStatus.EA),
    ("_ea", ReleaseStatus.EA),
    (".ea", ReleaseStatus.EA),
    ("-early-access", ReleaseStatus.EA),
)


def _first_match(
    text: str | None, table: tuple[tuple[str, Any], ...], default: Any
) -> Any:
    if not text:
        return default
    lowered = text.lower()
    for key, value in table:
        if key in lowered:
            return value
    return default


def archive_type_from_filename(filename: str | None) -> ArchiveType:
    return ArchiveType.from_filename(filename)


def filename_from_text(text: str | None) -> str:
    """Returns the part after the last "/" if it names an archive, else ""."""
    if archive_type_from_filename(text) is ArchiveType.NONE:
        return ""
    return text.rsplit("/", 1)[-1]


def operating_system_from_text(text: str | None) -> OperatingSystem:
    """Reads the OS from text, falling back to what the archive type implies."""
    found = _first_match(text, OPERATING_SYSTEM_LOOKUP, OperatingSystem.NOT_FOUND)
    if found is OperatingSystem.NOT_FOUND:
        archive_type = archive_type_from_filename(text)
        found = OPERATING_SYSTEM_BY_ARCHIVE_TYPE.get(archive_type, OperatingSystem.NOT_FOUND)
    return found


def architecture_from_text(text: str | None) -> Architecture:
    return _first_match(text, ARCHITECTURE_LOOKUP, Architecture.NOT_FOUND)


def package_type_from_text(text: str | None) -> PackageType:
    return _first_match(text, PACKAGE_TYPE_LOOKUP, PackageType.NOT_FOUND)


def release_status_from_text(text: str | None) -> ReleaseStatus:
    """Returns EA for early-access markers, GA for any other non-empty text."""
    if not text:
        return ReleaseStatus.NOT_FOUND
    return _first_match(text, RELEASE_STATUS_LOOKUP, ReleaseStatus.GA)
