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

"""The Package record: one downloadable JDK artifact from a vendor feed."""

from __future__ import annotations

from dataclasses import dataclass, field

from jdkcatalog.packages.enums import (
    Architecture,
    ArchiveType,
    Bitness,
    Distribution,
    LibCType,
    OperatingSystem,
    PackageType,
    TermOfSupport,
)
from jdkcatalog.packages.identity import package_id
from jdkcatalog.versioning import ReleaseStatus, VersionNumber


@dataclass(frozen=True)
class Package:
    """A single distributable artifact.

    Attributes:
        distribution: Vendor that publishes the artifact.
        version_number: Canonical Java version of the artifact.
        filename: File name of the artifact.
        direct_download_uri: URI of the file, or of the vendor page that
            leads to it when the package is not directly downloadable.
        download_site_uri: Vendor landing page.
        java_version: Java version as the vendor reports it. Defaults to
            version_number.
        distribution_version: Vendor-specific numbering (e.g., Zulu 8.50).
        architecture: CPU architecture.
        bitness: Derived from architecture when left as NOT_FOUND.
        operating_system: Target operating system.
        libc_type: Derived from operating_system when left as NOT_FOUND.
        package_type: jdk or jre.
        release_status: ea or ga.
        archive_type: Archive or installer format.
        term_of_support: Forced to NONE for early-access packages.
        javafx_bundled: Whether JavaFX ships with the artifact.
        directly_downloadable: Whether direct_download_uri points at the file.
        latest_build_available: Whether this is the newest build of its
            release line in the catalog it came from.
    """

    distribution: Distribution
    version_number: VersionNumber
    filename: str
    direct_download_uri: str
    download_site_uri: str = ""
    java_version: VersionNumber | None = None
    distribution_version: VersionNumber = field(default_factory=VersionNumber)
    architecture: Architecture = Architecture.NOT_FOUND
    bitness: Bitness = Bitness.NOT_FOUND
    operating_system: OperatingSystem = OperatingSystem.NOT_FOUND
    libc_type: LibCType = LibCType.NOT_FOUND
    package_type: PackageType = PackageType.JDK
    release_status: ReleaseStatus = ReleaseStatus.GA
    archive_type: ArchiveType = ArchiveType.NOT_FOUND
    term_of_support: TermOfSupport = TermOfSupport.NOT_FOUND
    javafx_bundled: bool = False
    directly_downloadable: bool = True
    latest_build_available: bool = False

    def __post_init__(self) -> None:
        # frozen: derived defaults are written through object.__setattr__
        if self.java_version is None:
            object.__setattr__(self, "java_version", self.version_number)
        if self.bitness is Bitness.NOT_FOUND:
            object.__setattr__(self, "bitness", self.architecture.bitness)
        if self.libc_type is LibCType.NOT_FOUND:
            object.__setattr__(self, "libc_type", self.operating_system.libc_type)
        # An early-access build is never a supported release
        if self.release_status is ReleaseStatus.EA:
            object.__setattr__(self, "term_of_support", TermOfSupport.NONE)

    @property
    def id(self) -> str:
        """Content-addressed identifier, see identity.package_id()."""
        return package_id(self)

    @property
    def feature(self) -> int | None:
        return self.version_number.feature
