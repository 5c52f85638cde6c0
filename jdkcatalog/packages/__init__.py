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

"""Package records, their attributes and identity rules.

Modules:
    enums
        Distribution, Architecture, OperatingSystem, ArchiveType and the
        other enumerations a package is described with.
    model
        The frozen Package dataclass.
    identity
        Content-addressed package ids and same-build classification
        (is_different_build, all_builds_of, max_version_for).
    lookup
        Attribute detection from filenames and download URLs.

Example:
    ```python
    from jdkcatalog.packages import Distribution, Package, is_different_build
    from jdkcatalog.versioning import parse

    package = Package(
        distribution=Distribution.ZULU,
        version_number=parse("11.0.9"),
        filename="zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz",
        direct_download_uri="https://cdn.example.com/zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz",
    )
    package.id                              # md5 of the download URI
    is_different_build(package, package)    # False
    ```
"""

from .enums import (
    Architecture,
    ArchiveType,
    Bitness,
    Distribution,
    DownloadScope,
    LibCType,
    OperatingSystem,
    PackageType,
    TermOfSupport,
)
from .identity import (
    all_builds_of,
    deduplicate,
    is_different_build,
    is_version_in_package,
    known_major_versions,
    mark_latest_builds,
    max_version_for,
    package_id,
)
from .lookup import (
    architecture_from_text,
    archive_type_from_filename,
    filename_from_text,
    operating_system_from_text,
    package_type_from_text,
    release_status_from_text,
)
from .model import Package

__all__ = [
    "Architecture",
    "ArchiveType",
    "Bitness",
    "Distribution",
    "DownloadScope",
    "LibCType",
    "OperatingSystem",
    "Package",
    "PackageType",
    "TermOfSupport",
    "all_builds_of",
    "architecture_from_text",
    "archive_type_from_filename",
    "deduplicate",
    "filename_from_text",
    "is_different_build",
    "is_version_in_package",
    "known_major_versions",
    "mark_latest_builds",
    "max_version_for",
    "operating_system_from_text",
    "package_id",
    "package_type_from_text",
    "release_status_from_text",
]
