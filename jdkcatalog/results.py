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

"""Public API return types for jdkcatalog.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from pathlib import Path
        from jdkcatalog.core import query_catalog
        from jdkcatalog.results import QueryResult

        result: QueryResult = query_catalog(Path("catalogs/zulu/catalog.yaml"), version="17")
        for package in result.packages:
            print(package.filename)
        ```

Note:
    Only public API return types belong in this module. Domain types
    (like VersionNumber and Package) stay with their related logic.
"""

from __future__ import annotations

from dataclasses import dataclass

from jdkcatalog.packages import Package
from jdkcatalog.versioning import VersionNumber


@dataclass(frozen=True)
class QueryResult:
    """Result from filtering a catalog snapshot.

    Attributes:
        query: Version the packages were filtered with, or None for all.
        total: Number of packages in the snapshot.
        packages: Matching packages, newest version first.
    """

    query: VersionNumber | None
    total: int
    packages: tuple[Package, ...]


@dataclass(frozen=True)
class BuildsResult:
    """Result from looking up the siblings of one package.

    Attributes:
        package: The package that was looked up.
        siblings: Other artifacts of the same build.
        newest: Newest package of the same release line and feature.
    """

    package: Package
    siblings: tuple[Package, ...]
    newest: Package | None
