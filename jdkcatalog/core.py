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

"""Core orchestration for jdkcatalog.

This module ties configuration, snapshot loading and the version engine
together for the CLI and for programmatic callers.

Example:
    ```python
    from pathlib import Path
    from jdkcatalog.core import find_builds, query_catalog

    result = query_catalog(Path("catalogs/zulu/catalog.yaml"), version="11", latest=True)
    builds = find_builds(Path("catalogs/zulu/catalog.yaml"), result.packages[0].id)
    ```
"""

from __future__ import annotations

from functools import cmp_to_key
from pathlib import Path

from jdkcatalog.catalog import load_catalog_from_config
from jdkcatalog.config import load_effective_config
from jdkcatalog.exceptions import ConfigError
from jdkcatalog.logging import get_global_logger
from jdkcatalog.packages import (
    DownloadScope,
    Package,
    all_builds_of,
    mark_latest_builds,
    max_version_for,
)
from jdkcatalog.results import BuildsResult, QueryResult
from jdkcatalog.versioning import VersionNumber, parse


def _newest_first(a: Package, b: Package) -> int:
    return b.version_number.compare(a.version_number)


def query_catalog(
    config_path: Path,
    *,
    version: str | None = None,
    latest: bool | None = None,
    scope: str | None = None,
    distribution: str | None = None,
) -> QueryResult:
    """Loads a catalog and filters it.

    Arguments left as None fall back to the config's 'query' section
    (keys 'version', 'latest', 'scope').

    Args:
        config_path: Path to the catalog config YAML file.
        version: Version prefix to match, e.g. "17" or "11.0.9". Matching
            uses compare_for_filter(), so "11" matches every 11.x.
        latest: Keep only the newest build of each release line.
        scope: DownloadScope token, e.g. "directly_downloadable".
        distribution: Distribution override for config layering.

    Returns:
        QueryResult with the matching packages, newest first.

    Raises:
        ConfigError: On config errors, an unknown scope token, or a version
            query without a version number.
        NetworkError: If the snapshot cannot be fetched.
        CatalogError: If the snapshot is malformed.
    """
    logger = get_global_logger()

    logger.step(1, 3, "Loading configuration...")
    config = load_effective_config(config_path, distribution=distribution)
    query_defaults = config.get("query") or {}
    if version is None:
        version = query_defaults.get("version")
    if latest is None:
        latest = bool(query_defaults.get("latest", False))
    if scope is None:
        scope = query_defaults.get("scope")

    download_scope = None
    if scope:
        download_scope = DownloadScope.from_token(scope)
        if download_scope is None:
            tokens = ", ".join(member.token for member in DownloadScope)
            raise ConfigError(f"Unknown scope {scope!r}. Use one of: {tokens}")

    query: VersionNumber | None = None
    if version is not None:
        query = parse(str(version))
        if query.is_empty:
            raise ConfigError(f"No version number in query {version!r}")

    logger.step(2, 3, "Loading catalog...")
    packages = load_catalog_from_config(config)
    total = len(packages)

    logger.step(3, 3, "Filtering packages...")
    if latest:
        packages = [p for p in mark_latest_builds(packages) if p.latest_build_available]
    if download_scope is not None:
        packages = [p for p in packages if download_scope.includes(p.directly_downloadable)]
    if query is not None:
        packages = [p for p in packages if query.compare_for_filter(p.version_number) == 0]
    logger.verbose("QUERY", f"{len(packages)} of {total} package(s) matched")

    return QueryResult(
        query=query,
        total=total,
        packages=tuple(sorted(packages, key=cmp_to_key(_newest_first))),
    )


def find_builds(
    config_path: Path, package_id: str, *, distribution: str | None = None
) -> BuildsResult:
    """Finds the sibling artifacts and the newest build for one package.

    Args:
        config_path: Path to the catalog config YAML file.
        package_id: Id of the package, as printed by the catalog command.
        distribution: Distribution override for config layering.

    Returns:
        BuildsResult for the package.

    Raises:
        ConfigError: If no package in the catalog has the given id.
        NetworkError: If the snapshot cannot be fetched.
        CatalogError: If the snapshot is malformed.
    """
    logger = get_global_logger()

    logger.step(1, 2, "Loading catalog...")
    config = load_effective_config(config_path, distribution=distribution)
    packages = load_catalog_from_config(config)

    logger.step(2, 2, "Resolving builds...")
    package = next((p for p in packages if p.id == package_id), None)
    if package is None:
        raise ConfigError(f"No package with id {package_id!r} in catalog")

    siblings = all_builds_of(packages, package)
    logger.verbose("QUERY", f"Found {len(siblings)} sibling artifact(s)")
    return BuildsResult(
        package=package,
        siblings=tuple(siblings),
        newest=max_version_for(packages, package),
    )
