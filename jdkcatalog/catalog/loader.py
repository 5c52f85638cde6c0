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

"""Load read-only catalog snapshots of package records.

A snapshot is a list of package records using the catalog's JSON field
names. It is read from a local JSON or YAML file, or fetched from an HTTP
endpoint. A JSONPath expression selects the records when they are nested
inside a larger document (e.g. ``$.result[*]``).

Record Fields:

- **distribution** (str, required): Vendor api string, e.g. "zulu"
- **java_version** (str, required): Version text, parsed with parse()
- **filename** (str, required): File name of the artifact
- **direct_download_uri** (str, required): Download location
- **download_site_uri** (str, optional): Vendor landing page
- **distribution_version** (str, optional): Vendor numbering, e.g. "11.43.21"
- **architecture**, **operating_system**, **lib_c_type**, **package_type**,
  **release_status**, **archive_type**, **term_of_support** (str, optional):
  api strings. Missing or unknown values are derived from the filename,
  the version or the term-of-support classifier.
- **javafx_bundled**, **directly_downloadable**, **latest_build_available**
  (bool, optional): Default to False, True and False.

Example:
    Loading from an API:
        ```python
        from jdkcatalog.catalog import load_catalog

        packages = load_catalog(
            "https://api.example.com/packages?distro=zulu",
            packages_path="$.result[*]",
        )
        ```

    Loading from a file:
        ```python
        packages = load_catalog(Path("snapshots/zulu.yaml"))
        ```

Note:
    No retries are attempted. Records sharing an id are collapsed to the
    first occurrence.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Mapping

from jsonpath_ng import parse as jsonpath_parse
import requests
import yaml

from jdkcatalog.exceptions import CatalogError, ConfigError, NetworkError
from jdkcatalog.logging import Logger, get_global_logger
from jdkcatalog.packages import (
    Architecture,
    ArchiveType,
    Distribution,
    LibCType,
    OperatingSystem,
    Package,
    PackageType,
    TermOfSupport,
    architecture_from_text,
    deduplicate,
    operating_system_from_text,
    package_type_from_text,
    release_status_from_text,
)
from jdkcatalog.support import classify_term_of_support
from jdkcatalog.versioning import OutputFormat, ReleaseStatus, VersionNumber, parse

__all__ = [
    "load_catalog",
    "load_catalog_from_config",
    "package_from_dict",
    "package_to_dict",
]

_REQUIRED_FIELDS = ("distribution", "java_version", "filename", "direct_download_uri")

# -------------------------------
# Record conversion
# -------------------------------


def package_from_dict(record: Mapping[str, Any]) -> Package:
    """Builds a Package from a catalog record.

    Args:
        record: Mapping using the catalog field names.

    Returns:
        The Package, with missing attributes derived where possible.

    Raises:
        CatalogError: If a required field is missing, the distribution is
            unknown, or java_version holds no version number.
    """
    missing = [name for name in _REQUIRED_FIELDS if not record.get(name)]
    if missing:
        raise CatalogError(f"Package record is missing required field(s): {', '.join(missing)}")

    filename = str(record["filename"])
    distribution = Distribution.from_text(str(record["distribution"]))
    if distribution is Distribution.NOT_FOUND:
        raise CatalogError(f"Unknown distribution {record['distribution']!r} for {filename}")

    version_number = parse(str(record["java_version"]))
    if version_number.is_empty:
        raise CatalogError(
            f"No version number in java_version {record['java_version']!r} for {filename}"
        )
    distribution_version = VersionNumber()
    if record.get("distribution_version"):
        distribution_version = parse(str(record["distribution_version"]))

    architecture = Architecture.from_text(record.get("architecture"))
    if architecture is Architecture.NOT_FOUND:
        architecture = architecture_from_text(filename)

    operating_system = OperatingSystem.from_text(record.get("operating_system"))
    if operating_system is OperatingSystem.NOT_FOUND:
        operating_system = operating_system_from_text(filename)
        if operating_system is OperatingSystem.NOT_FOUND:
            operating_system = OperatingSystem.NONE

    package_type = PackageType.from_text(record.get("package_type"))
    if package_type is PackageType.NOT_FOUND:
        package_type = package_type_from_text(filename)

    release_status = ReleaseStatus.from_text(record.get("release_status"))
    if release_status is ReleaseStatus.NOT_FOUND:
        if version_number.is_early_access:
            release_status = ReleaseStatus.EA
        else:
            release_status = release_status_from_text(filename)

    archive_type = ArchiveType.from_text(record.get("archive_type"))
    if archive_type is ArchiveType.NOT_FOUND:
        archive_type = ArchiveType.from_filename(filename)

    term_of_support = TermOfSupport.from_text(record.get("term_of_support"))
    if term_of_support is TermOfSupport.NOT_FOUND:
        term_of_support = classify_term_of_support(version_number.feature, distribution)

    return Package(
        distribution=distribution,
        version_number=version_number,
        filename=filename,
        direct_download_uri=str(record["direct_download_uri"]),
        download_site_uri=str(record.get("download_site_uri") or ""),
        java_version=version_number,
        distribution_version=distribution_version,
        architecture=architecture,
        operating_system=operating_system,
        libc_type=LibCType.from_text(record.get("lib_c_type")),
        package_type=package_type,
        release_status=release_status,
        archive_type=archive_type,
        term_of_support=term_of_support,
        javafx_bundled=bool(record.get("javafx_bundled", False)),
        directly_downloadable=bool(record.get("directly_downloadable", True)),
        latest_build_available=bool(record.get("latest_build_available", False)),
    )


def package_to_dict(package: Package) -> dict[str, Any]:
    """Renders a Package with the catalog field names plus id and major_version."""
    return {
        "id": package.id,
        "archive_type": package.archive_type.api_string,
        "distribution": package.distribution.api_string,
        "major_version": package.version_number.feature,
        "java_version": str(package.java_version),
        "distribution_version": package.distribution_version.to_string(
            OutputFormat.REDUCED, java_format=True, include_suffix=True
        ),
        "latest_build_available": package.latest_build_available,
        "release_status": package.release_status.api_string,
        "term_of_support": package.term_of_support.api_string,
        "operating_system": package.operating_system.api_string,
        "lib_c_type": package.libc_type.api_string,
        "architecture": package.architecture.api_string,
        "package_type": package.package_type.api_string,
        "javafx_bundled": package.javafx_bundled,
        "directly_downloadable": package.directly_downloadable,
        "filename": package.filename,
        "direct_download_uri": package.direct_download_uri,
        "download_site_uri": package.download_site_uri,
    }


# -------------------------------
# Snapshot sources
# -------------------------------


def _expand_headers(headers: Mapping[str, Any], logger: Logger) -> dict[str, str]:
    """Replaces "${VAR}" header values with environment variables."""
    expanded: dict[str, str] = {}
    for key, value in headers.items():
        if isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            env_value = os.environ.get(env_var)
            if not env_value:
                logger.verbose("CATALOG", f"Warning: Environment variable {env_var} not set")
            else:
                expanded[key] = env_value
        else:
            expanded[key] = str(value)
    return expanded


def _fetch_payload(
    url: str, timeout: int, headers: Mapping[str, Any], logger: Logger
) -> Any:
    logger.verbose("CATALOG", f"Fetching catalog: GET {url}")
    try:
        response = requests.get(
            url, headers=_expand_headers(headers, logger), timeout=timeout
        )
        response.raise_for_status()
    except requests.exceptions.HTTPError as err:
        raise NetworkError(
            f"Catalog request failed: {response.status_code} {response.reason}"
        ) from err
    except requests.exceptions.RequestException as err:
        raise NetworkError(f"Failed to fetch catalog: {err}") from err

    logger.verbose("CATALOG", f"Catalog response: {response.status_code} OK")
    try:
        return response.json()
    except ValueError as err:
        raise NetworkError(
            f"Invalid JSON response from catalog. Response: {response.text[:200]}"
        ) from err


def _read_payload(path: Path, logger: Logger) -> Any:
    if not path.exists():
        raise ConfigError(f"Catalog file not found: {path}")
    suffix = path.suffix.lower()
    if suffix not in (".json", ".yaml", ".yml"):
        raise ConfigError(
            f"Unsupported catalog file type {suffix!r}: {path}. Use .json, .yaml or .yml"
        )
    logger.verbose("CATALOG", f"Reading catalog file: {path}")
    with path.open("r", encoding="utf-8") as f:
        if suffix == ".json":
            try:
                return json.load(f)
            except json.JSONDecodeError as err:
                raise CatalogError(f"Error parsing JSON: {path}: {err}") from err
        try:
            return yaml.safe_load(f)
        except yaml.YAMLError as err:
            raise CatalogError(f"Error parsing YAML: {path}: {err}") from err


def _select_records(payload: Any, packages_path: str | None) -> list[Any]:
    if packages_path:
        try:
            expr = jsonpath_parse(packages_path)
        except Exception as err:
            raise ConfigError(f"Invalid packages_path {packages_path!r}: {err}") from err
        values = [match.value for match in expr.find(payload)]
        if len(values) == 1 and isinstance(values[0], list):
            values = values[0]
        return values
    if not isinstance(payload, list):
        raise CatalogError(
            "Catalog payload must be a list of package records "
            "(set packages_path to select nested records)"
        )
    return payload


def load_catalog(
    source: str | Path,
    *,
    packages_path: str | None = None,
    timeout: int = 30,
    headers: Mapping[str, Any] | None = None,
    logger: Logger | None = None,
) -> list[Package]:
    """Loads a catalog snapshot.

    Args:
        source: http(s) URL, or path to a .json/.yaml/.yml file.
        packages_path: JSONPath expression selecting the records. Without
            it the document itself must be the list of records.
        timeout: HTTP timeout in seconds.
        headers: HTTP headers. "${VAR}" values are read from the
            environment.
        logger: Logger for progress output. Defaults to the global logger.

    Returns:
        Packages in snapshot order, deduplicated by id.

    Raises:
        NetworkError: If the HTTP request fails or returns invalid JSON.
        ConfigError: If the file is missing, of an unsupported type, or
            packages_path is not valid JSONPath.
        CatalogError: If the document or one of its records is malformed.
    """
    if logger is None:
        logger = get_global_logger()

    text = str(source)
    if text.startswith(("http://", "https://")):
        payload = _fetch_payload(text, timeout, headers or {}, logger)
    else:
        payload = _read_payload(Path(source), logger)

    records = _select_records(payload, packages_path)
    packages: list[Package] = []
    for index, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise CatalogError(f"Catalog record #{index} is not a mapping: {record!r}")
        packages.append(package_from_dict(record))

    unique = deduplicate(packages)
    logger.verbose(
        "CATALOG",
        f"Loaded {len(unique)} package(s), {len(packages) - len(unique)} duplicate(s) dropped",
    )
    return unique


def load_catalog_from_config(
    config: Mapping[str, Any], *, logger: Logger | None = None
) -> list[Package]:
    """Loads the snapshot described by the 'catalog' section of a config.

    Raises:
        ConfigError: If 'catalog.source' is missing.
    """
    catalog = config.get("catalog") or {}
    source = catalog.get("source")
    if not source:
        raise ConfigError("Config requires 'catalog.source'")
    return load_catalog(
        source,
        packages_path=catalog.get("packages_path"),
        timeout=int(catalog.get("timeout", 30)),
        headers=catalog.get("headers") or {},
        logger=logger,
    )
