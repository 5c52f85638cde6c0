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

"""jdkcatalog - JDK package version resolution and cataloging

A Python library and CLI that catalogs build artifacts published by many
JDK vendors, each encoding version information in its own free-text
convention.

jdkcatalog provides:

- A parser turning vendor version text ("1.8.0_262", "8u262", "17-ea+5")
  into a canonical VersionNumber
- Strict ordering, prefix filtering and prefix equality over versions
- Term-of-support classification (LTS, MTS, STS)
- Content-addressed package ids and same-build classification
- Catalog snapshot loading from YAML/JSON files or HTTP endpoints
- Layered YAML configuration (organization, distribution, catalog)

Quick Start:
Parse a version string:

    $ jdkcatalog parse 1.8.0_275.b01-x86.rpm

Filter a catalog snapshot:

    $ jdkcatalog catalog catalogs/zulu/catalog.yaml --version 17 --latest

For full CLI documentation:

    $ jdkcatalog --help

For more details, see the individual module docstrings.
"""

__version__ = "0.1.0"
__author__ = "Roger Cibrian"
__license__ = "Apache-2.0"
__description__ = "JDK package version resolution and cataloging"

# Re-export commonly used functions for convenience
from jdkcatalog.catalog import load_catalog, package_from_dict, package_to_dict
from jdkcatalog.config import load_effective_config
from jdkcatalog.core import find_builds, query_catalog
from jdkcatalog.exceptions import (
    CatalogError,
    ConfigError,
    InvalidVersionError,
    JDKCatalogError,
    NetworkError,
)
from jdkcatalog.packages import (
    Distribution,
    Package,
    all_builds_of,
    is_different_build,
    max_version_for,
    package_id,
)
from jdkcatalog.results import BuildsResult, QueryResult
from jdkcatalog.support import TermOfSupport, classify_term_of_support
from jdkcatalog.versioning import (
    MajorVersion,
    OutputFormat,
    ReleaseStatus,
    VersionNumber,
    parse,
)

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "__description__",
    "BuildsResult",
    "QueryResult",
    "parse",
    "VersionNumber",
    "MajorVersion",
    "OutputFormat",
    "ReleaseStatus",
    "TermOfSupport",
    "classify_term_of_support",
    "Distribution",
    "Package",
    "package_id",
    "is_different_build",
    "all_builds_of",
    "max_version_for",
    "load_catalog",
    "package_from_dict",
    "package_to_dict",
    "load_effective_config",
    "query_catalog",
    "find_builds",
    "JDKCatalogError",
    "InvalidVersionError",
    "ConfigError",
    "NetworkError",
    "CatalogError",
]
