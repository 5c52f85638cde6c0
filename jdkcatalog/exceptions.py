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

"""Exception hierarchy for jdkcatalog.

This module defines a custom exception hierarchy that allows library users
to distinguish between different types of errors. All exceptions inherit from
JDKCatalogError, allowing users to catch all jdkcatalog errors with a single
except clause if needed.

Note that an unparseable version string is not an error: the parser returns
an empty VersionNumber (feature absent) and reports the condition through the
logger instead.

Example:
    Catching specific error types:
        ```python
        from jdkcatalog.catalog import load_catalog
        from jdkcatalog.exceptions import CatalogError, NetworkError

        try:
            packages = load_catalog("https://api.example.com/packages")
        except NetworkError as e:
            print(f"Network error: {e}")
        except CatalogError as e:
            print(f"Bad catalog record: {e}")
        ```

    Catching all jdkcatalog errors:
        ```python
        from jdkcatalog.exceptions import JDKCatalogError

        try:
            packages = load_catalog("catalog.yaml")
        except JDKCatalogError as e:
            print(f"jdkcatalog error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "JDKCatalogError",
    "InvalidVersionError",
    "ConfigError",
    "NetworkError",
    "CatalogError",
]


class JDKCatalogError(Exception):
    """Base exception for all jdkcatalog errors.

    All jdkcatalog-specific exceptions inherit from this class, allowing
    users to catch all jdkcatalog errors with a single except clause if
    needed.
    """

    pass


class InvalidVersionError(JDKCatalogError, ValueError):
    """Raised when a version number or feature version is invalid.

    This exception is raised when there are problems with:

    - Explicit VersionNumber construction (negative component, feature
        missing or below 1 where a feature is required)
    - Term-of-support classification of a feature below 1
    - Rendering or querying operations that need a feature number on an
        empty VersionNumber

    It also subclasses ValueError, so callers treating it as a plain
    invalid-argument failure keep working.

    Example:
        Rejecting an invalid feature version:
            ```python
            from jdkcatalog.exceptions import InvalidVersionError
            from jdkcatalog.support import classify_term_of_support

            try:
                classify_term_of_support(0)
            except InvalidVersionError as e:
                print(f"Invalid version: {e}")
            ```
    """

    pass


class ConfigError(JDKCatalogError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - YAML parse errors (syntax errors, invalid structure)
    - Missing configuration files (file not found, empty file)
    - Missing required configuration fields (e.g., no 'catalog.source')
    - Unsupported catalog source file types

    Example:
        Catching configuration errors:
            ```python
            from jdkcatalog.exceptions import ConfigError

            try:
                config = load_effective_config(Path("invalid.yaml"))
            except ConfigError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class NetworkError(JDKCatalogError):
    """Raised for network-related errors while fetching a catalog snapshot.

    This exception is raised when there are problems with:

    - HTTP errors returned by the catalog endpoint
    - Connection failures and timeouts
    - Responses that are not valid JSON

    Example:
        Catching network errors:
            ```python
            from jdkcatalog.exceptions import NetworkError

            try:
                packages = load_catalog("https://api.example.com/packages")
            except NetworkError as e:
                print(f"Network error: {e}")
            ```
    """

    pass


class CatalogError(JDKCatalogError):
    """Raised when a catalog snapshot or one of its records is malformed.

    This exception is raised when there are problems with:

    - Records missing a required field (e.g., 'filename')
    - Records whose java_version cannot be parsed into a feature version
    - Snapshots whose payload is not a list of records

    Example:
        Catching catalog errors:
            ```python
            from jdkcatalog.catalog import package_from_dict
            from jdkcatalog.exceptions import CatalogError

            try:
                package = package_from_dict({"distribution": "zulu"})
            except CatalogError as e:
                print(f"Catalog error: {e}")
            ```
    """

    pass
