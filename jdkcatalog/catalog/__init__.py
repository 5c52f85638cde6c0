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

"""Catalog snapshot loading for jdkcatalog.

This package reads the read-only package snapshots the version engine
queries, from local JSON/YAML files or an HTTP endpoint.

Example:
    ```python
    from jdkcatalog.catalog import load_catalog

    packages = load_catalog("catalog.yaml")
    ```
"""

from .loader import (
    load_catalog,
    load_catalog_from_config,
    package_from_dict,
    package_to_dict,
)

__all__ = [
    "load_catalog",
    "load_catalog_from_config",
    "package_from_dict",
    "package_to_dict",
]
