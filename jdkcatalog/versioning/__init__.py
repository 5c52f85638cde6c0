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

"""Java version parsing and comparison for jdkcatalog.

This package turns the free-text version conventions used by JDK vendors
into a canonical VersionNumber and provides the comparison modes built on
top of it.

Modules:
    number
        VersionNumber, ReleaseStatus, OutputFormat and MajorVersion, plus the
        strict order, filter match and prefix equality operations.
    parser
        parse(), which resolves ambiguous matches by specificity and reads
        early-access and build markers.

Comparison Modes:

1. **Strict order** (compare):
   - Presence beats absence: 11.0.2 > 11.0
   - EA pre-build breaks ties: 17-ea.28 < 17-ea.34

2. **Filter match** (compare_for_filter):
   - A truncated query acts as a wildcard: "11" matches 11.0.2

3. **Prefix equality** (equals):
   - VersionNumber(1) equals VersionNumber(1, 2)

Example:
    ```python
    from jdkcatalog.versioning import VersionNumber, parse

    v = parse("1.8.0_262")
    v.compare(VersionNumber.of(8, 0, 262))  # 0
    v.to_string()                           # "8.0.262.0"
    ```
"""

from .number import (
    COMPONENT_NAMES,
    MajorVersion,
    OutputFormat,
    ReleaseStatus,
    VersionNumber,
)
from .parser import VERSION_PATTERN, parse

__all__ = [
    "COMPONENT_NAMES",
    "MajorVersion",
    "OutputFormat",
    "ReleaseStatus",
    "VERSION_PATTERN",
    "VersionNumber",
    "parse",
]
