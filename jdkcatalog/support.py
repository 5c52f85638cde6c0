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

"""Term-of-support classification for Java feature releases.

Feature releases up to 8 and every sixth release from 11 on (11, 17, 23,
...) are long-term support. From 13 on, odd non-LTS releases are
medium-term support, a tier only Zulu publishes. Everything else from 9 on
is short-term support.

Example:
    ```python
    from jdkcatalog.packages.enums import Distribution
    from jdkcatalog.support import classify_term_of_support

    classify_term_of_support(17)                      # TermOfSupport.LTS
    classify_term_of_support(13)                      # TermOfSupport.STS
    classify_term_of_support(13, Distribution.ZULU)   # TermOfSupport.MTS
    ```
"""

from __future__ import annotations

from jdkcatalog.exceptions import InvalidVersionError
from jdkcatalog.packages.enums import Distribution, TermOfSupport

__all__ = [
    "MTS_DISTRIBUTIONS",
    "TermOfSupport",
    "classify_term_of_support",
    "is_lts",
    "is_mts",
    "is_release_term_of_support",
    "is_sts",
]

MTS_DISTRIBUTIONS = frozenset({Distribution.ZULU})


def _require_feature(feature: int) -> None:
    if feature < 1:
        raise InvalidVersionError(f"Feature version must be positive, got {feature}")


def is_lts(feature: int) -> bool:
    _require_feature(feature)
    if feature <= 8:
        return True
    if feature < 11:
        return False
    return (feature - 11) % 6 == 0


def is_mts(feature: int) -> bool:
    return feature >= 13 and not is_lts(feature) and feature % 2 != 0


def is_sts(feature: int) -> bool:
    if feature < 9:
        _require_feature(feature)
        return False
    if feature in (9, 10):
        return True
    return not is_lts(feature) and not is_mts(feature)


def classify_term_of_support(
    feature: int, distribution: Distribution | None = None
) -> TermOfSupport:
    """Returns the support tier of a feature release.

    Args:
        feature: Feature version, e.g. 17.
        distribution: Owning vendor. MTS is only reported for vendors in
            MTS_DISTRIBUTIONS, every other vendor gets STS instead.

    Returns:
        LTS, MTS or STS.

    Raises:
        InvalidVersionError: If feature is below 1.
    """
    if is_lts(feature):
        return TermOfSupport.LTS
    if is_mts(feature):
        if distribution in MTS_DISTRIBUTIONS:
            return TermOfSupport.MTS
        return TermOfSupport.STS
    if is_sts(feature):
        return TermOfSupport.STS
    return TermOfSupport.NOT_FOUND


def is_release_term_of_support(feature: int, term_of_support: TermOfSupport) -> bool:
    """Checks whether a feature release belongs to the given tier."""
    if term_of_support is TermOfSupport.LTS:
        return is_lts(feature)
    if term_of_support is TermOfSupport.MTS:
        return is_mts(feature)
    if term_of_support is TermOfSupport.STS:
        return is_sts(feature)
    return False
