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

"""Configuration loading and merging for jdkcatalog.

This module implements a three-layer configuration system that lets
organization-wide defaults be overridden by per-distribution settings and
finally by the catalog configuration itself.

Configuration Layers:
    1. **Organization defaults** (defaults/org.yaml)
       - Base settings for every catalog (timeouts, shared headers)
       - Loaded if a defaults directory is found

    2. **Distribution defaults** (defaults/distributions/<name>.yaml)
       - Vendor-specific overrides (e.g., Zulu API headers)
       - Optional; only loaded if the distribution is known
       - Overrides organization defaults

    3. **Catalog configuration** (catalogs/<name>/catalog.yaml)
       - Names the snapshot source and the query defaults
       - Always required
       - Overrides distribution and organization defaults

Merge Behavior:
    The loader performs deep merging with "last wins" semantics:

    - **Dicts**: Recursively merged (keys from overlay override base)
    - **Lists**: Completely replaced (NOT appended/extended)
    - **Scalars**: Overwritten (strings, numbers, booleans)

Path Resolution:
    A relative ``catalog.source`` file path is resolved against the directory
    of the catalog configuration file. URLs are left untouched.

Error Handling:
    - ConfigError: Config file doesn't exist, YAML parse errors, empty files,
        or a top level that is not a mapping
    - All errors are chained with "from err" for better debugging

Example:
    Basic usage:
        ```python
        from pathlib import Path
        from jdkcatalog.config import load_effective_config

        cfg = load_effective_config(Path("catalogs/zulu/catalog.yaml"))
        print(cfg["catalog"]["source"])
        ```

    Override distribution detection:
        ```python
        cfg = load_effective_config(
            Path("catalogs/mirror/catalog.yaml"),
            distribution="zulu",
        )
        ```
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from jdkcatalog.exceptions import ConfigError
from jdkcatalog.logging import get_global_logger
from jdkcatalog.packages import Distribution

# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """Loads a YAML file and returns the parsed Python object.

    Args:
        p: Path to the YAML file to load.

    Returns:
        The parsed Python object from the YAML file.

    Raises:
        ConfigError: When the file does not exist, holds invalid YAML, or is
            empty.
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Merge logic
# -------------------------------


def _deep_merge_dicts(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Deep-merges two dicts with "overlay wins" semantics.

    This function does not mutate inputs; returns a new dict.

    Args:
        base: The base dictionary.
        overlay: The overlay dictionary that takes precedence.

    Returns:
        A new dictionary with the merged contents.
    """
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge_dicts(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = v
    return result


# -------------------------------
# Defaults discovery
# -------------------------------


def _find_defaults_root(start_dir: Path) -> Path | None:
    """Walks upward from start_dir looking for a defaults/org.yaml file.

    Returns:
        The defaults/ directory if found, None otherwise.
    """
    for parent in [start_dir] + list(start_dir.parents):
        candidate = parent / "defaults" / "org.yaml"
        if candidate.exists():
            return parent / "defaults"
    return None


def _detect_distribution(config_path: Path, config_obj: dict[str, Any]) -> str | None:
    """Determines the distribution a catalog config belongs to.

    Uses the following priority order:

    1. The top-level 'distribution' key of the config
    2. The folder name (catalogs/zulu/catalog.yaml -> zulu), if it names a
       known distribution
    3. None if not found
    """
    declared = config_obj.get("distribution")
    if isinstance(declared, str) and declared.strip():
        return declared.strip()

    parent_name = config_path.parent.name
    if parent_name and Distribution.from_text(parent_name) is not Distribution.NOT_FOUND:
        return parent_name
    return None


# -------------------------------
# Path resolution
# -------------------------------


def _resolve_catalog_source(cfg: dict[str, Any], config_dir: Path) -> None:
    """Makes a relative catalog.source file path absolute. Modifies cfg in place."""
    catalog = cfg.get("catalog")
    if not isinstance(catalog, dict):
        return
    source = catalog.get("source")
    if not isinstance(source, str) or not source:
        return
    if source.startswith(("http://", "https://")):
        return
    p = Path(source)
    if not p.is_absolute():
        catalog["source"] = str((config_dir / p).resolve())


# -------------------------------
# Public API
# -------------------------------


def load_effective_config(
    config_path: Path,
    *,
    distribution: str | None = None,
) -> dict[str, Any]:
    """Loads and merges the effective configuration for a catalog.

    Performs the following operations:

    1. Read the catalog config YAML
    2. Find defaults root by scanning upwards for defaults/org.yaml
    3. Load org defaults
    4. Determine distribution (param > config 'distribution' > folder name)
    5. Load distribution defaults if present
    6. Merge: org -> distribution -> config (dicts deep-merge, lists replace)
    7. Resolve a relative catalog.source against the config directory

    Args:
        config_path: Path to the catalog config YAML file.
        distribution: Optional distribution override.

    Returns:
        The merged configuration dict. The detected distribution is stored
            under the top-level 'distribution' key when known.

    Raises:
        ConfigError: On YAML parse errors, empty files, a non-mapping top
            level, or if the config file is missing.
    """
    logger = get_global_logger()
    config_path = config_path.resolve()
    config_dir = config_path.parent

    logger.verbose("CONFIG", f"Loading config: {config_path}")

    config_obj = _load_yaml_file(config_path)
    if not isinstance(config_obj, dict):
        raise ConfigError(f"top-level YAML must be a mapping (dict): {config_path}")

    defaults_root = _find_defaults_root(config_dir)
    merged: dict[str, Any] = {}
    layers_merged = 0
    distribution_name = distribution or _detect_distribution(config_path, config_obj)

    if defaults_root:
        logger.verbose("CONFIG", f"Found defaults root: {defaults_root}")
        org_defaults = _load_yaml_file(defaults_root / "org.yaml")
        if isinstance(org_defaults, dict):
            merged = _deep_merge_dicts(merged, org_defaults)
            layers_merged += 1

        if distribution_name:
            logger.verbose("CONFIG", f"Distribution: {distribution_name}")
            candidate = defaults_root / "distributions" / f"{distribution_name}.yaml"
            if candidate.exists():
                logger.verbose(
                    "CONFIG", f"Loading: {candidate.relative_to(defaults_root.parent)}"
                )
                distribution_defaults = _load_yaml_file(candidate)
                if isinstance(distribution_defaults, dict):
                    merged = _deep_merge_dicts(merged, distribution_defaults)
                    layers_merged += 1

    merged = _deep_merge_dicts(merged, config_obj)
    layers_merged += 1
    if distribution_name:
        merged["distribution"] = distribution_name

    logger.verbose("CONFIG", f"Deep merged {layers_merged} layer(s)")
    logger.debug(
        "CONFIG",
        "Final config:\n" + yaml.dump(merged, default_flow_style=False, sort_keys=False),
    )

    _resolve_catalog_source(merged, config_dir)
    return merged
