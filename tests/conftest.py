"""
Pytest configuration and shared fixtures for jdkcatalog tests.

This module provides reusable fixtures and test utilities used across
the test suite.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
import yaml

from jdkcatalog.logging import SilentLogger, set_global_logger
from jdkcatalog.packages import (
    Architecture,
    ArchiveType,
    Distribution,
    OperatingSystem,
    Package,
    PackageType,
    TermOfSupport,
)
from jdkcatalog.versioning import ReleaseStatus, parse


class RecordingLogger:
    """Logger that keeps every message for assertions."""

    def __init__(self) -> None:
        self.steps: list[str] = []
        self.verbose_messages: list[tuple[str, str]] = []
        self.debug_messages: list[tuple[str, str]] = []
        self.warnings: list[tuple[str, str]] = []

    def step(self, step: int, total: int, message: str) -> None:
        self.steps.append(message)

    def verbose(self, prefix: str, message: str) -> None:
        self.verbose_messages.append((prefix, message))

    def debug(self, prefix: str, message: str) -> None:
        self.debug_messages.append((prefix, message))

    def warning(self, prefix: str, message: str) -> None:
        self.warnings.append((prefix, message))


@pytest.fixture(autouse=True)
def reset_global_logger():
    """Restore the silent global logger after every test."""
    yield
    set_global_logger(SilentLogger())


@pytest.fixture
def recording_logger() -> RecordingLogger:
    """Provide a logger that records messages instead of printing them."""
    return RecordingLogger()


@pytest.fixture
def tmp_test_dir(tmp_path: Path) -> Path:
    """
    Provide a temporary directory for test artifacts.

    Automatically cleaned up after test completion.
    """
    return tmp_path


@pytest.fixture
def create_yaml_file(tmp_test_dir: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("test.yaml", {"key": "value"})
    """
    def _create(filename: str, data: Any) -> Path:
        path = tmp_test_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create


@pytest.fixture
def sample_package_record() -> dict[str, Any]:
    """
    Provide a complete catalog record for a Zulu 11 package.
    """
    return {
        "distribution": "zulu",
        "java_version": "11.0.9",
        "distribution_version": "11.43.21",
        "latest_build_available": False,
        "architecture": "x64",
        "operating_system": "linux",
        "lib_c_type": "glibc",
        "package_type": "jdk",
        "release_status": "ga",
        "archive_type": "tar.gz",
        "term_of_support": "lts",
        "javafx_bundled": False,
        "directly_downloadable": True,
        "filename": "zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz",
        "direct_download_uri": "https://cdn.example.com/zulu/bin/zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz",
        "download_site_uri": "https://www.example.com/downloads/",
    }


@pytest.fixture
def sample_catalog_records(sample_package_record) -> list[dict[str, Any]]:
    """
    Provide a small catalog snapshot.

    Contains two builds of Zulu 11 on linux/x64 (one with a sibling zip
    artifact), the same 11.0.9 build for aarch64, and a Zulu 17 build.
    """
    def _record(java_version: str, filename: str, **overrides: Any) -> dict[str, Any]:
        record = dict(sample_package_record)
        record.update(
            java_version=java_version,
            filename=filename,
            direct_download_uri=f"https://cdn.example.com/zulu/bin/{filename}",
        )
        record.update(overrides)
        return record

    return [
        _record("11.0.9", "zulu11.43.21-ca-jdk11.0.9-linux_x64.tar.gz"),
        _record("11.0.9", "zulu11.43.21-ca-jdk11.0.9-linux_x64-v2.tar.gz"),
        _record("11.0.8", "zulu11.41.23-ca-jdk11.0.8-linux_x64.tar.gz"),
        _record(
            "11.0.9",
            "zulu11.43.21-ca-jdk11.0.9-linux_aarch64.tar.gz",
            architecture="aarch64",
        ),
        _record("17.0.1", "zulu17.30.15-ca-jdk17.0.1-linux_x64.tar.gz"),
    ]


@pytest.fixture
def package_factory():
    """
    Factory fixture for building Package instances.

    Usage:
        package = package_factory("11.0.9", architecture=Architecture.AARCH64)
    """
    def _create(version: str = "11.0.9", **overrides: Any) -> Package:
        filename = overrides.pop("filename", f"zulu-jdk{version}-linux_x64.tar.gz")
        fields: dict[str, Any] = {
            "distribution": Distribution.ZULU,
            "version_number": parse(version),
            "filename": filename,
            "direct_download_uri": f"https://cdn.example.com/zulu/bin/{filename}",
            "architecture": Architecture.X64,
            "operating_system": OperatingSystem.LINUX,
            "package_type": PackageType.JDK,
            "release_status": ReleaseStatus.GA,
            "archive_type": ArchiveType.TAR_GZ,
            "term_of_support": TermOfSupport.LTS,
        }
        fields.update(overrides)
        return Package(**fields)

    return _create


@pytest.fixture
def catalog_config(tmp_test_dir: Path, sample_catalog_records):
    """
    Factory fixture writing a snapshot and a catalog config pointing at it.

    Layout: catalogs/zulu/catalog.yaml with a relative catalog.source of
    snapshot.json. Keyword arguments are added to the config top level.

    Usage:
        config_path = catalog_config(query={"version": "17"})
    """
    def _create(**config_overrides: Any) -> Path:
        catalog_dir = tmp_test_dir / "catalogs" / "zulu"
        catalog_dir.mkdir(parents=True, exist_ok=True)
        (catalog_dir / "snapshot.json").write_text(
            json.dumps({"result": sample_catalog_records}), encoding="utf-8"
        )
        config = {
            "catalog": {"source": "snapshot.json", "packages_path": "$.result[*]"},
            **config_overrides,
        }
        config_path = catalog_dir / "catalog.yaml"
        with config_path.open("w", encoding="utf-8") as f:
            yaml.dump(config, f)
        return config_path

    return _create
