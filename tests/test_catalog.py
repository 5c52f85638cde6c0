"""
Tests for jdkcatalog.catalog module.

Tests catalog snapshot loading including:
- Record to Package conversion with derived attributes
- Package rendering back to records
- JSON and YAML snapshot files
- JSONPath record selection
- HTTP snapshots (mocked), including failures and header expansion
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import requests
import requests_mock

from jdkcatalog.catalog import (
    load_catalog,
    load_catalog_from_config,
    package_from_dict,
    package_to_dict,
)
from jdkcatalog.exceptions import CatalogError, ConfigError, NetworkError
from jdkcatalog.packages import (
    Architecture,
    ArchiveType,
    Distribution,
    LibCType,
    OperatingSystem,
    PackageType,
    TermOfSupport,
)
from jdkcatalog.versioning import ReleaseStatus, VersionNumber

CATALOG_URL = "https://api.example.com/packages?distro=zulu"


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class TestPackageFromDict:
    """Tests for converting catalog records to packages."""

    def test_complete_record(self, sample_package_record):
        """Test that every field of a complete record is read."""
        package = package_from_dict(sample_package_record)

        assert package.distribution is Distribution.ZULU
        assert package.version_number == VersionNumber.of(11, 0, 9)
        assert package.distribution_version == VersionNumber.of(11, 43, 21)
        assert package.architecture is Architecture.X64
        assert package.operating_system is OperatingSystem.LINUX
        assert package.libc_type is LibCType.GLIBC
        assert package.package_type is PackageType.JDK
        assert package.release_status is ReleaseStatus.GA
        assert package.archive_type is ArchiveType.TAR_GZ
        assert package.term_of_support is TermOfSupport.LTS
        assert package.directly_downloadable is True
        assert package.download_site_uri == "https://www.example.com/downloads/"

    def test_minimal_record_derives_attributes(self):
        """Test that missing attributes are derived from the filename and version."""
        filename = "zulu17.30.15-ca-jdk17.0.1-macosx_aarch64.dmg"
        package = package_from_dict(
            {
                "distribution": "zulu",
                "java_version": "17.0.1",
                "filename": filename,
                "direct_download_uri": f"https://cdn.example.com/zulu/bin/{filename}",
            }
        )

        assert package.architecture is Architecture.AARCH64
        assert package.bitness.value == 64
        assert package.operating_system is OperatingSystem.MACOS
        assert package.libc_type is LibCType.LIBC
        assert package.package_type is PackageType.JDK
        assert package.release_status is ReleaseStatus.GA
        assert package.archive_type is ArchiveType.DMG
        assert package.term_of_support is TermOfSupport.LTS
        assert package.javafx_bundled is False
        assert package.latest_build_available is False

    def test_term_of_support_classified_per_vendor(self):
        """Test that a derived MTS tier is only kept for Zulu."""
        base = {
            "java_version": "13.0.2",
            "filename": "jdk-13.0.2_linux-x64_bin.tar.gz",
            "direct_download_uri": "https://cdn.example.com/jdk-13.0.2_linux-x64_bin.tar.gz",
        }

        zulu = package_from_dict({**base, "distribution": "zulu"})
        temurin = package_from_dict({**base, "distribution": "temurin"})

        assert zulu.term_of_support is TermOfSupport.MTS
        assert temurin.term_of_support is TermOfSupport.STS

    def test_early_access_record(self):
        """Test that an EA version marks the package EA without a support tier."""
        filename = "openjdk-18-ea+22_linux-x64_bin.tar.gz"
        package = package_from_dict(
            {
                "distribution": "oracle_open_jdk",
                "java_version": "18-ea+22",
                "filename": filename,
                "direct_download_uri": f"https://download.example.net/{filename}",
            }
        )

        assert package.release_status is ReleaseStatus.EA
        assert package.version_number.pre_build == 22
        assert package.term_of_support is TermOfSupport.NONE

    def test_unknown_operating_system_becomes_none(self):
        """Test that an undetectable OS is NONE rather than NOT_FOUND."""
        package = package_from_dict(
            {
                "distribution": "temurin",
                "java_version": "17.0.1",
                "filename": "jdk-17.0.1.tar.gz",
                "direct_download_uri": "https://cdn.example.com/jdk-17.0.1.tar.gz",
            }
        )

        assert package.operating_system is OperatingSystem.NONE
        assert package.libc_type is LibCType.NONE

    @pytest.mark.parametrize(
        "missing", ["distribution", "java_version", "filename", "direct_download_uri"]
    )
    def test_missing_required_field_raises(self, sample_package_record, missing):
        """Test that each required field is enforced."""
        del sample_package_record[missing]

        with pytest.raises(CatalogError, match=missing):
            package_from_dict(sample_package_record)

    def test_unknown_distribution_raises(self, sample_package_record):
        """Test that unknown vendors are rejected."""
        sample_package_record["distribution"] = "acme"

        with pytest.raises(CatalogError, match="Unknown distribution"):
            package_from_dict(sample_package_record)

    def test_unparseable_version_raises(self, sample_package_record):
        """Test that a java_version without a number is rejected."""
        sample_package_record["java_version"] = "latest"

        with pytest.raises(CatalogError, match="No version number"):
            package_from_dict(sample_package_record)


class TestPackageToDict:
    """Tests for rendering packages as records."""

    def test_contains_id_and_major_version(self, sample_package_record):
        """Test the derived fields."""
        package = package_from_dict(sample_package_record)

        record = package_to_dict(package)

        assert record["id"] == package.id
        assert record["major_version"] == 11
        assert record["java_version"] == "11.0.9.0"
        assert record["distribution_version"] == "11.43.21"

    def test_uses_api_strings(self, sample_package_record):
        """Test that enums are rendered with their api strings."""
        record = package_to_dict(package_from_dict(sample_package_record))

        assert record["distribution"] == "zulu"
        assert record["architecture"] == "x64"
        assert record["operating_system"] == "linux"
        assert record["lib_c_type"] == "glibc"
        assert record["archive_type"] == "tar.gz"
        assert record["term_of_support"] == "lts"
        assert record["release_status"] == "ga"

    def test_record_can_be_loaded_again(self, sample_package_record):
        """Test that a rendered record converts back to the same package."""
        package = package_from_dict(sample_package_record)

        again = package_from_dict(package_to_dict(package))

        assert again.id == package.id
        assert again.version_number.compare(package.version_number) == 0


class TestLoadCatalogFromFile:
    """Tests for loading snapshot files."""

    def test_json_list(self, tmp_test_dir, sample_catalog_records):
        """Test a JSON file holding the record list."""
        path = _write_json(tmp_test_dir / "catalog.json", sample_catalog_records)

        packages = load_catalog(path)

        assert len(packages) == 5
        assert packages[0].filename == sample_catalog_records[0]["filename"]

    def test_yaml_file(self, create_yaml_file, sample_catalog_records):
        """Test a YAML snapshot."""
        path = create_yaml_file("catalog.yaml", sample_catalog_records)

        packages = load_catalog(path)

        assert [p.version_number.feature for p in packages] == [11, 11, 11, 11, 17]

    def test_string_path(self, tmp_test_dir, sample_catalog_records):
        """Test that a str source is treated as a path."""
        path = _write_json(tmp_test_dir / "catalog.json", sample_catalog_records)

        assert len(load_catalog(str(path))) == 5

    def test_duplicates_dropped(self, tmp_test_dir, sample_catalog_records, recording_logger):
        """Test that records sharing an id are collapsed."""
        records = sample_catalog_records + [sample_catalog_records[0]]
        path = _write_json(tmp_test_dir / "catalog.json", records)

        packages = load_catalog(path, logger=recording_logger)

        assert len(packages) == 5
        assert any("1 duplicate(s)" in msg for _, msg in recording_logger.verbose_messages)

    def test_packages_path_wildcard(self, tmp_test_dir, sample_catalog_records):
        """Test JSONPath selection of nested records."""
        path = _write_json(
            tmp_test_dir / "catalog.json", {"result": sample_catalog_records, "message": ""}
        )

        packages = load_catalog(path, packages_path="$.result[*]")

        assert len(packages) == 5

    def test_packages_path_to_list(self, tmp_test_dir, sample_catalog_records):
        """Test that a path selecting the list itself is flattened."""
        path = _write_json(tmp_test_dir / "catalog.json", {"result": sample_catalog_records})

        packages = load_catalog(path, packages_path="$.result")

        assert len(packages) == 5

    def test_invalid_packages_path_raises(self, tmp_test_dir, sample_catalog_records):
        """Test that a malformed JSONPath is a config error."""
        path = _write_json(tmp_test_dir / "catalog.json", {"result": sample_catalog_records})

        with pytest.raises(ConfigError, match="Invalid packages_path"):
            load_catalog(path, packages_path="$.result[")

    def test_nested_payload_without_path_raises(self, tmp_test_dir, sample_catalog_records):
        """Test that a non-list document needs packages_path."""
        path = _write_json(tmp_test_dir / "catalog.json", {"result": sample_catalog_records})

        with pytest.raises(CatalogError, match="packages_path"):
            load_catalog(path)

    def test_non_mapping_record_raises(self, tmp_test_dir):
        """Test that every record must be a mapping."""
        path = _write_json(tmp_test_dir / "catalog.json", ["zulu-11.0.9.tar.gz"])

        with pytest.raises(CatalogError, match="not a mapping"):
            load_catalog(path)

    def test_missing_file_raises(self, tmp_test_dir):
        """Test that a missing snapshot file is a config error."""
        with pytest.raises(ConfigError, match="not found"):
            load_catalog(tmp_test_dir / "missing.json")

    def test_unsupported_suffix_raises(self, tmp_test_dir):
        """Test that only JSON and YAML files are accepted."""
        path = tmp_test_dir / "catalog.csv"
        path.write_text("distribution,java_version\n", encoding="utf-8")

        with pytest.raises(ConfigError, match="Unsupported catalog file type"):
            load_catalog(path)

    def test_invalid_json_raises(self, tmp_test_dir):
        """Test that a corrupt JSON file is a catalog error."""
        path = tmp_test_dir / "catalog.json"
        path.write_text("[{", encoding="utf-8")

        with pytest.raises(CatalogError, match="Error parsing JSON"):
            load_catalog(path)


class TestLoadCatalogFromUrl:
    """Tests for loading HTTP snapshots."""

    def test_fetch_records(self, sample_catalog_records):
        """Test a successful fetch."""
        with requests_mock.Mocker() as m:
            m.get(CATALOG_URL, json={"result": sample_catalog_records})

            packages = load_catalog(CATALOG_URL, packages_path="$.result[*]")

        assert len(packages) == 5
        assert packages[-1].version_number.feature == 17

    def test_http_error_raises(self):
        """Test that error statuses raise NetworkError."""
        with requests_mock.Mocker() as m:
            m.get(CATALOG_URL, status_code=500, reason="Server Error")

            with pytest.raises(NetworkError, match="500"):
                load_catalog(CATALOG_URL)

    def test_invalid_json_raises(self):
        """Test that a non-JSON body raises NetworkError."""
        with requests_mock.Mocker() as m:
            m.get(CATALOG_URL, text="<html>maintenance</html>")

            with pytest.raises(NetworkError, match="Invalid JSON"):
                load_catalog(CATALOG_URL)

    def test_connection_failure_raises(self):
        """Test that transport errors raise NetworkError."""
        with requests_mock.Mocker() as m:
            m.get(CATALOG_URL, exc=requests.exceptions.ConnectTimeout)

            with pytest.raises(NetworkError, match="Failed to fetch catalog"):
                load_catalog(CATALOG_URL)

    def test_headers_expanded_from_environment(self, monkeypatch, sample_catalog_records):
        """Test that ${VAR} header values are read from the environment."""
        monkeypatch.setenv("CATALOG_TOKEN", "secret-token")

        with requests_mock.Mocker() as m:
            m.get(CATALOG_URL, json=sample_catalog_records)

            load_catalog(
                CATALOG_URL,
                headers={"Authorization": "${CATALOG_TOKEN}", "Accept": "application/json"},
            )

            sent = m.last_request.headers

        assert sent["Authorization"] == "secret-token"
        assert sent["Accept"] == "application/json"

    def test_unset_header_variable_is_dropped(
        self, monkeypatch, sample_catalog_records, recording_logger
    ):
        """Test that headers with unset variables are not sent."""
        monkeypatch.delenv("CATALOG_TOKEN", raising=False)

        with requests_mock.Mocker() as m:
            m.get(CATALOG_URL, json=sample_catalog_records)

            load_catalog(
                CATALOG_URL,
                headers={"Authorization": "${CATALOG_TOKEN}"},
                logger=recording_logger,
            )

            sent = m.last_request.headers

        assert "Authorization" not in sent
        assert any("CATALOG_TOKEN" in msg for _, msg in recording_logger.verbose_messages)


class TestLoadCatalogFromConfig:
    """Tests for loading the snapshot named in a config."""

    def test_reads_catalog_section(self, tmp_test_dir, sample_catalog_records):
        """Test that source and packages_path are taken from the config."""
        path = _write_json(tmp_test_dir / "catalog.json", {"result": sample_catalog_records})
        config = {"catalog": {"source": str(path), "packages_path": "$.result[*]"}}

        assert len(load_catalog_from_config(config)) == 5

    def test_missing_source_raises(self):
        """Test that catalog.source is required."""
        with pytest.raises(ConfigError, match="catalog.source"):
            load_catalog_from_config({"catalog": {}})
        with pytest.raises(ConfigError):
            load_catalog_from_config({})
