"""
Tests for jdkcatalog.cli module.

Tests command handlers including:
- parse, compare and support output
- catalog listing and JSON output
- builds lookup
- Error reporting and exit codes
"""

from __future__ import annotations

import argparse
import hashlib
import json

from jdkcatalog.cli import cmd_builds, cmd_catalog, cmd_compare, cmd_parse, cmd_support


def _args(**kwargs) -> argparse.Namespace:
    defaults = {"verbose": False, "debug": False}
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


def _catalog_args(config_path, **kwargs) -> argparse.Namespace:
    values = {
        "config": str(config_path),
        "query_version": None,
        "latest": False,
        "scope": None,
        "distribution": None,
        "json": False,
    }
    values.update(kwargs)
    return _args(**values)


class TestParseCommand:
    """Tests for the 'parse' command."""

    def test_prints_canonical_forms(self, capsys):
        """Test that a legacy version is shown in canonical form."""
        exit_code = cmd_parse(_args(text="1.8.0_262", match=0))

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "PARSE RESULTS" in out
        assert "8.0.262.0" in out
        assert "8, 0, 262, 0, 0, 0" in out

    def test_early_access_fields(self, capsys):
        """Test that EA status and pre-build are printed."""
        cmd_parse(_args(text="17-ea+8", match=0))

        out = capsys.readouterr().out
        assert "Release Status:  ea" in out
        assert "Pre-Build:       8" in out

    def test_second_occurrence(self, capsys):
        """Test the --match option."""
        cmd_parse(_args(text="upgrade 11.0.9 to 11.0.10", match=1))

        assert "11.0.10.0" in capsys.readouterr().out

    def test_no_version_fails(self, capsys):
        """Test that text without a version exits with 1."""
        exit_code = cmd_parse(_args(text="latest", match=0))

        assert exit_code == 1
        assert "No version number found" in capsys.readouterr().out

    def test_negative_match_fails(self, capsys):
        """Test that a negative --match is reported as an error."""
        exit_code = cmd_parse(_args(text="11.0.9", match=-1))

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out


class TestCompareCommand:
    """Tests for the 'compare' command."""

    def test_early_access_order(self, capsys):
        """Test that EA pre-builds decide the order."""
        exit_code = cmd_compare(_args(left="17-ea.28", right="17-ea.34"))

        out = capsys.readouterr().out
        assert exit_code == 0
        assert " < " in out
        assert "Filter Match:    True" in out

    def test_equivalent_spellings(self, capsys):
        """Test that legacy spellings compare equal."""
        cmd_compare(_args(left="8u262", right="1.8.0_262"))

        out = capsys.readouterr().out
        assert " == " in out
        assert "Equals:          True" in out

    def test_unparseable_side_fails(self, capsys):
        """Test that either side must hold a version."""
        exit_code = cmd_compare(_args(left="11", right="latest"))

        assert exit_code == 1
        assert "Error:" in capsys.readouterr().out


class TestSupportCommand:
    """Tests for the 'support' command."""

    def test_lts(self, capsys):
        """Test an LTS release."""
        assert cmd_support(_args(feature=17, distribution=None)) == 0
        assert "Java 17: LTS" in capsys.readouterr().out

    def test_mts_for_zulu(self, capsys):
        """Test that Zulu gets MTS and others STS."""
        cmd_support(_args(feature=13, distribution="zulu"))
        cmd_support(_args(feature=13, distribution=None))

        out = capsys.readouterr().out
        assert "Java 13: MTS" in out
        assert "Java 13: STS" in out

    def test_invalid_feature_fails(self, capsys):
        """Test that feature 0 exits with 1."""
        assert cmd_support(_args(feature=0, distribution=None)) == 1
        assert "Error:" in capsys.readouterr().out

    def test_unknown_distribution_fails(self, capsys):
        """Test that unknown vendors are rejected."""
        assert cmd_support(_args(feature=13, distribution="acme")) == 1
        assert "Unknown distribution" in capsys.readouterr().out


class TestCatalogCommand:
    """Tests for the 'catalog' command."""

    def test_lists_matching_packages(self, catalog_config, capsys):
        """Test the table output."""
        exit_code = cmd_catalog(_catalog_args(catalog_config(), query_version="17"))

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "CATALOG RESULTS" in out
        assert "zulu17.30.15-ca-jdk17.0.1-linux_x64.tar.gz" in out
        assert "1 of 5 package(s) matched" in out

    def test_json_output(self, catalog_config, capsys):
        """Test that --json prints only parseable records."""
        exit_code = cmd_catalog(
            _catalog_args(catalog_config(), query_version="11", latest=True, json=True)
        )

        records = json.loads(capsys.readouterr().out)
        assert exit_code == 0
        assert len(records) == 3
        assert all(record["major_version"] == 11 for record in records)
        assert all(record["latest_build_available"] for record in records)

    def test_missing_config_fails(self, tmp_test_dir, capsys):
        """Test that a missing config exits with 1."""
        exit_code = cmd_catalog(_catalog_args(tmp_test_dir / "missing.yaml"))

        assert exit_code == 1
        assert "Config file not found" in capsys.readouterr().out

    def test_bad_scope_fails(self, catalog_config, capsys):
        """Test that query errors are reported."""
        exit_code = cmd_catalog(_catalog_args(catalog_config(), scope="mirrored"))

        assert exit_code == 1
        assert "Unknown scope" in capsys.readouterr().out


class TestBuildsCommand:
    """Tests for the 'builds' command."""

    def test_shows_siblings(self, catalog_config, sample_catalog_records, capsys):
        """Test that sibling artifacts are listed."""
        uri = sample_catalog_records[0]["direct_download_uri"]
        package_id = hashlib.md5(uri.encode("utf-8")).hexdigest()

        exit_code = cmd_builds(
            _args(config=str(catalog_config()), package_id=package_id, distribution=None)
        )

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "Siblings:        1" in out
        assert sample_catalog_records[1]["filename"] in out

    def test_unknown_id_fails(self, catalog_config, capsys):
        """Test that an unknown id exits with 1."""
        exit_code = cmd_builds(
            _args(config=str(catalog_config()), package_id="f" * 32, distribution=None)
        )

        assert exit_code == 1
        assert "No package with id" in capsys.readouterr().out
