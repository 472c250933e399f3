"""Tests for the customer-locator CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from customer_locator.cli import cli
from customer_locator.config import DEFAULT_SOURCE, load_settings
from customer_locator.geo import DUBLIN, Location
from customer_locator.units import Kilometers

FIXTURES = Path(__file__).parent / "fixtures"

_ENV_VARS = (
    "CUSTOMER_LOCATOR_SOURCE",
    "CUSTOMER_LOCATOR_RADIUS_KM",
    "CUSTOMER_LOCATOR_ORIGIN",
    "CUSTOMER_LOCATOR_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


# ── Settings tests ───────────────────────────────────────────────────────


class TestSettings:
    def test_defaults(self):
        settings = load_settings()
        assert settings.source == DEFAULT_SOURCE
        assert settings.radius == Kilometers(100)
        assert settings.origin == DUBLIN
        assert settings.http_timeout == 15.0

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("CUSTOMER_LOCATOR_SOURCE", "https://example.com/c.json")
        monkeypatch.setenv("CUSTOMER_LOCATOR_RADIUS_KM", "42.5")
        monkeypatch.setenv("CUSTOMER_LOCATOR_ORIGIN", "51.5,-0.12")
        monkeypatch.setenv("CUSTOMER_LOCATOR_HTTP_TIMEOUT", "3")
        settings = load_settings()
        assert settings.source == "https://example.com/c.json"
        assert settings.radius == Kilometers(42.5)
        assert settings.origin == Location(51.5, -0.12)
        assert settings.http_timeout == 3.0

    @pytest.mark.parametrize(
        ("name", "value"),
        [
            ("CUSTOMER_LOCATOR_RADIUS_KM", "far"),
            ("CUSTOMER_LOCATOR_RADIUS_KM", "-1"),
            ("CUSTOMER_LOCATOR_ORIGIN", "200,0"),
            ("CUSTOMER_LOCATOR_HTTP_TIMEOUT", "0"),
            ("CUSTOMER_LOCATOR_HTTP_TIMEOUT", "nan"),
            ("CUSTOMER_LOCATOR_HTTP_TIMEOUT", "inf"),
        ],
    )
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError, match=name):
            load_settings()


# ── locate command ───────────────────────────────────────────────────────


class TestLocateCommand:
    def test_lists_customers_within_radius(self, runner):
        result = runner.invoke(cli, [
            "locate", "--source", str(FIXTURES / "customers.json"),
            "--radius", "100", "--origin", "53.339428,-6.257664",
        ])
        assert result.exit_code == 0, result.output
        assert "Christina McArdle" in result.output
        assert "Alice Cahill" not in result.output
        assert "1 of 3 customer(s) matched." in result.output

    def test_uses_environment_defaults(self, runner, monkeypatch):
        monkeypatch.setenv("CUSTOMER_LOCATOR_SOURCE", str(FIXTURES / "customers.json"))
        monkeypatch.setenv("CUSTOMER_LOCATOR_RADIUS_KM", "40")
        result = runner.invoke(cli, ["locate"])
        assert result.exit_code == 0, result.output
        assert "0 of 3 customer(s) matched." in result.output

    def test_sort_by_user_id(self, runner, tmp_path):
        path = tmp_path / "customers.json"
        records = [
            {"user_id": 9, "name": "Zed Later", "latitude": "53.34", "longitude": "-6.26"},
            {"user_id": 4, "name": "Amy Earlier", "latitude": "53.35", "longitude": "-6.25"},
        ]
        path.write_text("\n".join(json.dumps(r) for r in records) + "\n")

        sorted_out = runner.invoke(cli, ["locate", "--source", str(path)]).output
        assert sorted_out.index("Amy Earlier") < sorted_out.index("Zed Later")

        load_order = runner.invoke(cli, ["locate", "--source", str(path), "--no-sort"]).output
        assert load_order.index("Zed Later") < load_order.index("Amy Earlier")

    def test_malformed_source_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["locate", "--source", str(FIXTURES / "customers_malformed.json")])
        assert result.exit_code == 1
        assert "line 2" in result.output

    def test_missing_source_exits_nonzero(self, runner, tmp_path):
        result = runner.invoke(cli, ["locate", "--source", str(tmp_path / "missing.json")])
        assert result.exit_code == 1

    def test_bad_origin_is_usage_error(self, runner):
        result = runner.invoke(cli, ["locate", "--origin", "100,0"])
        assert result.exit_code == 2

    def test_negative_radius_is_usage_error(self, runner):
        result = runner.invoke(cli, ["locate", "--radius", "-5"])
        assert result.exit_code == 2


# ── distance command ─────────────────────────────────────────────────────


class TestDistanceCommand:
    def test_prints_kilometers(self, runner):
        result = runner.invoke(cli, ["distance", "53.339428,-6.257664", "52.986375,-6.043701"])
        assert result.exit_code == 0, result.output
        assert "41.7" in result.output
        assert "km" in result.output

    def test_negative_coordinates_after_separator(self, runner):
        result = runner.invoke(cli, ["distance", "--", "-33.4489,-70.6693", "-33.4489,-70.6693"])
        assert result.exit_code == 0, result.output
        assert "0.000 km" in result.output

    def test_invalid_point(self, runner):
        result = runner.invoke(cli, ["distance", "nowhere", "0,0"])
        assert result.exit_code == 2
