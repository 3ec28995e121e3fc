"""
Tests for the HTTP API and the command-line interface.
"""

import pytest
from click.testing import CliRunner
from fastapi.testclient import TestClient

from fleet_resolver.api import app, get_service
from fleet_resolver.cli import main


@pytest.fixture
def client(service):
    app.dependency_overrides[get_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["catalog_vehicles"] == 15


def test_fleet_options(client):
    response = client.get("/fleet/truck", params={"option": "house-shifting"})
    assert response.status_code == 200

    offers = response.json()
    assert [o["id"] for o in offers] == ["1-ton-truck", "3-ton-truck"]
    assert offers[0]["badge"] == "RECOMMENDED"
    assert offers[0]["category"] == "recommended"
    assert offers[0]["original_price"] == 230
    assert offers[1]["badge"] == "CHEAPER"
    assert offers[1]["eta"] == "28 min"


def test_integer_prices_serialize_unchanged(client):
    offers = client.get("/fleet/truck", params={"option": "house-shifting"}).json()
    assert isinstance(offers[0]["price"], int)
    assert isinstance(offers[0]["original_price"], int)
    assert (offers[0]["price"], offers[0]["original_price"]) == (180, 230)


@pytest.mark.parametrize("path,params", [
    ("/fleet/ride", {"option": "sedan"}),
    ("/fleet/truck", {"option": "unknown-key"}),
    ("/fleet/truck", {}),
    ("/fleet/boat", {"option": "house-shifting"}),
])
def test_fleet_options_fail_soft(client, path, params):
    response = client.get(path, params=params)
    assert response.status_code == 200
    assert response.json() == []


def test_sub_options(client):
    response = client.get("/fleet/towing/options")
    assert response.status_code == 200
    assert response.json() == ["sedan", "suv", "bakkie", "small-truck", "van"]


def test_describe_vehicle(client):
    assert client.get("/vehicles/3-ton-truck").json() == {"name": "3 Ton Truck", "icon": "🚛"}
    assert client.get("/vehicles/unknown-id").json() == {"name": "Vehicle", "icon": "🚗"}


def test_categories(client):
    response = client.get("/categories")
    assert response.status_code == 200
    assert [c["id"] for c in response.json()] == [
        "package", "foodies", "delivery-truck", "clothes", "towing", "hardware"
    ]


def test_category_destination(client):
    response = client.get("/categories/delivery-truck")
    assert response.status_code == 200
    assert response.json() == {
        "category_id": "delivery-truck",
        "route": "/your-route",
        "service_type": "truck",
    }


@pytest.mark.parametrize("category_id", ["clothes", "hardware", "boats"])
def test_category_without_destination(client, category_id):
    assert client.get(f"/categories/{category_id}").status_code == 404


@pytest.fixture
def runner():
    return CliRunner()


def test_cli_options(runner):
    result = runner.invoke(main, ["--latency-ms", "0", "options", "package", "0-5kg"])
    assert result.exit_code == 0, result.output
    assert "Bicycle [RECOMMENDED]" in result.output
    assert "Motorbike [CHEAPER]" in result.output
    assert "ETA: 14 min" in result.output
    assert "Id: bicycle" in result.output


def test_cli_options_empty(runner):
    result = runner.invoke(main, ["--latency-ms", "0", "options", "ride"])
    assert result.exit_code == 0, result.output
    assert "No vehicles available for ride" in result.output


def test_cli_rejects_unknown_service_type(runner):
    result = runner.invoke(main, ["options", "boat"])
    assert result.exit_code != 0


def test_cli_sub_options(runner):
    result = runner.invoke(main, ["sub-options", "truck"])
    assert result.exit_code == 0, result.output
    assert result.output.split() == [
        "house-shifting", "farm-produce", "construction-material",
        "building-sand", "furniture", "bulk-goods"
    ]


def test_cli_describe(runner):
    result = runner.invoke(main, ["describe", "heavy-duty-tow"])
    assert result.exit_code == 0, result.output
    assert "Heavy Duty Tow" in result.output


def test_cli_categories(runner):
    result = runner.invoke(main, ["categories"])
    assert result.exit_code == 0, result.output
    assert "/your-route [towing]" in result.output
    assert "/shop" in result.output
    assert "(not available)" in result.output


def test_cli_bad_config(runner, tmp_path):
    result = runner.invoke(main, ["--config", str(tmp_path / "nope.yaml"), "describe", "car"])
    assert result.exit_code != 0
    assert "Error" in result.output
