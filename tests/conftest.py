import json

import pytest
from fastapi.testclient import TestClient

from config import settings
from main import app
from models.country import Country
from services import country_service

SAMPLE_COUNTRIES = [
    {
        "type": "Feature",
        "properties": {"name_long": "France", "iso_a2": "FR", "region_un": "Europe", "pop_est": 67059887},
        "geometry": {"type": "Point", "coordinates": [2.2, 46.2]},
    },
    {
        "type": "Feature",
        "properties": {"name_long": "United States", "iso_a2": "US", "region_un": "Americas", "pop_est": 328239523},
        "geometry": {"type": "Point", "coordinates": [-98.5, 39.8]},
    },
    {
        "type": "Feature",
        "properties": {"name_long": "Côte d'Ivoire", "iso_a2": "CI", "region_un": "Africa", "pop_est": 25716544},
        "geometry": None,
    },
]


@pytest.fixture
def sample_countries():
    return SAMPLE_COUNTRIES


@pytest.fixture
def countries():
    return tuple(Country(**c) for c in SAMPLE_COUNTRIES)


@pytest.fixture
def dataset_file(tmp_path):
    path = tmp_path / "world.geojson.json"
    path.write_text(json.dumps(SAMPLE_COUNTRIES), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_dataset(monkeypatch):
    monkeypatch.setattr(country_service, "_countries", None)


@pytest.fixture
def client(dataset_file, monkeypatch):
    monkeypatch.setattr(settings, "data_path", dataset_file)
    with TestClient(app) as c:
        yield c
