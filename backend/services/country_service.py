import json
import logging
import random
from pathlib import Path

from pydantic import ValidationError

from models.country import Country, CountryName
from utils.text_helpers import normalize_name

logger = logging.getLogger(__name__)

_countries: tuple[Country, ...] | None = None


class DatasetError(Exception):
    """The country dataset could not be loaded."""


def _parse(raw) -> list:
    if isinstance(raw, list):
        return raw
    if isinstance(raw, dict) and raw.get("type") == "FeatureCollection":
        features = raw.get("features")
        if isinstance(features, list):
            return features
    raise DatasetError("expected a JSON array of features or a FeatureCollection")


def load(path: Path) -> tuple[Country, ...]:
    """Read the dataset at ``path`` and install it as the process-wide dataset.

    Raises DatasetError if the file is missing, unreadable, not JSON, or
    holds records without a display name.
    """
    global _countries
    try:
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
    except OSError as e:
        raise DatasetError(f"cannot read dataset {path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatasetError(f"dataset {path} is not valid JSON: {e}") from e

    try:
        countries = tuple(Country(**c) for c in _parse(raw))
    except (TypeError, ValidationError) as e:
        raise DatasetError(f"dataset {path} has a malformed record: {e}") from e

    _countries = countries
    logger.info("Loaded %d countries from %s", len(countries), path)
    return countries


def get_all() -> tuple[Country, ...]:
    if _countries is None:
        raise DatasetError("dataset not loaded")
    return _countries


def random_country(countries: tuple[Country, ...], rng=None) -> Country:
    rng = rng or random
    return countries[rng.randrange(len(countries))]


def country_names(countries: tuple[Country, ...]) -> list[CountryName]:
    return [CountryName(name_long=c.name, continent=c.region) for c in countries]


def find_by_name(countries: tuple[Country, ...], name: str) -> Country | None:
    # First match in dataset order wins if two names normalize alike.
    key = normalize_name(name)
    return next((c for c in countries if normalize_name(c.name) == key), None)
