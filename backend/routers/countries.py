import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from models.country import Country, CountryName
from services import country_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["countries"])


@router.get("/random_country", response_model=Country, response_model_exclude_unset=True)
async def random_country():
    return country_service.random_country(country_service.get_all())


@router.get("/country_names", response_model=list[CountryName])
async def country_names():
    return country_service.country_names(country_service.get_all())


@router.get("/info/{name:path}", response_model=dict[str, Any])
async def country_info(name: str):
    country = country_service.find_by_name(country_service.get_all(), name)
    if not country:
        logger.debug("No country matches %r", name)
        raise HTTPException(status_code=404, detail="Country not found")
    return country.properties
