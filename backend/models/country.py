from typing import Any

from pydantic import BaseModel, field_validator


class Country(BaseModel):
    model_config = {"frozen": True, "extra": "allow"}

    # Other top-level members (type, id, bbox, ...) pass through as extras
    properties: dict[str, Any]
    geometry: Any = None

    @field_validator("properties")
    @classmethod
    def require_name(cls, v: dict[str, Any]) -> dict[str, Any]:
        name = v.get("name_long")
        if not isinstance(name, str) or not name.strip():
            raise ValueError("properties.name_long must be a non-empty string")
        return v

    @property
    def name(self) -> str:
        return self.properties["name_long"]

    @property
    def region(self) -> str | None:
        return self.properties.get("region_un")


class CountryName(BaseModel):
    name_long: str
    continent: str | None = None
