import json

from pydantic_settings import BaseSettings
from pydantic import field_validator
from pathlib import Path


class Settings(BaseSettings):
    data_path: Path = Path(__file__).resolve().parent / "data" / "world.geojson.json"
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "info"
    cors_allow_origin: str = "*"
    cors_allow_methods: list[str] = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type"]

    @field_validator("cors_allow_methods", "cors_allow_headers", mode="before")
    @classmethod
    def split_header_values(cls, v):
        # "GET, OPTIONS" and '["GET", "OPTIONS"]' both give ["GET", "OPTIONS"]
        if not isinstance(v, str):
            return v
        text = v.strip()
        if text.startswith("["):
            return json.loads(text)
        return [part.strip() for part in text.split(",") if part.strip()]

    model_config = {
        "env_prefix": "COUNTRY_API_",
        "env_file": str(Path(__file__).resolve().parent.parent / ".env"),
        "env_file_encoding": "utf-8",
    }


settings = Settings()
