"""Application configuration and settings management."""

from pathlib import Path
from typing import Annotated, Any, Optional

import json
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class WarehouseSetting(BaseModel):
    name: str
    postal_code: str


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables or defaults."""

    model_config = SettingsConfigDict(
        env_prefix="FREIGHT_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    app_name: str = "Freight Quote API"
    api_prefix: str = "/api"
    frontend_allowed_origins: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("http://localhost:5173", "http://127.0.0.1:5173"),
        description="Permitted web origins for browser clients (CORS).",
    )

    viacep_base_url: str = Field(
        default="https://viacep.com.br/ws",
        description="Base URL of the postal code address lookup service.",
    )
    nominatim_base_url: str = Field(
        default="https://nominatim.openstreetmap.org",
        description="Base URL of the OpenStreetMap geocoding service.",
    )
    nominatim_user_agent: str = Field(
        default="freight-quote-api/0.1",
        description="User-Agent sent to Nominatim (required by its usage policy).",
    )
    correios_base_url: str = Field(
        default="http://ws.correios.com.br/calculador/CalcPrecoPrazo.aspx",
        description="Correios price and lead time web service.",
    )
    http_timeout_seconds: float = Field(default=30.0, gt=0.0)
    geocode_max_parallel_requests: int = Field(default=4, ge=1)

    # Correios contract
    correios_company_code: str = Field(default="", description="Contract company code (nCdEmpresa).")
    correios_password: str = Field(default="", description="Contract password (sDsSenha).")
    correios_services: Annotated[tuple[str, ...], NoDecode] = Field(
        default=("04162", "04669"),
        description="Enabled service codes, quoted in this order.",
    )
    correios_express_service: str = Field(
        default="04162",
        description="Service code reported as the EXPRESS service level.",
    )

    warehouses: tuple[WarehouseSetting, ...] = Field(
        default=(
            WarehouseSetting(name="CD São Paulo", postal_code="01001-000"),
            WarehouseSetting(name="CD Belo Horizonte", postal_code="30130-010"),
        ),
        description="Origin warehouses used when no workbook is configured.",
    )
    warehouses_file: Optional[Path] = Field(
        default=None,
        description="Optional workbook with Name/PostalCode columns that replaces `warehouses`.",
    )

    @field_validator("warehouses_file", mode="before")
    @classmethod
    def _expand_path(cls, value: Any) -> Optional[Path]:
        if value is None or value == "":
            return None
        path_value = value if isinstance(value, Path) else Path(str(value))
        return path_value.expanduser().resolve()

    @field_validator("frontend_allowed_origins", "correios_services", mode="before")
    @classmethod
    def _parse_str_tuple_from_env(cls, value: Any) -> tuple[str, ...]:
        """Parse string tuple from environment variable (comma-separated or JSON array)."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(str(item) for item in value)
        if isinstance(value, str):
            try:
                parsed = json.loads(value)
                if isinstance(parsed, list):
                    return tuple(str(item) for item in parsed)
            except (json.JSONDecodeError, TypeError):
                pass
            if "," in value:
                return tuple(item.strip() for item in value.split(",") if item.strip())
            if value.strip():
                return (value.strip(),)
        return tuple()


settings = Settings()
