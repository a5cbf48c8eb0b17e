"""Application configuration using Pydantic Settings."""

from decimal import Decimal
from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    log_format: Literal["console", "json"] = "console"

    # Display
    currency_symbol: str = "R$"
    date_format: str = "%Y-%m-%d"
    display_date_format: str = "%d/%m/%Y"
    report_timezone: str = "America/Sao_Paulo"

    # Rental bounds (form limits of the desktop app)
    valor_aluguel_max: Decimal = Field(
        default=Decimal("9999.99"),
        description="Maximum accepted rental fee",
    )
    valor_caucao_max: Decimal = Field(
        default=Decimal("99999.99"),
        description="Maximum accepted deposit",
    )

    # Late fee
    multa_percentual_diario: Decimal = Decimal("0.02")  # 2% per day
    multa_valor_maximo: Decimal = Decimal("1000.00")
    multa_dias_carencia: int = 1

    # Suggestions based on product price
    aluguel_percentual_sugerido: Decimal = Decimal("0.30")
    caucao_percentual_sugerido: Decimal = Decimal("1.00")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the log level name."""
        return v.strip().upper() or "INFO"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
