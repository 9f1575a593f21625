"""Storefront Configuration"""

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment"""

    # Application
    app_name: str = "Storefront Cart"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8001
    log_level: str = "INFO"

    # Pricing policy
    currency: str = "USD"
    tax_rate: Decimal = Field(default=Decimal("0.10"), ge=0)
    free_shipping_threshold: Decimal = Field(default=Decimal("100.00"), ge=0)
    shipping_flat_fee: Decimal = Field(default=Decimal("10.00"), ge=0)

    # Carts idle longer than this are dropped by cleanup
    cart_max_age_hours: int = Field(default=24, ge=1)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
