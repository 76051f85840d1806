"""
config.py — taxcalc settings and logging setup.

Usage:
    from taxcalc.config import settings, configure_logging
    configure_logging()
    print(settings.round_places)

Settings never change tax law: slab tables and caps are constants in
taxcalc.engine. Only presentation precision and logging are configurable.
"""
import logging

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TAXCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    debug: bool = False
    financial_year: str = "FY2025-26"

    # Decimal places for monetary values in result models
    round_places: int = 2


# Module-level singleton — import this throughout the codebase
settings = Settings()


def configure_logging() -> None:
    """Configure root logging for an embedding application (DEBUG when settings.debug)."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s — %(message)s",
    )
