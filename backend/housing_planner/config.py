from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Region used when a country has no assumption table of its own
    default_country: str = "KE"

    # 1 acre in square metres
    acre_to_sqm: float = 4046.86

    log_level: str = "INFO"

    model_config = {
        "env_prefix": "HOUSING_PLANNER_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Apply the configured log level for host applications and scripts."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
