"""Library configuration.

Configuration is loaded from environment variables using pydantic-settings.
Every variable is optional; the defaults suit most callers.

## Optional Environment Variables

- SOLARTIME_MIDNIGHT_SEARCH_DAYS: Civil days scanned for the next (or previous)
  solar midnight, starting at the reference day (default: 2)
- SOLARTIME_IERS_AUTO_DOWNLOAD: Allow astropy to download Earth orientation
  tables for precise sun positions (default: false)

## Example .env file

```
SOLARTIME_MIDNIGHT_SEARCH_DAYS=3
SOLARTIME_IERS_AUTO_DOWNLOAD=true
```
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SOLARTIME_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Solar midnight search window (the preceding day is always included)
    midnight_search_days: int = Field(
        default=2,
        ge=2,
        le=7,
        description="Civil days scanned for solar midnight, starting at the reference day",
    )

    # astropy
    iers_auto_download: bool = Field(
        default=False,
        description="Allow astropy to fetch IERS tables over the network",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached library settings.

    Settings are loaded once and cached. To reload, clear the cache:
    ```python
    get_settings.cache_clear()
    ```
    """
    return Settings()
