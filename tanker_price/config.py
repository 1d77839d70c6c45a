"""Application configuration via Pydantic Settings.

NOTE: Variable names (LOCATION, RADIUS, TANKERKOENIG_KEY, UPDATE_INTERVAL, ...)
are mapped explicitly so a typo in .env doesn't silently fall back to a default.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Search area
    location: str = Field(default="", validation_alias="LOCATION")
    # Tankerkönig terms allow at most 25 km
    radius_km: float = Field(default=2.0, ge=0.0, le=25.0, validation_alias="RADIUS")

    # Tankerkönig
    tankerkoenig_api_key: str = Field(default="", validation_alias="TANKERKOENIG_KEY")
    tankerkoenig_url: str = Field(
        default="https://creativecommons.tankerkoenig.de/json/list.php",
        validation_alias="TANKERKOENIG_URL",
    )
    # Tankerkönig terms forbid polling more often than every five minutes
    update_interval_seconds: int = Field(default=300, ge=300, validation_alias="UPDATE_INTERVAL")

    # Geocoder
    geocoder_user_agent: str = Field(default="tanker_price", validation_alias="GEOCODER_USER_AGENT")
    nominatim_url: str = Field(
        default="https://nominatim.openstreetmap.org/search",
        validation_alias="NOMINATIM_URL",
    )

    # Prometheus
    prometheus_namespace: str = Field(default="tanker_price", validation_alias="PROMETHEUS_NAMESPACE")

    # App
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
