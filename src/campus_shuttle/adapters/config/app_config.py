"""12-factor configuration adapter using environment variables and TOML config."""

from pathlib import Path
from typing import Any

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # type: ignore[no-redef]  # Fallback for older Python

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from campus_shuttle.domain.models.discovery_policy import (
    DirectionPolicy,
    DurationPolicy,
    TransferSearchKind,
)

TRANSFER_SEARCH_CHOICES = tuple(kind.value for kind in TransferSearchKind)
DIRECTION_POLICY_CHOICES = tuple(policy.value for policy in DirectionPolicy)
DURATION_POLICY_CHOICES = tuple(policy.value for policy in DurationPolicy)
LOG_LEVEL_CHOICES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_choice(field_name: str, value: str, choices: tuple[str, ...]) -> str:
    """Lower-case a setting and check it against the allowed values."""
    normalized = str(value).lower()
    if normalized not in choices:
        raise ValueError(f"{field_name} must be one of {', '.join(choices)}")
    return normalized


def _positive_minutes_per_point(value: Any) -> int:
    minutes = int(value)
    if minutes <= 0:
        raise ValueError("minutes_per_point must be positive")
    return minutes


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Catalog source
    catalog_source: str = Field(
        default="file", description="Where the route catalog comes from: 'file' or 'http'"
    )
    # If not set, will try catalog.example.toml in the working directory
    catalog_file: str | None = Field(
        default="catalog.example.toml",
        description="Path to TOML file with stops, routes and transfer points",
    )

    # Shuttle API configuration
    api_base_url: str = Field(
        default="http://localhost:3000", description="Base URL of the shuttle booking API"
    )
    api_timeout: int = Field(default=10, description="Timeout for API requests in seconds")
    api_token: str | None = Field(
        default=None, description="Bearer token used when no rider session is supplied"
    )

    # Discovery configuration
    transfer_search: str = Field(
        default="any_stop",
        description="Transfer search strategy: 'any_stop' or 'registered'",
    )
    direction_policy: str = Field(
        default="bidirectional",
        description="Travel direction along routes: 'bidirectional' or 'forward_only'",
    )
    duration_policy: str = Field(
        default="full_route",
        description="Duration of a route slice: 'full_route' or 'proportional'",
    )
    minutes_per_point: int = Field(default=5, description="Minutes of travel charged as one point")
    nearby_stop_limit: int = Field(
        default=3, description="Number of stops listed by the nearby stop search"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level for the CLI")

    @field_validator("catalog_source")
    @classmethod
    def validate_catalog_source(cls, v: str) -> str:
        """Validate catalog source is either 'file' or 'http'."""
        if v.lower() not in ("file", "http"):
            raise ValueError("catalog_source must be either 'file' or 'http'")
        return v.lower()

    @field_validator("transfer_search")
    @classmethod
    def validate_transfer_search(cls, v: str) -> str:
        """Validate transfer search names a known strategy."""
        return _normalize_choice("transfer_search", v, TRANSFER_SEARCH_CHOICES)

    @field_validator("direction_policy")
    @classmethod
    def validate_direction_policy(cls, v: str) -> str:
        """Validate direction policy names a known policy."""
        return _normalize_choice("direction_policy", v, DIRECTION_POLICY_CHOICES)

    @field_validator("duration_policy")
    @classmethod
    def validate_duration_policy(cls, v: str) -> str:
        """Validate duration policy names a known policy."""
        return _normalize_choice("duration_policy", v, DURATION_POLICY_CHOICES)

    @field_validator("minutes_per_point")
    @classmethod
    def validate_minutes_per_point(cls, v: int) -> int:
        """Validate minutes per point is positive."""
        return _positive_minutes_per_point(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVEL_CHOICES:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVEL_CHOICES)}")
        return v.upper()

    @property
    def transfer_search_kind(self) -> TransferSearchKind:
        return TransferSearchKind(self.transfer_search)

    @property
    def direction(self) -> DirectionPolicy:
        return DirectionPolicy(self.direction_policy)

    @property
    def duration(self) -> DurationPolicy:
        return DurationPolicy(self.duration_policy)

    def load_catalog_data(self) -> dict[str, Any]:
        """Load and parse the catalog TOML file, applying its [settings] table.

        Raises:
            ValueError: If catalog_file is not set or a setting is invalid.
            FileNotFoundError: If the catalog file does not exist.
        """
        if not self.catalog_file:
            raise ValueError("catalog_file must be set to load the route catalog")

        catalog_path = Path(self.catalog_file)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Catalog file not found: {catalog_path}")

        with open(catalog_path, "rb") as f:
            toml_data = tomllib.load(f)

        # Update discovery settings from TOML if present
        settings = toml_data.get("settings", {})
        if isinstance(settings, dict):
            if "transfer_search" in settings:
                self.transfer_search = _normalize_choice(
                    "transfer_search", settings["transfer_search"], TRANSFER_SEARCH_CHOICES
                )
            if "direction_policy" in settings:
                self.direction_policy = _normalize_choice(
                    "direction_policy", settings["direction_policy"], DIRECTION_POLICY_CHOICES
                )
            if "duration_policy" in settings:
                self.duration_policy = _normalize_choice(
                    "duration_policy", settings["duration_policy"], DURATION_POLICY_CHOICES
                )
            if "minutes_per_point" in settings:
                self.minutes_per_point = _positive_minutes_per_point(settings["minutes_per_point"])

        return toml_data
