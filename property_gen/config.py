"""Configuration management for property-gen."""

import os
from dataclasses import dataclass, field
from pathlib import Path

from property_gen.exceptions import ConfigurationError

# Central Florida cities, in the order all-cities exports iterate them.
CITIES: tuple[str, ...] = (
    "Orlando",
    "Tampa",
    "Daytona Beach",
    "St. Petersburg",
    "Clearwater",
    "Lakeland",
    "Kissimmee",
    "Port Orange",
    "Sanford",
    "Oviedo",
    "Winter Park",
    "Altamonte Springs",
    "Deltona",
    "Palm Coast",
    "Titusville",
)


@dataclass
class ApiConfig:
    """HTTP surface and request limit configuration."""

    default_limit: int = 10
    max_limit: int = 200
    allow_origins: list[str] = field(default_factory=lambda: ["*"])
    host: str = "0.0.0.0"
    port: int = 8000

    def __post_init__(self) -> None:
        if self.max_limit < 0:
            raise ConfigurationError(f"max_limit must be >= 0, got {self.max_limit}")
        if not 0 <= self.default_limit <= self.max_limit:
            raise ConfigurationError(
                f"default_limit must be between 0 and {self.max_limit}, "
                f"got {self.default_limit}"
            )


@dataclass
class OutputConfig:
    """Output configuration for batch exports."""

    output_dir: Path = field(default_factory=lambda: Path("."))
    pretty_json: bool = True


@dataclass
class PropertyGenConfig:
    """Main configuration for property-gen."""

    api: ApiConfig = field(default_factory=ApiConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    cities: tuple[str, ...] = CITIES
    seed: int | None = None
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "PropertyGenConfig":
        """Create config from environment variables."""
        api = ApiConfig(
            default_limit=_int_env("DEFAULT_LIMIT", 10),
            max_limit=_int_env("MAX_LIMIT", 200),
            allow_origins=[
                origin.strip()
                for origin in os.getenv("CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ],
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=_int_env("API_PORT", 8000),
        )

        output = OutputConfig(
            output_dir=Path(os.getenv("OUTPUT_DIR", ".")),
            pretty_json=os.getenv("PRETTY_JSON", "true").lower() == "true",
        )

        return cls(
            api=api,
            output=output,
            seed=_int_env("SEED", None),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )


def _int_env(name: str, default: int | None) -> int | None:
    """Read an integer environment variable."""
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
