"""Configuration management for car-loans."""

from dataclasses import dataclass, field
from pathlib import Path

from car_loans.exceptions import ConfigurationError

LOG_FORMATS = ("standard", "json")


@dataclass
class OutputConfig:
    """JSON export configuration."""

    json_output_dir: Path = field(default_factory=lambda: Path("output"))
    pretty_json: bool = False


@dataclass
class SeedConfig:
    """Bootstrap data configuration."""

    use_demo_data: bool = True
    synthetic_owners: int = 0
    cars_per_owner: int = 2
    seed: int | None = None


@dataclass
class CarLoanConfig:
    """Main configuration for car-loans."""

    output: OutputConfig = field(default_factory=OutputConfig)
    seed_data: SeedConfig = field(default_factory=SeedConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "CarLoanConfig":
        """Create config from environment variables."""
        import os

        output = OutputConfig(
            json_output_dir=Path(os.getenv("OUTPUT_DIR", "output")),
            pretty_json=os.getenv("PRETTY_JSON", "false").lower() == "true",
        )

        seed_data = SeedConfig(
            use_demo_data=os.getenv("USE_DEMO_DATA", "true").lower() == "true",
            synthetic_owners=_int_env("SYNTHETIC_OWNERS", "0"),
            cars_per_owner=_int_env("CARS_PER_OWNER", "2"),
            seed=_int_env("SEED", None),
        )

        log_format = os.getenv("LOG_FORMAT", "standard").lower()
        if log_format not in LOG_FORMATS:
            raise ConfigurationError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

        return cls(
            output=output,
            seed_data=seed_data,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=log_format,
        )


def _int_env(name: str, default: str | None) -> int | None:
    import os

    raw = os.getenv(name, default)
    if raw is None or raw == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from exc
