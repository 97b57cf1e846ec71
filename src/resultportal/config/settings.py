"""
Typed configuration models using Pydantic.

Colleges, fetch behaviour and marking rules live here so that no sheet URL
or pass mark is hardcoded in the processing code.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

DEFAULT_STANDARDS: tuple[str, ...] = ("5", "6", "7", "8", "9", "10")


class CollegeConfig(BaseModel):
    """A college (or school) and the published sheet holding its results."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Display name shown on the marksheet")
    csv_url: str | None = Field(
        default=None,
        description="Published CSV export URL, e.g. a Google Sheets gviz/tq?tqx=out:csv link",
    )
    csv_path: Path | None = Field(
        default=None,
        description="Local CSV export, relative to data_root",
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank college names."""
        v = v.strip()
        if not v:
            msg = "College name must not be empty"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_source(self) -> "CollegeConfig":
        """Exactly one of csv_url / csv_path must be configured."""
        if (self.csv_url is None) == (self.csv_path is None):
            msg = f"College {self.name!r} needs exactly one of 'csv_url' or 'csv_path'"
            raise ValueError(msg)
        return self

    @property
    def source(self) -> str:
        """Human-readable sheet location."""
        return self.csv_url if self.csv_url is not None else str(self.csv_path)


class FetchConfig(BaseModel):
    """HTTP settings for downloading published sheets."""

    model_config = ConfigDict(frozen=True)

    timeout_seconds: float = Field(default=30.0, gt=0)
    retries: int = Field(default=3, ge=0, le=10)
    backoff_factor: float = Field(default=0.6, ge=0)


class MarksConfig(BaseModel):
    """Marking rules used when rendering a marksheet."""

    model_config = ConfigDict(frozen=True)

    pass_mark: float = Field(default=35, ge=0, description="Minimum subject score to pass")
    max_total: float = Field(default=500, gt=0, description="Maximum achievable total")


class LoggingConfig(BaseModel):
    """structlog output settings."""

    model_config = ConfigDict(frozen=True)

    level: str = Field(default="INFO")
    json_output: bool = Field(default=False)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Normalize and check the level name."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            msg = f"Unknown log level: {v!r}"
            raise ValueError(msg)
        return level


class PortalConfig(BaseModel):
    """Complete portal configuration."""

    model_config = ConfigDict(frozen=True)

    colleges: dict[str, CollegeConfig]
    data_root: Path = Field(default=Path("./data"))
    standards: list[str] = Field(default_factory=lambda: list(DEFAULT_STANDARDS))
    fetch: FetchConfig = Field(default_factory=FetchConfig)
    marks: MarksConfig = Field(default_factory=MarksConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("colleges")
    @classmethod
    def validate_colleges(cls, v: dict[str, CollegeConfig]) -> dict[str, CollegeConfig]:
        """At least one college must be configured."""
        if not v:
            msg = "At least one college must be configured"
            raise ValueError(msg)
        return v

    @field_validator("standards", mode="before")
    @classmethod
    def validate_standards(cls, v: list[object]) -> list[str]:
        """YAML may give standards as integers; they are compared as stripped strings."""
        return [str(s).strip() for s in v]

    def get_college(self, college_id: str) -> CollegeConfig | None:
        """Look up a college by its id."""
        return self.colleges.get(college_id)

    def resolve(self, path: Path) -> Path:
        """Resolve a sheet path against data_root."""
        if path.is_absolute():
            return path
        return self.data_root / path
