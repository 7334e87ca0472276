"""Configuration schema using Pydantic for type-safe validation."""

from pathlib import Path
from typing import Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from ..utils.validators import validate_error_rate, validate_page_range
from .regions import Region

DEFAULT_CONFIG_PATH = Path(__file__).parent / "default_config.yaml"


class GenerationConfig(BaseModel):
    """Parameters shared by every page of one generation request."""

    region: Region = Field(default=Region.USA, description="Region profile to use")

    error_rate: float = Field(
        default=0.0,
        description="Expected number of typos per record (may be fractional)",
    )

    seed: str = Field(default="", description="User seed, hashed to an integer")

    page_size: int = Field(default=20, ge=1, description="Records per page")

    @field_validator("region", mode="before")
    @classmethod
    def parse_region(cls, v):
        """Accept region tags in any case."""
        return Region.parse(v)

    @field_validator("error_rate")
    @classmethod
    def validate_error_rate(cls, v: float) -> float:
        return validate_error_rate(v)

    @field_validator("seed", mode="before")
    @classmethod
    def coerce_seed(cls, v):
        """YAML may parse numeric seeds as ints; seeds are always strings."""
        if v is None:
            return ""
        return str(v)


class ExportConfig(BaseModel):
    """Configuration for exporting a page range to CSV."""

    generation: GenerationConfig = Field(default_factory=GenerationConfig)

    from_page: int = Field(default=0, ge=0, description="First page (inclusive)")

    to_page: int = Field(default=0, ge=0, description="Last page (inclusive)")

    output: Path = Field(
        default=Path("fake_user_data.csv"), description="CSV output path"
    )

    @model_validator(mode="after")
    def validate_range(self):
        """Ensure from_page <= to_page."""
        validate_page_range(self.from_page, self.to_page)
        return self


def load_config_dict(config_file: Optional[Path] = None) -> Dict:
    """
    Read a YAML configuration file.

    Args:
        config_file: YAML file to read; the packaged defaults when omitted

    Returns:
        Parsed configuration dictionary (empty if the file is empty)
    """
    path = config_file if config_file is not None else DEFAULT_CONFIG_PATH
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}
