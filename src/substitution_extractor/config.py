"""Extraction tolerances and the landmark strings of the source PDFs."""

import os

from pydantic import BaseModel, ConfigDict, Field

# Landmarks are part of the contract with the planning tool's PDF template
BLOCK_LANDMARK = "Block"
LAST_BLOCK_LANDMARK = "15:15"
DATE_LANDMARK = "Datum: "
DATE_FORMAT = "%d.%m.%Y"
TEXT_ENCODING = "WinAnsiEncoding"

# Lesson blocks per school day
BLOCK_COUNT = 6

CONTINUATION_PREFIX = "-"


class ExtractorConfig(BaseModel):
    """Geometric tolerances used by the table reconstruction.

    The defaults match the layout of the planning tool's PDFs. Override
    via environment variables for local experiments:
    SUBSTITUTION_REGION_PADDING, SUBSTITUTION_HEADER_HALF_BAND,
    SUBSTITUTION_SEPARATOR_RANK.
    """

    model_config = ConfigDict(frozen=True)

    region_padding: int = Field(
        default=4,
        gt=0,
        description="Padding added above the header row and below the bottom rule of a table",
    )
    header_half_band: int = Field(
        default=2,
        gt=0,
        description="Max distance (exclusive) of a column header from the 'Block' baseline",
    )
    separator_rank: int = Field(
        default=6,
        gt=0,
        description="Number of largest line spacings treated as real row separators",
    )

    @property
    def separator_count(self) -> int:
        """Row separators a column must keep: one per block plus the header rule."""
        return self.separator_rank + 1

    @classmethod
    def from_env(cls) -> "ExtractorConfig":
        """Build a config from SUBSTITUTION_* environment variables."""
        overrides = {}
        for field_name in cls.model_fields:
            value = os.getenv(f"SUBSTITUTION_{field_name.upper()}")
            if value is not None and value.strip():
                overrides[field_name] = value.strip()
        return cls(**overrides)


DEFAULT_CONFIG = ExtractorConfig()
