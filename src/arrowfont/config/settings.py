"""Configuration settings for Arrowfont."""

import math
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from arrowfont.exceptions import StrokeSpecError


class GeometryConfig(BaseModel):
    """Tolerances used by the outline geometry."""

    intersection_epsilon: float = Field(
        default=1e-6,
        gt=0.0,
        le=1.0,
        description="Determinant below which two lines are treated as parallel",
    )
    normal_epsilon: float = Field(
        default=1e-12,
        gt=0.0,
        le=1e-3,
        description="Vector length below which normalization leaves the vector unchanged",
    )


class StrokeSpec(BaseModel):
    """Chevron stroke parameters.

    Attributes:
        triangle_size: Distance from the back edge (x=0) to the tip along the baseline
        angle_deg: Angle of each leg relative to the baseline, in degrees
        stroke_width: Uniform stroke thickness, centered on the centerline
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    triangle_size: float = Field(
        default=300.0,
        gt=0.0,
        description="Baseline distance from back edge to tip",
    )
    angle_deg: float = Field(
        default=45.0,
        gt=0.0,
        lt=90.0,
        description="Leg angle relative to the baseline (exclusive 0-90)",
    )
    stroke_width: float = Field(
        default=75.0,
        gt=0.0,
        description="Stroke thickness in font units",
    )

    @model_validator(mode="after")
    def check_centerline_fits(self) -> "StrokeSpec":
        height = self.triangle_size * math.tan(math.radians(self.angle_deg))
        if not math.isfinite(self.triangle_size * self.triangle_size + height * height):
            raise ValueError("centerline overflows the float range")
        return self

    @classmethod
    def checked(cls, **values: Any) -> "StrokeSpec":
        """Build a spec, converting validation failures to StrokeSpecError.

        Args:
            **values: Field values for the spec

        Returns:
            Validated StrokeSpec

        Raises:
            StrokeSpecError: If any value is outside its supported range
        """
        try:
            return cls(**values)
        except ValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"]) or "spec"
            raise StrokeSpecError(field, error["msg"]) from e


class GlyphConfig(BaseModel):
    """Font metrics and glyph geometry for the arrow glyphs."""

    units_per_em: int = Field(default=1000, ge=16, le=16384)
    ascender: int = Field(default=800)
    descender: int = Field(default=-200)
    dash_length: float = Field(
        default=420.0,
        gt=0.0,
        description="Length of the dash body",
    )
    gap_after_dash: float = Field(
        default=80.0,
        ge=0.0,
        description="Spacing added after the dash and the chevron",
    )
    dash_unicode: int = Field(default=0xE000, ge=0, le=0x10FFFF)
    chevron_unicode: int = Field(default=0xE001, ge=0, le=0x10FFFF)
    stroke: StrokeSpec = Field(default_factory=StrokeSpec)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class ArrowFontSettings(BaseModel):
    """Main application settings."""

    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    glyphs: GlyphConfig = Field(default_factory=GlyphConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> ArrowFontSettings:
    """Get default application settings."""
    return ArrowFontSettings()
