"""Image conversion request and output schemas."""

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from .algo.formats import ChannelLayout, TargetFormat


class ConversionRequest(BaseModel):
    """Parameters of a single conversion run.

    Attributes:
        input_path: Path to the source image
        target_format: Format to convert to
        output_dir: Directory to write into (None = next to the input)
        quality: Optional quality for lossy formats (JPEG, WEBP, AVIF)
    """

    input_path: Path
    target_format: TargetFormat
    output_dir: Path | None = None
    quality: int | None = Field(default=None, ge=1, le=100, description="Output quality (1-100)")

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="forbid")


class ConversionOutput(BaseModel):
    """Metadata of a completed conversion."""

    output_path: Path
    target_format: TargetFormat
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    layout: ChannelLayout

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)
