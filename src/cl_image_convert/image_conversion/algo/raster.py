"""In-memory rasters and the per-format color model selection."""

from dataclasses import dataclass
from pathlib import Path

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from ...common.errors import DecodeError
from ...common.schemas import PipelineStep
from .formats import ChannelLayout, TargetFormat, layout_for


@dataclass
class DecodedRaster:
    """Decoded source image in whatever color model the container used."""

    image: Image.Image
    source_path: Path
    source_format: str | None = None

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def mode(self) -> str:
        return self.image.mode


@dataclass(frozen=True)
class EncodableRaster:
    """8-bit RGB or RGBA pixels, shaped (height, width, channels)."""

    width: int
    height: int
    layout: ChannelLayout
    pixels: NDArray[np.uint8]

    def __post_init__(self) -> None:
        expected = (self.height, self.width, self.layout.channels)
        if self.pixels.dtype != np.uint8 or self.pixels.shape != expected:
            raise ValueError(
                f"Pixel array {self.pixels.shape}/{self.pixels.dtype} "
                + f"does not match {expected}/uint8"
            )

    @property
    def channels(self) -> int:
        return self.layout.channels

    def tobytes(self) -> bytes:
        return self.pixels.tobytes()

    def __len__(self) -> int:
        return self.pixels.size


def _to_8bit(image: Image.Image) -> Image.Image:
    """Scale single channel wide-range modes down to 8-bit L.

    Integer modes are treated as 16-bit samples, float mode as 0.0 to 1.0.
    Other modes are returned unchanged.
    """
    if image.mode.startswith("I"):
        values = np.clip(np.asarray(image).astype(np.int64), 0, 65535)
        scaled = (values + 128) // 257
    elif image.mode == "F":
        values = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
        scaled = np.rint(values * 255)
    else:
        return image

    return Image.fromarray(scaled.astype(np.uint8))


def select_color_model(raster: DecodedRaster, target_format: TargetFormat) -> EncodableRaster:
    """
    Normalize a decoded raster to the layout required by target_format.

    JPEG output drops alpha. Every other format gets RGBA, with a fully opaque
    alpha channel added when the source has none. 16-bit samples are scaled
    to 8 bits, not clipped.

    Raises:
        DecodeError: If the source color model cannot be converted
    """
    layout = layout_for(target_format)

    try:
        converted = _to_8bit(raster.image).convert(layout.pil_mode)
    except (ValueError, OSError) as exc:
        raise DecodeError(
            raster.source_path,
            f"cannot convert {raster.mode} to {layout.pil_mode}: {exc}",
            step=PipelineStep.SELECT_COLOR_MODEL,
        ) from exc

    pixels = np.asarray(converted, dtype=np.uint8).reshape(
        converted.height, converted.width, layout.channels
    )

    return EncodableRaster(
        width=converted.width,
        height=converted.height,
        layout=layout,
        pixels=pixels,
    )
