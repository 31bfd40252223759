"""Image conversion algorithms."""

from .formats import (
    FORMAT_CATALOG,
    ChannelLayout,
    FormatSpec,
    TargetFormat,
    format_from_extension,
    layout_for,
    resolve_format,
)
from .image_convert import decode_image, encode_image
from .output_path import derive_output_path
from .raster import DecodedRaster, EncodableRaster, select_color_model

__all__ = [
    "FORMAT_CATALOG",
    "ChannelLayout",
    "DecodedRaster",
    "EncodableRaster",
    "FormatSpec",
    "TargetFormat",
    "decode_image",
    "derive_output_path",
    "encode_image",
    "format_from_extension",
    "layout_for",
    "resolve_format",
    "select_color_model",
]
