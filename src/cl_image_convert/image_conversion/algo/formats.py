"""Catalog of supported target formats and extension lookup."""

from dataclasses import dataclass
from enum import StrEnum
from pathlib import Path

from ...common.errors import MissingExtension, UnsupportedFormat


class ChannelLayout(StrEnum):
    """8-bit truecolor layouts accepted by the encoder."""

    RGB8 = "RGB"
    RGBA8 = "RGBA"

    @property
    def pil_mode(self) -> str:
        return self.value

    @property
    def channels(self) -> int:
        return len(self.value)

    @property
    def has_alpha(self) -> bool:
        return self is ChannelLayout.RGBA8


class TargetFormat(StrEnum):
    """Target formats, keyed by their command-line identifier."""

    JPEG = "jpg"
    PNG = "png"
    TIFF = "tiff"
    WEBP = "webp"
    AVIF = "avif"

    @property
    def extension(self) -> str:
        return FORMAT_CATALOG[self].extension

    @property
    def pil_format(self) -> str:
        return FORMAT_CATALOG[self].pil_format

    @property
    def layout(self) -> ChannelLayout:
        return layout_for(self)


@dataclass(frozen=True)
class FormatSpec:
    extension: str
    pil_format: str
    supports_alpha: bool
    aliases: tuple[str, ...] = ()


FORMAT_CATALOG: dict[TargetFormat, FormatSpec] = {
    TargetFormat.JPEG: FormatSpec("jpg", "JPEG", supports_alpha=False, aliases=("jpeg",)),
    TargetFormat.PNG: FormatSpec("png", "PNG", supports_alpha=True),
    TargetFormat.TIFF: FormatSpec("tiff", "TIFF", supports_alpha=True, aliases=("tif",)),
    TargetFormat.WEBP: FormatSpec("webp", "WEBP", supports_alpha=True),
    TargetFormat.AVIF: FormatSpec("avif", "AVIF", supports_alpha=True),
}

_EXTENSIONS: dict[str, TargetFormat] = {
    ext: fmt
    for fmt, spec in FORMAT_CATALOG.items()
    for ext in (spec.extension, *spec.aliases)
}


def layout_for(target_format: TargetFormat) -> ChannelLayout:
    """Channel layout the target container is written with.

    Formats without alpha support get opaque RGB, everything else RGBA.
    """
    if FORMAT_CATALOG[target_format].supports_alpha:
        return ChannelLayout.RGBA8
    return ChannelLayout.RGB8


def format_from_extension(extension: str) -> TargetFormat | None:
    """Look up a format by extension (with or without the leading dot)."""
    return _EXTENSIONS.get(extension.lstrip(".").lower())


def resolve_format(output_path: str | Path) -> TargetFormat:
    """Resolve the container format of an output path from its extension.

    Raises:
        MissingExtension: If the path has no extension
        UnsupportedFormat: If the extension is not in the catalog
    """
    path = Path(output_path)
    suffix = path.suffix
    if not suffix:
        raise MissingExtension(path)

    target_format = format_from_extension(suffix)
    if target_format is None:
        raise UnsupportedFormat(suffix.lstrip("."), path)
    return target_format
