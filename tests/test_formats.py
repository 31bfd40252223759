"""Unit tests for the target format catalog and extension lookup."""

from pathlib import Path

import pytest

from cl_image_convert.common.errors import MissingExtension, UnsupportedFormat
from cl_image_convert.common.schemas import PipelineStep
from cl_image_convert.image_conversion.algo.formats import (
    FORMAT_CATALOG,
    ChannelLayout,
    TargetFormat,
    format_from_extension,
    layout_for,
    resolve_format,
)

# ============================================================================
# Catalog Tests
# ============================================================================


def test_target_format_values():
    """Test TargetFormat values match the command-line identifiers."""
    assert [fmt.value for fmt in TargetFormat] == ["jpg", "png", "tiff", "webp", "avif"]


def test_catalog_covers_every_format():
    """Test every TargetFormat has a catalog entry."""
    assert set(FORMAT_CATALOG) == set(TargetFormat)


def test_canonical_extensions():
    assert TargetFormat.JPEG.extension == "jpg"
    assert TargetFormat.PNG.extension == "png"
    assert TargetFormat.TIFF.extension == "tiff"
    assert TargetFormat.WEBP.extension == "webp"
    assert TargetFormat.AVIF.extension == "avif"


def test_pil_format_names():
    assert TargetFormat.JPEG.pil_format == "JPEG"
    assert TargetFormat.PNG.pil_format == "PNG"
    assert TargetFormat.TIFF.pil_format == "TIFF"
    assert TargetFormat.WEBP.pil_format == "WEBP"
    assert TargetFormat.AVIF.pil_format == "AVIF"


# ============================================================================
# Channel Layout Tests
# ============================================================================


def test_jpeg_layout_has_no_alpha():
    assert layout_for(TargetFormat.JPEG) == ChannelLayout.RGB8
    assert ChannelLayout.RGB8.channels == 3
    assert not ChannelLayout.RGB8.has_alpha


@pytest.mark.parametrize(
    "fmt",
    [TargetFormat.PNG, TargetFormat.TIFF, TargetFormat.WEBP, TargetFormat.AVIF],
)
def test_alpha_formats_use_rgba(fmt: TargetFormat):
    assert layout_for(fmt) == ChannelLayout.RGBA8
    assert fmt.layout.channels == 4
    assert fmt.layout.has_alpha


# ============================================================================
# Extension Lookup Tests
# ============================================================================


def test_format_from_extension_aliases():
    assert format_from_extension("jpeg") == TargetFormat.JPEG
    assert format_from_extension(".JPG") == TargetFormat.JPEG
    assert format_from_extension("tif") == TargetFormat.TIFF
    assert format_from_extension("gif") is None


@pytest.mark.parametrize("fmt", list(TargetFormat))
def test_resolve_format_canonical_extension(fmt: TargetFormat):
    """Test every canonical extension resolves back to its format."""
    assert resolve_format(Path(f"out/photo.{fmt.extension}")) == fmt


def test_resolve_format_is_case_insensitive():
    assert resolve_format("photo.WebP") == TargetFormat.WEBP


def test_resolve_format_missing_extension():
    with pytest.raises(MissingExtension) as exc_info:
        _ = resolve_format(Path("out/photo"))

    assert exc_info.value.step == PipelineStep.RESOLVE_FORMAT
    assert exc_info.value.path == Path("out/photo")


@pytest.mark.parametrize("name", ["photo.gif", "photo.bmp", "photo.svg", "archive.tar.gz"])
def test_resolve_format_unsupported_extension(name: str):
    with pytest.raises(UnsupportedFormat) as exc_info:
        _ = resolve_format(name)

    assert exc_info.value.extension == Path(name).suffix.lstrip(".")
    assert "Unsupported output file extension" in str(exc_info.value)
