"""Pillow-backed decode and encode of a single image."""

from pathlib import Path

from loguru import logger
from PIL import Image, UnidentifiedImageError

from ...common.errors import DecodeError, OpenError, SaveError
from ...utils.profiling import timed
from .formats import TargetFormat
from .raster import DecodedRaster, EncodableRaster

# Raised by Image.open/load on malformed content. UnidentifiedImageError, an
# OSError subclass, is caught before these.
_DECODE_ERRORS = (
    Image.DecompressionBombError,
    OSError,
    SyntaxError,
    ValueError,
    EOFError,
)


@timed
def decode_image(input_path: str | Path) -> DecodedRaster:
    """
    Decode an image file into memory.

    The container is detected from the file content, not its extension.
    Multi-frame images decode to their first frame.

    Args:
        input_path: Path to input image

    Returns:
        DecodedRaster holding the fully loaded image

    Raises:
        OpenError: If the file cannot be opened for reading
        DecodeError: If the content is not a recognizable, valid image
    """
    input_path = Path(input_path)

    try:
        fh = input_path.open("rb")
    except OSError as exc:
        raise OpenError(input_path, exc.strerror or exc) from exc

    with fh:
        try:
            with Image.open(fh) as img:
                source_format = img.format
                image = img.copy()
        except UnidentifiedImageError as exc:
            raise DecodeError(input_path, "unrecognized image format") from exc
        except _DECODE_ERRORS as exc:
            raise DecodeError(input_path, exc) from exc

    if image.width <= 0 or image.height <= 0:
        raise DecodeError(input_path, f"invalid dimensions {image.width}x{image.height}")

    logger.debug(f"Decoded {input_path}: {source_format} {image.mode} {image.width}x{image.height}")

    return DecodedRaster(image=image, source_path=input_path, source_format=source_format)


def _save_options(target_format: TargetFormat, quality: int | None) -> dict[str, object]:
    save_kwargs: dict[str, object] = {}

    if target_format in (TargetFormat.JPEG, TargetFormat.WEBP, TargetFormat.AVIF):
        if quality is not None:
            save_kwargs["quality"] = quality

    # Pixel exact unless a lossy quality was asked for
    if target_format == TargetFormat.WEBP and quality is None:
        save_kwargs["lossless"] = True

    if target_format == TargetFormat.PNG:
        save_kwargs["optimize"] = True

    return save_kwargs


@timed
def encode_image(
    *,
    raster: EncodableRaster,
    target_format: TargetFormat,
    output_path: str | Path,
    quality: int | None = None,
) -> Path:
    """
    Encode a normalized raster into the target container.

    Creates or overwrites output_path. A failed write may leave a partial file.

    Args:
        raster: Pixels in the layout selected for target_format
        target_format: Container to write
        output_path: Destination file
        quality: Optional quality for lossy formats (JPEG, WEBP, AVIF)

    Returns:
        Output file path

    Raises:
        SaveError: If the file cannot be written or the codec fails
    """
    output_path = Path(output_path)

    image = Image.frombytes(
        raster.layout.pil_mode,
        (raster.width, raster.height),
        raster.tobytes(),
    )

    try:
        with output_path.open("wb") as fh:
            image.save(fh, format=target_format.pil_format, **_save_options(target_format, quality))
    except (OSError, ValueError, KeyError) as exc:
        # KeyError: Pillow has no encoder registered for the format
        raise SaveError(output_path, exc) from exc

    logger.debug(f"Encoded {output_path}: {target_format.pil_format} {raster.layout.pil_mode}")

    return output_path
