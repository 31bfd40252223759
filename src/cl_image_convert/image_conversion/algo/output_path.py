"""Output path derivation."""

from pathlib import Path

from ...common.errors import MissingFileName, SameFile
from .formats import TargetFormat


def derive_output_path(
    *,
    input_path: str | Path,
    target_format: TargetFormat,
    output_dir: str | Path | None = None,
) -> Path:
    """
    Derive where the converted image is written.

    The input's file name is placed in output_dir when given, otherwise next to
    the input, and its extension is replaced by the canonical extension of
    target_format.

    Args:
        input_path: Path to the source image
        target_format: Format being converted to
        output_dir: Optional directory to write into

    Returns:
        Output file path

    Raises:
        MissingFileName: If input_path has no file name component
        SameFile: If the derived path is the input path itself
    """
    input_path = Path(input_path)

    if input_path.name in ("", ".", ".."):
        raise MissingFileName(input_path)

    if output_dir is not None:
        output_path = Path(output_dir) / input_path.name
    else:
        output_path = input_path

    # A trailing dot is an empty extension: "a." becomes "a.png", not "a..png"
    if not output_path.suffix and output_path.name.endswith("."):
        output_path = output_path.with_name(output_path.name[:-1])

    output_path = output_path.with_suffix(f".{target_format.extension}")

    if output_path == input_path or output_path.resolve() == input_path.resolve():
        raise SameFile(input_path)

    return output_path
