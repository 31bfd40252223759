"""Command-line entry point: cl-image-convert."""

import argparse
import sys
from collections.abc import Sequence

from loguru import logger
from pydantic import ValidationError

from . import __version__
from .image_conversion import ConversionRequest, ImageConversionTask
from .image_conversion.algo.formats import TargetFormat

LOG_FORMAT = "<level>{level: <8}</level> | {message}"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cl-image-convert",
        description="Convert an image to another format.",
    )
    parser.add_argument("-i", "--input", required=True, help="Input image path")
    parser.add_argument(
        "-f",
        "--to-format",
        required=True,
        choices=[fmt.value for fmt in TargetFormat],
        help="Target format",
    )
    parser.add_argument(
        "-o",
        "--output-dir",
        default=None,
        help="Directory to write the result into (default: next to the input)",
    )
    parser.add_argument(
        "-q",
        "--quality",
        type=int,
        default=None,
        help="Quality 1..100 for jpg, webp and avif",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress (-v) or debug details (-vv)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def configure_logging(verbosity: int) -> None:
    level = "WARNING"
    if verbosity == 1:
        level = "INFO"
    elif verbosity > 1:
        level = "DEBUG"

    logger.remove()
    _ = logger.add(sys.stderr, level=level, format=LOG_FORMAT)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        request = ConversionRequest(
            input_path=args.input,
            target_format=args.to_format,
            output_dir=args.output_dir,
            quality=args.quality,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    result = ImageConversionTask().execute(request)
    if not result.ok:
        logger.error(result.error)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
