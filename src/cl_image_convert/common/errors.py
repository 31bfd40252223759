"""Errors raised by the conversion pipeline.

Every error is terminal. Each one records the pipeline step it belongs to and
the path or extension involved, so the message can be shown to the user as is.
"""

from pathlib import Path
from typing import ClassVar

from typing_extensions import override

from .schemas import PipelineStep


class ConversionError(Exception):
    """Base class for all conversion failures."""

    default_step: ClassVar[PipelineStep]

    def __init__(
        self,
        message: str,
        path: str | Path | None = None,
        step: PipelineStep | None = None,
    ):
        self.message: str = message
        self.path: Path | None = Path(path) if path is not None else None
        self.step: PipelineStep = step or self.default_step
        super().__init__(self.message)

    @property
    def kind(self) -> str:
        return type(self).__name__

    @override
    def __str__(self):
        return f"[{self.step}] {self.message}"


# Path derivation


class MissingFileName(ConversionError):
    default_step = PipelineStep.DERIVE_PATH

    def __init__(self, path: str | Path):
        super().__init__(f"Input path has no file name: '{path}'", path)


class SameFile(ConversionError):
    default_step = PipelineStep.DERIVE_PATH

    def __init__(self, path: str | Path):
        super().__init__(f"Input and output are the same file: '{path}'", path)


class DirectoryNotFound(ConversionError):
    default_step = PipelineStep.DERIVE_PATH

    def __init__(self, path: str | Path):
        super().__init__(f"Output directory does not exist: '{path}'", path)


# Format resolution


class MissingExtension(ConversionError):
    default_step = PipelineStep.RESOLVE_FORMAT

    def __init__(self, path: str | Path):
        super().__init__(f"Missing output file extension: '{path}'", path)


class UnsupportedFormat(ConversionError):
    default_step = PipelineStep.RESOLVE_FORMAT

    def __init__(self, extension: str, path: str | Path | None = None):
        self.extension: str = extension
        super().__init__(f"Unsupported output file extension: '{extension}'", path)


# Codec boundary


class OpenError(ConversionError):
    default_step = PipelineStep.DECODE

    def __init__(self, path: str | Path, reason: object):
        super().__init__(f"Failed to open image file '{path}': {reason}", path)


class DecodeError(ConversionError):
    default_step = PipelineStep.DECODE

    def __init__(self, path: str | Path, reason: object, step: PipelineStep | None = None):
        super().__init__(f"Failed to decode image file '{path}': {reason}", path, step)


class SaveError(ConversionError):
    default_step = PipelineStep.ENCODE

    def __init__(self, path: str | Path, reason: object):
        super().__init__(f"Failed to save image file '{path}': {reason}", path)
