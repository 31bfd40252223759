"""Shared schemas and errors."""

from .errors import (
    ConversionError,
    DecodeError,
    DirectoryNotFound,
    MissingExtension,
    MissingFileName,
    OpenError,
    SameFile,
    SaveError,
    UnsupportedFormat,
)
from .schemas import PipelineStep, TaskResult

__all__ = [
    "ConversionError",
    "DecodeError",
    "DirectoryNotFound",
    "MissingExtension",
    "MissingFileName",
    "OpenError",
    "PipelineStep",
    "SameFile",
    "SaveError",
    "TaskResult",
    "UnsupportedFormat",
]
