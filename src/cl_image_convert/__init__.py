"""cl_image_convert - Convert a raster image between container formats."""

from .common.errors import (
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
from .common.schemas import PipelineStep, TaskResult
from .image_conversion import ConversionOutput, ConversionRequest, ImageConversionTask
from .image_conversion.algo import ChannelLayout, TargetFormat

__version__ = "0.1.0"

__all__ = [
    "ChannelLayout",
    "ConversionError",
    "ConversionOutput",
    "ConversionRequest",
    "DecodeError",
    "DirectoryNotFound",
    "ImageConversionTask",
    "MissingExtension",
    "MissingFileName",
    "OpenError",
    "PipelineStep",
    "SameFile",
    "SaveError",
    "TargetFormat",
    "TaskResult",
    "UnsupportedFormat",
    "__version__",
]
