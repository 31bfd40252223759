"""Single image format conversion."""

from .schema import ConversionOutput, ConversionRequest
from .task import ImageConversionTask

__all__ = ["ImageConversionTask", "ConversionRequest", "ConversionOutput"]
