"""Image conversion task implementation."""

from loguru import logger

from ..common.errors import ConversionError, DirectoryNotFound
from ..common.schemas import PipelineStep, TaskResult
from .algo.formats import resolve_format
from .algo.image_convert import decode_image, encode_image
from .algo.output_path import derive_output_path
from .algo.raster import select_color_model
from .schema import ConversionOutput, ConversionRequest


class ImageConversionTask:
    """
    Runs one conversion, strictly in order:

        derive_path -> resolve_format -> decode -> select_color_model -> encode

    - run() raises the first ConversionError
    - execute() reports it as a failed TaskResult instead
    """

    schema: type[ConversionRequest] = ConversionRequest

    @property
    def task_type(self) -> str:
        return "image_conversion"

    def run(self, params: ConversionRequest) -> ConversionOutput:
        logger.debug(f"{PipelineStep.DERIVE_PATH}: {params.input_path}")
        output_path = derive_output_path(
            input_path=params.input_path,
            target_format=params.target_format,
            output_dir=params.output_dir,
        )
        if params.output_dir is not None and not params.output_dir.is_dir():
            raise DirectoryNotFound(params.output_dir)

        logger.debug(f"{PipelineStep.RESOLVE_FORMAT}: {output_path}")
        target_format = resolve_format(output_path)

        logger.debug(f"{PipelineStep.DECODE}: {params.input_path}")
        decoded = decode_image(params.input_path)

        logger.debug(f"{PipelineStep.SELECT_COLOR_MODEL}: {decoded.mode} -> {target_format.layout}")
        raster = select_color_model(decoded, target_format)
        del decoded

        logger.debug(f"{PipelineStep.ENCODE}: {output_path}")
        _ = encode_image(
            raster=raster,
            target_format=target_format,
            output_path=output_path,
            quality=params.quality,
        )

        logger.info(f"Converted {params.input_path} -> {output_path}")

        return ConversionOutput(
            output_path=output_path,
            target_format=target_format,
            width=raster.width,
            height=raster.height,
            layout=raster.layout,
        )

    def execute(self, params: ConversionRequest) -> TaskResult:
        try:
            output = self.run(params)

            return TaskResult(
                status="completed",
                task_output=output.model_dump(mode="json"),
            )

        except ConversionError as exc:
            logger.debug(f"{self.task_type} failed at {exc.step}: {exc.kind}")
            return TaskResult(
                status="failed",
                step=exc.step,
                error_kind=exc.kind,
                error=str(exc),
            )
