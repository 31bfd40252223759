"""Pydantic schemas shared by the conversion pipeline."""

from enum import StrEnum
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Pipeline steps
# ─────────────────────────────────────────────────────────────


class PipelineStep(StrEnum):
    """Steps of a conversion run, in execution order."""

    DERIVE_PATH = "derive_path"
    RESOLVE_FORMAT = "resolve_format"
    DECODE = "decode"
    SELECT_COLOR_MODEL = "select_color_model"
    ENCODE = "encode"


# ─────────────────────────────────────────────────────────────
# Task execution result
# ─────────────────────────────────────────────────────────────

TaskOutput = dict[str, object]


class TaskResult(BaseModel):
    """Result returned by ImageConversionTask.execute()."""

    status: Literal["completed", "failed"]
    task_output: TaskOutput | None = None

    step: PipelineStep | None = Field(default=None, description="Step at which the run failed")
    error_kind: str | None = Field(default=None, description="Name of the error class")
    error: str | None = None

    model_config: ClassVar[ConfigDict] = ConfigDict(extra="forbid", frozen=True)

    @property
    def ok(self) -> bool:
        return self.status == "completed"
