"""Module d'orchestration : tests/couverture et séquence complète."""

from ros_ci_pipeline.outcome import ExecutionOutcome, StageResult
from ros_ci_pipeline.pipeline.coverage import CoveragePipeline
from ros_ci_pipeline.pipeline.driver import (
    PipelineDriver,
    PipelineReport,
    is_valid_json,
)

__all__ = [
    "StageResult",
    "ExecutionOutcome",
    "CoveragePipeline",
    "PipelineDriver",
    "PipelineReport",
    "is_valid_json",
]
