"""Module de configuration."""

from ros_ci_pipeline.config.env import load_inputs_from_env
from ros_ci_pipeline.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    load_pipeline_inputs,
)
from ros_ci_pipeline.config.models import LoggingSettings, PipelineInputs

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "load_pipeline_inputs",
    "load_inputs_from_env",
    "LoggingSettings",
    "PipelineInputs",
]
