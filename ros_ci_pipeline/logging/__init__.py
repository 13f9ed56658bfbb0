"""Module de logging."""

from ros_ci_pipeline.logging.base import Logger
from ros_ci_pipeline.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
]
