"""Module de gestion des erreurs."""

from ros_ci_pipeline.errors.base import ErrorHandler, ErrorHandlerChain
from ros_ci_pipeline.errors.collector import FailureCollector
from ros_ci_pipeline.errors.exceptions import (ApplicationError,
                                               CommandError,
                                               CommandExecutionError,
                                               CommandLaunchError,
                                               ConfigurationError,
                                               DistroValidationError,
                                               FileConfigurationError,
                                               InstallationError,
                                               ValidationError)
from ros_ci_pipeline.errors.host_handler import HostErrorHandler
from ros_ci_pipeline.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "FileConfigurationError",
    "ValidationError",
    "DistroValidationError",
    "InstallationError",
    "CommandError",
    "CommandLaunchError",
    "CommandExecutionError",
    "ErrorHandler",
    "ErrorHandlerChain",
    "HostErrorHandler",
    "LoggerErrorHandler",
    "FailureCollector",
]
