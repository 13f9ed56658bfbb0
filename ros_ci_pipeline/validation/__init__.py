"""Module de validation."""

from ros_ci_pipeline.validation.base import CheckResult, Validator
from ros_ci_pipeline.validation.distros import (
    DistroCheck,
    DistroValidator,
    check_distros,
    validate_distros,
)

__all__ = [
    "Validator",
    "CheckResult",
    "DistroCheck",
    "DistroValidator",
    "check_distros",
    "validate_distros",
]
