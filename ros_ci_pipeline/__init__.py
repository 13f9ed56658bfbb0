"""
ROS CI Pipeline - Cœur d'orchestration d'un pipeline CI ROS / ROS 2.

Modules disponibles:
- logging: Gestion des logs (Logger, FileLogger)
- errors: Exceptions, handlers et collecte des échecs
- config: Entrées du pipeline (pydantic, TOML/JSON, INPUT_*)
- host: Intégration avec l'hôte CI (groupes de logs, échec du run)
- commands: Formatage et exécution des commandes selon la plateforme
- validation: Validation des distributions ciblées
- filesystem: Écriture des fichiers, résolution des fichiers .repos
- scripts: Génération du script install_rosdeps.sh
- dependencies: Installation des dépendances rosdep
- pipeline: Tests/couverture et séquence complète
"""

__version__ = "1.0.0"

from ros_ci_pipeline.logging import Logger, FileLogger
from ros_ci_pipeline.errors import (
    ApplicationError,
    CommandExecutionError,
    CommandLaunchError,
    ConfigurationError,
    FailureCollector,
    ValidationError,
)
from ros_ci_pipeline.distros import (
    ROS1_DISTROS,
    ROS2_DISTROS,
    DistroSet,
)
from ros_ci_pipeline.config import (
    PipelineInputs,
    load_inputs_from_env,
    load_pipeline_inputs,
)
from ros_ci_pipeline.host import CIHost, GitHubActionsHost, detect_host
from ros_ci_pipeline.commands import (
    ExecOptions,
    PlatformCommandExecutor,
    PosixShell,
    SubprocessRunner,
    WrappedNativeShell,
    detect_shell_strategy,
    filter_non_empty_join,
)
from ros_ci_pipeline.validation import check_distros, validate_distros
from ros_ci_pipeline.filesystem import resolve_vcs_repo_file_url
from ros_ci_pipeline.scripts import RosdepScriptConfig, BashScriptInstaller
from ros_ci_pipeline.dependencies import RosdepInstaller
from ros_ci_pipeline.pipeline import (
    CoveragePipeline,
    ExecutionOutcome,
    PipelineDriver,
    PipelineReport,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    # Erreurs
    "ApplicationError",
    "ConfigurationError",
    "ValidationError",
    "CommandExecutionError",
    "CommandLaunchError",
    "FailureCollector",
    # Distributions
    "ROS1_DISTROS",
    "ROS2_DISTROS",
    "DistroSet",
    # Configuration
    "PipelineInputs",
    "load_inputs_from_env",
    "load_pipeline_inputs",
    # Hôte CI
    "CIHost",
    "GitHubActionsHost",
    "detect_host",
    # Commandes
    "ExecOptions",
    "PlatformCommandExecutor",
    "PosixShell",
    "WrappedNativeShell",
    "SubprocessRunner",
    "detect_shell_strategy",
    "filter_non_empty_join",
    # Validation
    "check_distros",
    "validate_distros",
    # Fichiers
    "resolve_vcs_repo_file_url",
    # Scripts
    "RosdepScriptConfig",
    "BashScriptInstaller",
    # Dépendances
    "RosdepInstaller",
    # Pipeline
    "CoveragePipeline",
    "ExecutionOutcome",
    "PipelineDriver",
    "PipelineReport",
]
