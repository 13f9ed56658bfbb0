"""Module d'intégration avec l'hôte CI (groupes de logs, échec du run)."""

from ros_ci_pipeline.host.base import CIHost
from ros_ci_pipeline.host.github import GitHubActionsHost
from ros_ci_pipeline.host.local import LocalHost, detect_host

__all__ = [
    "CIHost",
    "GitHubActionsHost",
    "LocalHost",
    "detect_host",
]
