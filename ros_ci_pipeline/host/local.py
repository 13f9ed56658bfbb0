"""Hôte local (terminal) et détection automatique de l'hôte."""

import os
import sys
from typing import Mapping, Optional, TextIO

from ros_ci_pipeline.host.base import CIHost
from ros_ci_pipeline.host.github import GitHubActionsHost


class LocalHost(CIHost):
    """Hôte pour une exécution hors CI : bannières texte simples."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream

    def _write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

    def start_group(self, title: str) -> None:
        self._write(f"==> {title}")

    def end_group(self) -> None:
        pass

    def set_failed(self, message: str) -> None:
        self._write(f"ERREUR: {message}")

    def warning(self, message: str) -> None:
        self._write(f"AVERTISSEMENT: {message}")


def detect_host(environ: Optional[Mapping[str, str]] = None) -> CIHost:
    """
    Sélectionne l'hôte CI d'après l'environnement.

    Args:
        environ: Environnement à inspecter (os.environ par défaut)

    Returns:
        GitHubActionsHost si GITHUB_ACTIONS vaut "true", LocalHost sinon
    """
    env = os.environ if environ is None else environ
    if env.get("GITHUB_ACTIONS", "").lower() == "true":
        return GitHubActionsHost()
    return LocalHost()
