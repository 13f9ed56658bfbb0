"""Stratégies d'invocation du shell selon la plateforme hôte.

Deux variantes fermées, choisies une seule fois au démarrage :
    PosixShell : bash -c <script>.
    WrappedNativeShell : cmd.exe (sans AutoRun) qui charge
        l'environnement du compilateur (vcvarsall.bat) puis passe
        la main à Git bash pour exécuter le même script.
"""

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ros_ci_pipeline.distros import DistroSet


class ShellStrategy(ABC):
    """Transforme un corps de script en (interpréteur, arguments)."""

    @abstractmethod
    def command_for(self, script: str) -> Tuple[str, List[str]]:
        """Construit l'invocation native du script.

        Args:
            script: Corps du script bash (préfixe inclus).

        Returns:
            Tuple (interpréteur, arguments).
        """
        pass

    @abstractmethod
    def activation_prefix(self, distros: DistroSet) -> str:
        """Préfixe activant l'environnement des distributions ciblées."""
        pass


@dataclass(frozen=True)
class PosixShell(ShellStrategy):
    """Hôte de type POSIX : bash est appelé directement."""

    shell: str = "bash"
    ros_root: str = "/opt/ros"

    def command_for(self, script: str) -> Tuple[str, List[str]]:
        return self.shell, ["-c", script]

    def activation_prefix(self, distros: DistroSet) -> str:
        return "".join(
            f"source {self.ros_root}/{name}/setup.sh && "
            for _, name in distros.active()
        )


@dataclass(frozen=True)
class WrappedNativeShell(ShellStrategy):
    """Hôte Windows : cmd.exe → vcvarsall.bat → Git bash.

    Les flags de cmd.exe reprennent ceux des étapes "run:" de
    GitHub Actions, plus /D qui désactive l'AutoRun (qui bloquerait
    par exemple un virtualenv Python activé par une étape précédente).
    """

    cmd: str = "C:\\Windows\\system32\\cmd.exe"
    vcvarsall: str = (
        "%programfiles(x86)%\\Microsoft Visual Studio\\2019\\Enterprise"
        "\\VC\\Auxiliary\\Build\\vcvarsall.bat"
    )
    architecture: str = "amd64"
    bash: str = "C:\\Program Files\\Git\\bin\\bash.exe"

    def command_for(self, script: str) -> Tuple[str, List[str]]:
        return self.cmd, [
            "/D",
            "/E:ON",
            "/V:OFF",
            "/S",
            "/C",
            "call",
            self.vcvarsall,
            self.architecture,
            "&",
            self.bash,
            "-c",
            script,
        ]

    def activation_prefix(self, distros: DistroSet) -> str:
        # L'environnement est chargé par la chaîne vcvarsall.
        return ""


def detect_shell_strategy(platform: Optional[str] = None) -> ShellStrategy:
    """Choisit la stratégie d'invocation pour la plateforme hôte.

    Args:
        platform: Identifiant de plateforme (sys.platform par défaut).

    Returns:
        WrappedNativeShell pour win32, PosixShell sinon.
    """
    current = platform or sys.platform
    if current == "win32":
        return WrappedNativeShell()
    return PosixShell()
