"""Installation de scripts bash dans le workspace.

Example:
    Installation du script rosdep :

        installer = BashScriptInstaller(file_manager, logger)
        path = installer.install(
            Path(workspace) / config.script_name, config
        )
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Protocol

from ros_ci_pipeline.errors.exceptions import InstallationError
from ros_ci_pipeline.filesystem.base import FileManager
from ros_ci_pipeline.logging.base import Logger


class BashScriptSource(Protocol):
    """Toute configuration capable de produire un script bash."""

    def to_bash_script(self) -> str:
        ...


class ScriptInstaller(ABC):
    """Interface abstraite pour l'installation de scripts."""

    @abstractmethod
    def install(self, path: Path, config: BashScriptSource) -> Path:
        """Installe un script à partir de sa configuration.

        Args:
            path: Chemin où installer le script.
            config: Configuration du script à générer.

        Returns:
            Le chemin du script installé.

        Raises:
            InstallationError: Si l'écriture échoue.
        """
        pass


class BashScriptInstaller(ScriptInstaller):
    """Installateur de scripts bash exécutables.

    Le script est toujours réécrit : son contenu dépend des entrées
    de l'invocation courante.

    Attributes:
        default_mode: Permissions appliquées (0o766 par défaut).
    """

    def __init__(
        self,
        file_manager: FileManager,
        logger: Optional[Logger] = None,
        default_mode: int = 0o766
    ) -> None:
        """Initialise l'installateur avec ses dépendances.

        Args:
            file_manager: Gestionnaire de fichiers.
            logger: Instance de Logger optionnelle.
            default_mode: Permissions par défaut pour les scripts.
        """
        self._file_manager = file_manager
        self._logger = logger
        self.default_mode = default_mode

    def install(self, path: Path, config: BashScriptSource) -> Path:
        try:
            self._file_manager.create_file(
                str(path), config.to_bash_script(), mode=self.default_mode
            )
        except OSError as e:
            raise InstallationError(
                f"Impossible d'écrire le script {path} : {e}"
            ) from e
        if self._logger:
            self._logger.log_info(f"Script {path} installé.")
        return path
