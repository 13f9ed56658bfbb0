"""Implémentation locale de la gestion des fichiers."""

import os
from typing import Optional

from ros_ci_pipeline.filesystem.base import FileManager
from ros_ci_pipeline.logging.base import Logger


class LocalFileManager(FileManager):
    """
    Gestion des fichiers sur le disque du runner.

    Les opérations sont loggées via l'instance Logger si fournie.
    """

    def __init__(self, logger: Optional[Logger] = None) -> None:
        """
        Initialise le gestionnaire de fichiers.

        Args:
            logger: Instance de Logger optionnelle
        """
        self.logger = logger

    def create_file(
        self, file_path: str, content: str, mode: int | None = None
    ) -> None:
        """
        Crée (ou écrase) un fichier avec le contenu spécifié.

        Args:
            file_path: Chemin du fichier à créer
            content: Contenu du fichier
            mode: Permissions à appliquer après écriture

        Raises:
            OSError: Si l'écriture ou le chmod échoue
        """
        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                f.write(content)
            if mode is not None:
                os.chmod(file_path, mode)
        except OSError as e:
            if self.logger:
                self.logger.log_error(
                    f"Erreur lors de la création du fichier {file_path}: {e}"
                )
            raise
        if self.logger:
            self.logger.log_info(f"Fichier {file_path} créé avec succès.")
