"""Interface abstraite pour la gestion des fichiers."""

from abc import ABC, abstractmethod


class FileManager(ABC):
    """Interface pour la gestion des fichiers."""

    @abstractmethod
    def create_file(
        self, file_path: str, content: str, mode: int | None = None
    ) -> None:
        """
        Crée (ou écrase) un fichier avec le contenu spécifié.

        Args:
            file_path: Chemin du fichier à créer
            content: Contenu du fichier
            mode: Permissions à appliquer (None = umask par défaut)

        Raises:
            OSError: Si l'écriture échoue
        """
        pass
