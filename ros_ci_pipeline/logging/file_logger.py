"""Implémentation concrète du logger (fichier et/ou console)."""

import logging
import os
from typing import Any, Optional

from ros_ci_pipeline.logging.base import Logger

DEFAULT_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


class FileLogger(Logger):
    """
    Logger qui écrit dans un fichier et/ou sur la console.

    Caractéristiques:
    - Logger unique par instance (évite les conflits)
    - Encodage UTF-8 explicite
    - Flush immédiat après chaque log
    - Pas de propagation (évite les logs en double)
    - Fichier optionnel : sur un runner CI, la console suffit souvent
    """

    def __init__(
        self,
        log_file: Optional[str] = None,
        level: str = "INFO",
        log_format: str = DEFAULT_FORMAT,
        console_output: bool = True
    ) -> None:
        """
        Initialise le logger.

        Args:
            log_file: Chemin du fichier de log (None = pas de fichier)
            level: Niveau de log (DEBUG, INFO, WARNING, ERROR)
            log_format: Format des messages (syntaxe logging)
            console_output: Activer la sortie console
        """
        self.log_file = log_file

        if log_file:
            log_dir = os.path.dirname(log_file)
            if log_dir and not os.path.exists(log_dir):
                os.makedirs(log_dir, exist_ok=True)

        log_level = getattr(logging, level.upper(), logging.INFO)

        # Un logger par destination
        name = f"ros_ci_pipeline.{log_file or 'console'}"
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)
        self.handlers: list[logging.Handler] = []

        if not self.logger.handlers:
            formatter = logging.Formatter(log_format)
            if log_file:
                file_handler = logging.FileHandler(log_file, encoding='utf-8')
                file_handler.setLevel(log_level)
                file_handler.setFormatter(formatter)
                self.logger.addHandler(file_handler)
            if console_output:
                console_handler = logging.StreamHandler()
                console_handler.setLevel(log_level)
                console_handler.setFormatter(formatter)
                self.logger.addHandler(console_handler)
        self.handlers = list(self.logger.handlers)

        self.logger.propagate = False

    @classmethod
    def from_settings(cls, settings: Any) -> "FileLogger":
        """
        Construit un logger depuis la section logging de la configuration.

        Args:
            settings: Objet exposant level, format et file
                      (ex: LoggingSettings)

        Returns:
            Instance de FileLogger configurée
        """
        return cls(
            log_file=settings.file,
            level=settings.level,
            log_format=settings.format,
        )

    def _flush(self) -> None:
        """Force l'écriture immédiate des handlers."""
        for handler in self.handlers:
            handler.flush()

    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        self.logger.info(message)
        self._flush()

    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        self.logger.warning(message)
        self._flush()

    def log_error(self, message: str) -> None:
        """Log une erreur."""
        self.logger.error(message)
        self._flush()
