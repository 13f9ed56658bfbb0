"""
Module contenant les exceptions personnalisées du pipeline CI.

Ce module suit le principe SRP en isolant la gestion des exceptions.
"""
from typing import Optional


class ApplicationError(Exception):
    """Exception de base pour tout le pipeline."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les configurations."""
    pass


class FileConfigurationError(ConfigurationError):
    """Fichier de configuration illisible ou invalide."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class DistroValidationError(ValidationError):
    """Distribution ROS absente ou hors de la liste autorisée."""
    pass


class InstallationError(ApplicationError):
    """Échec d'écriture ou d'installation d'un artefact (script)."""
    pass


class CommandError(ApplicationError):
    """Exception de base pour l'exécution de commandes."""
    pass


class CommandLaunchError(CommandError):
    """L'interpréteur n'a pas pu être lancé (introuvable, permissions)."""

    def __init__(self, interpreter: str, reason: str) -> None:
        self.interpreter = interpreter
        super().__init__(
            f"Impossible de lancer '{interpreter}' : {reason}"
        )


class CommandExecutionError(CommandError):
    """Le processus s'est terminé avec un code de retour non nul.

    Attributes:
        command: Script exécuté (préfixe inclus).
        exit_code: Code de retour du processus.
        stage: Nom de l'étape du pipeline en échec, renseigné par
            l'orchestrateur qui l'a lancée (None hors pipeline).
    """

    def __init__(
        self,
        command: str,
        exit_code: int,
        message: Optional[str] = None
    ) -> None:
        self.command = command
        self.exit_code = exit_code
        self.stage: Optional[str] = None
        super().__init__(
            message
            or f"La commande '{command}' a échoué avec le code {exit_code}"
        )
