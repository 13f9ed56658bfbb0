"""
    HostErrorHandler (générique, configurable)
"""
from ros_ci_pipeline.errors.base import ErrorHandler
from ros_ci_pipeline.errors.exceptions import (ApplicationError,
                                               CommandExecutionError,
                                               CommandLaunchError,
                                               ConfigurationError,
                                               InstallationError,
                                               ValidationError)
from ros_ci_pipeline.host.base import CIHost


class HostErrorHandler(ErrorHandler):
    """Handler qui annote l'hôte CI avec une piste de résolution.

    Distingue les erreurs connues (ApplicationError) des erreurs
    inattendues. N'appelle jamais set_failed : le rapport d'échec
    reste la responsabilité de la frontière extérieure.
    """

    def __init__(
        self,
        host: CIHost,
        solutions: dict[type[Exception], str] | None = None
    ) -> None:
        """Initialise le handler.

        Args:
            host: Hôte CI recevant les annotations.
            solutions: Dictionnaire {TypeException: "piste"} prioritaire
                       sur les pistes par défaut.
        """
        self.host = host
        self.solutions = solutions or {}

    def handle(self, error: Exception) -> None:
        """Émet un avertissement décrivant l'erreur et sa piste.

        Args:
            error: L'exception à annoter.
        """
        if isinstance(error, ApplicationError):
            hint = self._hint_for(error)
            self.host.warning(f"{type(error).__name__}: {error}. {hint}")
        else:
            self.host.warning(
                f"Erreur inattendue ({type(error).__name__}): {error}. "
                "Cela peut être un bug du pipeline."
            )

    def _hint_for(self, error: ApplicationError) -> str:
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution
        if isinstance(error, CommandLaunchError):
            return "Vérifiez que l'interpréteur est installé sur le runner."
        if isinstance(error, CommandExecutionError):
            return "Consultez la sortie du groupe de logs correspondant."
        if isinstance(error, (ConfigurationError, ValidationError)):
            return "Vérifiez les entrées du workflow."
        if isinstance(error, InstallationError):
            return "Vérifiez les permissions du workspace."
        return "Voir les logs pour plus de détails."
