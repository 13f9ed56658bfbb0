"""
    LoggerErrorHandler
"""
from ros_ci_pipeline.errors.base import ErrorHandler
from ros_ci_pipeline.errors.exceptions import (ApplicationError,
                                               CommandExecutionError)
from ros_ci_pipeline.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    """

    def __init__(self, logger: Logger) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
        """
        self.logger = logger

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec un message adapté à son type.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, CommandExecutionError):
            self.logger.log_error(
                f"{type(error).__name__} (code {error.exit_code}): {error}"
            )
        elif isinstance(error, ApplicationError):
            self.logger.log_error(f"{type(error).__name__}: {error}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {error}"
            )
