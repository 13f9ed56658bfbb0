"""Accumulateur explicite des échecs du pipeline."""

from ros_ci_pipeline.host.base import CIHost


class FailureCollector:
    """Collecte les messages d'échec au lieu de marquer l'hôte.

    Les composants ajoutent leurs messages ; seule la frontière
    extérieure (cli.main) les transmet à l'hôte via report().
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    def add(self, message: str) -> None:
        """Enregistre un échec.

        Args:
            message: Message lisible décrivant l'échec.
        """
        self._messages.append(message)

    @property
    def failed(self) -> bool:
        """True si au moins un échec a été enregistré."""
        return bool(self._messages)

    @property
    def messages(self) -> tuple[str, ...]:
        """Messages enregistrés, dans l'ordre d'ajout."""
        return tuple(self._messages)

    def report(self, host: CIHost) -> None:
        """Transmet chaque échec à l'hôte CI.

        Args:
            host: Hôte CI recevant les appels set_failed.
        """
        for message in self._messages:
            host.set_failed(message)
