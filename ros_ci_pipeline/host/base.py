"""Interface abstraite de l'hôte CI."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Iterator


class CIHost(ABC):
    """
    Interface vers l'hôte CI qui exécute le pipeline.

    Le regroupement des logs est purement cosmétique : il ne doit
    jamais modifier les codes de retour ni le flot de contrôle.
    """

    @abstractmethod
    def start_group(self, title: str) -> None:
        """Ouvre un groupe de logs repliable."""
        pass

    @abstractmethod
    def end_group(self) -> None:
        """Ferme le groupe de logs courant."""
        pass

    @abstractmethod
    def set_failed(self, message: str) -> None:
        """
        Marque le run comme échoué.

        N'interrompt pas l'exécution : l'appelant doit s'arrêter
        explicitement.

        Args:
            message: Message lisible décrivant l'échec
        """
        pass

    @abstractmethod
    def warning(self, message: str) -> None:
        """Émet un avertissement visible dans l'interface de l'hôte."""
        pass

    @contextmanager
    def group(self, title: str) -> Iterator[None]:
        """
        Encadre un bloc de sortie dans un groupe nommé.

        Le groupe est fermé même si le bloc lève une exception,
        qui est ensuite propagée telle quelle.

        Args:
            title: Titre du groupe
        """
        self.start_group(title)
        try:
            yield
        finally:
            self.end_group()
