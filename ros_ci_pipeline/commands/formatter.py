"""Formatage des lignes de commande et des messages d'exécution.

Ce module fournit :
    filter_non_empty_join : Assemblage d'une ligne de commande à
        partir de fragments, sans double espace.
    CommandFormatter : Interface abstraite de formatage des messages.
    PlainCommandFormatter : Texte brut (logs fichier, titres de groupe).
    AnsiCommandFormatter : Codes ANSI colorés pour la console.

Example :
    Assemblage avec un fragment optionnel vide :

        filter_non_empty_join(["colcon test", "", "--verbose"])
        # "colcon test --verbose"

Note :
    AnsiCommandFormatter vérifie automatiquement si la sortie est
    un terminal (TTY) avant d'émettre des codes ANSI.
"""

import sys
from abc import ABC, abstractmethod
from typing import Iterable


def filter_non_empty_join(values: Iterable[str]) -> str:
    """Joint les fragments non vides avec un espace unique.

    Args:
        values: Fragments ordonnés (les fragments vides sont ignorés).

    Returns:
        La ligne de commande assemblée, "" si tout est vide.
    """
    return " ".join(value for value in values if len(value) > 0)


class CommandFormatter(ABC):
    """Interface abstraite pour formater les messages d'exécution."""

    @abstractmethod
    def format_start(self, script: str) -> str:
        """Formate le message (titre de groupe) de début d'exécution.

        Args:
            script: Corps du script shell exécuté.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_failure(self, script: str, exit_code: int) -> str:
        """Formate le message d'échec d'une commande.

        Args:
            script: Corps du script shell exécuté.
            exit_code: Code de retour non nul.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass

    @abstractmethod
    def format_dry_run(self, argv: list[str]) -> str:
        """Formate le message de simulation (mode dry-run).

        Args:
            argv: Interpréteur suivi de ses arguments.

        Returns:
            Message formaté prêt à l'affichage.
        """
        pass


class PlainCommandFormatter(CommandFormatter):
    """Formateur texte brut.

    Example :
        Invoking: bash -c 'colcon build --symlink-install'
    """

    def format_start(self, script: str) -> str:
        return f"Invoking: bash -c '{script}'"

    def format_failure(self, script: str, exit_code: int) -> str:
        return f"Code retour {exit_code} : {script}"

    def format_dry_run(self, argv: list[str]) -> str:
        return f"[dry-run] {' '.join(argv)}"


class AnsiCommandFormatter(PlainCommandFormatter):
    """Formateur ANSI coloré pour la console locale.

    N'émet aucun code ANSI si stdout n'est pas un terminal TTY,
    évitant ainsi de polluer les logs du runner CI.

    Styles ANSI :
        début   → \\033[1;36m (cyan gras)
        échec   → \\033[1;31m (rouge gras)
        dry-run → \\033[0;90m (gris discret)
        reset   → \\033[0m
    """

    RESET = "\033[0m"
    START_STYLE = "\033[1;36m"
    FAILURE_STYLE = "\033[1;31m"
    DRY_STYLE = "\033[0;90m"

    def _is_tty(self) -> bool:
        """Vérifie si stdout est un terminal interactif (TTY)."""
        return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()

    def _apply_style(self, text: str, style: str) -> str:
        if not self._is_tty():
            return text
        return f"{style}{text}{self.RESET}"

    def format_start(self, script: str) -> str:
        return self._apply_style(
            super().format_start(script), self.START_STYLE
        )

    def format_failure(self, script: str, exit_code: int) -> str:
        return self._apply_style(
            super().format_failure(script, exit_code), self.FAILURE_STYLE
        )

    def format_dry_run(self, argv: list[str]) -> str:
        return self._apply_style(
            super().format_dry_run(argv), self.DRY_STYLE
        )
