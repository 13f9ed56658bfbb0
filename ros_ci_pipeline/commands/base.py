"""Interfaces abstraites et structures de données pour l'exécution
de commandes shell.

Ce module définit :
    - ExecOptions : Options immuables d'une exécution.
    - ProcessRunner : Interface abstraite du lanceur de processus.
    - CommandExecutor : Interface abstraite des exécuteurs de
      lignes de commande shell.
"""

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ExecOptions:
    """Options d'exécution transmises telles quelles à chaque commande.

    Attributes:
        env: Variables d'environnement supplémentaires (fusionnées
            avec os.environ).
        cwd: Répertoire de travail.
        silent: Si True, pas de groupe de logs ni d'écho console.
        ignore_return_code: Si True, un code non nul est retourné
            au lieu de lever CommandExecutionError.
    """

    env: Dict[str, str] = field(default_factory=dict)
    cwd: Optional[str] = None
    silent: bool = False
    ignore_return_code: bool = False

    def with_overrides(self, **changes: Any) -> "ExecOptions":
        """Retourne une copie avec certains champs remplacés.

        Args:
            **changes: Champs à remplacer (ex: ignore_return_code=True).

        Returns:
            Nouvelle instance ; l'originale n'est pas modifiée.
        """
        return dataclasses.replace(self, **changes)

    def with_env(self, **variables: str) -> "ExecOptions":
        """Retourne une copie avec des variables d'environnement ajoutées."""
        return dataclasses.replace(self, env={**self.env, **variables})


class ProcessRunner(ABC):
    """Interface abstraite du lanceur de processus."""

    @abstractmethod
    def run(
        self,
        interpreter: str,
        args: List[str],
        options: ExecOptions,
    ) -> int:
        """Lance un processus et attend sa fin.

        Args:
            interpreter: Chemin ou nom de l'interpréteur.
            args: Arguments passés à l'interpréteur.
            options: Options d'exécution.

        Returns:
            Code de retour du processus.

        Raises:
            CommandLaunchError: Si l'interpréteur ne peut être lancé.
            CommandExecutionError: Si le code est non nul et que
                options.ignore_return_code est False.
        """
        pass


class CommandExecutor(ABC):
    """Interface abstraite pour l'exécution de lignes de commande."""

    @abstractmethod
    def execute(
        self,
        command_line: str,
        prefix: str = "",
        options: Optional[ExecOptions] = None,
        log_message: Optional[str] = None,
    ) -> int:
        """Exécute une ligne de commande shell.

        Args:
            command_line: Commande (déjà échappée par l'appelant).
            prefix: Préfixe concaténé tel quel devant la commande.
            options: Options d'exécution.
            log_message: Titre du groupe de logs.

        Returns:
            Code de retour du processus.
        """
        pass
