"""Constructeur fluent pour assembler des lignes de commande shell.

Ce module fournit la classe ShellCommandBuilder qui construit une
ligne de commande unique (chaîne) via une API fluent. Les fragments
vides sont ignorés, si bien qu'une option absente ne laisse pas de
double espace.

Example:
    Construction d'une commande colcon :

        from ros_ci_pipeline.commands import ShellCommandBuilder

        cmd = (
            ShellCommandBuilder("colcon lcov-result")
            .with_option_if("--filter", pattern)
            .with_args(["--packages-up-to foo"])
            .with_flag("--verbose")
            .build()
        )
        # Résultat sans pattern : "colcon lcov-result
        #                          --packages-up-to foo --verbose"
"""

from typing import List, Optional

from ros_ci_pipeline.commands.formatter import filter_non_empty_join


class ShellCommandBuilder:
    """Constructeur fluent de lignes de commande shell.

    Contrairement à une liste argv, les fragments sont conservés
    tels quels : un fragment peut contenir plusieurs mots déjà
    échappés (ex: une sélection de paquets colcon).
    """

    def __init__(self, program: str) -> None:
        """Initialise le constructeur avec le programme.

        Args:
            program: Commande de base (ex: 'colcon test').

        Raises:
            ValueError: Si program est vide.
        """
        if not program or not program.strip():
            raise ValueError("Le programme est requis.")
        self._fragments: List[str] = [program]

    def with_flag(self, flag: str) -> "ShellCommandBuilder":
        """Ajoute un flag (ignoré s'il est vide).

        Args:
            flag: Flag à ajouter (ex: '--verbose').

        Returns:
            L'instance courante pour le chaînage.
        """
        self._fragments.append(flag)
        return self

    def with_flags(self, flags: List[str]) -> "ShellCommandBuilder":
        """Ajoute une liste de flags, dans l'ordre."""
        self._fragments.extend(flags)
        return self

    def with_flag_if(
        self, flag: str, condition: bool
    ) -> "ShellCommandBuilder":
        """Ajoute un flag seulement si la condition est vraie."""
        if condition:
            self._fragments.append(flag)
        return self

    def with_option_if(
        self, key: str, value: Optional[str]
    ) -> "ShellCommandBuilder":
        """Ajoute 'clé valeur' seulement si la valeur est non vide.

        Args:
            key: Clé de l'option (ex: '--filter').
            value: Valeur de l'option (None ou "" = option absente).

        Returns:
            L'instance courante pour le chaînage.
        """
        if value:
            self._fragments.append(f"{key} {value}")
        return self

    def with_args(self, args: List[str]) -> "ShellCommandBuilder":
        """Ajoute des arguments positionnels (fragments bruts)."""
        self._fragments.extend(args)
        return self

    def build(self) -> str:
        """Construit la ligne de commande.

        Returns:
            Fragments non vides joints par un espace unique.
        """
        return filter_non_empty_join(self._fragments)
