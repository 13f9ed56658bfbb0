"""Module d'exécution de commandes shell.

Ce module fournit des classes pour construire et exécuter
des lignes de commande shell sur l'hôte CI.

Classes disponibles :
    ExecOptions : Options immuables d'une exécution.
    ProcessRunner : Interface abstraite du lanceur de processus.
    CommandExecutor : Interface abstraite des exécuteurs.
    ShellCommandBuilder : Constructeur fluent de lignes de commande.
    CommandFormatter : Interface abstraite de formatage.
    PlainCommandFormatter : Formatage texte brut.
    AnsiCommandFormatter : Formatage ANSI coloré (console).
    ShellStrategy, PosixShell, WrappedNativeShell : Invocation
        native selon la plateforme.
    SubprocessRunner : Lanceur concret via subprocess.
    PlatformCommandExecutor : Exécuteur concret.
"""

from ros_ci_pipeline.commands.base import (
    CommandExecutor,
    ExecOptions,
    ProcessRunner,
)
from ros_ci_pipeline.commands.builder import ShellCommandBuilder
from ros_ci_pipeline.commands.executor import PlatformCommandExecutor
from ros_ci_pipeline.commands.formatter import (
    AnsiCommandFormatter,
    CommandFormatter,
    PlainCommandFormatter,
    filter_non_empty_join,
)
from ros_ci_pipeline.commands.runner import SubprocessRunner
from ros_ci_pipeline.commands.strategy import (
    PosixShell,
    ShellStrategy,
    WrappedNativeShell,
    detect_shell_strategy,
)

__all__ = [
    # Structures de données
    "ExecOptions",
    # Interfaces abstraites
    "ProcessRunner",
    "CommandExecutor",
    # Constructeur
    "ShellCommandBuilder",
    "filter_non_empty_join",
    # Formateurs
    "CommandFormatter",
    "PlainCommandFormatter",
    "AnsiCommandFormatter",
    # Stratégies de plateforme
    "ShellStrategy",
    "PosixShell",
    "WrappedNativeShell",
    "detect_shell_strategy",
    # Implémentations
    "SubprocessRunner",
    "PlatformCommandExecutor",
]
