"""Exécuteur de lignes de commande indépendant de la plateforme.

PlatformCommandExecutor concatène préfixe et commande en un corps
de script, délègue la forme de l'invocation à une ShellStrategy
choisie au démarrage, et encadre l'exécution dans un groupe de logs
de l'hôte CI (sauf en mode silencieux).
"""

from typing import Optional

from ros_ci_pipeline.commands.base import (
    CommandExecutor,
    ExecOptions,
    ProcessRunner,
)
from ros_ci_pipeline.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from ros_ci_pipeline.commands.strategy import ShellStrategy
from ros_ci_pipeline.host.base import CIHost
from ros_ci_pipeline.logging.base import Logger


class PlatformCommandExecutor(CommandExecutor):
    """Exécute des scripts bash via la stratégie de la plateforme.

    Attributes:
        strategy: Stratégie d'invocation (POSIX ou Windows).
        runner: Lanceur de processus.
        host: Hôte CI pour les groupes de logs.
        logger: Logger optionnel.
    """

    def __init__(
        self,
        strategy: ShellStrategy,
        runner: ProcessRunner,
        host: CIHost,
        logger: Optional[Logger] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        self.strategy = strategy
        self.runner = runner
        self.host = host
        self.logger = logger
        self._formatter = formatter or PlainCommandFormatter()

    def execute(
        self,
        command_line: str,
        prefix: str = "",
        options: Optional[ExecOptions] = None,
        log_message: Optional[str] = None,
    ) -> int:
        """Exécute une ligne de commande et retourne son code.

        Le préfixe n'est pas échappé : l'appelant est responsable
        de la syntaxe du script obtenu.

        Args:
            command_line: Commande à exécuter.
            prefix: Préfixe (ex: activation d'environnement).
            options: Options d'exécution (défaut: ExecOptions()).
            log_message: Titre du groupe de logs (défaut dérivé
                du script).

        Returns:
            Code de retour du processus.

        Raises:
            CommandLaunchError: Si l'interpréteur est introuvable.
            CommandExecutionError: Si le code est non nul et que
                ignore_return_code n'est pas positionné.
        """
        options = options or ExecOptions()
        script = f"{prefix or ''}{command_line}"
        interpreter, args = self.strategy.command_for(script)
        title = log_message or self._formatter.format_start(script)

        if self.logger:
            self.logger.log_info(title)

        if options.silent:
            return self.runner.run(interpreter, args, options)
        with self.host.group(title):
            return self.runner.run(interpreter, args, options)
