"""Lanceur de processus via subprocess.

Ce module fournit SubprocessRunner, l'implémentation concrète de
ProcessRunner utilisée par PlatformCommandExecutor. La sortie du
processus (stdout et stderr fusionnés) est relayée ligne par ligne
sur la console, où l'hôte CI la range dans le groupe de logs courant.

Example :
    Exécution qui tolère un code non nul :

        from ros_ci_pipeline.commands import ExecOptions, SubprocessRunner

        runner = SubprocessRunner(logger=logger)
        code = runner.run(
            "bash", ["-c", "colcon lcov-result --initial"],
            ExecOptions(ignore_return_code=True),
        )
"""

import os
import subprocess  # nosec B404
import sys
from typing import Dict, List, Optional, TextIO

from ros_ci_pipeline.commands.base import ExecOptions, ProcessRunner
from ros_ci_pipeline.commands.formatter import (
    CommandFormatter,
    PlainCommandFormatter,
)
from ros_ci_pipeline.errors.exceptions import (
    CommandExecutionError,
    CommandLaunchError,
)
from ros_ci_pipeline.logging.base import Logger


class SubprocessRunner(ProcessRunner):
    """Lanceur de processus bloquant, avec sortie en temps réel.

    Attributes:
        _logger: Logger optionnel.
        _dry_run: Mode simulation (aucun processus lancé).
        _stream: Flux de recopie de la sortie (sys.stdout par défaut).
        _formatter: Formateur des messages de log.
    """

    def __init__(
        self,
        logger: Optional[Logger] = None,
        dry_run: bool = False,
        stream: Optional[TextIO] = None,
        formatter: Optional[CommandFormatter] = None,
    ) -> None:
        """Initialise le lanceur.

        Args:
            logger: Logger optionnel pour les messages d'exécution.
            dry_run: Si True, simule sans exécuter (retourne 0).
            stream: Flux de recopie de la sortie du processus.
            formatter: Formateur des messages (texte brut par défaut).
        """
        self._logger = logger
        self._dry_run = dry_run
        self._stream = stream
        self._formatter = formatter or PlainCommandFormatter()

    def _build_env(
        self, env: Dict[str, str]
    ) -> Optional[Dict[str, str]]:
        """Fusionne os.environ et les variables de l'appel.

        Retourne None sans variable spécifique (subprocess
        utilisera alors os.environ).
        """
        if not env:
            return None
        merged = os.environ.copy()
        merged.update(env)
        return merged

    def _log(self, message: str) -> None:
        if self._logger:
            self._logger.log_info(message)

    def _log_error(self, message: str) -> None:
        if self._logger:
            self._logger.log_error(message)

    def _echo(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")

    def run(
        self,
        interpreter: str,
        args: List[str],
        options: ExecOptions,
    ) -> int:
        """Lance le processus et attend sa fin.

        Args:
            interpreter: Chemin ou nom de l'interpréteur.
            args: Arguments passés à l'interpréteur.
            options: Options d'exécution (env, cwd, silent,
                ignore_return_code).

        Returns:
            Code de retour du processus.

        Raises:
            CommandLaunchError: Si le processus ne peut être lancé.
            CommandExecutionError: Si le code est non nul et que
                ignore_return_code est False.
        """
        argv = [interpreter] + list(args)
        if self._dry_run:
            self._log(self._formatter.format_dry_run(argv))
            return 0

        try:
            with subprocess.Popen(  # nosec B603
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                env=self._build_env(options.env),
                cwd=options.cwd,
            ) as proc:
                for line in proc.stdout:
                    if not options.silent:
                        self._echo(line.rstrip("\n"))
                exit_code = proc.wait()
        except OSError as e:
            self._log_error(f"Erreur système : {e}")
            raise CommandLaunchError(interpreter, str(e)) from e

        if exit_code != 0:
            script = args[-1] if args else interpreter
            self._log_error(self._formatter.format_failure(script, exit_code))
            if not options.ignore_return_code:
                raise CommandExecutionError(script, exit_code)
        return exit_code
