"""Séquence complète du pipeline CI.

Le driver enchaîne validation, mise à jour rosdep, import VCS
optionnel, installation des dépendances, build colcon puis tests et
couverture. Toute exception levée par une étape est capturée une
seule fois ici et convertie en message d'échec ; le rapport à l'hôte
CI et le code de sortie du processus restent l'affaire de l'appelant.
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from ros_ci_pipeline.commands.base import CommandExecutor, ExecOptions
from ros_ci_pipeline.commands.builder import ShellCommandBuilder
from ros_ci_pipeline.commands.strategy import ShellStrategy
from ros_ci_pipeline.config.models import PipelineInputs
from ros_ci_pipeline.dependencies.rosdep import RosdepInstaller
from ros_ci_pipeline.errors.base import ErrorHandler
from ros_ci_pipeline.errors.collector import FailureCollector
from ros_ci_pipeline.errors.exceptions import CommandExecutionError
from ros_ci_pipeline.filesystem.base import FileManager
from ros_ci_pipeline.filesystem.urls import resolve_vcs_repo_file_url
from ros_ci_pipeline.logging.base import Logger
from ros_ci_pipeline.outcome import ExecutionOutcome, failing_stage
from ros_ci_pipeline.pipeline.coverage import CoveragePipeline
from ros_ci_pipeline.validation.distros import DistroValidator

COLCON_DEFAULTS_FILE = "colcon_defaults.yaml"


def is_valid_json(value: str) -> bool:
    """Vérifie qu'une chaîne est un document JSON valide."""
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class PipelineReport:
    """Bilan d'une invocation du pipeline.

    Attributes:
        outcome: Étapes exécutées, dans l'ordre.
        failures: Messages d'échec (vide si succès).
    """

    outcome: ExecutionOutcome = field(default_factory=ExecutionOutcome)
    failures: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return not self.failures

    @property
    def exit_code(self) -> int:
        """Code de sortie du processus : 0 si succès, 1 sinon."""
        return 0 if self.success else 1


class PipelineDriver:
    """Orchestrateur de bout en bout.

    Attributes:
        inputs: Entrées de l'invocation.
        executor: Exécuteur des commandes.
        strategy: Stratégie de plateforme (préfixe d'activation).
        installer: Installateur des dépendances rosdep.
        tests: Pipeline test + couverture.
        file_manager: Écriture du fichier de défauts colcon.
        error_handler: Handler appelé sur l'exception capturée.
        logger: Logger optionnel.
    """

    def __init__(
        self,
        inputs: PipelineInputs,
        executor: CommandExecutor,
        strategy: ShellStrategy,
        installer: RosdepInstaller,
        tests: CoveragePipeline,
        file_manager: FileManager,
        error_handler: Optional[ErrorHandler] = None,
        logger: Optional[Logger] = None,
    ) -> None:
        self.inputs = inputs
        self.executor = executor
        self.strategy = strategy
        self.installer = installer
        self.tests = tests
        self.file_manager = file_manager
        self.error_handler = error_handler
        self.logger = logger
        self._outcome = ExecutionOutcome()

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log_info(message)

    def command_prefix(self) -> str:
        """Préfixe des commandes colcon (entrée explicite prioritaire)."""
        if self.inputs.command_prefix:
            return self.inputs.command_prefix
        return self.strategy.activation_prefix(self.inputs.distros)

    def base_options(self) -> ExecOptions:
        """Options transmises à chaque étape."""
        return ExecOptions(
            cwd=self.inputs.workspace_dir,
            ignore_return_code=self.inputs.ignore_return_code,
        )

    def _write_colcon_defaults(self, options: ExecOptions) -> ExecOptions:
        path = Path(self.inputs.workspace_dir) / COLCON_DEFAULTS_FILE
        self.file_manager.create_file(str(path), self.inputs.colcon_defaults)
        self._log(f"Défauts colcon écrits dans {path}")
        return options.with_env(COLCON_DEFAULTS_FILE=str(path.resolve()))

    def run(self) -> PipelineReport:
        """Exécute le pipeline et retourne son bilan.

        Une étape interrompue par un code non nul figure dans le
        bilan avec ce code.

        Returns:
            PipelineReport ; aucune exception n'en sort.
        """
        failures = FailureCollector()

        check = DistroValidator(self.inputs.distros).check()
        if not check.valid:
            failures.add(check.reason)
            return PipelineReport(failures=failures.messages)

        colcon_defaults = self.inputs.colcon_defaults
        if colcon_defaults and not is_valid_json(colcon_defaults):
            failures.add(
                f"Input colcon-defaults is not valid JSON: {colcon_defaults}"
            )
            return PipelineReport(failures=failures.messages)

        self._outcome = ExecutionOutcome()
        try:
            self._run_stages()
        except Exception as e:
            if isinstance(e, CommandExecutionError):
                self._record(
                    ExecutionOutcome().add(e.stage or e.command, e.exit_code)
                )
            failures.add(str(e))
            self._notify(e, failures)
        return PipelineReport(self._outcome, failures.messages)

    def _notify(self, error: Exception, failures: FailureCollector) -> None:
        if not self.error_handler:
            return
        try:
            self.error_handler.handle(error)
        except Exception as e:
            failures.add(f"Échec du handler d'erreurs : {e}")

    def _record(self, outcome: ExecutionOutcome) -> None:
        # Conserve les étapes terminées même si une suivante échoue
        self._outcome = self._outcome.extend(outcome)

    def _execute_stage(
        self, name: str, command_line: str, prefix: str,
        options: ExecOptions,
    ) -> None:
        with failing_stage(name):
            code = self.executor.execute(command_line, prefix, options)
        self._record(ExecutionOutcome().add(name, code))

    def _run_stages(self) -> None:
        inputs = self.inputs
        options = self.base_options()
        if inputs.colcon_defaults:
            options = self._write_colcon_defaults(options)
        prefix = self.command_prefix()

        self._execute_stage("rosdep-update", "rosdep update", "", options)

        if inputs.vcs_repo_file_url:
            url = resolve_vcs_repo_file_url(inputs.vcs_repo_file_url)
            self._execute_stage(
                "vcs-import",
                f"vcs import --force --recursive src/ --input {url}",
                "",
                options,
            )

        self._record(
            self.installer.install(
                inputs.package_selection,
                inputs.workspace_dir,
                options,
                inputs.distros,
            )
        )

        build_cmd = (
            ShellCommandBuilder("colcon build")
            .with_flag("--symlink-install")
            .with_flag(inputs.package_selection)
            .with_flags(list(inputs.extra_build_options))
            .build()
        )
        self._execute_stage("colcon-build", build_cmd, prefix, options)

        if inputs.skip_tests:
            self._log("Tests ignorés (skip-tests).")
            return

        self._record(
            self.tests.run(
                prefix,
                options,
                inputs.package_selection,
                list(inputs.extra_test_options),
                inputs.coverage_ignore_pattern,
            )
        )
