"""Exécution des tests colcon et agrégation de la couverture.

Les quatre étapes s'enchaînent toujours dans le même ordre. Les
étapes de comptabilité lcov (1 et 3) tolèrent un échec, par exemple
en l'absence de données de couverture ; l'exécution des tests (2)
et le rapport coverage.py (4) suivent la politique de l'appelant.
"""

from typing import List, Optional

from ros_ci_pipeline.commands.base import CommandExecutor, ExecOptions
from ros_ci_pipeline.commands.builder import ShellCommandBuilder
from ros_ci_pipeline.outcome import ExecutionOutcome, failing_stage

LCOV_INITIAL_CMD = "colcon lcov-result --initial"


class CoveragePipeline:
    """Pipeline test + couverture basé sur colcon.

    Attributes:
        executor: Exécuteur des commandes.
    """

    def __init__(self, executor: CommandExecutor) -> None:
        self.executor = executor

    @staticmethod
    def test_command(
        package_selection: str, extra_options: List[str]
    ) -> str:
        """Ligne de commande de l'étape colcon test."""
        return (
            ShellCommandBuilder("colcon test")
            .with_flag("--event-handlers console_cohesion+")
            .with_flag("--return-code-on-test-failure")
            .with_flag(package_selection)
            .with_flag(" ".join(extra_options))
            .build()
        )

    @staticmethod
    def lcov_result_command(
        package_selection: str, coverage_ignore_pattern: str
    ) -> str:
        """Ligne de commande de la collecte lcov.

        --filter n'apparaît que si un motif non vide est fourni.
        """
        return (
            ShellCommandBuilder("colcon lcov-result")
            .with_option_if("--filter", coverage_ignore_pattern)
            .with_flag(package_selection)
            .with_flag("--verbose")
            .build()
        )

    @staticmethod
    def coveragepy_result_command(package_selection: str) -> str:
        """Ligne de commande du rapport coverage.py."""
        return (
            ShellCommandBuilder("colcon coveragepy-result")
            .with_flag(package_selection)
            .with_flag("--verbose")
            .with_flag("--coverage-report-args -m")
            .build()
        )

    def run(
        self,
        command_prefix: str,
        options: ExecOptions,
        package_selection: str = "",
        extra_options: Optional[List[str]] = None,
        coverage_ignore_pattern: str = "",
    ) -> ExecutionOutcome:
        """Lance les tests puis collecte la couverture.

        Args:
            command_prefix: Préfixe des commandes colcon.
            options: Options d'exécution de l'appelant.
            package_selection: Filtre colcon des paquets.
            extra_options: Options supplémentaires de colcon test.
            coverage_ignore_pattern: Motif --filter de lcov ("" = aucun).

        Returns:
            Les quatre étapes, dans l'ordre d'exécution.

        Raises:
            CommandError: Si l'étape de test ou le rapport coverage.py
                échoue (sauf si options.ignore_return_code).
        """
        best_effort = options.with_overrides(ignore_return_code=True)
        outcome = ExecutionOutcome()

        code = self.executor.execute(
            LCOV_INITIAL_CMD, command_prefix, best_effort
        )
        outcome = outcome.add("lcov-initial", code, suppressed=True)

        with failing_stage("colcon-test"):
            code = self.executor.execute(
                self.test_command(package_selection, extra_options or []),
                command_prefix,
                options,
            )
        outcome = outcome.add("colcon-test", code)

        code = self.executor.execute(
            self.lcov_result_command(
                package_selection, coverage_ignore_pattern
            ),
            command_prefix,
            best_effort,
        )
        outcome = outcome.add("lcov-result", code, suppressed=True)

        with failing_stage("coveragepy-result"):
            code = self.executor.execute(
                self.coveragepy_result_command(package_selection),
                command_prefix,
                options,
            )
        return outcome.add("coveragepy-result", code)
