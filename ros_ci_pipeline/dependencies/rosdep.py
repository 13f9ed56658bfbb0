"""Installation des dépendances système via rosdep."""

from pathlib import Path
from typing import Optional, Union

from ros_ci_pipeline.commands.base import CommandExecutor, ExecOptions
from ros_ci_pipeline.distros import DistroSet
from ros_ci_pipeline.logging.base import Logger
from ros_ci_pipeline.outcome import ExecutionOutcome, failing_stage
from ros_ci_pipeline.scripts.config import RosdepScriptConfig
from ros_ci_pipeline.scripts.installer import ScriptInstaller


class RosdepInstaller:
    """Installe les dépendances rosdep pour chaque distribution ciblée.

    Le script install_rosdeps.sh est écrit une seule fois dans le
    workspace, puis appelé avec chaque distribution active, ROS 1
    d'abord. Un code non nul signale un échec du script lui-même :
    les erreurs de résolution rosdep sont neutralisées dans le script.

    Attributes:
        executor: Exécuteur des commandes.
        script_installer: Écrit le script dans le workspace.
        logger: Logger optionnel.
    """

    def __init__(
        self,
        executor: CommandExecutor,
        script_installer: ScriptInstaller,
        logger: Optional[Logger] = None,
    ) -> None:
        self.executor = executor
        self.script_installer = script_installer
        self.logger = logger

    def install(
        self,
        package_selection: str,
        workspace_dir: Union[str, Path],
        options: ExecOptions,
        distros: DistroSet,
    ) -> ExecutionOutcome:
        """Installe les dépendances des paquets sélectionnés.

        Args:
            package_selection: Filtre colcon des paquets.
            workspace_dir: Racine du workspace (reçoit le script).
            options: Options d'exécution ; cwd prend par défaut
                la valeur du workspace.
            distros: Distributions ciblées.

        Returns:
            Une étape par distribution invoquée (aucune si
            distros est vide).

        Raises:
            InstallationError: Si le script ne peut être écrit.
            CommandError: Si une invocation du script échoue et que
                ignore_return_code n'est pas positionné.
        """
        config = RosdepScriptConfig(package_selection=package_selection)
        self.script_installer.install(
            Path(workspace_dir) / config.script_name, config
        )
        if options.cwd is None:
            options = options.with_overrides(cwd=str(workspace_dir))

        outcome = ExecutionOutcome()
        for _, distro in distros.active():
            with failing_stage(f"rosdep ({distro})"):
                exit_code = self.executor.execute(
                    f"./{config.script_name} {distro}", "", options
                )
            if exit_code != 0 and self.logger:
                self.logger.log_warning(
                    f"rosdep ({distro}) terminé avec le code {exit_code}"
                )
            outcome = outcome.add(f"rosdep ({distro})", exit_code)
        return outcome
