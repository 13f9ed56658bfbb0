"""Tests pour le module dependencies."""

from unittest.mock import MagicMock

import pytest

from ros_ci_pipeline.commands.base import CommandExecutor, ExecOptions
from ros_ci_pipeline.dependencies import RosdepInstaller
from ros_ci_pipeline.distros import DistroSet
from ros_ci_pipeline.errors.exceptions import CommandExecutionError
from ros_ci_pipeline.logging.base import Logger
from ros_ci_pipeline.scripts import BashScriptInstaller
from ros_ci_pipeline.scripts.installer import ScriptInstaller
from ros_ci_pipeline.filesystem import LocalFileManager


class TestRosdepInstaller:
    """Tests pour RosdepInstaller.install()."""

    def setup_method(self):
        self.executor = MagicMock(spec=CommandExecutor)
        self.executor.execute.return_value = 0
        self.script_installer = MagicMock(spec=ScriptInstaller)
        self.mock_logger = MagicMock(spec=Logger)
        self.installer = RosdepInstaller(
            self.executor, self.script_installer, self.mock_logger
        )

    def _commands(self):
        return [c[0][0] for c in self.executor.execute.call_args_list]

    def test_ros1_puis_ros2(self, tmp_path):
        self.installer.install("", tmp_path, ExecOptions(),
                               DistroSet("noetic", "foxy"))
        assert self._commands() == [
            "./install_rosdeps.sh noetic",
            "./install_rosdeps.sh foxy",
        ]

    def test_script_ecrit_une_seule_fois(self, tmp_path):
        self.installer.install("--packages-up-to foo", tmp_path,
                               ExecOptions(), DistroSet("noetic", "foxy"))

        self.script_installer.install.assert_called_once()
        path, config = self.script_installer.install.call_args[0]
        assert path == tmp_path / "install_rosdeps.sh"
        assert config.package_selection == "--packages-up-to foo"

    def test_total_somme_des_codes(self, tmp_path):
        self.executor.execute.side_effect = [1, 2]
        outcome = self.installer.install(
            "", tmp_path, ExecOptions(ignore_return_code=True),
            DistroSet("noetic", "foxy"),
        )
        assert outcome.total_exit_code == 3
        assert [s.exit_code for s in outcome.stages] == [1, 2]
        assert [s.name for s in outcome.stages] == [
            "rosdep (noetic)", "rosdep (foxy)"
        ]
        assert self.mock_logger.log_warning.call_count == 2

    def test_sans_ros1_seul_ros2(self, tmp_path):
        self.executor.execute.return_value = 5
        outcome = self.installer.install(
            "", tmp_path, ExecOptions(ignore_return_code=True),
            DistroSet("", "foxy"),
        )
        assert self._commands() == ["./install_rosdeps.sh foxy"]
        assert outcome.total_exit_code == 5

    def test_aucune_distribution_aucune_invocation(self, tmp_path):
        outcome = self.installer.install("", tmp_path, ExecOptions(),
                                         DistroSet())
        self.executor.execute.assert_not_called()
        assert outcome.total_exit_code == 0
        assert outcome.stages == ()

    def test_cwd_par_defaut_workspace(self, tmp_path):
        self.installer.install("", tmp_path, ExecOptions(),
                               DistroSet("noetic"))
        options = self.executor.execute.call_args[0][2]
        assert options.cwd == str(tmp_path)

    def test_cwd_explicite_conserve(self, tmp_path):
        self.installer.install("", tmp_path, ExecOptions(cwd="/autre"),
                               DistroSet("noetic"))
        options = self.executor.execute.call_args[0][2]
        assert options.cwd == "/autre"

    def test_prefixe_vide(self, tmp_path):
        self.installer.install("", tmp_path, ExecOptions(),
                               DistroSet("noetic"))
        assert self.executor.execute.call_args[0][1] == ""

    def test_echec_propage(self, tmp_path):
        self.executor.execute.side_effect = CommandExecutionError("bash", 1)
        with pytest.raises(CommandExecutionError) as excinfo:
            self.installer.install("", tmp_path, ExecOptions(),
                                   DistroSet("noetic", "foxy"))
        assert self.executor.execute.call_count == 1
        assert excinfo.value.stage == "rosdep (noetic)"

    def test_script_reel_dans_workspace(self, tmp_path):
        installer = RosdepInstaller(
            self.executor, BashScriptInstaller(LocalFileManager())
        )
        installer.install("", tmp_path, ExecOptions(), DistroSet("noetic"))
        assert (tmp_path / "install_rosdeps.sh").exists()
