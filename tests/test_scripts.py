"""Tests pour le module scripts."""

import stat
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from ros_ci_pipeline.errors.exceptions import InstallationError
from ros_ci_pipeline.filesystem import LocalFileManager
from ros_ci_pipeline.filesystem.base import FileManager
from ros_ci_pipeline.scripts import (
    ROSDEP_SCRIPT_NAME,
    BashScriptInstaller,
    RosdepScriptConfig,
)


class TestRosdepScriptConfig:
    """Tests pour la dataclass RosdepScriptConfig."""

    def test_nom_par_defaut(self):
        assert RosdepScriptConfig().script_name == ROSDEP_SCRIPT_NAME
        assert ROSDEP_SCRIPT_NAME == "install_rosdeps.sh"

    def test_is_frozen(self):
        """Vérifie que la dataclass est immutable."""
        config = RosdepScriptConfig()
        with pytest.raises(AttributeError):
            config.package_selection = "--packages-select foo"

    @pytest.mark.parametrize("name", ["", "../evil.sh", "a/b.sh"])
    def test_nom_invalide(self, name):
        with pytest.raises(ValueError):
            RosdepScriptConfig(script_name=name)

    def test_shebang_et_mode_strict(self):
        script = RosdepScriptConfig().to_bash_script()
        assert script.startswith("#!/bin/bash\n")
        assert "set -euxo pipefail" in script

    def test_argument_unique_requis(self):
        script = RosdepScriptConfig().to_bash_script()
        assert "if [ $# != 1 ]; then" in script
        assert "exit 1" in script
        assert "DISTRO=$1" in script

    def test_selection_de_paquets(self):
        script = RosdepScriptConfig(
            package_selection="--packages-up-to my_pkg"
        ).to_bash_script()
        assert (
            "package_paths=$(colcon list --paths-only "
            "--packages-up-to my_pkg)"
        ) in script

    def test_selection_vide_sans_double_espace(self):
        script = RosdepScriptConfig().to_bash_script()
        assert "package_paths=$(colcon list --paths-only)" in script

    def test_erreurs_rosdep_neutralisees(self):
        script = RosdepScriptConfig().to_bash_script()
        assert (
            "rosdep install -r --from-paths $package_paths --ignore-src "
            "--skip-keys rti-connext-dds-5.3.1 --rosdistro $DISTRO -y "
            "|| true"
        ) in script


class TestBashScriptInstaller:
    """Tests pour BashScriptInstaller."""

    def test_install_ecrit_script_executable(self, tmp_path):
        installer = BashScriptInstaller(LocalFileManager())
        path = installer.install(
            tmp_path / ROSDEP_SCRIPT_NAME, RosdepScriptConfig()
        )

        assert path == tmp_path / ROSDEP_SCRIPT_NAME
        assert path.read_text().startswith("#!/bin/bash")
        assert path.stat().st_mode & stat.S_IXUSR

    def test_install_mode_par_defaut(self):
        file_manager = MagicMock(spec=FileManager)
        installer = BashScriptInstaller(file_manager)
        installer.install(Path("/ws/s.sh"), RosdepScriptConfig())

        _, kwargs = file_manager.create_file.call_args
        assert kwargs["mode"] == 0o766

    def test_install_reecrit_script_existant(self, tmp_path):
        path = tmp_path / ROSDEP_SCRIPT_NAME
        path.write_text("ancien")
        BashScriptInstaller(LocalFileManager()).install(
            path, RosdepScriptConfig()
        )
        assert "rosdep install" in path.read_text()

    def test_install_echec_leve_installation_error(self):
        file_manager = MagicMock(spec=FileManager)
        file_manager.create_file.side_effect = PermissionError("refusé")
        installer = BashScriptInstaller(file_manager)

        with pytest.raises(InstallationError, match="refusé"):
            installer.install(Path("/ws/s.sh"), RosdepScriptConfig())
