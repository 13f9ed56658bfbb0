"""Tests pour le module filesystem."""

import os
import stat
from unittest.mock import MagicMock

import pytest

from ros_ci_pipeline.filesystem import (
    LocalFileManager,
    resolve_vcs_repo_file_url,
)
from ros_ci_pipeline.logging.base import Logger


class TestResolveVcsRepoFileUrl:
    """Tests pour resolve_vcs_repo_file_url."""

    def test_chemin_local_converti(self, tmp_path):
        repos = tmp_path / "deps.repos"
        repos.write_text("repositories: {}\n")

        url = resolve_vcs_repo_file_url(str(repos))

        assert url.startswith("file://")
        assert url.endswith("/deps.repos")
        assert str(tmp_path.resolve()).replace(os.sep, "/") in url

    def test_chemin_relatif_rendu_absolu(self, tmp_path, monkeypatch):
        (tmp_path / "local.repos").write_text("")
        monkeypatch.chdir(tmp_path)

        url = resolve_vcs_repo_file_url("local.repos")

        assert url == (tmp_path / "local.repos").resolve().as_uri()

    @pytest.mark.parametrize("value", [
        "https://raw.githubusercontent.com/org/repo/main/deps.repos",
        "file:///inexistant/deps.repos",
        "",
    ])
    def test_url_inchangee(self, value):
        assert resolve_vcs_repo_file_url(value) == value


class TestLocalFileManager:
    """Tests pour LocalFileManager."""

    def setup_method(self):
        self.mock_logger = MagicMock(spec=Logger)
        self.manager = LocalFileManager(self.mock_logger)

    def test_create_file_ecrit_contenu(self, tmp_path):
        path = tmp_path / "a.txt"
        self.manager.create_file(str(path), "contenu")
        assert path.read_text(encoding="utf-8") == "contenu"
        self.mock_logger.log_info.assert_called_once()

    def test_create_file_ecrase(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("ancien")
        self.manager.create_file(str(path), "nouveau")
        assert path.read_text() == "nouveau"

    def test_create_file_applique_mode(self, tmp_path):
        path = tmp_path / "script.sh"
        self.manager.create_file(str(path), "#!/bin/bash\n", mode=0o755)
        assert stat.S_IMODE(path.stat().st_mode) == 0o755

    def test_create_file_repertoire_absent_leve(self, tmp_path):
        path = tmp_path / "absent" / "a.txt"
        with pytest.raises(OSError):
            self.manager.create_file(str(path), "x")
        self.mock_logger.log_error.assert_called_once()
