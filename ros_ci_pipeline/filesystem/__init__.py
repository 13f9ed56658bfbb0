"""Module de gestion des fichiers."""

from ros_ci_pipeline.filesystem.base import FileManager
from ros_ci_pipeline.filesystem.linux import LocalFileManager
from ros_ci_pipeline.filesystem.urls import resolve_vcs_repo_file_url

__all__ = [
    "FileManager",
    "LocalFileManager",
    "resolve_vcs_repo_file_url",
]
