"""Hôte GitHub Actions via les workflow commands."""

import sys
from typing import Optional, TextIO

from ros_ci_pipeline.host.base import CIHost


class GitHubActionsHost(CIHost):
    """
    Hôte GitHub Actions.

    Écrit les workflow commands (::group::, ::endgroup::, ::error::,
    ::warning::) sur la sortie standard, où le runner les interprète.

    Attributes:
        _stream: Flux de sortie (sys.stdout par défaut).
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """
        Initialise l'hôte.

        Args:
            stream: Flux de sortie injectable (tests)
        """
        self._stream = stream

    def _write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()

    @staticmethod
    def _escape(message: str) -> str:
        """Échappe les caractères réservés des workflow commands."""
        return (
            message.replace("%", "%25")
            .replace("\r", "%0D")
            .replace("\n", "%0A")
        )

    def start_group(self, title: str) -> None:
        self._write(f"::group::{self._escape(title)}")

    def end_group(self) -> None:
        self._write("::endgroup::")

    def set_failed(self, message: str) -> None:
        self._write(f"::error::{self._escape(message)}")

    def warning(self, message: str) -> None:
        self._write(f"::warning::{self._escape(message)}")
