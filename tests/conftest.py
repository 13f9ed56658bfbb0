"""Fixtures partagées des tests."""

import pytest

from ros_ci_pipeline.commands.base import CommandExecutor, ExecOptions
from ros_ci_pipeline.errors.exceptions import CommandExecutionError


class ScriptedExecutor(CommandExecutor):
    """Exécuteur factice : codes de retour par préfixe de commande.

    Reproduit la politique du vrai lanceur : un code non nul lève
    CommandExecutionError sauf si ignore_return_code est positionné.
    """

    def __init__(self, codes=None):
        self.codes = codes or {}
        self.calls = []

    def execute(self, command_line, prefix="", options=None,
                log_message=None):
        options = options or ExecOptions()
        self.calls.append((command_line, prefix, options))
        code = 0
        for start, value in self.codes.items():
            if command_line.startswith(start):
                code = value
        if code != 0 and not options.ignore_return_code:
            raise CommandExecutionError(f"{prefix}{command_line}", code)
        return code

    @property
    def commands(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def make_executor():
    """Fabrique d'exécuteurs factices : make_executor({"cmd": code})."""
    return ScriptedExecutor
