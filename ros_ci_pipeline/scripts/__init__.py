"""
Module de génération et installation de scripts bash.

Classes disponibles:
- RosdepScriptConfig: Génère le script install_rosdeps.sh.
- ScriptInstaller: Interface abstraite pour l'installation de scripts.
- BashScriptInstaller: Écrit un script exécutable dans le workspace.
"""

from ros_ci_pipeline.scripts.config import (
    ROSDEP_SCRIPT_NAME,
    RosdepScriptConfig,
)
from ros_ci_pipeline.scripts.installer import (
    BashScriptInstaller,
    ScriptInstaller,
)

__all__ = [
    "ROSDEP_SCRIPT_NAME",
    "RosdepScriptConfig",
    "ScriptInstaller",
    "BashScriptInstaller",
]
