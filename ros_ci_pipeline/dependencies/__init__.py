"""Module d'installation des dépendances système."""

from ros_ci_pipeline.dependencies.rosdep import RosdepInstaller

__all__ = ["RosdepInstaller"]
