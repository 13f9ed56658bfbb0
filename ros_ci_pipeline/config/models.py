"""Modèles pydantic des entrées du pipeline.

Les alias reprennent les noms des entrées du workflow
(ex: 'target-ros1-distro') ; les noms Python restent utilisables.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ros_ci_pipeline.distros import DistroSet
from ros_ci_pipeline.logging.file_logger import DEFAULT_FORMAT


class LoggingSettings(BaseModel):
    """Section logging de la configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    format: str = DEFAULT_FORMAT
    file: Optional[str] = None


class PipelineInputs(BaseModel):
    """Entrées d'une invocation du pipeline.

    Attributes:
        target_ros1_distro: Distribution ROS 1 ("" = aucune).
        target_ros2_distro: Distribution ROS 2 ("" = aucune).
        package_selection: Filtre colcon (ex: '--packages-up-to foo').
        extra_test_options: Options supplémentaires de colcon test.
        extra_build_options: Options supplémentaires de colcon build.
        coverage_ignore_pattern: Motif --filter pour lcov.
        command_prefix: Préfixe des commandes colcon ; dérivé des
            distributions si vide.
        workspace_dir: Racine du workspace.
        vcs_repo_file_url: Fichier .repos à importer (chemin ou URL).
        colcon_defaults: Contenu JSON du fichier de défauts colcon.
        skip_tests: Ne lance pas le pipeline de tests.
        ignore_return_code: Politique des étapes non tolérantes.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, extra="forbid"
    )

    target_ros1_distro: str = Field("", alias="target-ros1-distro")
    target_ros2_distro: str = Field("", alias="target-ros2-distro")
    package_selection: str = Field("", alias="package-selection")
    extra_test_options: tuple[str, ...] = Field(
        (), alias="extra-test-options"
    )
    extra_build_options: tuple[str, ...] = Field(
        (), alias="extra-build-options"
    )
    coverage_ignore_pattern: str = Field("", alias="coverage-ignore-pattern")
    command_prefix: str = Field("", alias="command-prefix")
    workspace_dir: str = Field(".", alias="workspace-dir")
    vcs_repo_file_url: str = Field("", alias="vcs-repo-file-url")
    colcon_defaults: str = Field("", alias="colcon-defaults")
    skip_tests: bool = Field(False, alias="skip-tests")
    ignore_return_code: bool = Field(False, alias="ignore-return-code")
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator(
        "target_ros1_distro",
        "target_ros2_distro",
        "package_selection",
        "coverage_ignore_pattern",
        mode="before",
    )
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("extra_test_options", "extra_build_options",
                     mode="before")
    @classmethod
    def _as_fragments(cls, value: Any) -> Any:
        """Accepte une chaîne ou une liste de fragments.

        Une chaîne reste un fragment unique, transmis tel quel au
        script : les guillemets de l'appelant sont conservés.
        """
        if value is None:
            return ()
        if isinstance(value, str):
            value = value.strip()
            return (value,) if value else ()
        return value

    @property
    def distros(self) -> DistroSet:
        """Distributions ciblées."""
        return DistroSet(self.target_ros1_distro, self.target_ros2_distro)
