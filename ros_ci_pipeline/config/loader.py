"""Fonctions de chargement de configuration."""

import json
import tomllib
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Union

from pydantic import ValidationError as PydanticValidationError

from ros_ci_pipeline.config.models import PipelineInputs
from ros_ci_pipeline.errors.exceptions import FileConfigurationError

PIPELINE_SECTION = "pipeline"


class ConfigLoader(ABC):
    """
    Interface abstraite pour le chargement de configuration.

    Permet l'injection de dépendance et facilite les tests
    en permettant de substituer l'implémentation réelle par un mock.
    """

    @abstractmethod
    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """
        Charge un fichier de configuration.

        Args:
            config_path: Chemin vers le fichier de configuration

        Returns:
            Dictionnaire de configuration brut

        Raises:
            FileNotFoundError: Si le fichier n'existe pas
            ValueError: Si le format n'est pas supporté ou le
                contenu illisible
        """
        pass


class FileConfigLoader(ConfigLoader):
    """
    Chargeur de configuration depuis fichiers TOML ou JSON.

    Le format est détecté par l'extension du fichier ; la
    validation du contenu revient au modèle pydantic de l'appelant.
    """

    def load(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise FileNotFoundError(
                f"Fichier de configuration non trouvé: {path}"
            )

        suffix = path.suffix.lower()

        if suffix == ".toml":
            with open(path, "rb") as f:
                raw_config = tomllib.load(f)
        elif suffix == ".json":
            with open(path, "r", encoding="utf-8") as f:
                raw_config = json.load(f)
        else:
            raise ValueError(
                f"Extension non supportée: {suffix}. "
                "Utilisez .toml ou .json"
            )

        return raw_config


def load_pipeline_inputs(
    config_path: Union[str, Path],
    loader: ConfigLoader | None = None,
    section: str = PIPELINE_SECTION,
) -> PipelineInputs:
    """Charge les entrées du pipeline depuis la section [pipeline].

    Args:
        config_path: Fichier TOML ou JSON.
        loader: Chargeur injectable (FileConfigLoader par défaut).
        section: Nom de la section à lire.

    Returns:
        Entrées validées.

    Raises:
        FileConfigurationError: Fichier absent, illisible, section
            manquante ou contenu invalide.
    """
    loader = loader or FileConfigLoader()
    try:
        raw = loader.load(config_path)
    except (OSError, ValueError) as e:
        raise FileConfigurationError(str(e)) from e

    if section not in raw:
        available = list(raw.keys())
        raise FileConfigurationError(
            f"Section '{section}' non trouvée dans {config_path}. "
            f"Sections disponibles: {available}"
        )
    try:
        return PipelineInputs.model_validate(raw[section])
    except PydanticValidationError as e:
        raise FileConfigurationError(
            f"Configuration invalide dans {config_path}: {e}"
        ) from e
