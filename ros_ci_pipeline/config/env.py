"""Lecture des entrées depuis l'environnement (convention GitHub Actions).

Le runner expose chaque entrée 'nom-entree' sous la variable
INPUT_NOM-ENTREE. Pour une exécution locale, un fichier .env peut
fournir ces variables ; il est chargé avec python-dotenv sans écraser
les variables déjà définies.
"""

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import dotenv_values
from pydantic import ValidationError as PydanticValidationError

from ros_ci_pipeline.config.models import PipelineInputs
from ros_ci_pipeline.errors.exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _input_variable(alias: str) -> str:
    return "INPUT_" + alias.replace(" ", "_").upper()


def load_inputs_from_env(
    environ: Optional[Mapping[str, str]] = None,
    dotenv_path: Optional[Union[str, Path]] = None,
) -> PipelineInputs:
    """Construit les entrées depuis les variables INPUT_*.

    Args:
        environ: Environnement (os.environ par défaut).
        dotenv_path: Fichier .env optionnel ; ses valeurs ne
            remplacent jamais celles de l'environnement.

    Returns:
        Entrées validées ; les entrées absentes ou vides gardent
        leur valeur par défaut.

    Raises:
        ConfigurationError: Si une valeur est invalide.
    """
    env: Dict[str, Optional[str]] = {}
    if dotenv_path is not None and Path(dotenv_path).exists():
        env.update(dotenv_values(dotenv_path))
    env.update(os.environ if environ is None else environ)

    data: Dict[str, Any] = {}
    for name, field in PipelineInputs.model_fields.items():
        if field.alias is None:
            continue
        value = env.get(_input_variable(field.alias))
        if not value:
            continue
        if field.annotation is bool:
            data[name] = value.strip().lower() in _TRUE_VALUES
        else:
            data[name] = value

    try:
        return PipelineInputs.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Entrées invalides : {e}") from e
