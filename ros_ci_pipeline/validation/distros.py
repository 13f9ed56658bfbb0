"""Validation des distributions ROS ciblées.

La vérification elle-même est pure (check_distros) et retourne un
résultat étiqueté ; c'est l'appelant qui décide de rapporter l'échec
et d'arrêter le pipeline.
"""

from ros_ci_pipeline.distros import DistroSet, RosGeneration
from ros_ci_pipeline.errors.exceptions import DistroValidationError
from ros_ci_pipeline.validation.base import CheckResult, Validator

DistroCheck = CheckResult


def check_distros(ros1: str, ros2: str) -> DistroCheck:
    """Vérifie les distributions ciblées.

    Ordre des contrôles (un seul motif est remonté) : aucune
    distribution, puis ROS 1 inconnue, puis ROS 2 inconnue.

    Args:
        ros1: Distribution ROS 1 ("" si non ciblée).
        ros2: Distribution ROS 2 ("" si non ciblée).

    Returns:
        DistroCheck valide, ou invalide avec le motif.
    """
    if not ros1 and not ros2:
        return DistroCheck(
            False,
            f"Neither '{RosGeneration.ROS1}' or '{RosGeneration.ROS2}' "
            "inputs were set, at least one is required.",
        )
    for generation, name in DistroSet(ros1, ros2).active():
        if name not in generation.allowed:
            label = "ROS 1" if generation is RosGeneration.ROS1 else "ROS 2"
            return DistroCheck(
                False,
                f"Input {name} was not a valid {label} distribution for "
                f"'{generation}'. Valid values: {','.join(generation.allowed)}",
            )
    return DistroCheck(True)


def validate_distros(ros1: str, ros2: str) -> bool:
    """Raccourci booléen de check_distros."""
    return check_distros(ros1, ros2).valid


class DistroValidator(Validator):
    """Validateur d'un DistroSet.

    Attributes:
        distros: Distributions à valider.
    """

    error_type = DistroValidationError

    def __init__(self, distros: DistroSet) -> None:
        self.distros = distros

    def check(self) -> DistroCheck:
        """Retourne le résultat étiqueté, sans lever."""
        return check_distros(self.distros.ros1, self.distros.ros2)
