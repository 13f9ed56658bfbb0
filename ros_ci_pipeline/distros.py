"""Distributions ROS prises en charge et ensemble des cibles actives."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Iterator


ROS1_DISTROS: tuple[str, ...] = ("kinetic", "lunar", "melodic", "noetic")
ROS2_DISTROS: tuple[str, ...] = (
    "dashing",
    "eloquent",
    "foxy",
    "galactic",
    "rolling",
)


class RosGeneration(StrEnum):
    """Génération de l'écosystème, nommée d'après l'entrée du workflow."""

    ROS1 = "target-ros1-distro"
    ROS2 = "target-ros2-distro"

    @property
    def allowed(self) -> tuple[str, ...]:
        """Liste autorisée pour cette génération."""
        if self is RosGeneration.ROS1:
            return ROS1_DISTROS
        return ROS2_DISTROS


@dataclass(frozen=True)
class DistroSet:
    """Distributions ciblées par une invocation du pipeline.

    Attributes:
        ros1: Distribution ROS 1 ("" si non ciblée).
        ros2: Distribution ROS 2 ("" si non ciblée).
    """

    ros1: str = ""
    ros2: str = ""

    def active(self) -> Iterator[tuple[RosGeneration, str]]:
        """Itère sur les distributions non vides, ROS 1 puis ROS 2."""
        if self.ros1:
            yield RosGeneration.ROS1, self.ros1
        if self.ros2:
            yield RosGeneration.ROS2, self.ros2

    @property
    def is_empty(self) -> bool:
        """True si aucune distribution n'est ciblée."""
        return not self.ros1 and not self.ros2
