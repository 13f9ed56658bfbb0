"""Configuration du script d'installation des dépendances rosdep.

Ce module fournit une dataclass qui génère le script bash
install_rosdeps.sh. Le script prend le nom de la distribution en
unique argument, ce qui permet de l'écrire une seule fois puis de
l'appeler pour chaque distribution ciblée.

Example:
    Génération du script pour une sélection de paquets :

        config = RosdepScriptConfig(
            package_selection="--packages-up-to my_pkg"
        )
        script = config.to_bash_script()
"""

from dataclasses import dataclass

ROSDEP_SCRIPT_NAME = "install_rosdeps.sh"

# Clé non résolvable sur certaines distributions ROS 2
DEFAULT_SKIP_KEYS: tuple[str, ...] = ("rti-connext-dds-5.3.1",)


@dataclass(frozen=True)
class RosdepScriptConfig:
    """Configuration du script install_rosdeps.sh.

    Attributes:
        package_selection: Filtre colcon des paquets du workspace
            (ex: '--packages-up-to my_pkg', "" = tous).
        skip_keys: Clés rosdep à ignorer.
        script_name: Nom du fichier généré.

    Example:
        >>> config = RosdepScriptConfig(package_selection="")
        >>> config.to_bash_script().startswith("#!/bin/bash")
        True
    """

    package_selection: str = ""
    skip_keys: tuple[str, ...] = DEFAULT_SKIP_KEYS
    script_name: str = ROSDEP_SCRIPT_NAME

    def __post_init__(self) -> None:
        """Valide les champs requis après initialisation.

        Raises:
            ValueError: Si script_name est vide ou contient un '/'.
        """
        if not self.script_name or "/" in self.script_name:
            raise ValueError(
                f"Nom de script invalide : {self.script_name!r}"
            )

    def to_bash_script(self) -> str:
        """Génère le script bash complet.

        Les erreurs de rosdep install sont neutralisées (|| true) :
        certaines dépendances non-catkin du cœur ROS 2 ne peuvent pas
        être résolues, et cela ne doit pas faire échouer le pipeline.

        Returns:
            Contenu complet du script bash.
        """
        list_cmd = " ".join(
            part for part in (
                "colcon list --paths-only", self.package_selection
            ) if part
        )
        skip = " ".join(f"--skip-keys {key}" for key in self.skip_keys)
        install_cmd = " ".join(
            part for part in (
                "rosdep install -r --from-paths $package_paths --ignore-src",
                skip,
                "--rosdistro $DISTRO -y || true",
            ) if part
        )
        return f"""#!/bin/bash
set -euxo pipefail
if [ $# != 1 ]; then
    echo "Specify rosdistro name as single argument to this script"
    exit 1
fi
DISTRO=$1
package_paths=$({list_cmd})
# Erreurs de clés non résolues neutralisées volontairement
{install_cmd}
"""
