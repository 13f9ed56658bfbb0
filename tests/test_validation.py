"""Tests pour le module validation."""

import itertools

import pytest

from ros_ci_pipeline.distros import (
    ROS1_DISTROS,
    ROS2_DISTROS,
    DistroSet,
    RosGeneration,
)
from ros_ci_pipeline.errors.exceptions import (
    DistroValidationError,
    ValidationError,
)
from ros_ci_pipeline.validation import (
    CheckResult,
    DistroCheck,
    DistroValidator,
    Validator,
    check_distros,
    validate_distros,
)


class TestCheckDistros:
    """Tests pour check_distros et validate_distros."""

    def test_ros1_valide(self):
        assert validate_distros("noetic", "") is True

    def test_ros2_valide(self):
        assert validate_distros("", "rolling") is True

    def test_les_deux_valides(self):
        assert validate_distros("melodic", "foxy") is True

    def test_aucune_distribution(self):
        result = check_distros("", "")
        assert result.valid is False
        assert "at least one is required" in result.reason

    def test_distribution_ros2_en_entree_ros1(self):
        """jazzy n'est pas dans la liste ROS 1."""
        result = check_distros("jazzy", "")
        assert result.valid is False
        assert "target-ros1-distro" in result.reason
        assert "noetic" in result.reason

    def test_ros2_inconnue(self):
        result = check_distros("", "humble")
        assert result.valid is False
        assert "target-ros2-distro" in result.reason
        assert "rolling" in result.reason

    def test_priorite_ros1_sur_ros2(self):
        """Si les deux sont invalides, seul le motif ROS 1 remonte."""
        result = check_distros("bogus1", "bogus2")
        assert "bogus1" in result.reason
        assert "bogus2" not in result.reason

    def test_ros2_invalide_avec_ros1_valide(self):
        result = check_distros("noetic", "bogus")
        assert "bogus" in result.reason

    def test_liste_separee_par_virgules(self):
        result = check_distros("", "bogus")
        assert "dashing,eloquent,foxy,galactic,rolling" in result.reason

    @pytest.mark.parametrize(
        "ros1, ros2",
        list(itertools.product(
            ("",) + ROS1_DISTROS + ("jazzy",),
            ("",) + ROS2_DISTROS + ("noetic",),
        )),
    )
    def test_propriete_generale(self, ros1, ros2):
        """Valide ssi au moins une entrée et chaque entrée autorisée."""
        expected = (
            bool(ros1 or ros2)
            and (not ros1 or ros1 in ROS1_DISTROS)
            and (not ros2 or ros2 in ROS2_DISTROS)
        )
        assert validate_distros(ros1, ros2) is expected

    def test_resultat_booleen(self):
        assert bool(DistroCheck(True)) is True
        assert bool(DistroCheck(False, "raison")) is False


class TestDistroValidator:
    """Tests pour DistroValidator."""

    def test_validate_ne_leve_pas_si_valide(self):
        DistroValidator(DistroSet("noetic", "")).validate()

    def test_validate_leve_avec_motif(self):
        validator = DistroValidator(DistroSet("", ""))
        with pytest.raises(DistroValidationError, match="at least one"):
            validator.validate()

    def test_check_ne_leve_pas(self):
        result = DistroValidator(DistroSet("bogus", "")).check()
        assert result.valid is False


class TestDistroSet:
    """Tests pour la dataclass DistroSet."""

    def test_active_ordre_ros1_puis_ros2(self):
        active = list(DistroSet("noetic", "foxy").active())
        assert active == [
            (RosGeneration.ROS1, "noetic"),
            (RosGeneration.ROS2, "foxy"),
        ]

    def test_active_ignore_vide(self):
        assert list(DistroSet("", "foxy").active()) == [
            (RosGeneration.ROS2, "foxy")
        ]

    def test_is_empty(self):
        assert DistroSet().is_empty is True
        assert DistroSet("noetic").is_empty is False

    def test_listes_autorisees(self):
        assert len(ROS1_DISTROS) == 4
        assert len(ROS2_DISTROS) == 5
        assert RosGeneration.ROS1.allowed == ROS1_DISTROS
        assert RosGeneration.ROS2.allowed == ROS2_DISTROS


class TestValidatorBase:
    """Tests pour l'interface Validator."""

    class _Always(Validator):
        def __init__(self, result):
            self.result = result

        def check(self):
            return self.result

    def test_validate_leve_error_type_par_defaut(self):
        validator = self._Always(CheckResult(False, "refusé"))
        with pytest.raises(ValidationError, match="refusé"):
            validator.validate()

    def test_validate_valide(self):
        self._Always(CheckResult(True)).validate()

    def test_distro_check_est_un_check_result(self):
        assert DistroCheck is CheckResult
