"""Interface abstraite pour la validation des entrées."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ros_ci_pipeline.errors.exceptions import ValidationError


@dataclass(frozen=True)
class CheckResult:
    """Résultat d'une validation : Valid ou Invalid(reason).

    Attributes:
        valid: True si les entrées sont acceptables.
        reason: Motif du rejet ("" si valide).
    """

    valid: bool
    reason: str = ""

    def __bool__(self) -> bool:
        return self.valid


class Validator(ABC):
    """
    Validateur d'un jeu d'entrées.

    check() ne lève jamais : l'appelant décide de rapporter le
    motif et d'arrêter. validate() lève error_type avec ce motif.
    """

    error_type: type[ValidationError] = ValidationError

    @abstractmethod
    def check(self) -> CheckResult:
        """Retourne le résultat étiqueté de la validation."""
        pass

    def validate(self) -> None:
        """
        Exécute la validation.

        Raises:
            ValidationError: Sous-classe error_type, avec le motif
        """
        result = self.check()
        if not result.valid:
            raise self.error_type(result.reason)
