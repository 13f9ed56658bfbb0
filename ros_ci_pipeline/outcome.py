"""Résultat agrégé d'une suite d'étapes.

Chaque étape conserve son nom et son code de retour. La somme
arithmétique des codes (total_exit_code) n'est fournie que pour
compatibilité : elle ne permet pas d'identifier l'étape fautive,
et deux codes peuvent s'additionner en une valeur trompeuse
(1 + 255 = 256).
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator

from ros_ci_pipeline.errors.exceptions import CommandExecutionError


@contextmanager
def failing_stage(name: str) -> Iterator[None]:
    """Rattache une CommandExecutionError à l'étape qui l'a levée.

    Seule l'étape la plus interne est retenue.

    Args:
        name: Nom de l'étape exécutée dans le bloc.
    """
    try:
        yield
    except CommandExecutionError as e:
        if e.stage is None:
            e.stage = name
        raise


@dataclass(frozen=True)
class StageResult:
    """Code de retour d'une étape.

    Attributes:
        name: Nom lisible de l'étape.
        exit_code: Code de retour du processus.
        suppressed: True si un échec de cette étape est toléré
            par conception (ex: comptabilité de couverture).
    """

    name: str
    exit_code: int
    suppressed: bool = False

    @property
    def failed(self) -> bool:
        """True si l'étape a échoué et que l'échec compte."""
        return self.exit_code != 0 and not self.suppressed


@dataclass(frozen=True)
class ExecutionOutcome:
    """Suite ordonnée de résultats d'étapes."""

    stages: tuple[StageResult, ...] = field(default_factory=tuple)

    def add(self, name: str, exit_code: int,
            suppressed: bool = False) -> "ExecutionOutcome":
        """Retourne un nouveau résultat avec une étape ajoutée."""
        return ExecutionOutcome(
            self.stages + (StageResult(name, exit_code, suppressed),)
        )

    def extend(self, other: "ExecutionOutcome") -> "ExecutionOutcome":
        """Retourne la concaténation de deux résultats."""
        return ExecutionOutcome(self.stages + other.stages)

    @property
    def success(self) -> bool:
        """True si aucune étape non tolérée n'a échoué."""
        return not any(stage.failed for stage in self.stages)

    @property
    def failed_stages(self) -> tuple[StageResult, ...]:
        return tuple(stage for stage in self.stages if stage.failed)

    @property
    def total_exit_code(self) -> int:
        """Somme des codes de retour (ambiguë, voir module)."""
        return sum(stage.exit_code for stage in self.stages)

    @classmethod
    def of(cls, stages: Iterable[StageResult]) -> "ExecutionOutcome":
        return cls(tuple(stages))
