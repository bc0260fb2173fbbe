"""Atomic checks that make up a rule chain."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fluentval.enums import GuardPolarity, StepOutcome


@dataclass(frozen=True)
class Guard:
    """Entity-level condition that enables or suppresses a step."""
    condition: Callable[[Any], bool]
    polarity: GuardPolarity = GuardPolarity.WHEN

    def allows(self, target: Any) -> bool:
        """True when the guarded step should run for ``target``."""
        met = bool(self.condition(target))
        return met if self.polarity == GuardPolarity.WHEN else not met


class ValidationStep:
    """A value predicate with its failure message and a snapshot of guards.

    The guards tuple is captured when the step is added to its chain; later
    ``when``/``unless`` calls on the chain never change it.
    """

    __slots__ = ("predicate", "message", "guards")

    def __init__(self, predicate: Callable[[Any], bool], message: str,
                 guards: tuple[Guard, ...] = ()):
        self.predicate = predicate
        self.message = message
        self.guards = guards

    @property
    def is_guarded(self) -> bool:
        return bool(self.guards)

    def with_message(self, message: str) -> "ValidationStep":
        """Replace the failure message of this step."""
        self.message = message
        return self

    def should_run(self, target: Any) -> bool:
        # all() short-circuits, so later guards are not evaluated once one fails
        return all(guard.allows(target) for guard in self.guards)

    def evaluate(self, target: Any, value: Any) -> StepOutcome:
        """Evaluate guards against the target, then the predicate against the value."""
        if self.guards and not self.should_run(target):
            return StepOutcome.SKIPPED
        return StepOutcome.PASSED if self.predicate(value) else StepOutcome.FAILED

    def __repr__(self) -> str:
        return f"ValidationStep(message={self.message!r}, guards={len(self.guards)})"
