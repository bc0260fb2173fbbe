"""Enumerations shared by the rule-chain engine."""

from enum import Enum


class CascadeMode(str, Enum):
    """How a rule chain reacts to its first failing step."""
    CONTINUE = "continue"
    STOP = "stop"


class GuardPolarity(str, Enum):
    """Whether a guard enables its steps when the condition holds or when it does not."""
    WHEN = "when"
    UNLESS = "unless"


class StepOutcome(str, Enum):
    """Result of evaluating a single step against a target."""
    SKIPPED = "skipped"
    PASSED = "passed"
    FAILED = "failed"
