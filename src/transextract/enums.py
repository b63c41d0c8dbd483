"""Enumerations for transextract type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class CountDecision(StrEnum):
    """Plural sensitivity of a Trans-node.

    StrEnum provides automatic string conversion: str(CountDecision.EXPLICIT) == "explicit"
    """

    EXPLICIT = "explicit"
    """A count attribute is present: <Trans count={n}>"""

    INFERRED = "inferred"
    """A {{count}} interpolation appears somewhere in the children"""

    ABSENT = "absent"
    """Neither; the phrase is not plural-sensitive"""

    @property
    def is_pluralizable(self) -> bool:
        """True for EXPLICIT and INFERRED."""
        return self is not CountDecision.ABSENT


class ConflictPolicy(StrEnum):
    """How aggregation resolves one key seen with different default values."""

    FIRST_WINS = "first_wins"
    """Keep the first value (in file order), warn about the rest"""

    LAST_WINS = "last_wins"
    """Keep the last value (in file order), warn about the rest"""

    ERROR = "error"
    """Raise KeyConflictError"""


class ExtractionStatus(StrEnum):
    """Outcome of extracting one source file."""

    SUCCESS = "success"
    ERROR = "error"


__all__ = [
    "ConflictPolicy",
    "CountDecision",
    "ExtractionStatus",
]
