"""Domain exceptions for nutrition plans."""

from typing import Iterable

from ....shared.errors import DomainError


class InvalidPlanError(DomainError):
    """Raised when a plan draft cannot be edited or saved.

    Examples:
    - Meal or line index out of range
    - Missing plan name or Arabic description
    - Meal without name, time or any line item

    Attributes:
        problems: Every violation found, in plan order
    """

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))
