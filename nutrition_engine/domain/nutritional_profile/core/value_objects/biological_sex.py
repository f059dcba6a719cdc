"""BiologicalSex value object."""

from enum import Enum
from typing import Union

from ....shared.errors import InvalidInputError


class BiologicalSex(str, Enum):
    """Biological sex selecting the Mifflin-St Jeor constant."""

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Union["BiologicalSex", str]) -> "BiologicalSex":
        """Coerce a raw form value into a BiologicalSex.

        Raises:
            InvalidInputError: If value is neither male nor female
        """
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidInputError(f"Unknown biological sex: {value!r}") from e
