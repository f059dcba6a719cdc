"""PersonMetrics value object - body metrics entered in the calculator."""

from dataclasses import dataclass

from .activity_level import ActivityLevel
from .biological_sex import BiologicalSex


@dataclass(frozen=True)
class PersonMetrics:
    """User biometric and activity data for energy calculations.

    Built fresh from form values on every calculation. Enumerated fields
    accept their string values; numeric bounds (age/height/weight ranges)
    are validated upstream by the caller, not here.

    Attributes:
        age: Age in years
        sex: Biological sex
        height_cm: Height in centimeters
        weight_kg: Body weight in kilograms
        activity_level: Physical activity level
    """

    age: int
    sex: BiologicalSex
    height_cm: float
    weight_kg: float
    activity_level: ActivityLevel

    def __post_init__(self) -> None:
        """Coerce enumerated fields.

        Raises:
            InvalidInputError: If sex or activity level is unknown
        """
        object.__setattr__(self, "sex", BiologicalSex.parse(self.sex))
        object.__setattr__(
            self, "activity_level", ActivityLevel.parse(self.activity_level)
        )

