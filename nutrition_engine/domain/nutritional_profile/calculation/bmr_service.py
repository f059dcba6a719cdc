"""BMRService - Basal Metabolic Rate calculation."""

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.biological_sex import BiologicalSex
from ..core.value_objects.bmr import BMR
from ..core.value_objects.person_metrics import PersonMetrics


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    No lower bound is applied to the result.

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(self, metrics: PersonMetrics) -> BMR:
        """Calculate BMR from body metrics.

        Args:
            metrics: User biometric data (weight, height, age, sex)

        Returns:
            BMR: Calculated basal metabolic rate in kcal/day

        Example:
            >>> service = BMRService()
            >>> metrics = PersonMetrics(
            ...     age=30,
            ...     sex="male",
            ...     height_cm=180.0,
            ...     weight_kg=80.0,
            ...     activity_level="moderate",
            ... )
            >>> service.calculate(metrics).value
            1780.0
        """
        base = 10 * metrics.weight_kg + 6.25 * metrics.height_cm - 5 * metrics.age

        if metrics.sex == BiologicalSex.MALE:
            bmr_value = base + 5
        else:
            bmr_value = base - 161

        return BMR(value=bmr_value)
