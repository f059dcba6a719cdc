"""MacroBreakdown value object - macronutrient distribution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroBreakdown:
    """Macronutrient distribution in grams and calories.

    All figures are integers already clamped and rounded by MacroService.
    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        calories: Calorie target the split was computed for
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams
        fat_g: Fat in grams
        protein_calories: Calories from protein
        carbs_calories: Calories from carbohydrates (carbs_g × 4)
        fat_calories: Calories from fat
    """

    calories: int
    protein_g: int
    carbs_g: int
    fat_g: int
    protein_calories: int
    carbs_calories: int
    fat_calories: int

    def top_calorie_source(self) -> str:
        """Get the macronutrient contributing the most calories.

        Ties resolve in protein, carbs, fat order.

        Example:
            >>> MacroBreakdown(2259, 160, 264, 63, 640, 1056, 565).top_calorie_source()
            'carbs'
        """
        sources = [
            ("protein", self.protein_calories),
            ("carbs", self.carbs_calories),
            ("fat", self.fat_calories),
        ]
        return max(sources, key=lambda item: item[1])[0]

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
