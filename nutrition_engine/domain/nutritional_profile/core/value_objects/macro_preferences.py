"""MacroPreferences value object - user-selected split settings."""

from dataclasses import dataclass

# Choices offered by the calculator form. The engine accepts any value.
PROTEIN_PER_KG_CHOICES = (1.6, 2.0, 2.2)
FAT_PERCENT_CHOICES = (0.20, 0.25, 0.30)
MEALS_PER_DAY_CHOICES = (3, 4, 5)


@dataclass(frozen=True)
class MacroPreferences:
    """Macro split preferences.

    Attributes:
        protein_per_kg: Protein grams per kg of body weight
        fat_percent: Share of calories from fat (0-1)
        meals_per_day: Number of meals the daily target is divided into
    """

    protein_per_kg: float = 1.6
    fat_percent: float = 0.25
    meals_per_day: int = 4
