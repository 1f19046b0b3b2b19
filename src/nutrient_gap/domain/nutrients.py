"""Tracked nutrient keys and their display metadata."""

import re
from enum import StrEnum
from types import MappingProxyType

_CAPITAL = re.compile(r"([A-Z])")


class NutrientKey(StrEnum):
    """Nutrients tracked by the analysis, in dashboard order."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBS = "carbs"
    FIBER = "fiber"
    FAT = "fat"
    VITAMIN_A = "vitaminA"
    VITAMIN_C = "vitaminC"
    VITAMIN_D = "vitaminD"
    VITAMIN_E = "vitaminE"
    VITAMIN_K = "vitaminK"
    THIAMIN = "thiamin"
    RIBOFLAVIN = "riboflavin"
    NIACIN = "niacin"
    VITAMIN_B6 = "vitaminB6"
    VITAMIN_B12 = "vitaminB12"
    CALCIUM = "calcium"
    IRON = "iron"
    MAGNESIUM = "magnesium"
    PHOSPHORUS = "phosphorus"
    POTASSIUM = "potassium"
    ZINC = "zinc"
    OMEGA3 = "omega3"
    SODIUM = "sodium"


class NutrientCategory(StrEnum):
    """Dashboard grouping for a nutrient."""

    MACRO = "macro"
    VITAMIN = "vitamin"
    MINERAL = "mineral"
    OTHER = "other"


NUTRIENT_UNITS = MappingProxyType(
    {
        NutrientKey.CALORIES: "cal",
        NutrientKey.PROTEIN: "g",
        NutrientKey.CARBS: "g",
        NutrientKey.FIBER: "g",
        NutrientKey.FAT: "g",
        NutrientKey.VITAMIN_A: "mcg",
        NutrientKey.VITAMIN_C: "mg",
        NutrientKey.VITAMIN_D: "mcg",
        NutrientKey.VITAMIN_E: "mg",
        NutrientKey.VITAMIN_K: "mcg",
        NutrientKey.THIAMIN: "mg",
        NutrientKey.RIBOFLAVIN: "mg",
        NutrientKey.NIACIN: "mg",
        NutrientKey.VITAMIN_B6: "mg",
        NutrientKey.VITAMIN_B12: "mcg",
        NutrientKey.CALCIUM: "mg",
        NutrientKey.IRON: "mg",
        NutrientKey.MAGNESIUM: "mg",
        NutrientKey.PHOSPHORUS: "mg",
        NutrientKey.POTASSIUM: "mg",
        NutrientKey.ZINC: "mg",
        NutrientKey.OMEGA3: "g",
        NutrientKey.SODIUM: "mg",
    }
)

NUTRIENT_CATEGORIES = MappingProxyType(
    {
        **{
            key: NutrientCategory.MACRO
            for key in (
                NutrientKey.CALORIES,
                NutrientKey.PROTEIN,
                NutrientKey.CARBS,
                NutrientKey.FIBER,
                NutrientKey.FAT,
            )
        },
        **{
            key: NutrientCategory.VITAMIN
            for key in (
                NutrientKey.VITAMIN_A,
                NutrientKey.VITAMIN_C,
                NutrientKey.VITAMIN_D,
                NutrientKey.VITAMIN_E,
                NutrientKey.VITAMIN_K,
                NutrientKey.THIAMIN,
                NutrientKey.RIBOFLAVIN,
                NutrientKey.NIACIN,
                NutrientKey.VITAMIN_B6,
                NutrientKey.VITAMIN_B12,
            )
        },
        **{
            key: NutrientCategory.MINERAL
            for key in (
                NutrientKey.CALCIUM,
                NutrientKey.IRON,
                NutrientKey.MAGNESIUM,
                NutrientKey.PHOSPHORUS,
                NutrientKey.POTASSIUM,
                NutrientKey.ZINC,
                NutrientKey.SODIUM,
            )
        },
        NutrientKey.OMEGA3: NutrientCategory.OTHER,
    }
)


def parse_nutrient_key(value: str) -> NutrientKey | None:
    """Return the tracked key for a raw string, or None if not tracked."""
    try:
        return NutrientKey(value)
    except ValueError:
        return None


def unit_for(nutrient: str) -> str:
    """Return the unit suffix for a nutrient, or an empty string."""
    key = parse_nutrient_key(nutrient)
    if key is None:
        return ""
    return NUTRIENT_UNITS[key]


def format_nutrient_name(nutrient: str) -> str:
    """Turn a compact key such as ``vitaminB12`` into ``Vitamin B12``."""
    spaced = _CAPITAL.sub(r" \1", nutrient)
    return spaced[:1].upper() + spaced[1:]
