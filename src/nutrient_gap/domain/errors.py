"""Errors raised by the nutrient analysis."""


class NutrientGapError(Exception):
    """Base error for nutrient gap analysis."""


class ConfigError(NutrientGapError):
    """Deployment or configuration defect, such as a non-positive target."""


class InputError(NutrientGapError, ValueError):
    """Malformed intake value supplied by an upstream collaborator."""
