"""Lenient normalization of consumed nutrient totals."""

import logging
import math
from collections.abc import Mapping

from nutrient_gap.domain.errors import InputError
from nutrient_gap.domain.nutrients import NutrientKey, parse_nutrient_key

_logger = logging.getLogger(__name__)


def normalize_intake(raw: Mapping[str, object] | None) -> dict[NutrientKey, float]:
    """Coerce upstream intake totals into a clean daily intake.

    Malformed entries are logged and counted as zero so that partial upstream
    data never aborts an analysis. Untracked nutrients are dropped.
    """
    intake: dict[NutrientKey, float] = {}
    for raw_key, raw_value in (raw or {}).items():
        key = parse_nutrient_key(str(raw_key))
        if key is None:
            _logger.warning("Ignoring untracked nutrient in intake: %s", raw_key)
            continue
        try:
            intake[key] = coerce_amount(raw_value)
        except InputError as exc:
            _logger.warning("Treating %s intake as zero: %s", key, exc)
            intake[key] = 0.0
    return intake


def coerce_amount(value: object) -> float:
    """Return a non-negative amount or raise InputError."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise InputError(f"Boolean is not an amount: {value!r}")
    if isinstance(value, int | float):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value.strip())
        except ValueError as exc:
            raise InputError(f"Not a number: {value!r}") from exc
    else:
        raise InputError(f"Unsupported amount type: {type(value).__name__}")
    if not math.isfinite(amount):
        raise InputError(f"Amount is not finite: {value!r}")
    if amount < 0:
        raise InputError(f"Amount is negative: {value!r}")
    return amount
