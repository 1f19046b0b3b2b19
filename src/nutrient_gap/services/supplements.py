"""Curated supplement knowledge base and lookup."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, TypeAdapter, ValidationError

from nutrient_gap.domain.analysis import Severity, Supplement
from nutrient_gap.domain.errors import ConfigError
from nutrient_gap.domain.nutrients import NutrientKey

_logger = logging.getLogger(__name__)


def _amazon_search(query: str) -> str:
    return f"https://www.amazon.com/s?k={query.replace(' ', '+')}"


_DEFAULT_SUPPLEMENTS: dict[NutrientKey, Supplement] = {
    NutrientKey.FIBER: Supplement(
        name="Psyllium Husk Fiber",
        description="Soluble fiber powder that mixes into water or smoothies.",
        dosage_guidance="5-10 g per day with plenty of water",
        importance_note="Supports digestion, satiety and healthy cholesterol levels.",
        purchase_link=_amazon_search("psyllium husk fiber"),
    ),
    NutrientKey.VITAMIN_A: Supplement(
        name="Vitamin A (Beta-Carotene)",
        description="Provitamin A carotenoid converted to vitamin A as needed.",
        dosage_guidance="3,000-7,500 mcg beta-carotene per day",
        importance_note="Needed for vision, immune function and skin health.",
        purchase_link=_amazon_search("beta carotene vitamin a"),
    ),
    NutrientKey.VITAMIN_C: Supplement(
        name="Vitamin C",
        description="Ascorbic acid tablets or buffered vitamin C.",
        dosage_guidance="500-1,000 mg per day",
        importance_note="Antioxidant that supports immunity and iron absorption.",
        purchase_link=_amazon_search("vitamin c 1000mg"),
    ),
    NutrientKey.VITAMIN_D: Supplement(
        name="Vitamin D3",
        description="Cholecalciferol softgels, the form the body makes from sunlight.",
        dosage_guidance="25-50 mcg (1,000-2,000 IU) per day with a meal",
        importance_note="Supports calcium absorption, bone health and immunity.",
        purchase_link=_amazon_search("vitamin d3 2000 iu"),
    ),
    NutrientKey.VITAMIN_E: Supplement(
        name="Vitamin E (Mixed Tocopherols)",
        description="Natural vitamin E with mixed tocopherols.",
        dosage_guidance="15 mg per day",
        importance_note="Fat-soluble antioxidant protecting cell membranes.",
        purchase_link=_amazon_search("vitamin e mixed tocopherols"),
    ),
    NutrientKey.VITAMIN_K: Supplement(
        name="Vitamin K2 (MK-7)",
        description="Menaquinone-7 softgels.",
        dosage_guidance="90-120 mcg per day",
        importance_note="Required for blood clotting and bone mineralization.",
        purchase_link=_amazon_search("vitamin k2 mk7"),
    ),
    NutrientKey.THIAMIN: Supplement(
        name="Vitamin B1 (Thiamin)",
        description="Thiamin hydrochloride tablets.",
        dosage_guidance="1.2 mg per day, or as part of a B-complex",
        importance_note="Helps turn carbohydrates into energy.",
        purchase_link=_amazon_search("vitamin b1 thiamine"),
    ),
    NutrientKey.RIBOFLAVIN: Supplement(
        name="Vitamin B2 (Riboflavin)",
        description="Riboflavin tablets.",
        dosage_guidance="1.3 mg per day, or as part of a B-complex",
        importance_note="Supports energy metabolism and healthy skin and eyes.",
        purchase_link=_amazon_search("vitamin b2 riboflavin"),
    ),
    NutrientKey.NIACIN: Supplement(
        name="Vitamin B3 (Niacinamide)",
        description="Flush-free niacinamide tablets.",
        dosage_guidance="16 mg per day, or as part of a B-complex",
        importance_note="Supports energy metabolism and nervous system function.",
        purchase_link=_amazon_search("niacinamide vitamin b3"),
    ),
    NutrientKey.VITAMIN_B6: Supplement(
        name="Vitamin B6 (P-5-P)",
        description="Pyridoxal-5-phosphate, the active form of vitamin B6.",
        dosage_guidance="1.3-1.7 mg per day",
        importance_note="Involved in protein metabolism and neurotransmitter synthesis.",
        purchase_link=_amazon_search("vitamin b6 p5p"),
    ),
    NutrientKey.VITAMIN_B12: Supplement(
        name="Vitamin B12 (Methylcobalamin)",
        description="Sublingual methylcobalamin lozenges.",
        dosage_guidance="250-1,000 mcg per day",
        importance_note="Essential for red blood cells and nerve health.",
        purchase_link=_amazon_search("vitamin b12 methylcobalamin"),
    ),
    NutrientKey.CALCIUM: Supplement(
        name="Calcium Citrate with D3",
        description="Well-absorbed calcium citrate, taken with or without food.",
        dosage_guidance="500-600 mg per dose, up to twice daily",
        importance_note="Builds and maintains bones and teeth.",
        purchase_link=_amazon_search("calcium citrate vitamin d3"),
    ),
    NutrientKey.IRON: Supplement(
        name="Gentle Iron (Iron Bisglycinate)",
        description="Chelated iron that is easy on the stomach.",
        dosage_guidance="18-25 mg per day, ideally with vitamin C",
        importance_note="Carries oxygen in the blood and prevents fatigue from anemia.",
        purchase_link=_amazon_search("iron bisglycinate"),
    ),
    NutrientKey.MAGNESIUM: Supplement(
        name="Magnesium Glycinate",
        description="Highly absorbable magnesium bound to glycine.",
        dosage_guidance="200-400 mg per day, often in the evening",
        importance_note="Supports muscle and nerve function, sleep and energy.",
        purchase_link=_amazon_search("magnesium glycinate"),
    ),
    NutrientKey.POTASSIUM: Supplement(
        name="Potassium Citrate",
        description="Low-dose potassium citrate capsules.",
        dosage_guidance="99 mg per capsule; prioritize potassium-rich foods",
        importance_note="Regulates fluid balance, blood pressure and heart rhythm.",
        purchase_link=_amazon_search("potassium citrate 99mg"),
    ),
    NutrientKey.ZINC: Supplement(
        name="Zinc Picolinate",
        description="Zinc bound to picolinic acid for absorption.",
        dosage_guidance="15-30 mg per day with food",
        importance_note="Supports immune function, wound healing and taste.",
        purchase_link=_amazon_search("zinc picolinate"),
    ),
    NutrientKey.OMEGA3: Supplement(
        name="Omega-3 Fish Oil",
        description="Purified EPA and DHA from fish oil softgels.",
        dosage_guidance="1-2 g combined EPA and DHA per day",
        importance_note="Supports heart, brain and joint health.",
        purchase_link=_amazon_search("omega 3 fish oil"),
    ),
}

DEFAULT_CATALOG: Mapping[NutrientKey, Supplement] = MappingProxyType(
    _DEFAULT_SUPPLEMENTS
)


class SupplementEntry(BaseModel):
    """Supplement entry as stored in a catalog file."""

    name: str
    description: str
    dosage: str
    url: str
    importance: str

    def to_domain(self) -> Supplement:
        """Convert the file entry into a domain supplement."""
        return Supplement(
            name=self.name,
            description=self.description,
            dosage_guidance=self.dosage,
            importance_note=self.importance,
            purchase_link=self.url,
        )


_CATALOG_ADAPTER = TypeAdapter(dict[NutrientKey, SupplementEntry])


def load_supplement_catalog(path: Path) -> Mapping[NutrientKey, Supplement]:
    """Load a catalog from a JSON file keyed by nutrient."""
    try:
        entries = _CATALOG_ADAPTER.validate_json(path.read_bytes())
    except (OSError, ValidationError) as exc:
        raise ConfigError(f"Invalid supplement catalog {path}: {exc}") from exc
    _logger.info("Loaded supplement catalog: path=%s entries=%s", path, len(entries))
    return MappingProxyType({key: entry.to_domain() for key, entry in entries.items()})


@dataclass(frozen=True)
class SupplementMatcher:
    """Read-only lookup of a supplement for a deficient nutrient."""

    catalog: Mapping[NutrientKey, Supplement] = field(
        default_factory=lambda: DEFAULT_CATALOG
    )

    def match(self, nutrient: NutrientKey, severity: Severity) -> Supplement | None:
        """Return the curated supplement for a nutrient, if one exists."""
        supplement = self.catalog.get(nutrient)
        if supplement is None:
            _logger.debug("No supplement for %s (%s)", nutrient, severity)
        return supplement
