"""Category taxonomy - read-only lookup of valid categories and spending buckets"""

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, FrozenSet, List, Optional, Tuple

from insights_gateway.domain.exceptions import TaxonomyConfigError

FIXED = "fixed"
VARIABLE = "variable"
DISCRETIONARY = "discretionary"

DEFAULT_FIXED_CATEGORIES = frozenset({"RENT_AND_UTILITIES", "LOAN_PAYMENTS", "INSURANCE"})
DEFAULT_DISCRETIONARY_CATEGORIES = frozenset({"ENTERTAINMENT", "SHOPPING", "TRAVEL", "DINING"})


@dataclass(frozen=True)
class CategoryTaxonomy:
    """
    Immutable category lookup shared by the aggregator and pattern classifier.

    pairs=None accepts any non-empty (primary, detailed) pair.
    """

    pairs: Optional[FrozenSet[Tuple[str, str]]] = None
    fixed: FrozenSet[str] = DEFAULT_FIXED_CATEGORIES
    discretionary: FrozenSet[str] = DEFAULT_DISCRETIONARY_CATEGORIES

    def is_valid(self, primary: Optional[str], detailed: Optional[str]) -> bool:
        if not primary or not detailed:
            return False
        return self.pairs is None or (primary, detailed) in self.pairs

    def bucket_for(self, primary: Optional[str]) -> str:
        if primary in self.fixed:
            return FIXED
        if primary in self.discretionary:
            return DISCRETIONARY
        return VARIABLE

    def detailed_by_primary(self) -> Dict[str, List[str]]:
        """Group known detailed categories under their primary, sorted by name"""
        grouped: Dict[str, List[str]] = {}
        for primary, detailed in sorted(self.pairs or ()):
            grouped.setdefault(primary, []).append(detailed)
        return grouped


DEFAULT_TAXONOMY = CategoryTaxonomy()


def load_taxonomy(path: str | Path | None) -> CategoryTaxonomy:
    """
    Load a taxonomy from a category data file.

    Expected shape:
        {"categories": [{"PRIMARY": "...", "DETAILED": "..."}, ...],
         "spending_buckets": {"fixed": [...], "discretionary": [...]}}

    spending_buckets is optional. A None path yields DEFAULT_TAXONOMY.

    Raises:
        TaxonomyConfigError: File is unreadable or does not match the shape above
    """
    if path is None:
        return DEFAULT_TAXONOMY

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise TaxonomyConfigError(f"Cannot read category taxonomy {path}: {e}") from e

    try:
        pairs = frozenset((entry["PRIMARY"], entry["DETAILED"]) for entry in data["categories"])
        buckets = data.get("spending_buckets", {})
        fixed = frozenset(buckets.get("fixed", DEFAULT_FIXED_CATEGORIES))
        discretionary = frozenset(buckets.get("discretionary", DEFAULT_DISCRETIONARY_CATEGORIES))
    except (KeyError, TypeError, AttributeError) as e:
        raise TaxonomyConfigError(f"Malformed category taxonomy {path}: {e}") from e

    overlap = fixed & discretionary
    if overlap:
        raise TaxonomyConfigError(
            f"Categories assigned to both fixed and discretionary: {sorted(overlap)}"
        )

    return CategoryTaxonomy(pairs=pairs, fixed=fixed, discretionary=discretionary)
