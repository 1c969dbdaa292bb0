"""
Broz Kink Taxonomy

The compiled-in vocabulary of selectable kinks.

This module ONLY:
- Holds the ordered category/kink catalog
- Resolves kinks by id or by persisted label
- Exposes the directed compatibility relation as an adjacency map

It does NOT decide who matches whom; see broz.matching.

Version: kink_taxonomy_v1
"""

from .models import (
    Category,
    Trait,
    TaxonomyIntegrityError,
    TraitNotFoundError,
)
from .store import KinkTaxonomy, get_taxonomy, normalize_label

__version__ = "kink_taxonomy_v1"

__all__ = [
    "Category",
    "Trait",
    "TaxonomyIntegrityError",
    "TraitNotFoundError",
    "KinkTaxonomy",
    "get_taxonomy",
    "normalize_label",
    "__version__",
]
