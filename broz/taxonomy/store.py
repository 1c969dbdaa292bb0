"""
Kink Taxonomy Store

Immutable, ordered catalog of kink categories with O(1) lookups:
- id    -> Trait
- label -> Trait (case-folded, trimmed; profiles persist labels)
- id    -> compatible ids (adjacency, directed)

The catalog is built once from KINK_CATEGORIES and shared read-only.

Version: kink_taxonomy_v1
"""

import logging
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from broz.shared.hashing import canonicalize_and_hash

from .kinks_data import KINK_CATEGORIES
from .models import Category, TaxonomyIntegrityError, Trait, TraitNotFoundError

logger = logging.getLogger(__name__)

_EMPTY: FrozenSet[str] = frozenset()


def normalize_label(label: Optional[str]) -> str:
    """Case-fold and trim a label for comparison."""
    if label is None:
        return ""
    return label.strip().casefold()


class KinkTaxonomy:
    """
    Read-only kink catalog.

    Construction validates:
    - kink ids are unique across all categories
    - normalized labels are unique (the label index depends on it)
    Relations pointing at unknown ids are logged, not rejected.
    """

    def __init__(self, categories: Sequence[Category]):
        self._categories: Tuple[Category, ...] = tuple(categories)
        self._traits: Tuple[Trait, ...] = tuple(
            trait for category in self._categories for trait in category.traits
        )
        self._by_id: Dict[str, Trait] = {}
        self._by_label: Dict[str, Trait] = {}
        self._category_by_id: Dict[str, Category] = {}
        self._compat: Dict[str, FrozenSet[str]] = {}
        self._build_indexes()
        self._validate_relations()
        self._version_hash = canonicalize_and_hash(
            [category.model_dump() for category in self._categories]
        )

    @classmethod
    def from_definitions(cls, definitions: Iterable[Mapping[str, Any]]) -> "KinkTaxonomy":
        """Build a taxonomy from raw category dicts (see kinks_data)."""
        categories = []
        for definition in definitions:
            traits = tuple(
                Trait(
                    id=kink["id"],
                    label=kink["label"],
                    compatible_with=kink.get("match_with"),
                )
                for kink in definition.get("kinks", [])
            )
            categories.append(Category(
                key=definition["key"],
                label=definition["label"],
                emoji=definition.get("emoji", ""),
                traits=traits,
            ))
        return cls(categories)

    def _build_indexes(self):
        for category in self._categories:
            for trait in category.traits:
                if trait.id in self._by_id:
                    raise TaxonomyIntegrityError(
                        f"Duplicate kink id '{trait.id}' in category '{category.key}'"
                    )
                label_key = normalize_label(trait.label)
                if label_key in self._by_label:
                    raise TaxonomyIntegrityError(
                        f"Duplicate kink label '{trait.label}' in category '{category.key}'"
                    )
                self._by_id[trait.id] = trait
                self._by_label[label_key] = trait
                self._category_by_id[trait.id] = category
                if trait.has_relation:
                    self._compat[trait.id] = frozenset(trait.compatible_with)

        logger.info(
            f"Built kink indexes: {len(self._categories)} categories, "
            f"{len(self._by_id)} kinks, {len(self._compat)} with relations"
        )

    def _validate_relations(self):
        for trait_id, targets in self._compat.items():
            for target in sorted(targets.difference(self._by_id)):
                logger.warning(f"Kink '{trait_id}' is compatible with unknown kink '{target}'")

    # ------------------------------------------------------------------
    # Catalog access
    # ------------------------------------------------------------------

    def all_categories(self) -> Tuple[Category, ...]:
        """All categories in declaration order."""
        return self._categories

    def all_traits(self) -> Tuple[Trait, ...]:
        """All kinks, category by category, in declaration order."""
        return self._traits

    def all_labels(self) -> Tuple[str, ...]:
        return tuple(trait.label for trait in self._traits)

    def flat_categories(self) -> List[Dict[str, Any]]:
        """Label-only grid: one entry per category with its kink labels."""
        return [
            {
                "key": category.key,
                "label": category.label,
                "emoji": category.emoji,
                "items": category.labels,
            }
            for category in self._categories
        ]

    @property
    def version_hash(self) -> str:
        """Deterministic fingerprint of the whole catalog."""
        return self._version_hash

    def __len__(self) -> int:
        return len(self._traits)

    def __contains__(self, trait_id: object) -> bool:
        return trait_id in self._by_id

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_trait(self, trait_id: str) -> Optional[Trait]:
        """Kink by id, or None."""
        return self._by_id.get(trait_id)

    def find_trait_by_id(self, trait_id: str) -> Trait:
        """
        Kink by id.

        Raises:
            TraitNotFoundError: if the id is not in the catalog
        """
        trait = self._by_id.get(trait_id)
        if trait is None:
            raise TraitNotFoundError(f"Unknown kink id: '{trait_id}'", key=trait_id)
        return trait

    def find_trait_by_label(self, label: str) -> Trait:
        """
        Kink by display label (case and surrounding whitespace ignored).

        Raises:
            TraitNotFoundError: if no kink carries this label
        """
        trait = self._by_label.get(normalize_label(label))
        if trait is None:
            raise TraitNotFoundError(f"Unknown kink label: '{label}'", key=label)
        return trait

    def category_of(self, trait_id: str) -> Category:
        category = self._category_by_id.get(trait_id)
        if category is None:
            raise TraitNotFoundError(f"Unknown kink id: '{trait_id}'", key=trait_id)
        return category

    def compatible_ids(self, trait_id: str) -> FrozenSet[str]:
        """Ids the kink is declared compatible with; empty if none or unknown."""
        return self._compat.get(trait_id, _EMPTY)

    def labels_to_ids(self, labels: Iterable[str]) -> List[str]:
        """
        Resolve persisted labels to kink ids.

        Order-preserving and deduplicated. Labels not in the catalog are
        skipped: stored profiles may carry labels that no longer exist.
        """
        ids: List[str] = []
        seen = set()
        for label in labels:
            trait = self._by_label.get(normalize_label(label))
            if trait is None:
                logger.debug(f"Skipping unknown kink label: '{label}'")
                continue
            if trait.id not in seen:
                seen.add(trait.id)
                ids.append(trait.id)
        return ids


KINK_TAXONOMY = KinkTaxonomy.from_definitions(KINK_CATEGORIES)


def get_taxonomy() -> KinkTaxonomy:
    """Get the process-wide kink catalog."""
    return KINK_TAXONOMY
