"""
Kink Taxonomy Tests

Tests validate:
- Catalog shape and declaration order
- Id uniqueness and integrity errors
- Lookup by id and by persisted label
- Directed compatibility relation
- Deterministic catalog fingerprint

Run with:
    pytest tests/test_kink_taxonomy.py -v
"""

import copy
import logging

import pytest
from pydantic import ValidationError

from broz.taxonomy import (
    Category,
    KinkTaxonomy,
    TaxonomyIntegrityError,
    Trait,
    TraitNotFoundError,
    get_taxonomy,
    normalize_label,
)
from broz.taxonomy.kinks_data import KINK_CATEGORIES


# ============================================================================
# Test Fixtures
# ============================================================================

@pytest.fixture
def taxonomy():
    """The shared kink catalog."""
    return get_taxonomy()


def make_definitions(*kinks, key="test", label="Test"):
    """Helper to build a single-category definition list."""
    return [{"key": key, "label": label, "emoji": "", "kinks": list(kinks)}]


# ============================================================================
# Catalog Shape Tests
# ============================================================================

class TestCatalogShape:
    """Test category and kink ordering."""

    def test_category_order(self, taxonomy):
        """Categories come back in declaration order."""
        keys = [c.key for c in taxonomy.all_categories()]
        assert keys == ["roles", "orientation", "profils", "visibilite", "pratiques", "fetishes"]

    def test_roles_order(self, taxonomy):
        """Actif, Passif, Versatile come before Dominateur, Soumis."""
        roles = taxonomy.all_categories()[0]
        assert roles.labels == ["Actif", "Passif", "Versatile", "Dominateur", "Soumis"]

    def test_trait_count(self, taxonomy):
        """34 kinks across 6 categories."""
        assert len(taxonomy.all_categories()) == 6
        assert len(taxonomy.all_traits()) == 34
        assert len(taxonomy) == 34

    def test_all_traits_flattens_in_order(self, taxonomy):
        """all_traits walks categories then kinks, in order."""
        expected = [t for c in taxonomy.all_categories() for t in c.traits]
        assert list(taxonomy.all_traits()) == expected
        assert taxonomy.all_traits()[0].id == "actif"
        assert taxonomy.all_traits()[-1].id == "uro"

    def test_calls_are_stable(self, taxonomy):
        """Repeated calls return identical sequences."""
        assert taxonomy.all_categories() == taxonomy.all_categories()
        assert taxonomy.all_labels() == taxonomy.all_labels()

    def test_flat_categories(self, taxonomy):
        """Label-only grid mirrors the category catalog."""
        flat = taxonomy.flat_categories()
        assert [c["key"] for c in flat] == [c.key for c in taxonomy.all_categories()]
        visibility = flat[3]
        assert visibility["label"] == "Visibilité"
        assert visibility["emoji"] == "👀"
        assert visibility["items"] == ["No Face", "Discret", "Avec visage"]

    def test_all_labels(self, taxonomy):
        """Flat label list keeps catalog order."""
        labels = taxonomy.all_labels()
        assert labels[:3] == ("Actif", "Passif", "Versatile")
        assert "Bien monté" in labels
        assert "Chasteté" in labels

    def test_models_are_frozen(self, taxonomy):
        """Catalog records cannot be mutated."""
        trait = taxonomy.find_trait_by_id("actif")
        with pytest.raises(ValidationError):
            trait.label = "Changed"


# ============================================================================
# Integrity Tests
# ============================================================================

class TestIntegrity:
    """Test invariants enforced at construction."""

    def test_ids_unique(self, taxonomy):
        """No two kinks share an id."""
        ids = [t.id for t in taxonomy.all_traits()]
        assert len(ids) == len(set(ids))

    def test_duplicate_id_rejected(self):
        """Duplicate ids across categories fail construction."""
        definitions = make_definitions({"id": "a", "label": "A"}) + make_definitions(
            {"id": "a", "label": "Other A"}, key="second"
        )
        with pytest.raises(TaxonomyIntegrityError):
            KinkTaxonomy.from_definitions(definitions)

    def test_duplicate_label_rejected(self):
        """Labels differing only by case collide in the label index."""
        definitions = make_definitions(
            {"id": "a", "label": "Same"},
            {"id": "b", "label": " same "},
        )
        with pytest.raises(TaxonomyIntegrityError):
            KinkTaxonomy.from_definitions(definitions)

    def test_dangling_relation_logged(self, caplog):
        """A relation to an unknown id is logged, not rejected."""
        definitions = make_definitions({"id": "a", "label": "A", "match_with": ["ghost"]})
        with caplog.at_level(logging.WARNING, logger="broz.taxonomy.store"):
            taxonomy = KinkTaxonomy.from_definitions(definitions)
        assert "ghost" in caplog.text
        assert taxonomy.compatible_ids("a") == frozenset({"ghost"})

    def test_empty_relation_same_as_none(self):
        """An empty compatible_with list means no relation."""
        trait = Trait(id="a", label="A", compatible_with=[])
        assert trait.compatible_with is None
        assert not trait.has_relation

    def test_string_relation_rejected(self):
        """compatible_with must be a list, not a single string."""
        with pytest.raises(ValueError):
            Trait(id="a", label="A", compatible_with="b")

    def test_definitions_not_mutated(self):
        """Building a taxonomy leaves the raw definitions untouched."""
        before = copy.deepcopy(KINK_CATEGORIES)
        KinkTaxonomy.from_definitions(KINK_CATEGORIES)
        assert KINK_CATEGORIES == before


# ============================================================================
# Lookup Tests
# ============================================================================

class TestLookup:
    """Test id and label lookups."""

    def test_find_by_id(self, taxonomy):
        trait = taxonomy.find_trait_by_id("no_face")
        assert trait.label == "No Face"
        assert set(trait.compatible_with) == {"no_face", "discret"}

    def test_find_by_id_unknown(self, taxonomy):
        """Unknown ids raise TraitNotFoundError, a LookupError."""
        with pytest.raises(TraitNotFoundError) as exc_info:
            taxonomy.find_trait_by_id("licorne")
        assert exc_info.value.key == "licorne"
        assert isinstance(exc_info.value, LookupError)

    def test_get_trait_unknown_is_none(self, taxonomy):
        assert taxonomy.get_trait("licorne") is None
        assert taxonomy.get_trait("bi").label == "Bi"

    def test_contains(self, taxonomy):
        assert "actif" in taxonomy
        assert "Actif" not in taxonomy

    def test_find_by_label_ignores_case_and_whitespace(self, taxonomy):
        """Persisted labels resolve regardless of casing and padding."""
        assert taxonomy.find_trait_by_label("Bien monté").id == "bien_monte"
        assert taxonomy.find_trait_by_label("  bien MONTÉ ").id == "bien_monte"

    def test_find_by_label_unknown(self, taxonomy):
        with pytest.raises(TraitNotFoundError):
            taxonomy.find_trait_by_label("Licorne")

    def test_labels_to_ids(self, taxonomy):
        """Order kept, duplicates dropped, unknown labels skipped."""
        ids = taxonomy.labels_to_ids(["Soumis", "Licorne", "actif", "SOUMIS"])
        assert ids == ["soumis", "actif"]

    def test_category_of(self, taxonomy):
        assert taxonomy.category_of("chastete").key == "pratiques"
        with pytest.raises(TraitNotFoundError):
            taxonomy.category_of("licorne")

    def test_normalize_label(self):
        assert normalize_label("  Dirty Talk ") == "dirty talk"
        assert normalize_label(None) == ""


# ============================================================================
# Relation Tests
# ============================================================================

class TestRelation:
    """Test the directed compatibility relation."""

    def test_relation_is_directed(self, taxonomy):
        """Chasteté points at Dominateur, not the other way round."""
        assert "dominateur" in taxonomy.compatible_ids("chastete")
        assert "chastete" not in taxonomy.compatible_ids("dominateur")

    def test_reflexive_exact_match(self, taxonomy):
        """Practice kinks match themselves."""
        assert taxonomy.compatible_ids("bdsm") == frozenset({"bdsm"})

    def test_no_relation(self, taxonomy):
        """Orientation kinks have no relation."""
        assert taxonomy.get_trait("gay").compatible_with is None
        assert taxonomy.compatible_ids("gay") == frozenset()

    def test_unknown_id_has_no_relation(self, taxonomy):
        assert taxonomy.compatible_ids("licorne") == frozenset()


# ============================================================================
# Fingerprint Tests
# ============================================================================

class TestVersionHash:
    """Test the catalog fingerprint."""

    def test_hash_format(self, taxonomy):
        assert taxonomy.version_hash.startswith("sha256:")
        assert len(taxonomy.version_hash) == len("sha256:") + 64

    def test_hash_deterministic(self, taxonomy):
        """Rebuilding from the same definitions gives the same hash."""
        rebuilt = KinkTaxonomy.from_definitions(KINK_CATEGORIES)
        assert rebuilt.version_hash == taxonomy.version_hash

    def test_hash_changes_with_catalog(self, taxonomy):
        """Any label change produces a new hash."""
        categories = list(taxonomy.all_categories())
        renamed = Category(
            key=categories[0].key,
            label="Roles",
            emoji=categories[0].emoji,
            traits=categories[0].traits,
        )
        changed = KinkTaxonomy([renamed] + categories[1:])
        assert changed.version_hash != taxonomy.version_hash
