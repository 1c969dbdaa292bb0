"""
Kink Taxonomy Models

Pydantic records for the kink catalog plus the errors raised by catalog
lookups. Records are frozen: the catalog is built once and shared.

Version: kink_taxonomy_v1
"""

from typing import List, Optional, Tuple
from pydantic import BaseModel, Field, field_validator


class TaxonomyIntegrityError(ValueError):
    """Raised when catalog definitions break an invariant (duplicate id or label)."""
    pass


class TraitNotFoundError(LookupError):
    """Raised when a kink id or label is not in the catalog."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class Trait(BaseModel):
    """
    A single selectable kink.

    compatible_with is the directed relation: ids this kink matches with.
    None means the kink never contributes to compatibility matching.
    """
    id: str = Field(description="Stable identifier, unique across the catalog")
    label: str = Field(description="Display text, persisted on user profiles")
    compatible_with: Optional[Tuple[str, ...]] = Field(
        default=None,
        description="Kink ids this kink is compatible with (directed)"
    )

    class Config:
        frozen = True
        extra = "forbid"

    @field_validator("compatible_with", mode="before")
    @classmethod
    def empty_relation_is_none(cls, v):
        """An empty relation behaves exactly like no relation."""
        if v is None:
            return None
        if isinstance(v, str):
            raise ValueError("compatible_with must be a list of kink ids, not a string")
        v = tuple(v)
        return v or None

    @property
    def has_relation(self) -> bool:
        return self.compatible_with is not None


class Category(BaseModel):
    """An ordered group of kinks shown together in the selection grid."""
    key: str = Field(description="Stable slug, independent of display language")
    label: str
    emoji: str = ""
    traits: Tuple[Trait, ...] = Field(default_factory=tuple)

    class Config:
        frozen = True
        extra = "forbid"

    @property
    def labels(self) -> List[str]:
        return [t.label for t in self.traits]


# Response models for API endpoints

class CategoriesResponse(BaseModel):
    """Full catalog for building the selection grid."""
    success: bool = True
    taxonomy_hash: str
    category_count: int
    trait_count: int
    categories: List[Category]


class FlatCategory(BaseModel):
    """Label-only view of a category."""
    key: str
    label: str
    emoji: str
    items: List[str]


class FlatCatalogResponse(BaseModel):
    """Label-only catalog for pickers that persist labels."""
    success: bool = True
    taxonomy_hash: str
    categories: List[FlatCategory]
    labels: List[str]


class TraitResponse(BaseModel):
    """A single kink with its owning category."""
    success: bool = True
    trait: Trait
    category_key: str


class TaxonomyHealthResponse(BaseModel):
    """Health check response for the taxonomy module."""
    status: str = "ok"
    module: str = "kink_taxonomy"
    version: str = "kink_taxonomy_v1"
    taxonomy_hash: str
    trait_count: int
