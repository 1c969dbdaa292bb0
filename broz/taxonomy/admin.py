"""
Kink Taxonomy Endpoints

Read-only access to the kink catalog for the selection UI.

GET /api/v1/kinks/health              - Health check
GET /api/v1/kinks/categories          - Full catalog (ids, labels, relations)
GET /api/v1/kinks/flat                - Label-only grid + flat label list
GET /api/v1/kinks/traits/{trait_id}   - Single kink

Version: kink_taxonomy_v1
"""

from fastapi import APIRouter, HTTPException

from .models import (
    CategoriesResponse,
    FlatCatalogResponse,
    FlatCategory,
    TaxonomyHealthResponse,
    TraitNotFoundError,
    TraitResponse,
)
from .store import get_taxonomy


# Router
router = APIRouter(
    prefix="/api/v1/kinks",
    tags=["kinks"],
)


@router.get("/health", response_model=TaxonomyHealthResponse)
async def taxonomy_health():
    """Health check for the taxonomy module."""
    taxonomy = get_taxonomy()
    return TaxonomyHealthResponse(
        taxonomy_hash=taxonomy.version_hash,
        trait_count=len(taxonomy),
    )


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories():
    """
    Full catalog in display order.

    taxonomy_hash changes only when the compiled-in catalog changes, so
    clients can use it as a cache key.
    """
    taxonomy = get_taxonomy()
    categories = list(taxonomy.all_categories())
    return CategoriesResponse(
        taxonomy_hash=taxonomy.version_hash,
        category_count=len(categories),
        trait_count=len(taxonomy),
        categories=categories,
    )


@router.get("/flat", response_model=FlatCatalogResponse)
async def list_flat():
    """Label-only catalog: what profile and filter pickers persist."""
    taxonomy = get_taxonomy()
    return FlatCatalogResponse(
        taxonomy_hash=taxonomy.version_hash,
        categories=[FlatCategory(**c) for c in taxonomy.flat_categories()],
        labels=list(taxonomy.all_labels()),
    )


@router.get("/traits/{trait_id}", response_model=TraitResponse)
async def get_trait(trait_id: str):
    """Look up a single kink by id."""
    taxonomy = get_taxonomy()
    try:
        trait = taxonomy.find_trait_by_id(trait_id)
    except TraitNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return TraitResponse(
        trait=trait,
        category_key=taxonomy.category_of(trait_id).key,
    )
