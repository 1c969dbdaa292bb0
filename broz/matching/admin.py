"""
Kink Matching Endpoints

POST /api/v1/matching/kinks/matchable  - Expand a selection through the relation
POST /api/v1/matching/kinks/partition  - Order a candidate's kinks for a viewer
POST /api/v1/matching/kinks/overlap    - Kink overlap score between two users
POST /api/v1/matching/kinks/toggle     - Toggle a kink under the selection cap
GET  /api/v1/matching/kinks/health     - Health check

Version: kink_matching_v1
"""

import logging

from fastapi import APIRouter, HTTPException

from broz import config
from broz.profile import SelectionLimitError, toggle_kink
from broz.taxonomy import TraitNotFoundError, get_taxonomy

from .match import (
    kink_overlap_score,
    matchable_trait_ids,
    partition_by_preference,
)
from .models import (
    MatchableRequest,
    MatchableResponse,
    MatchingHealthResponse,
    OverlapRequest,
    OverlapResponse,
    PartitionRequest,
    PartitionResponse,
    ToggleRequest,
    ToggleResponse,
)

logger = logging.getLogger(__name__)


# Router
router = APIRouter(
    prefix="/api/v1/matching/kinks",
    tags=["matching"],
)


@router.get("/health", response_model=MatchingHealthResponse)
async def matching_health():
    """Health check for the kink matching module."""
    return MatchingHealthResponse()


@router.post("/matchable", response_model=MatchableResponse)
async def matchable_endpoint(request: MatchableRequest):
    """
    Kink ids a selection is compatible with.

    Accepts ids, persisted labels, or both. Entries not in the catalog are
    reported in `ignored` and otherwise skipped.
    """
    try:
        taxonomy = get_taxonomy()

        resolved = []
        ignored = []
        for kink_id in request.selected_ids:
            if kink_id in taxonomy:
                if kink_id not in resolved:
                    resolved.append(kink_id)
            else:
                ignored.append(kink_id)

        for label in request.selected_labels:
            try:
                trait = taxonomy.find_trait_by_label(label)
            except TraitNotFoundError:
                ignored.append(label)
                continue
            if trait.id not in resolved:
                resolved.append(trait.id)

        matchable = matchable_trait_ids(resolved, taxonomy)

        return MatchableResponse(
            resolved_ids=resolved,
            ignored=ignored,
            matchable_ids=[t.id for t in taxonomy.all_traits() if t.id in matchable],
        )

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Matchable kinks failed: {e}")
        raise HTTPException(status_code=500, detail=f"Matching error: {str(e)}")


@router.post("/partition", response_model=PartitionResponse)
async def partition_endpoint(request: PartitionRequest):
    """Candidate kinks the viewer is looking for first, then the rest."""
    try:
        matching, other = partition_by_preference(
            request.candidate_kinks,
            request.looking_for,
        )
        return PartitionResponse(matching=matching, other=other)

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Kink partition failed: {e}")
        raise HTTPException(status_code=500, detail=f"Matching error: {str(e)}")


@router.post("/overlap", response_model=OverlapResponse)
async def overlap_endpoint(request: OverlapRequest):
    """Kink overlap score as used by live matching."""
    try:
        return OverlapResponse(score=kink_overlap_score(request.kinks_a, request.kinks_b))

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Kink overlap failed: {e}")
        raise HTTPException(status_code=500, detail=f"Matching error: {str(e)}")


@router.post("/toggle", response_model=ToggleResponse)
async def toggle_endpoint(request: ToggleRequest):
    """
    Toggle one kink in a selection.

    Returns 400 when adding would exceed the cap for the target
    (profile or filter).
    """
    limit = config.KINK_PROFILE_MAX if request.target == "profile" else config.KINK_FILTER_MAX
    try:
        selected = toggle_kink(request.selected, request.label, limit)
    except SelectionLimitError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ToggleResponse(
        selected=selected,
        count=len(selected),
        limit=limit,
    )
